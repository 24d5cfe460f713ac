# iss_tracker/services/queries.py
from ..schemas.responses import LatestResponse, PositionsResponse, StatusResponse
from .store import PositionStore


def get_positions(store: PositionStore) -> PositionsResponse:
    positions = store.snapshot_all()
    return PositionsResponse(
        count=len(positions),
        last_update=positions[-1].datetime if positions else None,
        positions=positions,
    )


def get_latest(store: PositionStore) -> LatestResponse:
    latest = store.latest()
    return LatestResponse(
        last_update=latest.datetime if latest else None,
        position=latest,
    )


def get_status(store: PositionStore, max_positions: int, update_interval: int) -> StatusResponse:
    # count and last_update must come from the same instant
    stored, latest = store.count_and_latest()
    return StatusResponse(
        positions_stored=stored,
        max_positions=max_positions,
        update_interval=update_interval,
        last_update=latest.datetime if latest else None,
    )
