# iss_tracker/routers/positions.py
from fastapi import APIRouter, Depends, Request

from ..core.config import Settings
from ..schemas.responses import LatestResponse, PositionsResponse, StatusResponse
from ..services import queries
from ..services.store import PositionStore

router = APIRouter(prefix="/api", tags=["positions"])


def get_store(request: Request) -> PositionStore:
    return request.app.state.store

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/positions", response_model=PositionsResponse)
def positions(store: PositionStore = Depends(get_store)):
    """Every retained position, oldest first."""
    return queries.get_positions(store)

@router.get("/latest", response_model=LatestResponse)
def latest(store: PositionStore = Depends(get_store)):
    return queries.get_latest(store)

@router.get("/status", response_model=StatusResponse)
def status(store: PositionStore = Depends(get_store), cfg: Settings = Depends(get_settings)):
    return queries.get_status(store, max_positions=store.capacity, update_interval=cfg.poll_interval)
