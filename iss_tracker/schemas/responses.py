from pydantic import BaseModel

from .position import Position

class PositionsResponse(BaseModel):
    count: int
    last_update: str | None = None
    positions: list[Position]

class LatestResponse(BaseModel):
    last_update: str | None = None
    position: Position | None = None

class StatusResponse(BaseModel):
    positions_stored: int
    max_positions: int
    update_interval: int
    last_update: str | None = None
