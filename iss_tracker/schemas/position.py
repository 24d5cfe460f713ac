# iss_tracker/schemas/position.py
from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """One observed ISS position. Never mutated once built."""

    model_config = ConfigDict(frozen=True)

    timestamp: int            # seconds since Unix epoch, as reported upstream
    datetime: str             # RFC 3339 UTC rendering of ``timestamp``
    latitude: float           # degrees
    longitude: float          # degrees


# ---- Open Notify payload (untrusted) ----
class IssApiPosition(BaseModel):
    latitude: str = Field(..., strict=True)
    longitude: str = Field(..., strict=True)

class IssApiResponse(BaseModel):
    message: str = Field(..., strict=True)
    timestamp: int = Field(..., strict=True)
    iss_position: IssApiPosition
