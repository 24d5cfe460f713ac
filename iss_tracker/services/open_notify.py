# iss_tracker/services/open_notify.py
import logging
import math
import re
from typing import Optional

import httpx
from pydantic import ValidationError

from ..schemas.position import IssApiResponse, Position
from ..utils.http import body_preview
from ..utils.time import rfc3339_utc

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "success"

# plain ASCII decimal: no whitespace, digit separators or non-ASCII digits
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_coordinate(raw: str) -> Optional[float]:
    if not _DECIMAL.fullmatch(raw):
        return None
    value = float(raw)
    return value if math.isfinite(value) else None


def position_from_payload(payload: IssApiResponse) -> Optional[Position]:
    """
    Validated Open Notify payload -> Position.
    None when the status marker is not "success" or a coordinate does not parse.
    """
    if payload.message != SUCCESS_MESSAGE:
        logger.warning("API error: message not %r (got %r)", SUCCESS_MESSAGE, payload.message)
        return None

    latitude = _parse_coordinate(payload.iss_position.latitude)
    longitude = _parse_coordinate(payload.iss_position.longitude)
    if latitude is None or longitude is None:
        logger.debug("Dropping position with unparsable coordinates: %r", payload.iss_position)
        return None

    return Position(
        timestamp=payload.timestamp,
        datetime=rfc3339_utc(payload.timestamp),
        latitude=latitude,
        longitude=longitude,
    )


async def fetch_iss_position(client: httpx.AsyncClient, url: str) -> Optional[Position]:
    """
    One GET against Open Notify's iss-now endpoint.

    Every failure (transport, status, body, marker, coordinates) yields None;
    nothing is raised and nothing is retried here. The polling cadence is the retry.
    """
    try:
        r = await client.get(url)
    except httpx.DecodingError as e:
        # body read eagerly by get(); a bad Content-Encoding surfaces here
        logger.warning("Error parsing response: %s", e)
        return None
    except httpx.RequestError as e:
        logger.warning("Error fetching ISS position: %s", str(e) or type(e).__name__)
        return None

    if r.status_code != httpx.codes.OK:
        logger.warning("Error response from API (%s): %s", r.status_code, body_preview(r))
        return None

    try:
        payload = IssApiResponse.model_validate_json(r.content)
    except ValidationError as e:
        logger.warning("Error parsing response: %s", e.errors(include_url=False))
        return None

    position = position_from_payload(payload)
    if position is not None:
        logger.info("Position at %s: %s, %s", position.datetime, position.latitude, position.longitude)
    return position
