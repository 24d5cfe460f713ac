from datetime import datetime, timezone


def rfc3339_utc(epoch_seconds: int) -> str:
    """RFC 3339 text for a Unix timestamp; falls back to now when out of range."""
    try:
        dt = datetime.fromtimestamp(epoch_seconds, timezone.utc)
    except (OverflowError, OSError, ValueError):
        dt = datetime.now(timezone.utc)
    return dt.isoformat()
