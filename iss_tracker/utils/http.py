# iss_tracker/utils/http.py
import httpx
from typing import Optional

from ..core.config import USER_AGENT


def make_client(timeout: float, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Long-lived client for the polling loop (one connection pool for the process)."""
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )


def body_preview(r: httpx.Response, limit: int = 200) -> str:
    text = r.text  # httpx decodes with errors="replace"
    return text if len(text) <= limit else text[:limit] + "..."
