# iss_tracker/services/tracker.py
import asyncio
import logging
from typing import Optional

import httpx

from ..core.config import Settings
from ..schemas.position import Position
from ..utils.http import make_client
from .open_notify import fetch_iss_position
from .store import PositionStore

logger = logging.getLogger(__name__)


class PositionTracker:
    """
    Background polling loop: fetch -> append on success -> sleep -> repeat.

    The sole writer of ``store``. Stops only when its task is cancelled.
    """

    def __init__(
        self,
        store: PositionStore,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.store = store
        self.url = settings.upstream_url
        self.poll_interval = settings.poll_interval
        self.timeout = settings.timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> Optional[Position]:
        """One acquisition tick; returns the stored position, if any."""
        if self._client is None:
            self._client = make_client(self.timeout, self._transport)
        position = await fetch_iss_position(self._client, self.url)
        if position is not None:
            self.store.append(position)
        return position

    async def run(self) -> None:
        logger.info("ISS position tracking task started")
        try:
            while True:
                try:
                    await self.run_once()
                except Exception:
                    logger.exception("Unexpected error in tracking tick; continuing")
                await asyncio.sleep(self.poll_interval)
        finally:
            logger.info("ISS position tracking task stopped")

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self.run(), name="iss-position-tracker")

    async def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        if self._client is not None:
            await self._client.aclose()
            self._client = None
