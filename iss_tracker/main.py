import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .core.config import Settings, settings as default_settings
from .routers import positions
from .services.store import PositionStore
from .services.tracker import PositionTracker

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: PositionStore | None = None,
    tracker: PositionTracker | None = None,
) -> FastAPI:
    settings = settings or default_settings
    store = store or PositionStore(settings.max_positions)
    tracker = tracker or PositionTracker(store, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        tracker.start()
        yield
        await tracker.stop()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.tracker = tracker

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(positions.router)

    # static last so /api/* wins
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; serving API only", static_dir)

    return app
