from __future__ import annotations

from pathlib import Path

import pytest

from iss_tracker.core.config import Settings

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        max_positions=3,
        poll_interval=2,
        timeout=1,
        upstream_url="http://upstream.test/iss-now.json",
        static_dir=str(STATIC_DIR),
    )
