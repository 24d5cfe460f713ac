# iss_tracker/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path
from importlib.metadata import PackageNotFoundError, version

try:
    APP_VERSION = version("iss-tracker")
except PackageNotFoundError:  # running from a source checkout
    APP_VERSION = "0.0.0"
USER_AGENT = f"iss-tracker/{APP_VERSION}"


class Settings(BaseSettings):
    app_name: str = Field(default="ISS Tracker", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")

    # History / polling
    max_positions: int = Field(default=15_000, gt=0, alias="MAX_POSITIONS")
    poll_interval: int = Field(default=2, gt=0, alias="POLL_INTERVAL")   # seconds
    timeout: int = Field(default=3, gt=0, alias="TIMEOUT")               # seconds

    # Upstream
    upstream_url: str = Field(default="http://api.open-notify.org/iss-now.json", alias="UPSTREAM_URL")

    # Serving
    static_dir: str = Field(default="static", alias="STATIC_DIR")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[1] / ".env"),  # iss_tracker/.env
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

settings = Settings()
