import argparse
import logging

import uvicorn

from .core.config import Settings
from .main import create_app

logger = logging.getLogger("iss_tracker")


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="iss_tracker", description="Track the ISS and serve its recent ground track.")
    p.add_argument("-m", "--max-positions", type=int, help="How many ISS positions to keep stored")
    p.add_argument("-p", "--poll-interval", type=int, help="The interval between ISS position checks (seconds)")
    p.add_argument("-t", "--timeout", type=int, help="How long to wait before timing out a position check (seconds)")
    p.add_argument("--host", help="Interface to bind")
    p.add_argument("--port", type=int, help="Port to bind")
    p.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return p.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    return Settings(**overrides)


def main(argv=None) -> None:
    cfg = build_settings(parse_args(argv))
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=cfg.log_level.upper(),
    )

    app = create_app(cfg)
    logger.info("ISS Tracker starting with %d position history", cfg.max_positions)
    logger.info("Server will continue tracking ISS positions in the background")
    logger.info("Access the web interface at http://localhost:%d", cfg.port)

    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())


if __name__ == "__main__":
    main()
