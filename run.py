#!/usr/bin/env python3
"""Entry point for running the tracker."""

import argparse
import logging
import sys

from config import SETTINGS


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main(port: int, no_listen: bool = False) -> None:
    """Start uvicorn unless the app is hosted elsewhere."""
    setup_logging(SETTINGS.log_level)
    logger = logging.getLogger("tracker")

    if no_listen:
        logger.info("Listener disabled; serve tracker.main:app from the hosting platform")
        return

    import uvicorn

    logger.info(f"🚀 API Quest tracker running on http://localhost:{port}")
    logger.info(f"📺 Live feed: http://localhost:{port}/api/events")
    logger.info(f'📋 Register players: POST http://localhost:{port}/api/register {{ "name": "Player Name" }}')
    uvicorn.run("tracker.main:app", host=SETTINGS.host, port=port, log_level=SETTINGS.log_level.lower())


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="API Quest live progress tracker")
    parser.add_argument("--port", type=int, default=SETTINGS.port, help="Port to listen on")
    parser.add_argument(
        "--no-listen",
        action="store_true",
        default=SETTINGS.no_listen,
        help="Do not start the listener (when embedded in a managed ASGI host)",
    )
    args = parser.parse_args()
    main(port=args.port, no_listen=args.no_listen)
