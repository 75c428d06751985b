"""Development entrypoint for the maneuver HTTP API."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from gurps_maneuvers.api.app import app
from gurps_maneuvers.config import get_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the GURPS maneuvers API server")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable autoreload (dev mode)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level)

    if args.reload:
        uvicorn.run(
            "gurps_maneuvers.api.app:app",
            host=args.host,
            port=args.port,
            reload=True,
            factory=False,
        )
    else:
        uvicorn.run(app, host=args.host, port=args.port, reload=False, factory=False)


if __name__ == "__main__":
    main()
