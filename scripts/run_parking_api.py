#!/usr/bin/env python3
"""Serve the parking API.

Usage:
    .venv/bin/python scripts/run_parking_api.py --host 0.0.0.0 --port 8080

Slots and tariffs come from config/settings.py (.env).
"""

from __future__ import annotations

import argparse
import sys

import structlog
import uvicorn

sys.path.insert(0, ".")
from config.settings import settings
from config.validators import validate_logging, validate_pricing, validate_slot_config
from parking.exceptions import ConfigError
from parking.utils.logging import configure_logging

logger = structlog.get_logger()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--host", default=settings.API_HOST)
    parser.add_argument("--port", type=int, default=settings.API_PORT)
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Start even if the slot or pricing configuration is invalid.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if not args.skip_validation:
        try:
            validate_logging()
            validate_slot_config()
            validate_pricing()
        except ConfigError as exc:
            print(f"config error: {exc}", file=sys.stderr)
            return 2

    configure_logging(settings.LOG_LEVEL)
    logger.info("parking_api_starting", host=args.host, port=args.port)

    from parking.api.parking_api import app

    uvicorn.run(app, host=args.host, port=args.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
