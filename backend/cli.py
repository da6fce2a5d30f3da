"""Run the inventory service.

Usage:
    python cli.py [-h HOST] [-p PORT] [-c CACHE_DIR]

Flags override SERVER_HOST / SERVER_PORT / CACHE_PATH from the environment
(or backend/.env), which override the built-in defaults.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger("inventory")


def build_parser() -> argparse.ArgumentParser:
    # -h is the host flag, so help is only available as --help
    parser = argparse.ArgumentParser(description="Inventory Service API server.", add_help=False)
    parser.add_argument("-h", "--host", default=None, help="Server host (env SERVER_HOST).")
    parser.add_argument("-p", "--port", type=int, default=None, help="Server port (env SERVER_PORT).")
    parser.add_argument("-c", "--cache", default=None, help="Upload cache folder (env CACHE_PATH).")
    parser.add_argument("--help", action="help", help="Show this message and exit.")
    return parser


def apply_overrides(args: argparse.Namespace, app_settings) -> None:
    if args.host:
        app_settings.SERVER_HOST = args.host
    if args.port is not None:
        app_settings.SERVER_PORT = args.port
    if args.cache:
        app_settings.CACHE_PATH = args.cache


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    import uvicorn

    from api.main import create_app
    from settings import Settings

    app_settings = Settings()
    apply_overrides(args, app_settings)

    if not logger.handlers:
        logging.basicConfig(
            level=app_settings.LOG_LEVEL,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    app = create_app(app_settings)
    logger.info(
        "Server running at http://%s:%s (store=%s, cache=%s)",
        app_settings.SERVER_HOST,
        app_settings.SERVER_PORT,
        app_settings.ITEM_STORE,
        app_settings.CACHE_PATH,
    )
    uvicorn.run(app, host=app_settings.SERVER_HOST, port=app_settings.SERVER_PORT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
