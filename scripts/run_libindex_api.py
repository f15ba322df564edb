"""Serve the libindex API, or only bring its catalog schema up to date."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LOGGER = logging.getLogger("libindex.launcher")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the libindex publish and catalog API.")
    parser.add_argument("--host", help="Bind address (default: LIBINDEX_API_HOST).")
    parser.add_argument("--port", type=int, help="Bind port (default: LIBINDEX_API_PORT).")
    parser.add_argument("--workers", type=int, help="Worker processes (default: LIBINDEX_API_WORKERS).")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes; forces one worker.")
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug", "trace"],
        help="Log level (default: LIBINDEX_API_LOG_LEVEL).",
    )
    parser.add_argument(
        "--database-url",
        help="Catalog database URL; exported as LIBINDEX_DATABASE_URL for the server process.",
    )
    parser.add_argument(
        "--migrate-only",
        action="store_true",
        help="Apply catalog migrations and exit without serving.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
    if args.database_url:
        # Read at import time by libindex_api.db.session, also in reloaded/worker processes.
        os.environ["LIBINDEX_DATABASE_URL"] = args.database_url

    from libindex_api.config.settings import get_api_settings

    settings = get_api_settings()
    log_level = (args.log_level or settings.log_level).lower()
    root_level = logging.DEBUG if log_level == "trace" else getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=root_level, format=LOG_FORMAT)
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(root_level)

    if args.migrate_only:
        from libindex_api.db.migrations import upgrade_database

        upgrade_database()
        LOGGER.info("Catalog schema is up to date")
        return 0

    reload = args.reload or settings.reload
    workers = 1 if reload else (args.workers or settings.workers)
    if workers > 1:
        LOGGER.warning(
            "Running %d workers: reference locks are per process, so concurrent publishes of one "
            "release must reach the same worker",
            workers,
        )

    uvicorn.run(
        "libindex_api.app:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=reload,
        workers=workers,
        log_level="debug" if log_level == "trace" else log_level,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
