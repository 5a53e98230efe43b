"""
CLI entry point for the user service.

Usage:
    # Serve the HTTP and JSON-RPC APIs
    python -m app.cli serve --port 8000

    # Wait for the database and create the users table
    python -m app.cli init-db
"""

import argparse
import logging
import sys

from sqlalchemy.exc import OperationalError

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI application under uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=False)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the database schema, retrying until the database is up."""
    from app.infrastructure.db import create_db_engine, create_schema, wait_for_database

    engine = create_db_engine(settings)
    try:
        wait_for_database(
            engine,
            attempts=args.attempts,
            delay=settings.db_connect_retry_seconds,
        )
    except OperationalError:
        logger.error("Giving up: database is not reachable.")
        sys.exit(1)
    create_schema(engine)
    engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UserAPI service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create the users table")
    init_parser.add_argument(
        "--attempts", type=int, default=settings.db_connect_attempts,
        help="Connection attempts before giving up",
    )
    init_parser.set_defaults(func=cmd_init_db)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
