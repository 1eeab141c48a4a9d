"""Flipball CLI entry point."""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

load_dotenv()

from flipball import __version__
from flipball.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    uvicorn.run(
        "flipball.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Print the effective configuration with secrets hidden."""
    from flipball.database import sanitize_mongodb_url

    settings = get_settings()
    values = settings.model_dump()
    values["mongo_uri"] = sanitize_mongodb_url(settings.mongo_uri)
    values["database_name"] = settings.database_name
    if values.get("logfire_token"):
        values["logfire_token"] = "***"

    for key in sorted(values):
        print(f"{key}: {values[key]}")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    """Ping MongoDB and report the connection status."""
    from flipball.database import check_db_connection, close_db, get_db_info, init_db

    async def run() -> bool:
        await init_db()
        try:
            return await check_db_connection()
        finally:
            await close_db()

    info = get_db_info()
    connected = asyncio.run(run())
    if connected:
        logger.info(f"MongoDB reachable at {info['url']} (database {info['database']})")
        return 0
    logger.error(f"MongoDB unreachable at {info['url']}")
    return 1


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="flipball",
        description="Flipball account and blue box game backend",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_serve = subparsers.add_parser("serve", help="Run the HTTP API server")
    parser_serve.add_argument("--host", help="Bind address (default from HOST)")
    parser_serve.add_argument("--port", type=int, help="Port (default from PORT)")
    parser_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser_serve.set_defaults(func=cmd_serve)

    parser_config = subparsers.add_parser("config", help="Show effective configuration")
    parser_config.set_defaults(func=cmd_config)

    parser_status = subparsers.add_parser("status", help="Check MongoDB connectivity")
    parser_status.set_defaults(func=cmd_status)

    args = parser.parse_args()
    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
