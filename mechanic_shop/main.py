"""
Command line entry point for the Mechanic Shop records client.
"""
import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import ArgumentError

from mechanic_shop import menu
from mechanic_shop.config import Settings, get_settings
from mechanic_shop.database import StoreConnectionError, StoreError, StoreGateway
from mechanic_shop.terminal import ConsoleTerminal

logger = logging.getLogger(__name__)


def build_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mechanic-shop",
        description="Manage customers, mechanics, cars and service requests of a repair shop.",
    )
    parser.add_argument("dbname", nargs="?", help="database name")
    parser.add_argument("port", nargs="?", type=int, help="database port")
    parser.add_argument("user", nargs="?", help="database user")
    parser.add_argument("--host", help="database host")
    parser.add_argument("--password", help="database password")
    parser.add_argument("--url", help="full SQLAlchemy database URL, overrides the other options")
    settings = settings or get_settings()
    parser.add_argument(
        "--version",
        action="version",
        version=f"{settings.app_name} {settings.app_version}",
    )
    parser.add_argument(
        "--init-schema",
        action="store_true",
        help="create the shop tables if they do not exist",
    )
    return parser


def main(argv=None, terminal=None) -> int:
    try:
        base_settings = get_settings()
    except ValidationError as exc:
        print(f"Error - Invalid configuration: {exc}", file=sys.stderr)
        return 1
    args = build_parser(base_settings).parse_args(argv)

    overrides = {
        "db_name": args.dbname,
        "db_port": args.port,
        "db_user": args.user,
        "db_host": args.host,
        "db_password": args.password,
        "database_url": args.url,
    }
    settings = base_settings.model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Connecting to database...")
    try:
        print(f"Connection URL: {settings.sqlalchemy_url.render_as_string(hide_password=True)}\n")
        gateway = StoreGateway.connect(settings)
    except (ArgumentError, StoreConnectionError) as exc:
        print(f"Error - Unable to Connect to Database: {exc}", file=sys.stderr)
        print("Make sure the database server is running and reachable", file=sys.stderr)
        return 1
    print("Done")

    try:
        if args.init_schema:
            try:
                gateway.create_schema()
            except StoreError as exc:
                print(f"Error - Unable to create the schema: {exc}", file=sys.stderr)
                return 1
            logger.info("Schema is ready")
        menu.run(gateway, terminal or ConsoleTerminal())
    finally:
        print("Disconnecting from database...", end="")
        gateway.close()
        print("Done\n\nBye !")
    return 0


if __name__ == "__main__":
    sys.exit(main())
