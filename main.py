"""Command-line interface for the POC demo service."""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pocdemo.config import Settings, load_settings
from pocdemo.database import Database
from pocdemo.users import UserService

logger = logging.getLogger("pocdemo.main")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="POC demo utilities")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file (default: POC_CONFIG)",
    )
    # ``--config`` is accepted before or after the subcommand.
    config_parent = argparse.ArgumentParser(add_help=False)
    config_parent.add_argument("--config", type=Path, default=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command")

    parser.set_defaults(command="serve")

    subparsers.add_parser(
        "init-db", parents=[config_parent], help="Create the schema and seed sample users"
    )
    subparsers.add_parser("list-users", parents=[config_parent], help="Print all stored users")

    serve_parser = subparsers.add_parser(
        "serve", parents=[config_parent], help="Start the HTTP service"
    )
    serve_parser.add_argument("--host", default=None, help="Bind address (default from settings)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default from settings)")

    args_list = list(argv) if argv is not None else sys.argv[1:]
    known_commands = {"serve", "init-db", "list-users"}

    if not any(arg in known_commands for arg in args_list):
        if not any(flag in args_list for flag in ("-h", "--help")):
            args_list = ["serve", *args_list]

    return parser.parse_args(args_list)


def _initialise_database(settings: Settings) -> Database:
    database = Database(settings.database_path)
    seeded = database.initialize()
    logger.info("Database initialised at %s (%s sample users added)", settings.database_path, seeded)
    return database


def _serve(*, settings: Settings, database: Database, host: str | None, port: int | None) -> None:
    from pocdemo.application import create_app
    import uvicorn

    bind_host = host or settings.host
    bind_port = port or settings.port
    logger.info("Starting demo service on http://%s:%s", bind_host, bind_port)

    app = create_app(database=database, settings=settings)
    uvicorn.run(app, host=bind_host, port=bind_port, log_level=settings.log_level.lower())


def _list_users(database: Database) -> None:
    users = UserService(database).list_users()
    if not users:
        print("No users are currently stored.")
        return

    print(f"{len(users)} user(s) found:")
    print(f"{'ID':>4}  {'Name':<24}  {'Email':<32}  Created")
    print("-" * 80)
    for user in users:
        created = user.created_at.strftime("%Y-%m-%d %H:%M:%S") if user.created_at else ""
        print(f"{user.id:>4}  {user.name:<24}  {user.email:<32}  {created}")


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for CLI usage."""

    args = _parse_args(argv)
    settings = load_settings(args.config)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    database = _initialise_database(settings)

    if args.command == "serve":
        _serve(settings=settings, database=database, host=args.host, port=args.port)
    elif args.command == "list-users":
        _list_users(database)
    elif args.command == "init-db":
        print("Database initialisation complete.")


if __name__ == "__main__":
    main()
