import argparse
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pocdemo.database import Database, resolve_database_path
from pocdemo.users import UserService


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a POC demo user")
    parser.add_argument("name", help="Display name for the user")
    parser.add_argument("email", help="Email address for the user")
    parser.add_argument(
        "--db",
        dest="db_path",
        default=None,
        help="Path to the SQLite database (defaults to POC_DB_PATH or data/poc.sqlite3)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    name = args.name.strip()
    email = args.email.strip()
    if not name or not email:
        print("Error: name and email must not be empty", file=sys.stderr)
        return 1

    db_env = args.db_path or os.getenv("POC_DB_PATH")
    database = Database(resolve_database_path(db_env))
    database.initialize()

    user = UserService(database).create_user(name, email)

    print(f"Created user #{user.id}: {user.name} <{user.email}>")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
