"""SQLite connection handling and schema initialisation."""
from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Sequence, Tuple

from .repository import UserRepository

logger = logging.getLogger("pocdemo.database")

SAMPLE_USERS: Sequence[Tuple[str, str]] = (
    ("Ford Prefect", "ford.prefect@hitchhikers.guide"),
    ("Arthur Dent", "arthur.dent@earth.com"),
    ("Zaphod Beeblebrox", "zaphod@heartofgold.ship"),
)


def _ensure_directory(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def resolve_database_path(env_value: Optional[str]) -> Path:
    """Resolve the on-disk path for the application database."""

    if env_value:
        return Path(env_value).expanduser().resolve(strict=False)
    base_dir = Path(__file__).resolve().parent.parent / "data"
    return (base_dir / "poc.sqlite3").resolve(strict=False)


class Database:
    """Thin wrapper around a file-backed SQLite database."""

    def __init__(self, path: Path, *, timeout: float = 5.0) -> None:
        _ensure_directory(path)
        self._path = path
        self._timeout = timeout

    @property
    def path(self) -> Path:
        return self._path

    def _connect(self) -> sqlite3.Connection:
        # Autocommit mode; transactions are opened explicitly by ``transaction``.
        conn = sqlite3.connect(
            self._path,
            timeout=self._timeout,
            check_same_thread=False,
            isolation_level=None,
        )
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def transaction(self, *, immediate: bool = False) -> Iterator[sqlite3.Connection]:
        """Yield a connection inside a transaction that commits on success.

        ``immediate`` takes the write lock up front so that a read followed by
        a write cannot be interleaved with another writer.
        """

        conn = self._connect()
        try:
            conn.execute("BEGIN IMMEDIATE" if immediate else "BEGIN")
            try:
                yield conn
            except BaseException:
                if conn.in_transaction:
                    conn.rollback()
                raise
            if conn.in_transaction:
                conn.commit()
        finally:
            conn.close()

    def initialize(self) -> int:
        """Create the ``users`` table and seed it when empty.

        Returns the number of sample rows inserted, which is ``0`` whenever the
        table already holds data.
        """

        logger.info("Initializing database schema at %s", self._path)

        with self.transaction(immediate=True) as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    email TEXT NOT NULL,
                    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                )
                """
            )

            seeded = 0
            if UserRepository().count(conn) == 0:
                logger.info("Seeding database with sample data...")
                conn.executemany(
                    "INSERT INTO users (name, email) VALUES (?, ?)",
                    SAMPLE_USERS,
                )
                seeded = len(SAMPLE_USERS)
                logger.info("Sample data seeded successfully")

        logger.info("Database initialization complete")
        return seeded


__all__ = ["Database", "SAMPLE_USERS", "resolve_database_path"]
