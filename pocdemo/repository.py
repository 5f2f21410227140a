"""Mapping between :class:`~pocdemo.models.User` and the ``users`` table."""
from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import List, Optional

from .models import User
from .timestamps import format_timestamp, parse_timestamp

_COLUMNS = "id, name, email, created_at"


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class UserRepository:
    """Explicit SQL for the ``users`` table.

    The repository never opens connections itself; callers pass the connection
    of the transaction the statement belongs to.
    """

    def find_all(self, conn: sqlite3.Connection) -> List[User]:
        rows = conn.execute(f"SELECT {_COLUMNS} FROM users ORDER BY id").fetchall()
        return [self._row_to_user(row) for row in rows]

    def find_by_id(self, conn: sqlite3.Connection, user_id: int) -> Optional[User]:
        row = conn.execute(
            f"SELECT {_COLUMNS} FROM users WHERE id = ?",
            (user_id,),
        ).fetchone()
        if row is None:
            return None
        return self._row_to_user(row)

    def exists(self, conn: sqlite3.Connection, user_id: int) -> bool:
        row = conn.execute("SELECT 1 FROM users WHERE id = ?", (user_id,)).fetchone()
        return row is not None

    def count(self, conn: sqlite3.Connection) -> int:
        return int(conn.execute("SELECT COUNT(*) FROM users").fetchone()[0])

    def find_by_name_containing(self, conn: sqlite3.Connection, query: str) -> List[User]:
        pattern = f"%{_escape_like(query)}%"
        rows = conn.execute(
            f"SELECT {_COLUMNS} FROM users WHERE name LIKE ? ESCAPE '\\' ORDER BY id",
            (pattern,),
        ).fetchall()
        return [self._row_to_user(row) for row in rows]

    def insert(
        self,
        conn: sqlite3.Connection,
        name: str,
        email: str,
        created_at: Optional[datetime] = None,
    ) -> User:
        """Insert a row and return it as stored, with id and timestamp assigned."""

        if created_at is None:
            cursor = conn.execute(
                "INSERT INTO users (name, email) VALUES (?, ?)",
                (name, email),
            )
        else:
            cursor = conn.execute(
                "INSERT INTO users (name, email, created_at) VALUES (?, ?, ?)",
                (name, email, format_timestamp(created_at)),
            )
        user_id = cursor.lastrowid

        user = self.find_by_id(conn, user_id)
        if user is None:
            raise RuntimeError("Failed to load user after creation")
        return user

    def update(self, conn: sqlite3.Connection, user_id: int, name: str, email: str) -> bool:
        cursor = conn.execute(
            "UPDATE users SET name = ?, email = ? WHERE id = ?",
            (name, email, user_id),
        )
        return cursor.rowcount > 0

    def delete(self, conn: sqlite3.Connection, user_id: int) -> bool:
        cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        return cursor.rowcount > 0

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(
            id=int(row["id"]),
            name=str(row["name"]),
            email=str(row["email"]),
            created_at=parse_timestamp(str(row["created_at"])),
        )


__all__ = ["UserRepository"]
