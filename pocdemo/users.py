"""User management operations."""
from __future__ import annotations

import logging
from typing import List, Optional

from .database import Database
from .models import User
from .repository import UserRepository

logger = logging.getLogger("pocdemo.users")


class UserService:
    """CRUD and search over users, one transaction per call."""

    def __init__(self, database: Database, repository: Optional[UserRepository] = None) -> None:
        self._database = database
        self._users = repository or UserRepository()

    def list_users(self) -> List[User]:
        with self._database.transaction() as conn:
            return self._users.find_all(conn)

    def get_user(self, user_id: int) -> Optional[User]:
        with self._database.transaction() as conn:
            return self._users.find_by_id(conn, user_id)

    def create_user(self, name: str, email: str) -> User:
        with self._database.transaction(immediate=True) as conn:
            user = self._users.insert(conn, name, email)
        logger.info("Created user %s (%s)", user.id, user.name)
        return user

    def update_user(self, user_id: int, name: str, email: str) -> bool:
        """Change the name and email of a user; ``False`` when it does not exist."""

        with self._database.transaction(immediate=True) as conn:
            if not self._users.exists(conn, user_id):
                return False
            self._users.update(conn, user_id, name, email)
        logger.info("Updated user %s", user_id)
        return True

    def delete_user(self, user_id: int) -> bool:
        with self._database.transaction(immediate=True) as conn:
            if not self._users.exists(conn, user_id):
                return False
            self._users.delete(conn, user_id)
        logger.info("Deleted user %s", user_id)
        return True

    def search_users_by_name(self, query: str) -> List[User]:
        with self._database.transaction() as conn:
            return self._users.find_by_name_containing(conn, query)


__all__ = ["UserService"]
