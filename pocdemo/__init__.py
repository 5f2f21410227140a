"""Proof-of-concept CRUD application for managing users."""

from __future__ import annotations

from typing import Any

from .database import Database, resolve_database_path
from .users import UserService


def create_app(*args: Any, **kwargs: Any):
    """Factory function that returns the combined REST + demo application."""

    from .application import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = [
    "Database",
    "UserService",
    "resolve_database_path",
    "create_app",
]
