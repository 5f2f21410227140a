"""Application factory that serves both the REST API and the demo pages."""
from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from .api import create_router as create_api_router
from .config import Settings, load_settings
from .database import Database
from .users import UserService
from .web import create_router as create_web_router

logger = logging.getLogger("pocdemo.application")


def _initialise_database(database: Database) -> Database:
    seeded = database.initialize()
    if seeded:
        logger.info("Seeded %s sample users into %s", seeded, database.path)
    return database


def create_app(
    *,
    database: Optional[Database] = None,
    settings: Optional[Settings] = None,
    initialize_database: bool = False,
) -> FastAPI:
    """Create the combined ASGI application.

    A database opened here is initialised before the application is returned.
    A caller-supplied ``database`` is assumed to be initialised already unless
    ``initialize_database`` is set.
    """

    if settings is None:
        settings = load_settings()
    if database is None:
        db = _initialise_database(Database(settings.database_path))
    else:
        db = database
        if initialize_database:
            _initialise_database(db)

    users = UserService(db)

    app = FastAPI(
        title=settings.app_title,
        version="0.0.1",
        description="Proof-of-concept CRUD application for users.",
    )
    app.state.database = db
    app.state.users = users
    app.state.settings = settings

    app.include_router(create_api_router(users))
    app.include_router(create_web_router(users, app_title=settings.app_title))

    @app.get("/", include_in_schema=False)
    async def root(request: Request):
        return RedirectResponse(request.url_for("demo"), status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(sqlite3.Error)
    async def handle_storage_error(request: Request, exc: sqlite3.Error):
        logger.exception("Storage failure while handling %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    return app


__all__ = ["create_app"]
