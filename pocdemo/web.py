"""Server-rendered demo pages served under ``/demo``."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .models import User
from .users import UserService

logger = logging.getLogger("pocdemo.web")

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def _format_datetime(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M:%S")


def _template_environment() -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
    templates.env.filters["datetime"] = _format_datetime
    return templates


def create_router(users: UserService, *, app_title: str = "POC Template Project") -> APIRouter:
    """Build the demo router bound to ``users``."""

    templates = _template_environment()
    templates.env.globals["app_title"] = app_title
    router = APIRouter(prefix="/demo", include_in_schema=False)

    def _render_users_table(
        request: Request,
        users_list: List[User],
        message: Optional[str] = None,
        *,
        status_code: int = status.HTTP_200_OK,
    ) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "fragments/users_table.html",
            {"users": users_list, "message": message},
            status_code=status_code,
        )

    @router.get("", response_class=HTMLResponse, name="demo")
    def demo(request: Request):
        return templates.TemplateResponse(
            request,
            "demo.html",
            {
                "page_title": "Tech Stack Demo",
                "current_time": datetime.now(),
                "active_page": "demo",
            },
        )

    @router.get("/widget", response_class=HTMLResponse, name="demo_widget")
    def widget(request: Request):
        return templates.TemplateResponse(
            request,
            "fragments/widget.html",
            {"message": f"Widget loaded at {_format_datetime(datetime.now())}"},
        )

    @router.get("/users", response_class=HTMLResponse, name="demo_users")
    def list_users(request: Request):
        return _render_users_table(request, users.list_users())

    @router.post("/users", response_class=HTMLResponse, name="demo_create_user")
    def create_user(request: Request, name: str = Form(...), email: str = Form(...)):
        name = name.strip()
        email = email.strip()
        if not name or not email:
            return _render_users_table(
                request,
                users.list_users(),
                "Please provide both name and email.",
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        users.create_user(name, email)
        return _render_users_table(
            request,
            users.list_users(),
            f"User '{name}' created successfully!",
        )

    @router.delete("/users/{user_id}", response_class=HTMLResponse, name="demo_delete_user")
    def delete_user(request: Request, user_id: int):
        if users.delete_user(user_id):
            message = "User deleted successfully!"
        else:
            logger.warning("Demo page asked to delete missing user %s", user_id)
            message = "User not found."
        return _render_users_table(request, users.list_users(), message)

    return router


__all__ = ["create_router"]
