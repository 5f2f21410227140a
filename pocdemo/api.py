"""JSON endpoints served under ``/rest-api``."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status
from pydantic import BaseModel, ConfigDict, Field

from .models import User
from .users import UserService


class HelloResponse(BaseModel):
    message: str
    answer: int
    question: str


class ChartSeries(BaseModel):
    name: str
    data: List[int]


class ChartDataResponse(BaseModel):
    categories: List[str]
    series: List[ChartSeries]


class UserPayload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)


class UserView(BaseModel):
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None


def _user_to_view(user: User) -> UserView:
    assert user.id is not None
    return UserView(id=user.id, name=user.name, email=user.email, created_at=user.created_at)


def create_router(users: UserService) -> APIRouter:
    """Build the REST router bound to ``users``."""

    router = APIRouter(prefix="/rest-api")

    @router.get("/hello", response_model=HelloResponse)
    async def hello() -> HelloResponse:
        return HelloResponse(
            message="Don't Panic!",
            answer=42,
            question="What do you get if you multiply six by nine?",
        )

    @router.get("/chart-data", response_model=ChartDataResponse)
    async def chart_data() -> ChartDataResponse:
        return ChartDataResponse(
            categories=["Jan", "Feb", "Mar", "Apr", "May", "Jun"],
            series=[
                ChartSeries(name="Series 1", data=[30, 40, 35, 50, 49, 60]),
                ChartSeries(name="Series 2", data=[23, 12, 54, 61, 32, 40]),
            ],
        )

    @router.get("/users", response_model=List[UserView])
    def list_users(q: Optional[str] = Query(default=None, max_length=255)) -> List[UserView]:
        if q:
            found = users.search_users_by_name(q)
        else:
            found = users.list_users()
        return [_user_to_view(user) for user in found]

    @router.get("/users/{user_id}", response_model=UserView)
    def get_user(user_id: int) -> UserView:
        user = users.get_user(user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return _user_to_view(user)

    @router.post("/users", status_code=status.HTTP_201_CREATED, response_model=UserView)
    def create_user(payload: UserPayload) -> UserView:
        user = users.create_user(payload.name, payload.email)
        return _user_to_view(user)

    @router.put("/users/{user_id}", response_model=UserView)
    def update_user(user_id: int, payload: UserPayload) -> UserView:
        if not users.update_user(user_id, payload.name, payload.email):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        user = users.get_user(user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return _user_to_view(user)

    @router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_user(user_id: int) -> Response:
        if not users.delete_user(user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


__all__ = ["create_router", "HelloResponse", "ChartDataResponse", "UserPayload", "UserView"]
