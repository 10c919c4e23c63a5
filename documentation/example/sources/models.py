from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from .constants import HTTPMethod, HTTPStatus


class User(BaseModel):
    name: str
    age: int
    roles: list[str]
    created_at: datetime = Field(default_factory=datetime.now)
    is_deleted: bool = False


class Request(BaseModel):
    method: HTTPMethod
    host: str
    path: str
    body: User | None = None
    params: dict[str, Any] = Field(default_factory=dict)


class Response(BaseModel):
    status: HTTPStatus
