from datetime import datetime

from pydantic import Field

from autohaven.entrypoints.http.dtos.base import CamelModel


class UserResponseDTO(CamelModel):
    """Public profile. The password credential is never serialized."""

    id: int
    username: str
    email: str
    name: str | None = None
    bio: str | None = None
    avatar: str | None = None
    created_at: datetime


class UpdateUserDTO(CamelModel):
    name: str | None = Field(default=None, max_length=255)
    bio: str | None = None
    avatar: str | None = None
