from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class NewUser:
    username: str
    password: str  # opaque credential, hashed upstream
    email: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class User:
    id: int
    username: str
    password: str
    email: str
    created_at: datetime
    name: str | None = None
    bio: str | None = None
    avatar: str | None = None


# Profile fields a user may change about themselves.
EDITABLE_PROFILE_FIELDS = frozenset({"name", "bio", "avatar"})
