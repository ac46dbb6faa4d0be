from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.errors import NotFoundError
from autohaven.domain.user import User
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class GetUserProfileRequest:
    user_id: int


@dataclass(frozen=True, slots=True)
class GetUserProfileResponse:
    user: User


class GetUserProfile:
    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        user = self._store.get_user(request.user_id)

        if user is None:
            raise NotFoundError(resource="User", identifier=request.user_id)

        return GetUserProfileResponse(user=user)
