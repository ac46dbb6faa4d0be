from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from autohaven.domain.errors import ForbiddenError, NotFoundError, ValidationError
from autohaven.domain.user import EDITABLE_PROFILE_FIELDS, User
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class UpdateUserProfileRequest:
    user_id: int
    requester_id: int
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UpdateUserProfileResponse:
    user: User


class UpdateUserProfile:
    """
    Partial profile update (name, bio, avatar).

    Username, email and password are managed by the authentication service
    and cannot be changed here.
    """

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: UpdateUserProfileRequest) -> UpdateUserProfileResponse:
        """
        Raises:
            NotFoundError: If the user does not exist
            ForbiddenError: If the caller is editing someone else's profile
            ValidationError: If `changes` touches a non-profile field
        """
        if self._store.get_user(request.user_id) is None:
            raise NotFoundError(resource="User", identifier=request.user_id)

        if request.requester_id != request.user_id:
            raise ForbiddenError("Users can only edit their own profile")

        locked = sorted(set(request.changes) - EDITABLE_PROFILE_FIELDS)
        if locked:
            raise ValidationError(
                errors=[
                    {"field": name, "message": "Field cannot be changed", "code": "READ_ONLY"}
                    for name in locked
                ]
            )

        user = self._store.update_user(request.user_id, request.changes)

        if user is None:
            raise NotFoundError(resource="User", identifier=request.user_id)

        return UpdateUserProfileResponse(user=user)
