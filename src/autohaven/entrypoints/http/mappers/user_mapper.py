from __future__ import annotations

from autohaven.domain.user import User
from autohaven.entrypoints.http.dtos.user import UpdateUserDTO, UserResponseDTO
from autohaven.use_cases.update_user_profile import UpdateUserProfileRequest


class UserMapper:
    @staticmethod
    def to_update_request(
        dto: UpdateUserDTO, user_id: int, requester_id: int
    ) -> UpdateUserProfileRequest:
        # Only fields present in the body; explicit null clears a profile field
        return UpdateUserProfileRequest(
            user_id=user_id,
            requester_id=requester_id,
            changes=dto.model_dump(exclude_unset=True),
        )

    @staticmethod
    def to_user_response(user: User) -> UserResponseDTO:
        """Drops the password credential at the boundary."""
        return UserResponseDTO(
            id=user.id,
            username=user.username,
            email=user.email,
            name=user.name,
            bio=user.bio,
            avatar=user.avatar,
            created_at=user.created_at,
        )
