from fastapi import APIRouter, Depends

from autohaven.entrypoints.http.dependencies import (
    get_current_user_id,
    get_list_user_cars_use_case,
    get_update_user_profile_use_case,
    get_user_profile_use_case,
)
from autohaven.entrypoints.http.dtos.car import CarResponseDTO
from autohaven.entrypoints.http.dtos.user import UpdateUserDTO, UserResponseDTO
from autohaven.entrypoints.http.error_responses import ErrorResponse
from autohaven.entrypoints.http.mappers.car_mapper import CarMapper
from autohaven.entrypoints.http.mappers.user_mapper import UserMapper
from autohaven.use_cases.get_user_profile import GetUserProfile, GetUserProfileRequest
from autohaven.use_cases.list_user_cars import ListUserCars, ListUserCarsRequest
from autohaven.use_cases.update_user_profile import UpdateUserProfile

router = APIRouter(tags=["Users"])


@router.get(
    "/users/{user_id}",
    response_model=UserResponseDTO,
    summary="Public profile",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
def get_user(
    user_id: int,
    use_case: GetUserProfile = Depends(get_user_profile_use_case),
) -> UserResponseDTO:
    result = use_case.execute(GetUserProfileRequest(user_id=user_id))
    return UserMapper.to_user_response(result.user)


@router.get(
    "/users/{user_id}/cars",
    response_model=list[CarResponseDTO],
    summary="Listings owned by a user",
)
def list_user_cars(
    user_id: int,
    use_case: ListUserCars = Depends(get_list_user_cars_use_case),
) -> list[CarResponseDTO]:
    result = use_case.execute(ListUserCarsRequest(user_id=user_id))
    return CarMapper.to_car_list_response(result.cars)


@router.put(
    "/users/{user_id}",
    response_model=UserResponseDTO,
    summary="Update own profile",
    description="Partial update of name, bio and avatar.",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Not your profile"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
def update_user(
    user_id: int,
    payload: UpdateUserDTO,
    requester_id: int = Depends(get_current_user_id),
    use_case: UpdateUserProfile = Depends(get_update_user_profile_use_case),
) -> UserResponseDTO:
    request = UserMapper.to_update_request(payload, user_id=user_id, requester_id=requester_id)

    result = use_case.execute(request)

    return UserMapper.to_user_response(result.user)
