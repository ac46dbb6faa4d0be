from fastapi import APIRouter, Depends, Response, status

from autohaven.entrypoints.http.dependencies import (
    get_add_favorite_use_case,
    get_current_user_id,
    get_list_favorites_use_case,
    get_remove_favorite_use_case,
)
from autohaven.entrypoints.http.dtos.favorite import (
    AddFavoriteDTO,
    FavoriteResponseDTO,
    FavoriteWithCarDTO,
)
from autohaven.entrypoints.http.error_responses import ErrorResponse
from autohaven.entrypoints.http.mappers.favorite_mapper import FavoriteMapper
from autohaven.use_cases.add_favorite import AddFavorite, AddFavoriteRequest
from autohaven.use_cases.list_favorites import ListFavorites, ListFavoritesRequest
from autohaven.use_cases.remove_favorite import RemoveFavorite, RemoveFavoriteRequest

router = APIRouter(tags=["Favorites"])


@router.get(
    "/favorites",
    response_model=list[FavoriteWithCarDTO],
    summary="The caller's saved listings",
    description="Newest-first `{favorite, car}` pairs; listings deleted since are omitted.",
)
def list_favorites(
    user_id: int = Depends(get_current_user_id),
    use_case: ListFavorites = Depends(get_list_favorites_use_case),
) -> list[FavoriteWithCarDTO]:
    result = use_case.execute(ListFavoritesRequest(user_id=user_id))
    return FavoriteMapper.to_list_response(result)


@router.post(
    "/favorites",
    response_model=FavoriteResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Save a listing",
    responses={
        400: {"model": ErrorResponse, "description": "Already a favorite, or carId missing"},
        404: {"model": ErrorResponse, "description": "Car not found"},
    },
)
def add_favorite(
    payload: AddFavoriteDTO,
    user_id: int = Depends(get_current_user_id),
    use_case: AddFavorite = Depends(get_add_favorite_use_case),
) -> FavoriteResponseDTO:
    result = use_case.execute(AddFavoriteRequest(user_id=user_id, car_id=payload.car_id))
    return FavoriteMapper.to_favorite_response(result.favorite)


@router.delete(
    "/favorites/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Remove a saved listing",
    responses={404: {"model": ErrorResponse, "description": "Not currently a favorite"}},
)
def remove_favorite(
    car_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: RemoveFavorite = Depends(get_remove_favorite_use_case),
) -> Response:
    use_case.execute(RemoveFavoriteRequest(user_id=user_id, car_id=car_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
