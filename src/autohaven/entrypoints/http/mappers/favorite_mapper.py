from __future__ import annotations

from autohaven.domain.favorite import Favorite
from autohaven.entrypoints.http.dtos.favorite import FavoriteResponseDTO, FavoriteWithCarDTO
from autohaven.entrypoints.http.mappers.car_mapper import CarMapper
from autohaven.use_cases.list_favorites import ListFavoritesResponse


class FavoriteMapper:
    @staticmethod
    def to_favorite_response(favorite: Favorite) -> FavoriteResponseDTO:
        return FavoriteResponseDTO(
            id=favorite.id,
            user_id=favorite.user_id,
            car_id=favorite.car_id,
            created_at=favorite.created_at,
        )

    @staticmethod
    def to_list_response(result: ListFavoritesResponse) -> list[FavoriteWithCarDTO]:
        return [
            FavoriteWithCarDTO(
                favorite=FavoriteMapper.to_favorite_response(item.favorite),
                car=CarMapper.to_car_response(item.car),
            )
            for item in result.items
        ]
