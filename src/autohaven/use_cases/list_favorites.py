from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.car import Car
from autohaven.domain.favorite import Favorite
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class FavoriteWithCar:
    favorite: Favorite
    car: Car


@dataclass(frozen=True, slots=True)
class ListFavoritesRequest:
    user_id: int


@dataclass(frozen=True, slots=True)
class ListFavoritesResponse:
    items: list[FavoriteWithCar]


class ListFavorites:
    """
    The caller's favorites, newest-first, each paired with its listing.

    Favorites whose listing has since been deleted are left out.
    """

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: ListFavoritesRequest) -> ListFavoritesResponse:
        items: list[FavoriteWithCar] = []

        for favorite in self._store.get_user_favorites(request.user_id):
            car = self._store.get_car(favorite.car_id)
            if car is not None:
                items.append(FavoriteWithCar(favorite=favorite, car=car))

        return ListFavoritesResponse(items=items)
