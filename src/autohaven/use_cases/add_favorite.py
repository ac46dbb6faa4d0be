from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.errors import FavoriteAlreadyExistsError, NotFoundError
from autohaven.domain.favorite import Favorite, NewFavorite
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class AddFavoriteRequest:
    user_id: int
    car_id: int


@dataclass(frozen=True, slots=True)
class AddFavoriteResponse:
    favorite: Favorite


class AddFavorite:
    """
    Save a listing to the caller's favorites.

    Uniqueness is checked here and again by the store at insert time, so two
    concurrent requests for the same pair produce one favorite.
    """

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: AddFavoriteRequest) -> AddFavoriteResponse:
        """
        Raises:
            NotFoundError: If the car does not exist
            FavoriteAlreadyExistsError: If the car is already a favorite
        """
        if self._store.get_car(request.car_id) is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        if self._store.is_favorite(request.user_id, request.car_id):
            raise FavoriteAlreadyExistsError(request.user_id, request.car_id)

        favorite = self._store.create_favorite(
            NewFavorite(user_id=request.user_id, car_id=request.car_id)
        )
        return AddFavoriteResponse(favorite=favorite)
