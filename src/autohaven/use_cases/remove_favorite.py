from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.errors import NotFoundError
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class RemoveFavoriteRequest:
    user_id: int
    car_id: int


class RemoveFavorite:
    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: RemoveFavoriteRequest) -> None:
        """
        Raises:
            NotFoundError: If the car is not currently a favorite of the caller
        """
        if not self._store.delete_favorite(request.user_id, request.car_id):
            raise NotFoundError(resource="Favorite", identifier=request.car_id)
