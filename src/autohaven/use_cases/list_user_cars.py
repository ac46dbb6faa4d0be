from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.car import Car
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class ListUserCarsRequest:
    user_id: int


@dataclass(frozen=True, slots=True)
class ListUserCarsResponse:
    cars: list[Car]


class ListUserCars:
    """Listings owned by one seller, newest-first. Unknown users simply have none."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: ListUserCarsRequest) -> ListUserCarsResponse:
        return ListUserCarsResponse(cars=self._store.get_user_cars(request.user_id))
