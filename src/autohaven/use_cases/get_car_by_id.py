"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.car import Car
from autohaven.domain.errors import NotFoundError
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    car_id: int


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    car: Car


class GetCarById:
    """
    Retrieve a single listing.

    The store reports a missing id as None; this use case turns that into
    NotFoundError for the transport layer.
    """

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Raises:
            NotFoundError: If no car has the given id
        """
        car = self._store.get_car(request.car_id)

        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        return GetCarByIdResponse(car=car)
