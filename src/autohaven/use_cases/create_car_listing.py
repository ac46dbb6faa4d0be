from __future__ import annotations

import logging
from dataclasses import dataclass

from autohaven.domain.car import Car, NewCar
from autohaven.ports.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateCarListingRequest:
    new_car: NewCar  # user_id already set to the authenticated caller


@dataclass(frozen=True, slots=True)
class CreateCarListingResponse:
    car: Car


class CreateCarListing:
    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: CreateCarListingRequest) -> CreateCarListingResponse:
        car = self._store.create_car(request.new_car)

        logger.info("Car listing created", extra={"car_id": car.id, "user_id": car.user_id})

        return CreateCarListingResponse(car=car)
