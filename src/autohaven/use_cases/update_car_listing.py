from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from autohaven.domain.car import EDITABLE_CAR_FIELDS, Car
from autohaven.domain.errors import ForbiddenError, NotFoundError, ValidationError
from autohaven.ports.record_store import RecordStore


def require_owned_car(store: RecordStore, car_id: int, user_id: int) -> Car:
    """
    Load a listing the caller is allowed to modify.

    Raises:
        NotFoundError: If the car does not exist
        ForbiddenError: If the car belongs to someone else
    """
    car = store.get_car(car_id)

    if car is None:
        raise NotFoundError(resource="Car", identifier=car_id)

    if car.user_id != user_id:
        raise ForbiddenError("Only the owner can modify this listing", car_id=car_id)

    return car


@dataclass(frozen=True, slots=True)
class UpdateCarListingRequest:
    car_id: int
    user_id: int
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class UpdateCarListingResponse:
    car: Car


class UpdateCarListing:
    """
    Partially update a listing owned by the caller.

    Shallow merge: fields absent from `changes` keep their current value.
    Identity fields (id, user_id, created_at) cannot be changed.
    """

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: UpdateCarListingRequest) -> UpdateCarListingResponse:
        """
        Raises:
            NotFoundError: If the car does not exist
            ForbiddenError: If the caller is not the owner
            ValidationError: If `changes` touches a non-editable field
        """
        require_owned_car(self._store, request.car_id, request.user_id)

        locked = sorted(set(request.changes) - EDITABLE_CAR_FIELDS)
        if locked:
            raise ValidationError(
                errors=[
                    {"field": name, "message": "Field cannot be changed", "code": "READ_ONLY"}
                    for name in locked
                ]
            )

        car = self._store.update_car(request.car_id, request.changes)

        if car is None:
            # Deleted between the ownership check and the update
            raise NotFoundError(resource="Car", identifier=request.car_id)

        return UpdateCarListingResponse(car=car)
