from __future__ import annotations

import logging
from dataclasses import dataclass

from autohaven.domain.errors import NotFoundError
from autohaven.ports.record_store import RecordStore
from autohaven.use_cases.update_car_listing import require_owned_car

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteCarListingRequest:
    car_id: int
    user_id: int


class DeleteCarListing:
    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: DeleteCarListingRequest) -> None:
        """
        Remove a listing owned by the caller.

        Raises:
            NotFoundError: If the car does not exist
            ForbiddenError: If the caller is not the owner
        """
        require_owned_car(self._store, request.car_id, request.user_id)

        if not self._store.delete_car(request.car_id):
            raise NotFoundError(resource="Car", identifier=request.car_id)

        logger.info(
            "Car listing deleted",
            extra={"car_id": request.car_id, "user_id": request.user_id},
        )
