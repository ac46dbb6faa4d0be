from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.review import Review
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class ListCarReviewsRequest:
    car_id: int


@dataclass(frozen=True, slots=True)
class ListCarReviewsResponse:
    reviews: list[Review]


class ListCarReviews:
    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: ListCarReviewsRequest) -> ListCarReviewsResponse:
        return ListCarReviewsResponse(reviews=self._store.get_car_reviews(request.car_id))
