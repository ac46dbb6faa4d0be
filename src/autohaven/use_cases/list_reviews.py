from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.review import Review
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class ListReviewsResponse:
    reviews: list[Review]


class ListReviews:
    """
    Reviews of every current listing.

    Grouped by listing in listing order (newest listing first), each group
    newest review first. Reviews of deleted listings are not returned.
    """

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self) -> ListReviewsResponse:
        reviews: list[Review] = []

        for car in self._store.get_cars():
            reviews.extend(self._store.get_car_reviews(car.id))

        return ListReviewsResponse(reviews=reviews)
