from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.review import NewReview, Review
from autohaven.ports.record_store import RecordStore


@dataclass(frozen=True, slots=True)
class CreateReviewRequest:
    new_review: NewReview  # reviewer_id already set to the authenticated caller


@dataclass(frozen=True, slots=True)
class CreateReviewResponse:
    review: Review


class CreateReview:
    """Append a review of a seller. Reviews are never edited or removed."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: CreateReviewRequest) -> CreateReviewResponse:
        """
        Raises:
            ValidationError: If the rating is out of range
        """
        request.new_review.validate()

        review = self._store.create_review(request.new_review)
        return CreateReviewResponse(review=review)
