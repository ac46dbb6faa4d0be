from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from autohaven.domain.errors import ValidationError

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True, slots=True)
class NewReview:
    user_id: int  # seller being reviewed
    reviewer_id: int
    car_id: int
    rating: int
    comment: str

    def validate(self) -> None:
        """
        Raises:
            ValidationError: If the rating is out of range
        """
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError(
                errors=[
                    {
                        "field": "rating",
                        "message": f"Must be between {MIN_RATING} and {MAX_RATING}",
                        "code": "INVALID_RANGE",
                    }
                ]
            )


@dataclass(frozen=True, slots=True)
class Review:
    id: int
    user_id: int
    reviewer_id: int
    car_id: int
    rating: int
    comment: str
    created_at: datetime
