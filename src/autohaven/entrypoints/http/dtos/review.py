from datetime import datetime

from pydantic import Field

from autohaven.domain.review import MAX_RATING, MIN_RATING
from autohaven.entrypoints.http.dtos.base import CamelModel


class ReviewResponseDTO(CamelModel):
    id: int
    user_id: int
    reviewer_id: int
    car_id: int
    rating: int
    comment: str
    created_at: datetime


class CreateReviewDTO(CamelModel):
    user_id: int = Field(gt=0, description="Seller being reviewed")
    car_id: int = Field(gt=0)
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING, examples=[5])
    comment: str = Field(min_length=1)
