from __future__ import annotations

from autohaven.domain.review import NewReview, Review
from autohaven.entrypoints.http.dtos.review import CreateReviewDTO, ReviewResponseDTO
from autohaven.use_cases.create_review import CreateReviewRequest


class ReviewMapper:
    @staticmethod
    def to_create_request(dto: CreateReviewDTO, reviewer_id: int) -> CreateReviewRequest:
        return CreateReviewRequest(
            new_review=NewReview(
                user_id=dto.user_id,
                reviewer_id=reviewer_id,
                car_id=dto.car_id,
                rating=dto.rating,
                comment=dto.comment,
            )
        )

    @staticmethod
    def to_review_response(review: Review) -> ReviewResponseDTO:
        return ReviewResponseDTO(
            id=review.id,
            user_id=review.user_id,
            reviewer_id=review.reviewer_id,
            car_id=review.car_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )

    @staticmethod
    def to_review_list_response(reviews: list[Review]) -> list[ReviewResponseDTO]:
        return [ReviewMapper.to_review_response(review) for review in reviews]
