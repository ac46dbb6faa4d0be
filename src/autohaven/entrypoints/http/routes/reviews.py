from fastapi import APIRouter, Depends, status

from autohaven.entrypoints.http.dependencies import (
    get_create_review_use_case,
    get_current_user_id,
    get_list_reviews_use_case,
)
from autohaven.entrypoints.http.dtos.review import CreateReviewDTO, ReviewResponseDTO
from autohaven.entrypoints.http.error_responses import ErrorResponse
from autohaven.entrypoints.http.mappers.review_mapper import ReviewMapper
from autohaven.use_cases.create_review import CreateReview
from autohaven.use_cases.list_reviews import ListReviews

router = APIRouter(tags=["Reviews"])


@router.get(
    "/reviews",
    response_model=list[ReviewResponseDTO],
    summary="Reviews across all current listings",
)
def list_reviews(
    use_case: ListReviews = Depends(get_list_reviews_use_case),
) -> list[ReviewResponseDTO]:
    result = use_case.execute()
    return ReviewMapper.to_review_list_response(result.reviews)


@router.post(
    "/reviews",
    response_model=ReviewResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Review a seller",
    responses={400: {"model": ErrorResponse, "description": "Validation error (e.g. rating outside 1-5)"}},
)
def create_review(
    payload: CreateReviewDTO,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateReview = Depends(get_create_review_use_case),
) -> ReviewResponseDTO:
    result = use_case.execute(ReviewMapper.to_create_request(payload, reviewer_id=user_id))
    return ReviewMapper.to_review_response(result.review)
