"""Test suite for the /api/reviews routes."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from autohaven.domain.errors import ValidationError
from autohaven.domain.review import Review
from autohaven.entrypoints.http.dependencies import (
    get_create_review_use_case,
    get_current_user_id,
    get_list_reviews_use_case,
)
from autohaven.entrypoints.http.exception_handlers import register_exception_handlers
from autohaven.entrypoints.http.routes.reviews import router
from autohaven.use_cases.create_review import CreateReviewResponse
from autohaven.use_cases.list_reviews import ListReviewsResponse

CALLER_ID = 2


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/api")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case() -> Mock:
    return Mock()


@pytest.fixture
def review() -> Review:
    return Review(
        id=1,
        user_id=1,
        reviewer_id=CALLER_ID,
        car_id=10,
        rating=5,
        comment="Honest seller",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_list_reviews_is_public(
    app: FastAPI, client: TestClient, mock_use_case: Mock, review: Review
) -> None:
    mock_use_case.execute.return_value = ListReviewsResponse(reviews=[review])
    app.dependency_overrides[get_list_reviews_use_case] = lambda: mock_use_case

    response = client.get("/api/reviews")

    assert response.status_code == 200
    assert response.json()[0]["comment"] == "Honest seller"
    mock_use_case.execute.assert_called_once_with()


def test_create_review(
    app: FastAPI, client: TestClient, mock_use_case: Mock, review: Review
) -> None:
    mock_use_case.execute.return_value = CreateReviewResponse(review=review)
    app.dependency_overrides[get_create_review_use_case] = lambda: mock_use_case
    app.dependency_overrides[get_current_user_id] = lambda: CALLER_ID

    response = client.post(
        "/api/reviews", json={"userId": 1, "carId": 10, "rating": 5, "comment": "Honest seller"}
    )

    assert response.status_code == 201
    assert response.json()["reviewerId"] == CALLER_ID
    new_review = mock_use_case.execute.call_args[0][0].new_review
    assert new_review.reviewer_id == CALLER_ID
    assert new_review.user_id == 1


@pytest.mark.parametrize("rating", [0, 6])
def test_create_review_rating_out_of_range(
    app: FastAPI, client: TestClient, mock_use_case: Mock, rating: int
) -> None:
    app.dependency_overrides[get_create_review_use_case] = lambda: mock_use_case
    app.dependency_overrides[get_current_user_id] = lambda: CALLER_ID

    response = client.post(
        "/api/reviews", json={"userId": 1, "carId": 10, "rating": rating, "comment": "meh"}
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "rating"
    mock_use_case.execute.assert_not_called()


def test_create_review_domain_validation_error(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = ValidationError(
        errors=[{"field": "rating", "message": "Must be between 1 and 5", "code": "INVALID_RANGE"}]
    )
    app.dependency_overrides[get_create_review_use_case] = lambda: mock_use_case
    app.dependency_overrides[get_current_user_id] = lambda: CALLER_ID

    response = client.post(
        "/api/reviews", json={"userId": 1, "carId": 10, "rating": 3, "comment": "ok"}
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_create_review_requires_authentication(client: TestClient) -> None:
    response = client.post(
        "/api/reviews", json={"userId": 1, "carId": 10, "rating": 5, "comment": "ok"}
    )

    assert response.status_code == 401
