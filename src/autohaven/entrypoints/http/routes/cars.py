from fastapi import APIRouter, Depends, Response, status

from autohaven.entrypoints.http.dependencies import (
    get_car_by_id_use_case,
    get_create_car_listing_use_case,
    get_current_user_id,
    get_delete_car_listing_use_case,
    get_list_car_reviews_use_case,
    get_search_cars_use_case,
    get_update_car_listing_use_case,
)
from autohaven.entrypoints.http.dtos.car import (
    CarResponseDTO,
    CarsSearchQueryDTO,
    CreateCarDTO,
    UpdateCarDTO,
    cars_search_query,
)
from autohaven.entrypoints.http.dtos.review import ReviewResponseDTO
from autohaven.entrypoints.http.error_responses import ErrorResponse
from autohaven.entrypoints.http.mappers.car_mapper import CarMapper
from autohaven.entrypoints.http.mappers.review_mapper import ReviewMapper
from autohaven.use_cases.create_car_listing import CreateCarListing
from autohaven.use_cases.delete_car_listing import DeleteCarListing, DeleteCarListingRequest
from autohaven.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from autohaven.use_cases.list_car_reviews import ListCarReviews, ListCarReviewsRequest
from autohaven.use_cases.search_cars import SearchCars
from autohaven.use_cases.update_car_listing import UpdateCarListing

router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=list[CarResponseDTO],
    summary="Search car listings",
    description="""
    Search listings with optional filters. All filters combine with AND.

    ## Filters
    - make, model, condition, fuel, transmission: exact match
    - minPrice/maxPrice, minYear/maxYear, minMileage/maxMileage: inclusive
      bounds; a bound that is not a number is ignored
    - features: comma-joined; a listing must have every one of them

    Results are newest-first.

    ## Example
    ```
    GET /api/cars?make=Toyota&minPrice=20000&maxPrice=30000&features=Sunroof
    ```
    """,
)
def search_cars(
    query: CarsSearchQueryDTO = Depends(cars_search_query),
    use_case: SearchCars = Depends(get_search_cars_use_case),
) -> list[CarResponseDTO]:
    """Search endpoint following parse → execute → map → return."""
    request = CarMapper.to_search_request(query)

    result = use_case.execute(request)

    return CarMapper.to_car_list_response(result.cars)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get a listing",
    responses={404: {"model": ErrorResponse, "description": "Car not found"}},
)
def get_car(
    car_id: int,
    use_case: GetCarById = Depends(get_car_by_id_use_case),
) -> CarResponseDTO:
    result = use_case.execute(GetCarByIdRequest(car_id=car_id))
    return CarMapper.to_car_response(result.car)


@router.post(
    "/cars",
    response_model=CarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a listing",
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
def create_car(
    payload: CreateCarDTO,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateCarListing = Depends(get_create_car_listing_use_case),
) -> CarResponseDTO:
    result = use_case.execute(CarMapper.to_create_request(payload, user_id=user_id))
    return CarMapper.to_car_response(result.car)


@router.put(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Update a listing",
    description="Partial update; fields left out of the body keep their values. Owner only.",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Not the owner"},
        404: {"model": ErrorResponse, "description": "Car not found"},
    },
)
def update_car(
    car_id: int,
    payload: UpdateCarDTO,
    user_id: int = Depends(get_current_user_id),
    use_case: UpdateCarListing = Depends(get_update_car_listing_use_case),
) -> CarResponseDTO:
    request = CarMapper.to_update_request(payload, car_id=car_id, user_id=user_id)

    result = use_case.execute(request)

    return CarMapper.to_car_response(result.car)


@router.delete(
    "/cars/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a listing",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Not the owner"},
        404: {"model": ErrorResponse, "description": "Car not found"},
    },
)
def delete_car(
    car_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: DeleteCarListing = Depends(get_delete_car_listing_use_case),
) -> Response:
    use_case.execute(DeleteCarListingRequest(car_id=car_id, user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/cars/{car_id}/reviews",
    response_model=list[ReviewResponseDTO],
    summary="Reviews left on a listing",
)
def list_car_reviews(
    car_id: int,
    use_case: ListCarReviews = Depends(get_list_car_reviews_use_case),
) -> list[ReviewResponseDTO]:
    result = use_case.execute(ListCarReviewsRequest(car_id=car_id))
    return ReviewMapper.to_review_list_response(result.reviews)
