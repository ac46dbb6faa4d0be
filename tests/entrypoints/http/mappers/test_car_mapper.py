"""Tests for CarMapper: query/body DTOs in, domain requests out, and back."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from autohaven.domain.car import Car, Condition, FuelType, Transmission
from autohaven.domain.errors import ValidationError
from autohaven.entrypoints.http.dtos.car import CarsSearchQueryDTO, CreateCarDTO, UpdateCarDTO
from autohaven.entrypoints.http.mappers.car_mapper import CarMapper


@pytest.fixture()
def car() -> Car:
    return Car(
        id=3,
        user_id=1,
        title="2022 Toyota RAV4 Hybrid",
        make="Toyota",
        model="RAV4",
        year=2022,
        price=31000,
        mileage=5000,
        condition=Condition.LIKE_NEW,
        fuel=FuelType.HYBRID,
        transmission=Transmission.AUTOMATIC,
        description="AWD hybrid.",
        location="Phoenix, AZ",
        created_at=datetime(2024, 2, 1, 9, 30, tzinfo=timezone.utc),
        features=("Sunroof", "AWD"),
        mpg_city=41,
    )


# ==============================================================================
# Search
# ==============================================================================


def test_to_search_request_parses_bounds_and_features() -> None:
    dto = CarsSearchQueryDTO(
        make="Toyota", min_price="20000", max_price="oops", features="Sunroof, AWD"
    )

    criteria = CarMapper.to_search_request(dto).criteria

    assert criteria.make == "Toyota"
    assert criteria.min_price == Decimal("20000")
    assert criteria.max_price is None
    assert criteria.features == frozenset({"Sunroof", "AWD"})


def test_to_search_request_with_nothing_set() -> None:
    criteria = CarMapper.to_search_request(CarsSearchQueryDTO()).criteria

    assert criteria.exact_match_filters() == {}
    assert criteria.features == frozenset()


# ==============================================================================
# Create
# ==============================================================================


def test_to_create_request_uses_session_user_and_defaults_sequences() -> None:
    dto = CreateCarDTO.model_validate(
        {
            "title": "2019 Honda Civic",
            "make": "Honda",
            "model": "Civic",
            "year": 2019,
            "price": 18500,
            "mileage": 40000,
            "condition": "good",
            "fuel": "gasoline",
            "transmission": "manual",
            "description": "Daily driver.",
            "location": "Denver, CO",
            "exteriorColor": "Blue",
        }
    )

    new_car = CarMapper.to_create_request(dto, user_id=9).new_car

    assert new_car.user_id == 9
    assert new_car.condition is Condition.GOOD
    assert new_car.transmission is Transmission.MANUAL
    assert new_car.features == ()
    assert new_car.images == ()
    assert new_car.exterior_color == "Blue"


# ==============================================================================
# Update
# ==============================================================================


def test_to_update_request_only_carries_sent_fields() -> None:
    dto = UpdateCarDTO.model_validate({"price": 23999, "features": ["Heated Seats"]})

    request = CarMapper.to_update_request(dto, car_id=3, user_id=1)

    assert request.car_id == 3
    assert request.user_id == 1
    assert request.changes == {"price": 23999, "features": ("Heated Seats",)}


def test_to_update_request_allows_clearing_optional_fields() -> None:
    dto = UpdateCarDTO.model_validate({"vin": None, "images": None})

    request = CarMapper.to_update_request(dto, car_id=3, user_id=1)

    assert request.changes == {"vin": None, "images": ()}


def test_to_update_request_rejects_null_required_fields() -> None:
    dto = UpdateCarDTO.model_validate({"price": None, "mileage": None, "title": "ok"})

    with pytest.raises(ValidationError) as exc_info:
        CarMapper.to_update_request(dto, car_id=3, user_id=1)

    assert [e["field"] for e in exc_info.value.errors] == ["mileage", "price"]
    assert {e["code"] for e in exc_info.value.errors} == {"NULL_VALUE"}


# ==============================================================================
# Response
# ==============================================================================


def test_to_car_response_serializes_camel_case(car: Car) -> None:
    data = CarMapper.to_car_response(car).model_dump(mode="json", by_alias=True)

    assert data["id"] == 3
    assert data["userId"] == 1
    assert data["condition"] == "like_new"
    assert data["fuel"] == "hybrid"
    assert data["features"] == ["Sunroof", "AWD"]
    assert data["images"] == []
    assert data["mpgCity"] == 41
    assert data["vin"] is None
    assert data["createdAt"].startswith("2024-02-01T09:30:00")


def test_to_car_list_response_keeps_order(car: Car) -> None:
    other = replace(car, id=4)

    result = CarMapper.to_car_list_response([other, car])

    assert [dto.id for dto in result] == [4, 3]
