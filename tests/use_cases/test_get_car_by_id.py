"""Test suite for GetCarById use case."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from autohaven.domain.car import Car, Condition, FuelType, Transmission
from autohaven.domain.errors import NotFoundError
from autohaven.ports.record_store import RecordStore
from autohaven.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest, GetCarByIdResponse


@pytest.fixture()
def mock_store() -> Mock:
    return Mock(spec=RecordStore)


@pytest.fixture()
def sample_car() -> Car:
    return Car(
        id=7,
        user_id=1,
        title="2020 Toyota Camry XSE",
        make="Toyota",
        model="Camry",
        year=2020,
        price=25999,
        mileage=15420,
        condition=Condition.EXCELLENT,
        fuel=FuelType.GASOLINE,
        transmission=Transmission.AUTOMATIC,
        description="One owner.",
        location="San Francisco, CA",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_execute_returns_car(mock_store: Mock, sample_car: Car) -> None:
    mock_store.get_car.return_value = sample_car

    result = GetCarById(record_store=mock_store).execute(GetCarByIdRequest(car_id=7))

    assert isinstance(result, GetCarByIdResponse)
    assert result.car == sample_car
    mock_store.get_car.assert_called_once_with(7)


def test_execute_raises_not_found(mock_store: Mock) -> None:
    mock_store.get_car.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        GetCarById(record_store=mock_store).execute(GetCarByIdRequest(car_id=99))

    assert exc_info.value.context == {"resource": "Car", "identifier": 99}
    assert "99" in exc_info.value.message


def test_request_is_immutable() -> None:
    request = GetCarByIdRequest(car_id=1)

    with pytest.raises(AttributeError):
        request.car_id = 2  # type: ignore[misc]
