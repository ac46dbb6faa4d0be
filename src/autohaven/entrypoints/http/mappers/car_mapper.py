from __future__ import annotations

from pydantic.alias_generators import to_camel

from autohaven.domain.car import Car, CarSearchCriteria, NewCar
from autohaven.domain.errors import ValidationError
from autohaven.entrypoints.http.dtos.car import (
    CarResponseDTO,
    CarsSearchQueryDTO,
    CreateCarDTO,
    UpdateCarDTO,
)
from autohaven.use_cases.create_car_listing import CreateCarListingRequest
from autohaven.use_cases.search_cars import SearchCarsRequest
from autohaven.use_cases.update_car_listing import UpdateCarListingRequest

# Listing fields that must never be set to null
_NON_NULLABLE_FIELDS = frozenset(
    {
        "title",
        "make",
        "model",
        "year",
        "price",
        "mileage",
        "condition",
        "fuel",
        "transmission",
        "description",
        "location",
    }
)


class CarMapper:
    """Maps between REST DTOs and domain models for listings."""

    @staticmethod
    def to_search_request(dto: CarsSearchQueryDTO) -> SearchCarsRequest:
        """
        Converts raw query params to search criteria.

        Malformed numeric bounds become "no constraint" (see
        CarSearchCriteria.from_params).
        """
        return SearchCarsRequest(criteria=CarSearchCriteria.from_params(dto.model_dump()))

    @staticmethod
    def to_create_request(dto: CreateCarDTO, user_id: int) -> CreateCarListingRequest:
        """
        Builds a new listing owned by the authenticated caller.

        Omitted features/images become empty sequences.
        """
        return CreateCarListingRequest(
            new_car=NewCar(
                user_id=user_id,
                title=dto.title,
                make=dto.make,
                model=dto.model,
                year=dto.year,
                price=dto.price,
                mileage=dto.mileage,
                condition=dto.condition,
                fuel=dto.fuel,
                transmission=dto.transmission,
                description=dto.description,
                location=dto.location,
                features=tuple(dto.features or ()),
                images=tuple(dto.images or ()),
                exterior_color=dto.exterior_color,
                interior_color=dto.interior_color,
                vin=dto.vin,
                engine_size=dto.engine_size,
                horsepower=dto.horsepower,
                mpg_city=dto.mpg_city,
                mpg_highway=dto.mpg_highway,
            )
        )

    @staticmethod
    def to_update_request(dto: UpdateCarDTO, car_id: int, user_id: int) -> UpdateCarListingRequest:
        """
        Converts a partial body to a change set containing only the fields sent.

        Raises:
            ValidationError: If a required listing field is explicitly null
        """
        changes = dto.model_dump(exclude_unset=True)

        nulls = sorted(
            name for name, value in changes.items() if value is None and name in _NON_NULLABLE_FIELDS
        )
        if nulls:
            raise ValidationError(
                errors=[
                    {"field": to_camel(name), "message": "Must not be null", "code": "NULL_VALUE"}
                    for name in nulls
                ]
            )

        for name in ("features", "images"):
            if name in changes:
                changes[name] = tuple(changes[name] or ())

        return UpdateCarListingRequest(car_id=car_id, user_id=user_id, changes=changes)

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        return CarResponseDTO(
            id=car.id,
            user_id=car.user_id,
            title=car.title,
            make=car.make,
            model=car.model,
            year=car.year,
            price=car.price,
            mileage=car.mileage,
            condition=car.condition,
            fuel=car.fuel,
            transmission=car.transmission,
            description=car.description,
            features=list(car.features or ()),
            images=list(car.images or ()),
            location=car.location,
            exterior_color=car.exterior_color,
            interior_color=car.interior_color,
            vin=car.vin,
            engine_size=car.engine_size,
            horsepower=car.horsepower,
            mpg_city=car.mpg_city,
            mpg_highway=car.mpg_highway,
            created_at=car.created_at,
        )

    @staticmethod
    def to_car_list_response(cars: list[Car]) -> list[CarResponseDTO]:
        return [CarMapper.to_car_response(car) for car in cars]
