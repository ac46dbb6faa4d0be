from datetime import datetime

from fastapi import Query
from pydantic import Field

from autohaven.domain.car import Condition, FuelType, Transmission
from autohaven.entrypoints.http.dtos.base import CamelModel


class CarResponseDTO(CamelModel):
    id: int
    user_id: int
    title: str
    make: str
    model: str
    year: int
    price: int
    mileage: int
    condition: Condition
    fuel: FuelType
    transmission: Transmission
    description: str
    features: list[str]
    images: list[str]
    location: str
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = None
    engine_size: str | None = None
    horsepower: int | None = None
    mpg_city: int | None = None
    mpg_highway: int | None = None
    created_at: datetime


class CreateCarDTO(CamelModel):
    """Request body for a new listing. The owner comes from the session, never the body."""

    title: str = Field(min_length=1, max_length=200, examples=["2020 Toyota Camry XSE"])
    make: str = Field(min_length=1, max_length=50, examples=["Toyota"])
    model: str = Field(min_length=1, max_length=50, examples=["Camry"])
    year: int = Field(ge=1886, le=2100, examples=[2020])
    price: int = Field(ge=0, description="Price in the smallest currency unit", examples=[25999])
    mileage: int = Field(ge=0, examples=[15420])
    condition: Condition
    fuel: FuelType
    transmission: Transmission
    description: str = Field(min_length=1)
    location: str = Field(min_length=1, max_length=100, examples=["San Francisco, CA"])
    features: list[str] | None = Field(default=None, examples=[["Sunroof", "Navigation"]])
    images: list[str] | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = Field(default=None, max_length=17)
    engine_size: str | None = None
    horsepower: int | None = Field(default=None, ge=0)
    mpg_city: int | None = Field(default=None, ge=0)
    mpg_highway: int | None = Field(default=None, ge=0)


class UpdateCarDTO(CamelModel):
    """Partial update: only fields present in the body are changed."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    make: str | None = Field(default=None, min_length=1, max_length=50)
    model: str | None = Field(default=None, min_length=1, max_length=50)
    year: int | None = Field(default=None, ge=1886, le=2100)
    price: int | None = Field(default=None, ge=0)
    mileage: int | None = Field(default=None, ge=0)
    condition: Condition | None = None
    fuel: FuelType | None = None
    transmission: Transmission | None = None
    description: str | None = Field(default=None, min_length=1)
    location: str | None = Field(default=None, min_length=1, max_length=100)
    features: list[str] | None = None
    images: list[str] | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = Field(default=None, max_length=17)
    engine_size: str | None = None
    horsepower: int | None = Field(default=None, ge=0)
    mpg_city: int | None = Field(default=None, ge=0)
    mpg_highway: int | None = Field(default=None, ge=0)


class CarsSearchQueryDTO(CamelModel):
    """
    Raw listing search parameters.

    Everything stays a string here: numeric bounds are parsed permissively in
    the domain, so a malformed bound is ignored rather than rejected.
    """

    make: str | None = None
    model: str | None = None
    condition: str | None = None
    fuel: str | None = None
    transmission: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    min_year: str | None = None
    max_year: str | None = None
    min_mileage: str | None = None
    max_mileage: str | None = None
    features: str | None = None


def cars_search_query(
    make: str | None = Query(default=None, description="Exact make", examples=["Toyota"]),
    model: str | None = Query(default=None, description="Exact model", examples=["Camry"]),
    condition: str | None = Query(default=None, description="Exact condition"),
    fuel: str | None = Query(default=None, description="Exact fuel type"),
    transmission: str | None = Query(default=None, description="Exact transmission"),
    min_price: str | None = Query(default=None, alias="minPrice", description="Inclusive"),
    max_price: str | None = Query(default=None, alias="maxPrice", description="Inclusive"),
    min_year: str | None = Query(default=None, alias="minYear", description="Inclusive"),
    max_year: str | None = Query(default=None, alias="maxYear", description="Inclusive"),
    min_mileage: str | None = Query(default=None, alias="minMileage", description="Inclusive"),
    max_mileage: str | None = Query(default=None, alias="maxMileage", description="Inclusive"),
    features: str | None = Query(
        default=None,
        description="Comma-joined; a listing must have every feature",
        examples=["Sunroof,Navigation"],
    ),
) -> CarsSearchQueryDTO:
    """Collect listing search query parameters (camelCase on the wire)."""
    return CarsSearchQueryDTO(
        make=make,
        model=model,
        condition=condition,
        fuel=fuel,
        transmission=transmission,
        min_price=min_price,
        max_price=max_price,
        min_year=min_year,
        max_year=max_year,
        min_mileage=min_mileage,
        max_mileage=max_mileage,
        features=features,
    )
