from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any


class Condition(str, Enum):
    NEW = "new"
    LIKE_NEW = "like_new"
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class FuelType(str, Enum):
    GASOLINE = "gasoline"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    HYBRID = "hybrid"
    PLUG_IN_HYBRID = "plug_in_hybrid"
    OTHER = "other"


class Transmission(str, Enum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"
    SEMI_AUTOMATIC = "semi_automatic"


@dataclass(frozen=True, slots=True)
class NewCar:
    """Fields supplied when a listing is created (id and created_at are generated)."""

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
    location: str
    features: tuple[str, ...] = ()
    images: tuple[str, ...] = ()
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = None
    engine_size: str | None = None
    horsepower: int | None = None
    mpg_city: int | None = None
    mpg_highway: int | None = None


@dataclass(frozen=True, slots=True)
class Car:
    id: int
    user_id: int
    title: str
    make: str
    model: str
    year: int
    price: int  # smallest currency unit
    mileage: int
    condition: Condition
    fuel: FuelType
    transmission: Transmission
    description: str
    location: str
    created_at: datetime
    features: tuple[str, ...] = ()
    images: tuple[str, ...] = ()
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = None
    engine_size: str | None = None
    horsepower: int | None = None
    mpg_city: int | None = None
    mpg_highway: int | None = None


# Fields that may be changed by the owner after the listing exists.
EDITABLE_CAR_FIELDS = frozenset(
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
        "features",
        "images",
        "exterior_color",
        "interior_color",
        "vin",
        "engine_size",
        "horsepower",
        "mpg_city",
        "mpg_highway",
    }
)


def parse_bound(value: Any) -> Decimal | None:
    """
    Permissively parse a numeric range bound.

    Anything that is not a finite number (None, "", "abc", "NaN", "Infinity")
    is treated as absent instead of raising.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def parse_features(value: Any) -> frozenset[str]:
    """Split a comma-joined feature list into the set of required features."""
    if value is None:
        return frozenset()
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = [str(item) for item in value]
    return frozenset(part.strip() for part in parts if part.strip())


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value.value if isinstance(value, Enum) else value)
    return text or None


@dataclass(frozen=True, slots=True)
class CarSearchCriteria:
    """
    Listing search criteria.

    Exact-match fields are compared with strict equality. Range bounds are
    inclusive; a missing bound imposes no constraint on that side. All
    required features must be present on a listing (AND semantics).
    """

    make: str | None = None
    model: str | None = None
    condition: str | None = None
    fuel: str | None = None
    transmission: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    min_year: Decimal | None = None
    max_year: Decimal | None = None
    min_mileage: Decimal | None = None
    max_mileage: Decimal | None = None
    features: frozenset[str] = frozenset()

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> CarSearchCriteria:
        """
        Build criteria from a loosely-typed mapping such as HTTP query params.

        Accepts both camelCase (``minPrice``) and snake_case (``min_price``)
        keys. Empty strings count as absent and malformed numbers are ignored.
        """

        def pick(camel: str, snake: str) -> Any:
            value = params.get(camel)
            if value is None or value == "":
                value = params.get(snake)
            return value

        return cls(
            make=_text(params.get("make")),
            model=_text(params.get("model")),
            condition=_text(params.get("condition")),
            fuel=_text(params.get("fuel")),
            transmission=_text(params.get("transmission")),
            min_price=parse_bound(pick("minPrice", "min_price")),
            max_price=parse_bound(pick("maxPrice", "max_price")),
            min_year=parse_bound(pick("minYear", "min_year")),
            max_year=parse_bound(pick("maxYear", "max_year")),
            min_mileage=parse_bound(pick("minMileage", "min_mileage")),
            max_mileage=parse_bound(pick("maxMileage", "max_mileage")),
            features=parse_features(params.get("features")),
        )

    def exact_match_filters(self) -> dict[str, str]:
        """Exact-match constraints that can be pushed down to the record store."""
        candidates = {
            "make": self.make,
            "model": self.model,
            "condition": self.condition,
            "fuel": self.fuel,
            "transmission": self.transmission,
        }
        return {key: value for key, value in candidates.items() if value}
