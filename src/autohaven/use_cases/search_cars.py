from __future__ import annotations

from dataclasses import dataclass

from autohaven.domain.car import Car, CarSearchCriteria
from autohaven.ports.record_store import RecordStore

# (car attribute, lower bound attribute, upper bound attribute)
_RANGE_FIELDS = (
    ("price", "min_price", "max_price"),
    ("year", "min_year", "max_year"),
    ("mileage", "min_mileage", "max_mileage"),
)


@dataclass(frozen=True, slots=True)
class SearchCarsRequest:
    criteria: CarSearchCriteria


@dataclass(frozen=True, slots=True)
class SearchCarsResponse:
    cars: list[Car]


def within_ranges(car: Car, criteria: CarSearchCriteria) -> bool:
    """Inclusive min/max check for price, year and mileage."""
    for field, min_attr, max_attr in _RANGE_FIELDS:
        value = getattr(car, field)
        lower = getattr(criteria, min_attr)
        upper = getattr(criteria, max_attr)
        if lower is not None and value < lower:
            return False
        if upper is not None and value > upper:
            return False
    return True


def has_all_features(car: Car, required: frozenset[str]) -> bool:
    """A listing qualifies only if it carries every required feature."""
    if not car.features:
        return False
    return required.issubset(car.features)


class SearchCars:
    """
    Listing search pipeline.

    Three stages, each narrowing the previous one and none reordering it:

    1. Exact-match (make, model, condition, fuel, transmission) pushed down
       to the record store, which returns listings newest-first.
    2. Inclusive numeric ranges on price, year and mileage.
    3. Feature superset: every requested feature must be on the listing.

    Stages 2 and 3 cannot be expressed with the store's equality filters, so
    they run here over the already-materialized result.
    """

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    def execute(self, request: SearchCarsRequest) -> SearchCarsResponse:
        criteria = request.criteria

        cars = self._store.get_cars(criteria.exact_match_filters())

        cars = [car for car in cars if within_ranges(car, criteria)]

        if criteria.features:
            cars = [car for car in cars if has_all_features(car, criteria.features)]

        return SearchCarsResponse(cars=cars)
