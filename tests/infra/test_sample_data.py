from __future__ import annotations

from autohaven.adapters.in_memory_record_store import InMemoryRecordStore
from autohaven.infra.sample_data import SAMPLE_LISTINGS, SAMPLE_SELLER, seed_sample_data


def test_seed_creates_seller_and_listings() -> None:
    store = InMemoryRecordStore()

    seller = seed_sample_data(store)

    assert seller.username == SAMPLE_SELLER.username
    cars = store.get_cars()
    assert len(cars) == len(SAMPLE_LISTINGS)
    assert {car.user_id for car in cars} == {seller.id}


def test_seed_reuses_existing_seller() -> None:
    store = InMemoryRecordStore()
    first = seed_sample_data(store)

    second = seed_sample_data(store)

    assert second.id == first.id
    assert store.get_user(first.id + 1) is None


def test_sample_listings_are_searchable_by_make() -> None:
    store = InMemoryRecordStore()
    seed_sample_data(store)

    makes = {car.make for car in store.get_cars()}

    assert "Toyota" in makes
    assert all(car.features for car in store.get_cars())
