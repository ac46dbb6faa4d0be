"""
SQL-specific behaviour of SqlRecordStore.

Shared behaviour is covered by test_record_store_contract.py; this file
covers what only the relational backend does:
- The unique constraint on (user_id, car_id) backs up the favorite pre-check
- Enum and tuple values are stored as plain column values
- Naive timestamps coming back from SQLite are treated as UTC
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autohaven.adapters.sql_record_store import SqlRecordStore, _aware, _column_value
from autohaven.domain.car import Condition, FuelType, NewCar, Transmission
from autohaven.domain.errors import FavoriteAlreadyExistsError
from autohaven.domain.favorite import NewFavorite
from autohaven.infra.db.models import Base, CarRow, FavoriteRow


@pytest.fixture()
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


def test_unique_constraint_rejects_concurrent_duplicate(
    session: Session, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A duplicate that slips past the pre-check is stopped by the constraint."""
    store = SqlRecordStore(session)
    store.create_favorite(NewFavorite(user_id=1, car_id=10))

    # Simulate the other request's insert landing after our pre-check
    monkeypatch.setattr(store, "is_favorite", lambda user_id, car_id: False)

    with pytest.raises(FavoriteAlreadyExistsError) as exc_info:
        store.create_favorite(NewFavorite(user_id=1, car_id=10))

    assert isinstance(exc_info.value.__cause__, IntegrityError)


def test_integrity_error_on_flush_is_translated() -> None:
    session = Mock(spec=Session)
    session.execute.return_value.scalar_one_or_none.return_value = None
    session.flush.side_effect = IntegrityError("INSERT INTO favorites", {}, Exception("UNIQUE"))
    store = SqlRecordStore(session)

    with pytest.raises(FavoriteAlreadyExistsError):
        store.create_favorite(NewFavorite(user_id=1, car_id=10))

    session.add.assert_called_once()


def test_create_car_stores_plain_column_values(session: Session) -> None:
    store = SqlRecordStore(session)

    car = store.create_car(
        NewCar(
            user_id=1,
            title="2019 Honda Civic",
            make="Honda",
            model="Civic",
            year=2019,
            price=18500,
            mileage=40000,
            condition=Condition.GOOD,
            fuel=FuelType.GASOLINE,
            transmission=Transmission.MANUAL,
            description="Daily driver.",
            location="Denver, CO",
            features=("Bluetooth",),
            images=("https://images.autohaven.example/civic.jpg",),
        )
    )
    session.expire_all()

    row = session.execute(select(CarRow).where(CarRow.id == car.id)).scalar_one()

    assert row.condition == "good"
    assert row.transmission == "manual"
    assert row.features == ["Bluetooth"]
    assert row.images == ["https://images.autohaven.example/civic.jpg"]


def test_created_at_comes_back_timezone_aware(session: Session) -> None:
    store = SqlRecordStore(session)
    favorite = store.create_favorite(NewFavorite(user_id=1, car_id=10))
    session.expire_all()

    reloaded = store.get_favorite(favorite.id)

    assert reloaded.created_at.tzinfo is not None
    assert reloaded.created_at == favorite.created_at


def test_delete_favorite_removes_row(session: Session) -> None:
    store = SqlRecordStore(session)
    store.create_favorite(NewFavorite(user_id=1, car_id=10))

    assert store.delete_favorite(1, 10) is True
    assert session.execute(select(FavoriteRow)).scalars().all() == []


def test_column_value_conversions() -> None:
    assert _column_value(Condition.NEW) == "new"
    assert _column_value(("a", "b")) == ["a", "b"]
    assert _column_value(7) == 7


def test_aware_attaches_utc_to_naive_values() -> None:
    naive = datetime(2024, 1, 1, 12, 0)

    assert _aware(naive) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert _aware(naive.replace(tzinfo=timezone.utc)).tzinfo is timezone.utc
