"""SQLAlchemy implementation of RecordStore."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from sqlalchemy import and_, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autohaven.adapters.in_memory_record_store import utcnow
from autohaven.domain.car import Car, Condition, FuelType, NewCar, Transmission
from autohaven.domain.errors import FavoriteAlreadyExistsError
from autohaven.domain.favorite import Favorite, NewFavorite
from autohaven.domain.message import Message, NewMessage
from autohaven.domain.review import NewReview, Review
from autohaven.domain.user import NewUser, User
from autohaven.infra.db.models import CarRow, FavoriteRow, MessageRow, ReviewRow, UserRow
from autohaven.ports.record_store import RecordStore

logger = logging.getLogger(__name__)


def _column_value(value: Any) -> Any:
    """Convert a domain value to what the column stores."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


def _aware(value: datetime) -> datetime:
    # SQLite hands timezone-aware columns back as naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlRecordStore(RecordStore):
    """
    Relational RecordStore backed by SQLAlchemy.

    - One Session per request; commit/rollback belongs to the session owner
    - Inserts and updates are flushed so generated ids are available
    - Exact-match filters become SQL WHERE clauses
    - Ordering matches the in-memory store: created_at, then id
    - Favorite uniqueness comes from the uq_favorites_user_car constraint
    """

    def __init__(self, session: Session, clock: Callable[[], datetime] = utcnow) -> None:
        """
        Initialize store with a database session.

        Args:
            session: SQLAlchemy session for database operations
            clock: Source of created_at timestamps
        """
        self._session = session
        self._clock = clock

    # --- users -------------------------------------------------------------

    def get_user(self, user_id: int) -> User | None:
        row = self._session.get(UserRow, user_id)
        return self._user_to_domain(row) if row else None

    def get_user_by_username(self, username: str) -> User | None:
        query = select(UserRow).where(UserRow.username == username)
        row = self._session.execute(query).scalar_one_or_none()
        return self._user_to_domain(row) if row else None

    def get_user_by_email(self, email: str) -> User | None:
        query = select(UserRow).where(UserRow.email == email)
        row = self._session.execute(query).scalar_one_or_none()
        return self._user_to_domain(row) if row else None

    def create_user(self, new_user: NewUser) -> User:
        row = UserRow(
            username=new_user.username,
            password=new_user.password,
            email=new_user.email,
            name=new_user.name,
            created_at=self._clock(),
        )
        self._session.add(row)
        self._session.flush()
        return self._user_to_domain(row)

    def update_user(self, user_id: int, changes: Mapping[str, Any]) -> User | None:
        row = self._session.get(UserRow, user_id)
        if row is None:
            return None
        self._apply(row, changes)
        return self._user_to_domain(row)

    # --- cars --------------------------------------------------------------

    def get_car(self, car_id: int) -> Car | None:
        row = self._session.get(CarRow, car_id)
        return self._car_to_domain(row) if row else None

    def get_cars(self, filters: Mapping[str, Any] | None = None) -> list[Car]:
        query = select(CarRow)

        for key, value in (filters or {}).items():
            query = query.where(getattr(CarRow, key) == _column_value(value))

        query = query.order_by(CarRow.created_at.desc(), CarRow.id.desc())
        rows = self._session.execute(query).scalars().all()
        return [self._car_to_domain(row) for row in rows]

    def get_user_cars(self, user_id: int) -> list[Car]:
        return self.get_cars({"user_id": user_id})

    def create_car(self, new_car: NewCar) -> Car:
        row = CarRow(
            user_id=new_car.user_id,
            title=new_car.title,
            make=new_car.make,
            model=new_car.model,
            year=new_car.year,
            price=new_car.price,
            mileage=new_car.mileage,
            condition=_column_value(new_car.condition),
            fuel=_column_value(new_car.fuel),
            transmission=_column_value(new_car.transmission),
            description=new_car.description,
            features=list(new_car.features or ()),
            images=list(new_car.images or ()),
            location=new_car.location,
            exterior_color=new_car.exterior_color,
            interior_color=new_car.interior_color,
            vin=new_car.vin,
            engine_size=new_car.engine_size,
            horsepower=new_car.horsepower,
            mpg_city=new_car.mpg_city,
            mpg_highway=new_car.mpg_highway,
            created_at=self._clock(),
        )
        self._session.add(row)
        self._session.flush()
        logger.debug("Car created", extra={"car_id": row.id, "user_id": row.user_id})
        return self._car_to_domain(row)

    def update_car(self, car_id: int, changes: Mapping[str, Any]) -> Car | None:
        row = self._session.get(CarRow, car_id)
        if row is None:
            return None
        self._apply(row, changes)
        return self._car_to_domain(row)

    def delete_car(self, car_id: int) -> bool:
        row = self._session.get(CarRow, car_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    # --- messages ----------------------------------------------------------

    def get_message(self, message_id: int) -> Message | None:
        row = self._session.get(MessageRow, message_id)
        return self._message_to_domain(row) if row else None

    def get_messages_between_users(
        self, user_a: int, user_b: int, car_id: int | None = None
    ) -> list[Message]:
        query = select(MessageRow).where(
            or_(
                and_(MessageRow.sender_id == user_a, MessageRow.receiver_id == user_b),
                and_(MessageRow.sender_id == user_b, MessageRow.receiver_id == user_a),
            )
        )
        if car_id is not None:
            query = query.where(MessageRow.car_id == car_id)

        # Chronological: a conversation reads top to bottom
        query = query.order_by(MessageRow.created_at.asc(), MessageRow.id.asc())
        rows = self._session.execute(query).scalars().all()
        return [self._message_to_domain(row) for row in rows]

    def get_user_messages(self, user_id: int) -> list[Message]:
        query = (
            select(MessageRow)
            .where(or_(MessageRow.sender_id == user_id, MessageRow.receiver_id == user_id))
            .order_by(MessageRow.created_at.desc(), MessageRow.id.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._message_to_domain(row) for row in rows]

    def create_message(self, new_message: NewMessage) -> Message:
        row = MessageRow(
            sender_id=new_message.sender_id,
            receiver_id=new_message.receiver_id,
            car_id=new_message.car_id,
            content=new_message.content,
            read=False,
            created_at=self._clock(),
        )
        self._session.add(row)
        self._session.flush()
        return self._message_to_domain(row)

    def mark_message_as_read(self, message_id: int) -> Message | None:
        row = self._session.get(MessageRow, message_id)
        if row is None:
            return None
        row.read = True
        self._session.flush()
        return self._message_to_domain(row)

    # --- reviews -----------------------------------------------------------

    def get_review(self, review_id: int) -> Review | None:
        row = self._session.get(ReviewRow, review_id)
        return self._review_to_domain(row) if row else None

    def get_car_reviews(self, car_id: int) -> list[Review]:
        query = (
            select(ReviewRow)
            .where(ReviewRow.car_id == car_id)
            .order_by(ReviewRow.created_at.desc(), ReviewRow.id.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._review_to_domain(row) for row in rows]

    def get_user_reviews(self, user_id: int) -> list[Review]:
        query = (
            select(ReviewRow)
            .where(ReviewRow.user_id == user_id)
            .order_by(ReviewRow.created_at.desc(), ReviewRow.id.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._review_to_domain(row) for row in rows]

    def create_review(self, new_review: NewReview) -> Review:
        row = ReviewRow(
            user_id=new_review.user_id,
            reviewer_id=new_review.reviewer_id,
            car_id=new_review.car_id,
            rating=new_review.rating,
            comment=new_review.comment,
            created_at=self._clock(),
        )
        self._session.add(row)
        self._session.flush()
        return self._review_to_domain(row)

    # --- favorites ---------------------------------------------------------

    def get_favorite(self, favorite_id: int) -> Favorite | None:
        row = self._session.get(FavoriteRow, favorite_id)
        return self._favorite_to_domain(row) if row else None

    def get_user_favorites(self, user_id: int) -> list[Favorite]:
        query = (
            select(FavoriteRow)
            .where(FavoriteRow.user_id == user_id)
            .order_by(FavoriteRow.created_at.desc(), FavoriteRow.id.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._favorite_to_domain(row) for row in rows]

    def is_favorite(self, user_id: int, car_id: int) -> bool:
        return self._find_favorite(user_id, car_id) is not None

    def create_favorite(self, new_favorite: NewFavorite) -> Favorite:
        if self.is_favorite(new_favorite.user_id, new_favorite.car_id):
            raise FavoriteAlreadyExistsError(new_favorite.user_id, new_favorite.car_id)

        row = FavoriteRow(
            user_id=new_favorite.user_id,
            car_id=new_favorite.car_id,
            created_at=self._clock(),
        )
        self._session.add(row)
        try:
            self._session.flush()
        except IntegrityError as exc:
            # Lost a race with a concurrent insert of the same pair; the
            # session owner rolls the transaction back.
            logger.info(
                "Duplicate favorite rejected by constraint",
                extra={"user_id": new_favorite.user_id, "car_id": new_favorite.car_id},
            )
            raise FavoriteAlreadyExistsError(new_favorite.user_id, new_favorite.car_id) from exc
        return self._favorite_to_domain(row)

    def delete_favorite(self, user_id: int, car_id: int) -> bool:
        row = self._find_favorite(user_id, car_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def _find_favorite(self, user_id: int, car_id: int) -> FavoriteRow | None:
        query = select(FavoriteRow).where(
            FavoriteRow.user_id == user_id, FavoriteRow.car_id == car_id
        )
        return self._session.execute(query).scalar_one_or_none()

    # --- row <-> domain ------------------------------------------------------

    def _apply(self, row: Any, changes: Mapping[str, Any]) -> None:
        for key, value in changes.items():
            setattr(row, key, _column_value(value))
        self._session.flush()

    def _user_to_domain(self, row: UserRow) -> User:
        return User(
            id=row.id,
            username=row.username,
            password=row.password,
            email=row.email,
            name=row.name,
            bio=row.bio,
            avatar=row.avatar,
            created_at=_aware(row.created_at),
        )

    def _car_to_domain(self, row: CarRow) -> Car:
        return Car(
            id=row.id,
            user_id=row.user_id,
            title=row.title,
            make=row.make,
            model=row.model,
            year=row.year,
            price=row.price,
            mileage=row.mileage,
            condition=Condition(row.condition),
            fuel=FuelType(row.fuel),
            transmission=Transmission(row.transmission),
            description=row.description,
            features=tuple(row.features or ()),
            images=tuple(row.images or ()),
            location=row.location,
            exterior_color=row.exterior_color,
            interior_color=row.interior_color,
            vin=row.vin,
            engine_size=row.engine_size,
            horsepower=row.horsepower,
            mpg_city=row.mpg_city,
            mpg_highway=row.mpg_highway,
            created_at=_aware(row.created_at),
        )

    def _message_to_domain(self, row: MessageRow) -> Message:
        return Message(
            id=row.id,
            sender_id=row.sender_id,
            receiver_id=row.receiver_id,
            car_id=row.car_id,
            content=row.content,
            read=row.read,
            created_at=_aware(row.created_at),
        )

    def _review_to_domain(self, row: ReviewRow) -> Review:
        return Review(
            id=row.id,
            user_id=row.user_id,
            reviewer_id=row.reviewer_id,
            car_id=row.car_id,
            rating=row.rating,
            comment=row.comment,
            created_at=_aware(row.created_at),
        )

    def _favorite_to_domain(self, row: FavoriteRow) -> Favorite:
        return Favorite(
            id=row.id,
            user_id=row.user_id,
            car_id=row.car_id,
            created_at=_aware(row.created_at),
        )
