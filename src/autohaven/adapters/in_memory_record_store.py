from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import fields, replace
from datetime import datetime, timezone
from typing import Any, TypeVar

from autohaven.domain.car import Car, NewCar
from autohaven.domain.errors import FavoriteAlreadyExistsError
from autohaven.domain.favorite import Favorite, NewFavorite
from autohaven.domain.message import Message, NewMessage
from autohaven.domain.review import NewReview, Review
from autohaven.domain.user import NewUser, User
from autohaven.ports.record_store import RecordStore

logger = logging.getLogger(__name__)

T = TypeVar("T", Car, Favorite, Message, Review, User)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _field_values(record: Any) -> dict[str, Any]:
    # Shallow: values are shared with the source record.
    return {f.name: getattr(record, f.name) for f in fields(record)}


def _newest_first(records: Iterable[T]) -> list[T]:
    return sorted(records, key=lambda r: (r.created_at, r.id), reverse=True)


def _oldest_first(records: Iterable[T]) -> list[T]:
    return sorted(records, key=lambda r: (r.created_at, r.id))


class InMemoryRecordStore(RecordStore):
    """
    Dict-backed RecordStore, the primary backend.

    - One dict per collection, keyed by id
    - Per-collection counters; ids are never reused after a delete
    - A single lock guards every read-modify-write
    - Favorite uniqueness is checked under the lock at insert time
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()

        self._users: dict[int, User] = {}
        self._cars: dict[int, Car] = {}
        self._messages: dict[int, Message] = {}
        self._reviews: dict[int, Review] = {}
        self._favorites: dict[int, Favorite] = {}

        self._next_ids = {
            "users": 1,
            "cars": 1,
            "messages": 1,
            "reviews": 1,
            "favorites": 1,
        }

    def _allocate_id(self, collection: str) -> int:
        # Caller must hold self._lock
        new_id = self._next_ids[collection]
        self._next_ids[collection] = new_id + 1
        return new_id

    # --- users -------------------------------------------------------------

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            users = list(self._users.values())
        return next((user for user in users if user.username == username), None)

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock:
            users = list(self._users.values())
        return next((user for user in users if user.email == email), None)

    def create_user(self, new_user: NewUser) -> User:
        with self._lock:
            user = User(
                id=self._allocate_id("users"),
                created_at=self._clock(),
                bio=None,
                avatar=None,
                **_field_values(new_user),
            )
            self._users[user.id] = user
        logger.debug("User created", extra={"user_id": user.id})
        return user

    def update_user(self, user_id: int, changes: Mapping[str, Any]) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            updated = replace(user, **changes)
            self._users[user_id] = updated
        return updated

    # --- cars --------------------------------------------------------------

    def get_car(self, car_id: int) -> Car | None:
        return self._cars.get(car_id)

    def get_cars(self, filters: Mapping[str, Any] | None = None) -> list[Car]:
        with self._lock:
            cars = list(self._cars.values())

        if filters:
            cars = [
                car
                for car in cars
                if all(getattr(car, key) == value for key, value in filters.items())
            ]

        return _newest_first(cars)

    def get_user_cars(self, user_id: int) -> list[Car]:
        return self.get_cars({"user_id": user_id})

    def create_car(self, new_car: NewCar) -> Car:
        values = _field_values(new_car)
        values["features"] = tuple(new_car.features or ())
        values["images"] = tuple(new_car.images or ())

        with self._lock:
            car = Car(id=self._allocate_id("cars"), created_at=self._clock(), **values)
            self._cars[car.id] = car
        logger.debug("Car created", extra={"car_id": car.id, "user_id": car.user_id})
        return car

    def update_car(self, car_id: int, changes: Mapping[str, Any]) -> Car | None:
        with self._lock:
            car = self._cars.get(car_id)
            if car is None:
                return None
            updated = replace(car, **changes)
            self._cars[car_id] = updated
        return updated

    def delete_car(self, car_id: int) -> bool:
        with self._lock:
            return self._cars.pop(car_id, None) is not None

    # --- messages ----------------------------------------------------------

    def get_message(self, message_id: int) -> Message | None:
        return self._messages.get(message_id)

    def get_messages_between_users(
        self, user_a: int, user_b: int, car_id: int | None = None
    ) -> list[Message]:
        with self._lock:
            messages = list(self._messages.values())

        participants = {(user_a, user_b), (user_b, user_a)}
        thread = [
            message
            for message in messages
            if (message.sender_id, message.receiver_id) in participants
            and (car_id is None or message.car_id == car_id)
        ]
        return _oldest_first(thread)

    def get_user_messages(self, user_id: int) -> list[Message]:
        with self._lock:
            messages = list(self._messages.values())
        return _newest_first(
            message
            for message in messages
            if user_id in (message.sender_id, message.receiver_id)
        )

    def create_message(self, new_message: NewMessage) -> Message:
        with self._lock:
            message = Message(
                id=self._allocate_id("messages"),
                created_at=self._clock(),
                read=False,
                **_field_values(new_message),
            )
            self._messages[message.id] = message
        return message

    def mark_message_as_read(self, message_id: int) -> Message | None:
        with self._lock:
            message = self._messages.get(message_id)
            if message is None:
                return None
            updated = replace(message, read=True)
            self._messages[message_id] = updated
        return updated

    # --- reviews -----------------------------------------------------------

    def get_review(self, review_id: int) -> Review | None:
        return self._reviews.get(review_id)

    def get_car_reviews(self, car_id: int) -> list[Review]:
        with self._lock:
            reviews = list(self._reviews.values())
        return _newest_first(review for review in reviews if review.car_id == car_id)

    def get_user_reviews(self, user_id: int) -> list[Review]:
        with self._lock:
            reviews = list(self._reviews.values())
        return _newest_first(review for review in reviews if review.user_id == user_id)

    def create_review(self, new_review: NewReview) -> Review:
        with self._lock:
            review = Review(
                id=self._allocate_id("reviews"),
                created_at=self._clock(),
                **_field_values(new_review),
            )
            self._reviews[review.id] = review
        return review

    # --- favorites ---------------------------------------------------------

    def get_favorite(self, favorite_id: int) -> Favorite | None:
        return self._favorites.get(favorite_id)

    def get_user_favorites(self, user_id: int) -> list[Favorite]:
        with self._lock:
            favorites = list(self._favorites.values())
        return _newest_first(fav for fav in favorites if fav.user_id == user_id)

    def is_favorite(self, user_id: int, car_id: int) -> bool:
        with self._lock:
            return self._find_favorite(user_id, car_id) is not None

    def create_favorite(self, new_favorite: NewFavorite) -> Favorite:
        with self._lock:
            if self._find_favorite(new_favorite.user_id, new_favorite.car_id) is not None:
                raise FavoriteAlreadyExistsError(new_favorite.user_id, new_favorite.car_id)

            favorite = Favorite(
                id=self._allocate_id("favorites"),
                created_at=self._clock(),
                **_field_values(new_favorite),
            )
            self._favorites[favorite.id] = favorite
        return favorite

    def delete_favorite(self, user_id: int, car_id: int) -> bool:
        with self._lock:
            favorite = self._find_favorite(user_id, car_id)
            if favorite is None:
                return False
            del self._favorites[favorite.id]
            return True

    def _find_favorite(self, user_id: int, car_id: int) -> Favorite | None:
        # Caller must hold self._lock
        return next(
            (
                fav
                for fav in self._favorites.values()
                if fav.user_id == user_id and fav.car_id == car_id
            ),
            None,
        )
