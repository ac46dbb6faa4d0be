from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from autohaven.domain.car import Car, NewCar
from autohaven.domain.favorite import Favorite, NewFavorite
from autohaven.domain.message import Message, NewMessage
from autohaven.domain.review import NewReview, Review
from autohaven.domain.user import NewUser, User


class RecordStore(ABC):
    """
    Port for marketplace data access.

    Contract shared by every backend:
        - Lookups of a missing id return None; they never raise.
        - Collections come back newest-first by created_at (newer id wins a
          tie), except get_messages_between_users which is oldest-first.
        - create_* assigns the next sequential id (never reused, even after a
          delete) and the current UTC timestamp.
        - update_* shallow-merges the given fields and returns the merged
          record, or None if the id does not exist. It never creates.
        - delete_* returns whether a record was actually removed.

    Contract (Preconditions):
        - Inputs are validated by the caller (route layer / use case)
        - Implementations trust inputs and do not re-validate
    """

    # --- users -------------------------------------------------------------

    @abstractmethod
    def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    def create_user(self, new_user: NewUser) -> User: ...

    @abstractmethod
    def update_user(self, user_id: int, changes: Mapping[str, Any]) -> User | None: ...

    # --- cars --------------------------------------------------------------

    @abstractmethod
    def get_car(self, car_id: int) -> Car | None: ...

    @abstractmethod
    def get_cars(self, filters: Mapping[str, Any] | None = None) -> list[Car]:
        """
        Return cars whose fields equal every key/value pair in filters.

        An absent or empty filter mapping returns the whole collection.

        Args:
            filters: Field name -> required value (strict equality)

        Returns:
            Matching cars, newest-first
        """
        ...

    @abstractmethod
    def get_user_cars(self, user_id: int) -> list[Car]: ...

    @abstractmethod
    def create_car(self, new_car: NewCar) -> Car: ...

    @abstractmethod
    def update_car(self, car_id: int, changes: Mapping[str, Any]) -> Car | None: ...

    @abstractmethod
    def delete_car(self, car_id: int) -> bool: ...

    # --- messages ----------------------------------------------------------

    @abstractmethod
    def get_message(self, message_id: int) -> Message | None: ...

    @abstractmethod
    def get_messages_between_users(
        self, user_a: int, user_b: int, car_id: int | None = None
    ) -> list[Message]:
        """
        Return the conversation between two users in either direction.

        Oldest-first, so the thread reads in chronological order. When car_id
        is given only that listing's thread is returned.
        """
        ...

    @abstractmethod
    def get_user_messages(self, user_id: int) -> list[Message]: ...

    @abstractmethod
    def create_message(self, new_message: NewMessage) -> Message: ...

    @abstractmethod
    def mark_message_as_read(self, message_id: int) -> Message | None: ...

    # --- reviews -----------------------------------------------------------

    @abstractmethod
    def get_review(self, review_id: int) -> Review | None: ...

    @abstractmethod
    def get_car_reviews(self, car_id: int) -> list[Review]: ...

    @abstractmethod
    def get_user_reviews(self, user_id: int) -> list[Review]: ...

    @abstractmethod
    def create_review(self, new_review: NewReview) -> Review: ...

    # --- favorites ---------------------------------------------------------

    @abstractmethod
    def get_favorite(self, favorite_id: int) -> Favorite | None: ...

    @abstractmethod
    def get_user_favorites(self, user_id: int) -> list[Favorite]: ...

    @abstractmethod
    def is_favorite(self, user_id: int, car_id: int) -> bool: ...

    @abstractmethod
    def create_favorite(self, new_favorite: NewFavorite) -> Favorite:
        """
        Store a favorite.

        Raises:
            FavoriteAlreadyExistsError: If the (user, car) pair already exists
        """
        ...

    @abstractmethod
    def delete_favorite(self, user_id: int, car_id: int) -> bool: ...
