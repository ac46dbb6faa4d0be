"""
Dependency injection for FastAPI routes.

The SQL backend gets a fresh session per request. The in-memory backend is a
process-wide singleton (it *is* the data), created and seeded on first use.
Use cases are built per request around whichever store is configured.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterator

from fastapi import Depends, Request

from autohaven.adapters.in_memory_record_store import InMemoryRecordStore
from autohaven.adapters.sql_record_store import SqlRecordStore
from autohaven.domain.errors import UnauthorizedError
from autohaven.infra.config import STORE_SQL, seed_sample_data, store_backend
from autohaven.infra.db.session import get_session
from autohaven.infra.sample_data import seed_sample_data as load_sample_data
from autohaven.ports.record_store import RecordStore
from autohaven.use_cases.add_favorite import AddFavorite
from autohaven.use_cases.create_car_listing import CreateCarListing
from autohaven.use_cases.create_review import CreateReview
from autohaven.use_cases.delete_car_listing import DeleteCarListing
from autohaven.use_cases.get_car_by_id import GetCarById
from autohaven.use_cases.get_conversation import GetConversation
from autohaven.use_cases.get_user_profile import GetUserProfile
from autohaven.use_cases.list_car_reviews import ListCarReviews
from autohaven.use_cases.list_favorites import ListFavorites
from autohaven.use_cases.list_reviews import ListReviews
from autohaven.use_cases.list_user_cars import ListUserCars
from autohaven.use_cases.list_user_messages import ListUserMessages
from autohaven.use_cases.mark_message_as_read import MarkMessageAsRead
from autohaven.use_cases.remove_favorite import RemoveFavorite
from autohaven.use_cases.search_cars import SearchCars
from autohaven.use_cases.send_message import SendMessage
from autohaven.use_cases.update_car_listing import UpdateCarListing
from autohaven.use_cases.update_user_profile import UpdateUserProfile

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"

# Process-wide store, created at most once under _in_memory_store_lock
_in_memory_store: InMemoryRecordStore | None = None
_in_memory_store_lock = threading.Lock()


def get_in_memory_store() -> InMemoryRecordStore:
    """The shared in-memory store, seeded with sample data unless disabled."""
    global _in_memory_store
    if _in_memory_store is None:
        with _in_memory_store_lock:
            if _in_memory_store is None:
                store = InMemoryRecordStore()
                seeded = seed_sample_data()

                if seeded:
                    load_sample_data(store)

                logger.info("In-memory record store initialized", extra={"seeded": seeded})
                _in_memory_store = store
    return _in_memory_store


def reset_in_memory_store() -> None:
    """Drop the shared store; the next request builds a fresh one."""
    global _in_memory_store
    with _in_memory_store_lock:
        _in_memory_store = None


def get_record_store() -> Iterator[RecordStore]:
    """
    Provides the configured RecordStore for a single request.

    For the SQL backend the session commits when the request succeeds and
    rolls back if it raises.
    """
    if store_backend() == STORE_SQL:
        with get_session() as session:
            yield SqlRecordStore(session)
    else:
        yield get_in_memory_store()


def get_current_user_id(request: Request) -> int:
    """
    Resolve the authenticated caller from the signed session cookie.

    Establishing the session (login) happens elsewhere; this only reads it.

    Raises:
        UnauthorizedError: If there is no authenticated session
    """
    session = request.scope.get("session") or {}
    user_id = session.get(SESSION_USER_KEY)

    if user_id is None:
        raise UnauthorizedError("Authentication required")

    return int(user_id)


# --- use case factories ------------------------------------------------------


def get_search_cars_use_case(store: RecordStore = Depends(get_record_store)) -> SearchCars:
    return SearchCars(record_store=store)


def get_car_by_id_use_case(store: RecordStore = Depends(get_record_store)) -> GetCarById:
    return GetCarById(record_store=store)


def get_create_car_listing_use_case(
    store: RecordStore = Depends(get_record_store),
) -> CreateCarListing:
    return CreateCarListing(record_store=store)


def get_update_car_listing_use_case(
    store: RecordStore = Depends(get_record_store),
) -> UpdateCarListing:
    return UpdateCarListing(record_store=store)


def get_delete_car_listing_use_case(
    store: RecordStore = Depends(get_record_store),
) -> DeleteCarListing:
    return DeleteCarListing(record_store=store)


def get_list_favorites_use_case(store: RecordStore = Depends(get_record_store)) -> ListFavorites:
    return ListFavorites(record_store=store)


def get_add_favorite_use_case(store: RecordStore = Depends(get_record_store)) -> AddFavorite:
    return AddFavorite(record_store=store)


def get_remove_favorite_use_case(
    store: RecordStore = Depends(get_record_store),
) -> RemoveFavorite:
    return RemoveFavorite(record_store=store)


def get_user_profile_use_case(store: RecordStore = Depends(get_record_store)) -> GetUserProfile:
    return GetUserProfile(record_store=store)


def get_list_user_cars_use_case(store: RecordStore = Depends(get_record_store)) -> ListUserCars:
    return ListUserCars(record_store=store)


def get_update_user_profile_use_case(
    store: RecordStore = Depends(get_record_store),
) -> UpdateUserProfile:
    return UpdateUserProfile(record_store=store)


def get_list_user_messages_use_case(
    store: RecordStore = Depends(get_record_store),
) -> ListUserMessages:
    return ListUserMessages(record_store=store)


def get_conversation_use_case(store: RecordStore = Depends(get_record_store)) -> GetConversation:
    return GetConversation(record_store=store)


def get_send_message_use_case(store: RecordStore = Depends(get_record_store)) -> SendMessage:
    return SendMessage(record_store=store)


def get_mark_message_as_read_use_case(
    store: RecordStore = Depends(get_record_store),
) -> MarkMessageAsRead:
    return MarkMessageAsRead(record_store=store)


def get_list_reviews_use_case(store: RecordStore = Depends(get_record_store)) -> ListReviews:
    return ListReviews(record_store=store)


def get_list_car_reviews_use_case(
    store: RecordStore = Depends(get_record_store),
) -> ListCarReviews:
    return ListCarReviews(record_store=store)


def get_create_review_use_case(store: RecordStore = Depends(get_record_store)) -> CreateReview:
    return CreateReview(record_store=store)
