"""
Unit tests for FastAPI dependency injection functions.

This test suite verifies the dependency wiring:
- get_record_store() yields a SQL store over a per-request session, or the
  shared in-memory store, depending on AUTOHAVEN_STORE
- get_current_user_id() reads the caller from the signed session cookie
- Use case factories wrap whatever store they are given
"""

from __future__ import annotations

import json
import sys
import threading
from base64 import b64encode
from collections.abc import Iterator
from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from itsdangerous import TimestampSigner
from starlette.middleware.sessions import SessionMiddleware

from autohaven.adapters.in_memory_record_store import InMemoryRecordStore
from autohaven.adapters.sql_record_store import SqlRecordStore
from autohaven.entrypoints.http import dependencies
from autohaven.entrypoints.http.dependencies import (
    SESSION_USER_KEY,
    get_add_favorite_use_case,
    get_current_user_id,
    get_in_memory_store,
    get_record_store,
    get_search_cars_use_case,
    reset_in_memory_store,
)
from autohaven.entrypoints.http.exception_handlers import register_exception_handlers
from autohaven.use_cases.add_favorite import AddFavorite
from autohaven.use_cases.search_cars import SearchCars

SECRET = "test-secret"


@pytest.fixture(autouse=True)
def fresh_in_memory_store() -> Iterator[None]:
    reset_in_memory_store()
    yield
    reset_in_memory_store()


def session_cookie(data: dict) -> str:
    """Encode a session the way SessionMiddleware does."""
    payload = b64encode(json.dumps(data).encode("utf-8"))
    return TimestampSigner(SECRET).sign(payload).decode("utf-8")


# ==============================================================================
# get_record_store()
# ==============================================================================


def test_get_record_store_is_generator() -> None:
    assert isinstance(get_record_store(), GeneratorType)


def test_get_record_store_defaults_to_in_memory(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AUTOHAVEN_STORE", raising=False)
    monkeypatch.setenv("AUTOHAVEN_SEED_SAMPLE_DATA", "false")

    first = next(get_record_store())
    second = next(get_record_store())

    assert isinstance(first, InMemoryRecordStore)
    assert first is second


def test_in_memory_store_is_seeded_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AUTOHAVEN_SEED_SAMPLE_DATA", raising=False)

    store = get_in_memory_store()

    assert store.get_user_by_username("carseller") is not None
    assert len(store.get_cars()) > 0


def test_in_memory_store_seeding_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTOHAVEN_SEED_SAMPLE_DATA", "0")

    assert get_in_memory_store().get_cars() == []


def test_in_memory_store_is_created_once_under_concurrent_first_use(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("AUTOHAVEN_SEED_SAMPLE_DATA", raising=False)
    workers = 16
    barrier = threading.Barrier(workers)
    seen: list[InMemoryRecordStore] = []

    def first_request() -> None:
        barrier.wait()
        seen.append(get_in_memory_store())

    threads = [threading.Thread(target=first_request) for _ in range(workers)]
    interval = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
    finally:
        sys.setswitchinterval(interval)

    assert len(seen) == workers
    assert len({id(store) for store in seen}) == 1
    assert seen[0] is get_in_memory_store()


def test_reset_in_memory_store_builds_a_fresh_store(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTOHAVEN_SEED_SAMPLE_DATA", "false")
    first = get_in_memory_store()

    reset_in_memory_store()

    assert get_in_memory_store() is not first


def test_get_record_store_sql_uses_session_per_request(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTOHAVEN_STORE", "sql")
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with patch.object(dependencies, "get_session", return_value=mock_context_manager):
        generator = get_record_store()
        store = next(generator)

        assert isinstance(store, SqlRecordStore)
        assert store._session is mock_session

        with pytest.raises(StopIteration):
            next(generator)

    mock_context_manager.__exit__.assert_called_once()


def test_get_record_store_sql_cleans_up_on_exception(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTOHAVEN_STORE", "sql")
    mock_context_manager = MagicMock()
    mock_context_manager.__exit__.return_value = None

    with patch.object(dependencies, "get_session", return_value=mock_context_manager):
        generator = get_record_store()
        next(generator)

        with pytest.raises(RuntimeError):
            generator.throw(RuntimeError("request failed"))

    mock_context_manager.__exit__.assert_called_once()


# ==============================================================================
# get_current_user_id()
# ==============================================================================


@pytest.fixture
def whoami_client() -> TestClient:
    app = FastAPI()
    app.add_middleware(SessionMiddleware, secret_key=SECRET)
    register_exception_handlers(app)

    @app.get("/whoami")
    def whoami(user_id: int = Depends(get_current_user_id)) -> dict:
        return {"userId": user_id}

    return TestClient(app, raise_server_exceptions=False)


def test_current_user_from_session_cookie(whoami_client: TestClient) -> None:
    whoami_client.cookies.set("session", session_cookie({SESSION_USER_KEY: 7}))

    response = whoami_client.get("/whoami")

    assert response.status_code == 200
    assert response.json() == {"userId": 7}


def test_no_session_is_unauthorized(whoami_client: TestClient) -> None:
    response = whoami_client.get("/whoami")

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_session_without_user_is_unauthorized(whoami_client: TestClient) -> None:
    whoami_client.cookies.set("session", session_cookie({"cart": [1]}))

    assert whoami_client.get("/whoami").status_code == 401


def test_tampered_session_is_unauthorized(whoami_client: TestClient) -> None:
    forged = TimestampSigner("wrong-secret").sign(
        b64encode(json.dumps({SESSION_USER_KEY: 1}).encode("utf-8"))
    )
    whoami_client.cookies.set("session", forged.decode("utf-8"))

    assert whoami_client.get("/whoami").status_code == 401


# ==============================================================================
# Use case factories
# ==============================================================================


def test_factories_wrap_the_given_store() -> None:
    store = InMemoryRecordStore()

    search = get_search_cars_use_case(store=store)
    add_favorite = get_add_favorite_use_case(store=store)

    assert isinstance(search, SearchCars)
    assert isinstance(add_favorite, AddFavorite)
    assert search._store is store
    assert add_favorite._store is store


def test_factories_create_fresh_instance_each_call() -> None:
    store = InMemoryRecordStore()

    assert get_search_cars_use_case(store=store) is not get_search_cars_use_case(store=store)
