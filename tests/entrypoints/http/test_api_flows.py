"""
End-to-end flows through the real application.

The full app (session middleware, routers, handlers, use cases) runs over a
fresh in-memory store. Callers authenticate with signed session cookies the
same way a browser would.
"""

from __future__ import annotations

import json
from base64 import b64encode

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from itsdangerous import TimestampSigner

from autohaven.adapters.in_memory_record_store import InMemoryRecordStore
from autohaven.domain.user import NewUser, User
from autohaven.entrypoints.http.app import build_app
from autohaven.entrypoints.http.dependencies import SESSION_USER_KEY, get_record_store
from autohaven.infra.sample_data import seed_sample_data

SECRET = "flow-test-secret"


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def seller(store: InMemoryRecordStore) -> User:
    return seed_sample_data(store)


@pytest.fixture
def buyer(store: InMemoryRecordStore) -> User:
    return store.create_user(NewUser(username="buyer", password="pw", email="buyer@example.com"))


@pytest.fixture
def app(store: InMemoryRecordStore, monkeypatch: pytest.MonkeyPatch) -> FastAPI:
    monkeypatch.setenv("AUTOHAVEN_SESSION_SECRET", SECRET)
    app = build_app()
    app.dependency_overrides[get_record_store] = lambda: store
    return app


def client_for(app: FastAPI, user: User | None = None) -> TestClient:
    client = TestClient(app, raise_server_exceptions=False)
    if user is not None:
        payload = b64encode(json.dumps({SESSION_USER_KEY: user.id}).encode("utf-8"))
        client.cookies.set("session", TimestampSigner(SECRET).sign(payload).decode("utf-8"))
    return client


@pytest.fixture
def anonymous(app: FastAPI) -> TestClient:
    return client_for(app)


@pytest.fixture
def as_buyer(app: FastAPI, buyer: User) -> TestClient:
    return client_for(app, buyer)


@pytest.fixture
def as_seller(app: FastAPI, seller: User) -> TestClient:
    return client_for(app, seller)


def first_car_id(client: TestClient, **params: str) -> int:
    return client.get("/api/cars", params=params).json()[0]["id"]


# ==============================================================================
# Search
# ==============================================================================


def test_anonymous_search(anonymous: TestClient, seller: User) -> None:
    everything = anonymous.get("/api/cars").json()
    toyotas = anonymous.get("/api/cars", params={"make": "Toyota"}).json()

    assert len(everything) > len(toyotas) > 0
    assert all(car["make"] == "Toyota" for car in toyotas)


def test_search_with_bounds_and_features(anonymous: TestClient, seller: User) -> None:
    cars = anonymous.get(
        "/api/cars",
        params={"minPrice": "20000", "maxPrice": "40000", "features": "Bluetooth"},
    ).json()

    for car in cars:
        assert 20000 <= car["price"] <= 40000
        assert "Bluetooth" in car["features"]


def test_search_with_malformed_bound_matches_unbounded(anonymous: TestClient, seller: User) -> None:
    unbounded = anonymous.get("/api/cars").json()

    assert anonymous.get("/api/cars", params={"minPrice": "cheap"}).json() == unbounded


# ==============================================================================
# Favorites
# ==============================================================================


def test_favorite_lifecycle(as_buyer: TestClient, seller: User) -> None:
    car_id = first_car_id(as_buyer)

    created = as_buyer.post("/api/favorites", json={"carId": car_id})
    assert created.status_code == 201

    duplicate = as_buyer.post("/api/favorites", json={"carId": car_id})
    assert duplicate.status_code == 400
    assert duplicate.json()["code"] == "ALREADY_FAVORITED"

    favorites = as_buyer.get("/api/favorites").json()
    assert [item["car"]["id"] for item in favorites] == [car_id]

    assert as_buyer.delete(f"/api/favorites/{car_id}").status_code == 204
    assert as_buyer.delete(f"/api/favorites/{car_id}").status_code == 404
    assert as_buyer.get("/api/favorites").json() == []


def test_favorite_missing_car(as_buyer: TestClient) -> None:
    assert as_buyer.post("/api/favorites", json={"carId": 999}).status_code == 404


def test_favorites_of_deleted_listing_disappear(
    as_buyer: TestClient, as_seller: TestClient
) -> None:
    car_id = first_car_id(as_buyer)
    as_buyer.post("/api/favorites", json={"carId": car_id})

    assert as_seller.delete(f"/api/cars/{car_id}").status_code == 204

    assert as_buyer.get("/api/favorites").json() == []
    assert as_buyer.get(f"/api/cars/{car_id}").status_code == 404


# ==============================================================================
# Listings
# ==============================================================================


def test_only_owner_may_edit_listing(as_buyer: TestClient, as_seller: TestClient) -> None:
    car_id = first_car_id(as_buyer)
    before = as_buyer.get(f"/api/cars/{car_id}").json()

    assert as_buyer.put(f"/api/cars/{car_id}", json={"price": 1}).status_code == 403
    assert as_buyer.delete(f"/api/cars/{car_id}").status_code == 403

    response = as_seller.put(f"/api/cars/{car_id}", json={"price": before["price"] - 1000})

    assert response.status_code == 200
    after = response.json()
    assert after["price"] == before["price"] - 1000
    assert {k: v for k, v in after.items() if k != "price"} == {
        k: v for k, v in before.items() if k != "price"
    }


def test_create_listing_is_owned_by_caller(as_buyer: TestClient, buyer: User) -> None:
    response = as_buyer.post(
        "/api/cars",
        json={
            "title": "2015 Subaru Outback",
            "make": "Subaru",
            "model": "Outback",
            "year": 2015,
            "price": 12500,
            "mileage": 98000,
            "condition": "fair",
            "fuel": "gasoline",
            "transmission": "automatic",
            "description": "AWD wagon.",
            "location": "Boise, ID",
        },
    )

    assert response.status_code == 201
    car = response.json()
    assert car["userId"] == buyer.id
    assert car["features"] == []
    assert [c["id"] for c in as_buyer.get(f"/api/users/{buyer.id}/cars").json()] == [car["id"]]
    assert as_buyer.get("/api/cars").json()[0]["id"] == car["id"]


# ==============================================================================
# Messages and reviews
# ==============================================================================


def test_conversation(as_buyer: TestClient, as_seller: TestClient, buyer: User, seller: User) -> None:
    car_id = first_car_id(as_buyer)

    question = as_buyer.post(
        "/api/messages",
        json={"receiverId": seller.id, "carId": car_id, "content": "Still available?"},
    ).json()
    as_seller.post(
        "/api/messages", json={"receiverId": buyer.id, "carId": car_id, "content": "Yes!"}
    )

    thread = as_seller.get(f"/api/messages/{buyer.id}/{car_id}").json()
    assert [m["content"] for m in thread] == ["Still available?", "Yes!"]

    assert as_buyer.put(f"/api/messages/{question['id']}/read").status_code == 403
    read = as_seller.put(f"/api/messages/{question['id']}/read")
    assert read.status_code == 200
    assert read.json()["read"] is True

    inbox = as_buyer.get("/api/messages").json()
    assert [m["content"] for m in inbox] == ["Yes!", "Still available?"]


def test_reviews(as_buyer: TestClient, anonymous: TestClient, seller: User) -> None:
    car_id = first_car_id(as_buyer)
    body = {"userId": seller.id, "carId": car_id, "comment": "Smooth sale"}

    assert as_buyer.post("/api/reviews", json={**body, "rating": 9}).status_code == 400
    assert as_buyer.post("/api/reviews", json={**body, "rating": 5}).status_code == 201

    assert len(anonymous.get(f"/api/cars/{car_id}/reviews").json()) == 1
    assert [r["rating"] for r in anonymous.get("/api/reviews").json()] == [5]


# ==============================================================================
# Profiles
# ==============================================================================


def test_profile_edit(as_buyer: TestClient, anonymous: TestClient, buyer: User, seller: User) -> None:
    response = as_buyer.put(f"/api/users/{buyer.id}", json={"bio": "Weekend mechanic"})

    assert response.status_code == 200
    assert anonymous.get(f"/api/users/{buyer.id}").json()["bio"] == "Weekend mechanic"
    assert as_buyer.put(f"/api/users/{seller.id}", json={"bio": "x"}).status_code == 403
    assert "password" not in anonymous.get(f"/api/users/{seller.id}").json()


def test_anonymous_writes_are_rejected(anonymous: TestClient, seller: User) -> None:
    car_id = first_car_id(anonymous)

    assert anonymous.post("/api/favorites", json={"carId": car_id}).status_code == 401
    assert anonymous.delete(f"/api/cars/{car_id}").status_code == 401
    assert anonymous.get("/api/messages").status_code == 401
