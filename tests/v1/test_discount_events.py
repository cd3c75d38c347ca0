# tests/v1/test_discount_events.py
"""Tests for discount-event endpoints."""

import pytest
from fastapi import status

from whycookin.models import Store


@pytest.fixture()
def store(db_session) -> Store:
    store = Store(store_name="Homeplus Hapjeong", address="Mapo-gu, Seoul")
    db_session.add(store)
    db_session.commit()
    db_session.refresh(store)
    return store


def _event(store_id, **overrides):
    payload = {"store_id": store_id, "item_name": "Strawberries 500g", "original_price": 10000}
    payload.update(overrides)
    return payload


def test_create_derives_discount_price(client, store) -> None:
    response = client.post("/api/discount-events", json=_event(store.id, discount_percentage=30))

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["discount_price"] == 7000
    assert body["discount_percentage"] == 30
    assert body["is_crowd_sourced"] is True
    assert body["total_reviews"] == 0
    assert body["created_at"] is not None


def test_create_derives_discount_percentage(client, store) -> None:
    response = client.post("/api/discount-events", json=_event(store.id, discount_price=7500))
    assert response.json()["discount_percentage"] == 25


def test_create_requires_a_discount_field(client, store) -> None:
    response = client.post("/api/discount-events", json=_event(store.id))
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_create_requires_store_and_item(client, store) -> None:
    assert client.post("/api/discount-events", json={"item_name": "x", "discount_price": 1}).status_code == 400
    assert client.post("/api/discount-events", json={"store_id": store.id, "discount_price": 1}).status_code == 400


def test_create_for_unknown_store_is_404(client) -> None:
    response = client.post("/api/discount-events", json=_event(9999, discount_price=1))
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_create_keeps_optional_fields(client, store) -> None:
    response = client.post(
        "/api/discount-events",
        json=_event(
            store.id,
            discount_price=5000,
            dietary_tags=["vegan", "gluten_free"],
            expiration_date="2026-10-20",
            is_crowd_sourced=False,
            total_reviews=3,
            avg_rating=4.5,
        ),
    )
    body = response.json()
    assert body["dietary_tags"] == ["vegan", "gluten_free"]
    assert body["expiration_date"] == "2026-10-20"
    assert body["is_crowd_sourced"] is False
    assert body["total_reviews"] == 3
    assert body["avg_rating"] == 4.5


def test_list_newest_first_and_filter_by_store(client, db_session, store) -> None:
    other = Store(store_name="GS25", address="Seoul")
    db_session.add(other)
    db_session.commit()
    client.post("/api/discount-events", json=_event(store.id, item_name="first", discount_price=1))
    client.post("/api/discount-events", json=_event(other.id, item_name="second", discount_price=1))
    client.post("/api/discount-events", json=_event(store.id, item_name="third", discount_price=1))

    names = [event["item_name"] for event in client.get("/api/discount-events").json()]
    assert names == ["third", "second", "first"]

    only_store = client.get("/api/discount-events", params={"store_id": store.id}).json()
    assert [event["item_name"] for event in only_store] == ["third", "first"]


def test_replace_event(client, store) -> None:
    created = client.post("/api/discount-events", json=_event(store.id, discount_price=9000, reason="ripe")).json()

    response = client.put(
        f"/api/discount-events/{created['id']}",
        json=_event(store.id, item_name="Strawberries 1kg", discount_percentage=50),
    )

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["item_name"] == "Strawberries 1kg"
    assert body["discount_price"] == 5000
    assert body["reason"] is None
    assert body["updated_at"] >= created["updated_at"]


def test_replace_missing_event(client, store) -> None:
    response = client.put("/api/discount-events/9999", json=_event(store.id, discount_price=1))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"detail": "Discount event not found or no changes made"}


def test_get_and_delete_event(client, store) -> None:
    event_id = client.post("/api/discount-events", json=_event(store.id, discount_price=1)).json()["id"]

    assert client.get(f"/api/discount-events/{event_id}").json()["id"] == event_id

    response = client.delete(f"/api/discount-events/{event_id}")
    assert response.json()["success"] is True
    assert response.json()["deleted"]["id"] == event_id
    assert client.get(f"/api/discount-events/{event_id}").status_code == status.HTTP_404_NOT_FOUND
