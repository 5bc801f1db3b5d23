"""HTTP tests for the /person routes, run against a fresh empty store."""

import pytest
from fastapi.testclient import TestClient

from person_api.app.core.config import Settings
from person_api.app.main import create_app


# --- GET /person ---

def test_list_empty_store_is_404(client):
    resp = client.get("/person")
    assert resp.status_code == 404


def test_list_empty_store_returns_empty_list_when_configured():
    app = create_app(Settings(seed_sample_data=False, empty_list_not_found=False))
    with TestClient(app) as c:
        resp = c.get("/person")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_after_create(client, person_payload):
    client.post("/person", json=person_payload)
    resp = client.get("/person")
    assert resp.status_code == 200
    people = resp.json()
    assert len(people) == 1
    assert people[0]["firstName"] == "Hiro"


def test_sample_data_is_loaded():
    with TestClient(create_app(Settings(seed_sample_data=True))) as c:
        people = c.get("/person").json()
    assert [p["lastName"] for p in people] == ["Protagonist", "Truly"]


# --- GET /person/{id} ---

def test_get_missing_is_404(client):
    resp = client.get("/person/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Person 999 not found"


def test_get_returns_camel_case_shape(client, person_payload):
    client.post("/person", json=person_payload)
    body = client.get("/person/1").json()
    assert body["id"] == 1
    for key, value in person_payload.items():
        assert body[key] == value
    assert body["orders"] == []
    assert body["created"] == body["updated"]


# --- POST /person ---

def test_create_returns_200_and_new_id(client, person_payload):
    resp = client.post("/person", json=person_payload)
    assert resp.status_code == 200
    assert resp.json()["id"] == 1
    assert client.post("/person", json=person_payload).json()["id"] == 2


def test_create_ignores_client_id(client, person_payload):
    resp = client.post("/person", json={**person_payload, "id": 77})
    assert resp.json()["id"] == 1


def test_create_accepts_snake_case(client, person_payload):
    payload = dict(person_payload)
    payload["first_name"] = payload.pop("firstName")
    assert client.post("/person", json=payload).status_code == 200


@pytest.mark.parametrize("field", ["firstName", "addressLine2", "zipCode"])
def test_create_missing_field_is_400(client, person_payload, field):
    del person_payload[field]
    resp = client.post("/person", json=person_payload)
    assert resp.status_code == 400
    assert client.get("/person").status_code == 404


def test_create_blank_field_is_400(client, person_payload):
    resp = client.post("/person", json={**person_payload, "emailAddress": "   "})
    assert resp.status_code == 400


def test_create_with_orders(client, person_payload):
    orders = [{"id": 1, "status": "open", "orderDate": "2024-03-01T10:00:00Z", "amount": 9.99}]
    body = client.post("/person", json={**person_payload, "orders": orders}).json()
    assert body["orders"][0]["orderDate"].startswith("2024-03-01T10:00:00")
    assert body["orders"][0]["amount"] == 9.99


# --- PUT /person/{id} ---

def test_replace_existing(client, person_payload):
    created = client.post("/person", json=person_payload).json()
    resp = client.put("/person/1", json={**person_payload, "city": "Oakland"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["city"] == "Oakland"
    assert body["created"] == created["created"]


def test_replace_missing_creates(client, person_payload):
    resp = client.put("/person/5", json=person_payload)
    assert resp.status_code == 200
    assert client.get("/person/5").status_code == 200


def test_replace_invalid_is_400(client, person_payload):
    del person_payload["city"]
    assert client.put("/person/1", json=person_payload).status_code == 400


# --- PATCH /person/{id} ---

def test_merge_existing(client, person_payload):
    created = client.post("/person", json=person_payload).json()
    resp = client.patch("/person/1", json={**person_payload, "status": "Inactive"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "Inactive"
    assert body["id"] == 1
    assert body["created"] == created["created"]


def test_merge_missing_is_404(client, person_payload):
    assert client.patch("/person/3", json=person_payload).status_code == 404


def test_merge_invalid_is_400(client, person_payload):
    client.post("/person", json=person_payload)
    resp = client.patch("/person/1", json={**person_payload, "lastName": ""})
    assert resp.status_code == 400


# --- DELETE /person/{id} ---

def test_delete_then_get_is_404(client, person_payload):
    client.post("/person", json=person_payload)
    resp = client.delete("/person/1")
    assert resp.status_code == 200
    assert resp.content == b""
    assert client.get("/person/1").status_code == 404


def test_delete_missing_is_404(client):
    assert client.delete("/person/1").status_code == 404


# --- misc ---

def test_health_reports_count(client, person_payload):
    client.post("/person", json=person_payload)
    assert client.get("/health").json() == {"status": "ok", "persons": 1}


def test_api_prefix(person_payload):
    app = create_app(Settings(seed_sample_data=False, api_prefix="/api/v1"))
    with TestClient(app) as c:
        assert c.post("/api/v1/person", json=person_payload).status_code == 200
        assert c.get("/person").status_code == 404
        assert c.get("/api/v1/person/1").status_code == 200


def test_apps_do_not_share_stores(person_payload):
    first = create_app(Settings(seed_sample_data=False))
    second = create_app(Settings(seed_sample_data=False))
    with TestClient(first) as a, TestClient(second) as b:
        a.post("/person", json=person_payload)
        assert b.get("/person").status_code == 404
