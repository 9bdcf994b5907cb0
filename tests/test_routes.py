"""
End-to-end checks of the HTTP boundary against temporary JSON files.
"""
from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from edupath.app import create_app


@pytest.fixture()
def client(settings, hasher):
    app = create_app(settings, hasher=hasher)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def apply_body(application_fields):
    return dict(application_fields, email="ana@x.com")


def test_startup_creates_applications_file(client, settings):
    assert json.loads(settings.applications_file.read_text(encoding="utf-8")) == []


def test_signup_login_flow(client):
    res = client.post("/api/signup", json={"name": "Ana", "email": "Ana@X.com", "password": "pw123"})
    assert res.status_code == 201
    created = res.json()
    assert set(created) == {"id", "name", "email"}

    dup = client.post("/api/signup", json={"name": "Ana2", "email": "ana@x.com", "password": "pw999"})
    assert dup.status_code == 409
    assert dup.json() == {"error": "Email already registered"}

    login = client.post("/api/login", json={"email": "ANA@X.COM", "password": "pw123"})
    assert login.status_code == 200
    assert login.json() == {"id": created["id"], "name": "Ana", "email": "Ana@X.com"}


def test_signup_missing_fields(client):
    res = client.post("/api/signup", json={"name": "Ana"})
    assert res.status_code == 400
    assert res.json() == {"error": "Missing fields"}
    assert client.post("/api/signup").status_code == 400


def test_login_failures_look_the_same(client):
    client.post("/api/signup", json={"name": "Ana", "email": "ana@x.com", "password": "pw123"})
    wrong = client.post("/api/login", json={"email": "ana@x.com", "password": "bad"})
    ghost = client.post("/api/login", json={"email": "ghost@x.com", "password": "pw123"})
    assert wrong.status_code == ghost.status_code == 401
    assert wrong.json() == ghost.json() == {"error": "Invalid email or password"}


def test_accounts_listing_exposes_store_layout(client):
    client.post("/api/signup", json={"name": "Ana", "email": "ana@x.com", "password": "pw123"})
    body = client.get("/api/accounts").json()
    (user,) = body["users"]
    assert user["passwordHash"].startswith("argon2$")


def test_university_crud(client):
    created = client.post(
        "/api/universities",
        json={"id": 1, "name": "Alpha U", "type": "Public", "colleges": [{"name": "Engineering"}]},
    )
    assert created.status_code == 201
    uni = created.json()
    assert uni["id"] != 1

    assert client.get(f"/api/universities/{uni['id']}").json() == uni

    listing = client.get("/api/universities", params={"college": "Engineering"}).json()
    assert listing == {"items": [uni], "total": 1}
    assert client.get("/api/universities", params={"college": "Arts"}).json() == {"items": [], "total": 0}
    assert client.get("/api/universities", params={"q": "alpha", "type": "Public"}).json()["total"] == 1

    replaced = client.put(f"/api/universities/{uni['id']}", json={"id": 5, "name": "Alpha Uni", "type": "Public"})
    assert replaced.status_code == 200
    assert replaced.json()["id"] == uni["id"]
    assert client.get(f"/api/universities/{uni['id']}").json()["name"] == "Alpha Uni"

    deleted = client.delete(f"/api/universities/{uni['id']}")
    assert deleted.json() == {"message": "Deleted successfully"}
    assert client.get(f"/api/universities/{uni['id']}").status_code == 404
    assert client.delete(f"/api/universities/{uni['id']}").status_code == 404
    assert client.put("/api/universities/123", json={"name": "x"}).status_code == 404


def test_apply_flow(client, apply_body):
    client.post("/api/signup", json={"name": "Ana", "email": "ana@x.com", "password": "pw123"})

    res = client.post("/api/apply", json=apply_body)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Application submitted successfully"

    assert client.get("/api/applications/count", params={"email": "ana@x.com"}).json() == {"count": 1}
    (app_record,) = client.get("/api/applications").json()
    assert app_record["id"] == body["applicationId"]
    assert app_record["status"] == "Pending"

    assert client.delete(f"/api/applications/{body['applicationId']}").json() == {"message": "Deleted successfully"}
    assert client.delete(f"/api/applications/{body['applicationId']}").status_code == 404
    assert client.get("/api/applications/count", params={"email": "ana@x.com"}).json() == {"count": 0}


def test_apply_error_codes(client, apply_body):
    forbidden = client.post("/api/apply", json=apply_body)
    assert forbidden.status_code == 403
    assert forbidden.json() == {"error": "Unauthorized: User not found"}

    missing = client.post("/api/apply", json=dict(apply_body, college=""))
    assert missing.status_code == 400

    assert client.get("/api/applications/count").status_code == 400


@pytest.mark.parametrize(
    "method, path",
    [("GET", "/api/universities/abc"), ("PUT", "/api/universities/abc"), ("DELETE", "/api/universities/abc"), ("DELETE", "/api/applications/abc")],
)
def test_non_numeric_ids_answer_not_found(client, method, path):
    res = client.request(method, path, json={"name": "x"})
    assert res.status_code == 404
    assert res.json() == {"error": "Not found"}


def test_malformed_json_body_is_bad_request(client):
    res = client.post("/api/signup", content="{bad json", headers={"content-type": "application/json"})
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid JSON body"}


@pytest.mark.parametrize("path", ["/api/signup", "/api/login", "/api/apply"])
def test_non_object_body_is_bad_request(client, path):
    res = client.post(path, json=["not", "an", "object"])
    assert res.status_code == 400
    assert set(res.json()) == {"error"}
