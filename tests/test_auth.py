# tests/test_auth.py
import pytest

from sdk import FIXTURE_PASSWORD, TestDataFactory


def test_register_assigns_next_sequential_id(client, store):
    prior = len(store.users)
    r = client.post("/api/auth/register", json={
        "email": "a@b.com", "firstName": "A", "lastName": "B", "password": "x"})
    assert r.status_code == 201
    body = r.json()
    assert body == {"id": prior + 1, "email": "a@b.com", "firstName": "A", "lastName": "B"}
    assert "password" not in body

    r2 = client.post("/api/auth/register", json=TestDataFactory.create_user())
    assert r2.json()["id"] == prior + 2


@pytest.mark.parametrize("missing", ["email", "firstName", "lastName", "password"])
def test_register_requires_every_field(client, missing):
    payload = {"email": "a@b.com", "firstName": "A", "lastName": "B", "password": "x"}
    payload[missing] = ""
    r = client.post("/api/auth/register", json=payload)
    assert r.status_code == 400
    assert r.json() == {"error": "All fields required"}

    del payload[missing]
    assert client.post("/api/auth/register", json=payload).status_code == 400


def test_login_uses_fixture_password_not_registered_one(client):
    client.post("/api/auth/register", json={
        "email": "a@b.com", "firstName": "A", "lastName": "B", "password": "x"})

    r = client.post("/api/auth/login", json={"email": "a@b.com", "password": "TestPassword123!"})
    assert r.status_code == 200
    body = r.json()
    assert body["token"] == "mock-jwt-token"
    assert body["user"]["email"] == "a@b.com"
    assert body["user"]["firstName"] == "A"
    assert "password" not in body["user"]

    r2 = client.post("/api/auth/login", json={"email": "a@b.com", "password": "x"})
    assert r2.status_code == 401
    assert r2.json() == {"error": "Invalid credentials"}


def test_login_seeded_users(client):
    for user in TestDataFactory.get_valid_users():
        r = client.post("/api/auth/login", json={"email": user["email"], "password": FIXTURE_PASSWORD})
        assert r.status_code == 200
        assert r.json()["user"]["lastName"] == user["lastName"]


def test_login_unknown_email(client):
    r = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": FIXTURE_PASSWORD})
    assert r.status_code == 401


def test_login_invalid_inputs(client):
    for creds in TestDataFactory.get_invalid_users():
        r = client.post("/api/auth/login", json=creds)
        if creds["email"] and creds["password"]:
            assert r.status_code == 401
        else:
            assert r.status_code == 400
            assert r.json() == {"error": "Email and password required"}


def test_login_without_body_is_client_error(client):
    r = client.post("/api/auth/login")
    assert r.status_code == 400
    assert "error" in r.json()


def test_fixture_password_is_configurable(store):
    from fastapi.testclient import TestClient
    from mockapi.config import Settings
    from mockapi.main import create_app

    c = TestClient(create_app(store=store, settings=Settings(fixture_password="other", session_token="t0k")))
    r = c.post("/api/auth/login", json={"email": "john.doe@example.com", "password": "other"})
    assert r.status_code == 200
    assert r.json()["token"] == "t0k"
    assert c.post("/api/auth/login", json={
        "email": "john.doe@example.com", "password": FIXTURE_PASSWORD}).status_code == 401


@pytest.mark.parametrize("field,value", [("email", 5), ("firstName", ["A"]), ("password", True)])
def test_register_non_text_field_is_missing(client, field, value):
    payload = {"email": "a@b.com", "firstName": "A", "lastName": "B", "password": "x"}
    payload[field] = value
    r = client.post("/api/auth/register", json=payload)
    assert r.status_code == 400
    assert r.json() == {"error": "All fields required"}


def test_login_non_text_field_is_missing(client):
    r = client.post("/api/auth/login", json={"email": 5, "password": FIXTURE_PASSWORD})
    assert r.status_code == 400
    assert r.json() == {"error": "Email and password required"}
