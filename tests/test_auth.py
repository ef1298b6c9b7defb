# File: tests/test_auth.py

import pytest


CREDENTIALS = {"email": "alice@example.com", "password": "123"}


@pytest.mark.parametrize(
    "body",
    [
        {"password": "123"},
        {"email": "alice@example.com"},
        {"email": "not-an-email", "password": "123"},
        {"email": "alice@example.com", "password": ""},
    ],
)
def test_signup_rejects_invalid_body(client, body):
    resp = client.post("/auth/signup", json=body)
    assert resp.status_code == 400
    assert resp.json()["code"] == "validation_error"


def test_signup_rejects_empty_body(client):
    resp = client.post("/auth/signup")
    assert resp.status_code == 400


def test_signup_returns_token(client):
    resp = client.post("/auth/signup", json=CREDENTIALS)
    assert resp.status_code == 201
    data = resp.json()
    assert data["access_token"]
    assert data["token_type"] == "bearer"


def test_signup_duplicate_email_conflicts(client):
    assert client.post("/auth/signup", json=CREDENTIALS).status_code == 201
    resp = client.post("/auth/signup", json=CREDENTIALS)
    assert resp.status_code == 409
    assert resp.json()["code"] == "conflict"


@pytest.mark.parametrize("body", [{"password": "123"}, {"email": "alice@example.com"}, None])
def test_login_rejects_invalid_body(client, body):
    resp = client.post("/auth/login", json=body)
    assert resp.status_code == 400


def test_login_returns_token(client, signup):
    signup(**CREDENTIALS)
    resp = client.post("/auth/login", json=CREDENTIALS)
    assert resp.status_code == 200
    assert "access_token" in resp.json()


def test_login_wrong_password(client, signup):
    signup(**CREDENTIALS)
    resp = client.post("/auth/login", json={**CREDENTIALS, "password": "nope"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Credentials incorrect"
    assert resp.headers["www-authenticate"] == "Bearer"


def test_login_unknown_email(client):
    resp = client.post("/auth/login", json={"email": "ghost@example.com", "password": "123"})
    assert resp.status_code == 401


def test_login_token_grants_access(client, signup):
    signup(**CREDENTIALS)
    token = client.post("/auth/login", json=CREDENTIALS).json()["access_token"]
    resp = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["email"] == CREDENTIALS["email"]


def test_signup_ignores_unknown_fields(client):
    resp = client.post("/auth/signup", json={**CREDENTIALS, "extra": 1, "role": "admin"})
    assert resp.status_code == 201
    assert set(resp.json()) == {"access_token", "token_type"}
