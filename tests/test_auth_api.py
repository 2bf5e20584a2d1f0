from __future__ import annotations

from tests.conftest import register_and_login


def test_health(client):
    assert client.get("/api/health").json() == {"ok": True}


def test_register_normalizes_email_and_seeds_categories(client):
    resp = client.post("/api/auth/register", json={"email": "  Owner@Example.com ", "password": "secret123"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["email"] == "owner@example.com"

    headers = register_and_login(client, email="second@example.com")
    names = [c["name"] for c in client.get("/api/categories", headers=headers).json()]
    assert names[:2] == ["Living Room", "Kitchen"]
    assert len(names) == 10


def test_register_rejects_duplicate_email(client):
    register_and_login(client)
    resp = client.post("/api/auth/register", json={"email": "owner@example.com", "password": "another1"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Email already registered"


def test_register_validates_payload(client):
    resp = client.post("/api/auth/register", json={"email": "not-an-email", "password": "secret123"})
    assert resp.status_code == 422
    resp = client.post("/api/auth/register", json={"email": "a@b.c", "password": "123"})
    assert resp.status_code == 422


def test_login_with_wrong_password(client):
    register_and_login(client)
    resp = client.post("/api/auth/login", json={"email": "owner@example.com", "password": "wrong-pass"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid email or password"


def test_me_with_bearer_and_cookie(client):
    headers = register_and_login(client)

    assert client.get("/api/auth/me", headers=headers).json()["email"] == "owner@example.com"
    # Login also set the session cookie on the client.
    assert client.get("/api/auth/me").status_code == 200


def test_protected_routes_require_auth(client):
    client.cookies.clear()
    resp = client.get("/api/items")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authenticated"

    resp = client.get("/api/items", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_logout(client):
    register_and_login(client)
    assert client.post("/api/auth/logout").json() == {"ok": True}
