from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from palate.app import app
from palate.auth.users import ADMIN, add_staff, authenticate

client = TestClient(app)


def _login_staff(c):
    c.post("/auth/login", json={"username": "staff", "password": "staff123"})


def _login_admin(c):
    c.post("/auth/login", json={"username": "admin", "password": "admin123"})


# ── Login / Logout ───────────────────────────────────────────────────────


def test_login_success_staff():
    resp = client.post("/auth/login", json={"username": "staff", "password": "staff123"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["staff"] == {"username": "staff", "role": "staff"}


def test_login_success_admin():
    resp = client.post("/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    assert resp.json()["staff"]["role"] == "admin"


def test_login_wrong_password():
    resp = client.post("/auth/login", json={"username": "staff", "password": "wrong"})
    assert resp.status_code == 401


def test_login_unknown_user():
    resp = client.post("/auth/login", json={"username": "nobody", "password": "x"})
    assert resp.status_code == 401


def test_auth_me_when_logged_in():
    _login_staff(client)
    resp = client.get("/auth/me")
    assert resp.status_code == 200
    assert resp.json()["username"] == "staff"


def test_auth_me_not_logged_in():
    c = TestClient(app)
    assert c.get("/auth/me").status_code == 401


def test_logout():
    _login_staff(client)
    resp = client.post("/auth/logout")
    assert resp.status_code == 200
    assert resp.json()["status"] == "logged_out"
    assert client.get("/auth/me").status_code == 401


def test_add_staff_account():
    add_staff("manager", "s3cret", ADMIN)
    assert authenticate("manager", "s3cret") == {"username": "manager", "role": "admin"}
    assert authenticate("manager", "wrong") is None


def test_add_staff_rejects_unknown_role():
    with pytest.raises(ValueError):
        add_staff("chef", "pw", "owner")


# ── Route protection ─────────────────────────────────────────────────────


def test_dashboard_requires_login():
    c = TestClient(app)
    assert c.get("/profiles").status_code == 401


def test_dashboard_allowed_for_staff():
    c = TestClient(app)
    _login_staff(c)
    assert c.get("/profiles").status_code == 200


def test_analytics_requires_admin():
    c = TestClient(app)
    _login_staff(c)
    assert c.get("/analytics").status_code == 403


def test_analytics_allowed_for_admin():
    c = TestClient(app)
    _login_admin(c)
    assert c.get("/analytics").status_code == 200


# ── Diner endpoints stay public ──────────────────────────────────────────


def test_health_is_public():
    c = TestClient(app)
    assert c.get("/health").status_code == 200


def test_registration_and_feedback_are_public():
    c = TestClient(app)
    resp = c.post("/diners", json={"phone_number": "9000000009", "name": "Kiran", "tags": []})
    assert resp.status_code == 200
    resp = c.post("/feedback", json={"phone_number": "9000000009", "vibe_score": 50})
    assert resp.status_code == 200
