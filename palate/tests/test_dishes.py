from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from palate.app import app
from palate.dishes.data_store import get_dish, list_dishes, reload_catalog

client = TestClient(app)


def _login_admin(c):
    c.post("/auth/login", json={"username": "admin", "password": "admin123"})


def _login_staff(c):
    c.post("/auth/login", json={"username": "staff", "password": "staff123"})


def test_bundled_catalog_loads():
    resp = client.get("/dishes")
    assert resp.status_code == 200
    names = [d["name"] for d in resp.json()]
    assert len(names) == 12
    assert "Butter Chicken" in names


def test_get_dish():
    resp = client.get("/dishes/gulab-jamun")
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Gulab Jamun"
    assert body["flavor_tags"] == ["sweet", "cardamom", "syrupy"]
    assert body["active"] is True


def test_unknown_dish():
    assert client.get("/dishes/nope").status_code == 404


def test_create_dish_requires_admin():
    c = TestClient(app)
    payload = {"name": "Tom Yum", "flavor_tags": ["sour", "spice", "umami"]}
    assert c.post("/dishes", json=payload).status_code == 401
    _login_staff(c)
    assert c.post("/dishes", json=payload).status_code == 403


def test_admin_adds_dish_usable_in_feedback():
    c = TestClient(app)
    _login_admin(c)
    resp = c.post("/dishes", json={"name": "Tom Yum", "flavor_tags": ["sour", "umami", "hot"]})
    assert resp.status_code == 200
    dish_id = resp.json()["id"]
    assert client.get(f"/dishes/{dish_id}").json()["name"] == "Tom Yum"

    client.post("/diners", json={"phone_number": "9000000003", "name": "Meera", "tags": []})
    body = client.post("/feedback", json={
        "phone_number": "9000000003",
        "dish_ids": [dish_id],
        "would_order_again": True,
        "vibe_score": 70,
    }).json()
    assert body["flavors"]["sour"] == pytest.approx(5.48)
    assert body["flavors"]["umami"] == pytest.approx(5.48)
    assert body["flavors"]["spice"] == 5.0


def test_catalog_from_custom_csv(tmp_path: Path):
    csv_path = tmp_path / "dishes.csv"
    csv_path.write_text(
        "id,name,flavor_tags,image_url,active\n"
        'lemon-tart,Lemon Tart,"sour, sweet",,true\n'
        "old-special,Old Special,bitter,,false\n"
    )
    reload_catalog(csv_path)
    assert [d.id for d in list_dishes()] == ["lemon-tart"]
    assert len(list_dishes(active_only=False)) == 2
    tart = get_dish("lemon-tart")
    assert tart.flavor_tags == ["sour", "sweet"]
    assert tart.image_url is None


def test_missing_catalog_is_empty(tmp_path: Path):
    reload_catalog(tmp_path / "missing.csv")
    assert list_dishes() == []
