from __future__ import annotations

from tests.conftest import register_and_login


def _categories(client, headers):
    return client.get("/api/categories", headers=headers).json()


def test_create_appends_after_last_category(client, auth_headers):
    resp = client.post("/api/categories", json={"name": " Garage ", "icon": "🔧"}, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["name"] == "Garage"
    assert body["order"] == 11
    assert body["isDefault"] is False
    assert body["budget"] is None


def test_duplicate_category_name_rejected(client, auth_headers):
    resp = client.post("/api/categories", json={"name": "Kitchen"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Category name already exists"


def test_patch_only_touches_given_fields(client, auth_headers):
    kitchen = next(c for c in _categories(client, auth_headers) if c["name"] == "Kitchen")
    cid = kitchen["id"]

    resp = client.patch(f"/api/categories/{cid}", json={"icon": "🍳", "budget": "300"}, headers=auth_headers)
    assert resp.json()["icon"] == "🍳"

    resp = client.patch(f"/api/categories/{cid}", json={"name": "Cooking"}, headers=auth_headers)
    body = resp.json()
    assert body["name"] == "Cooking"
    assert body["icon"] == "🍳"
    assert body["budget"] is not None

    resp = client.patch(f"/api/categories/{cid}", json={"budget": None}, headers=auth_headers)
    assert resp.json()["budget"] is None
    assert resp.json()["icon"] == "🍳"


def test_reorder(client, auth_headers):
    ids = [c["id"] for c in _categories(client, auth_headers)]
    reversed_ids = list(reversed(ids))

    assert client.put("/api/categories/order", json={"orderedIds": reversed_ids}, headers=auth_headers).json() == {
        "ok": True
    }
    assert [c["id"] for c in _categories(client, auth_headers)] == reversed_ids


def test_delete_moves_items_to_uncategorized(client, auth_headers):
    kitchen = next(c for c in _categories(client, auth_headers) if c["name"] == "Kitchen")
    item = client.post(
        "/api/items", json={"name": "Kettle", "categoryId": kitchen["id"]}, headers=auth_headers
    ).json()

    listed = next(c for c in _categories(client, auth_headers) if c["id"] == kitchen["id"])
    assert listed["itemCount"] == 1

    assert client.delete(f"/api/categories/{kitchen['id']}", headers=auth_headers).json() == {"ok": True}

    reloaded = client.get(f"/api/items/{item['id']}", headers=auth_headers).json()
    assert reloaded["categoryId"] is None
    assert reloaded["category"] is None


def test_seed_is_noop_when_categories_exist(client, auth_headers):
    resp = client.post("/api/categories/seed", headers=auth_headers)
    assert resp.status_code == 200
    assert len(resp.json()) == 10


def test_other_users_category_is_not_found(client, auth_headers):
    theirs = _categories(client, auth_headers)[0]["id"]
    intruder = register_and_login(client, email="intruder@example.com")

    resp = client.patch(f"/api/categories/{theirs}", json={"name": "Mine"}, headers=intruder)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Category not found"


def test_categories_with_items(client, auth_headers):
    kitchen = next(c for c in _categories(client, auth_headers) if c["name"] == "Kitchen")
    toaster = client.post(
        "/api/items", json={"name": "Toaster", "categoryId": kitchen["id"]}, headers=auth_headers
    ).json()
    client.post("/api/items", json={"name": "Kettle", "categoryId": kitchen["id"]}, headers=auth_headers)
    client.post("/api/items", json={"name": "Doormat"}, headers=auth_headers)
    client.post(f"/api/items/{toaster['id']}/toggle-bought", headers=auth_headers)

    resp = client.get("/api/categories/with-items", headers=auth_headers)
    assert resp.status_code == 200, resp.text
    rows = resp.json()

    assert [r["id"] for r in rows] == [c["id"] for c in _categories(client, auth_headers)]
    kitchen_row = next(r for r in rows if r["id"] == kitchen["id"])
    assert sorted(i["name"] for i in kitchen_row["items"]) == ["Kettle", "Toaster"]
    assert kitchen_row["itemCount"] == 2
    assert kitchen_row["boughtCount"] == 1
    assert all(r["items"] == [] for r in rows if r["id"] != kitchen["id"])
    assert "Doormat" not in {i["name"] for r in rows for i in r["items"]}
