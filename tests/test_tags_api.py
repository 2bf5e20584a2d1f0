from __future__ import annotations


def test_tag_names_are_normalized_and_unique(client, auth_headers):
    resp = client.post("/api/tags", json={"name": "  Urgent ", "color": "#f00"}, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["name"] == "urgent"

    resp = client.post("/api/tags", json={"name": "URGENT"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Tag already exists"


def test_list_reports_usage(client, auth_headers):
    gift = client.post("/api/tags", json={"name": "gift"}, headers=auth_headers).json()
    client.post("/api/tags", json={"name": "bulky"}, headers=auth_headers)
    client.post("/api/items", json={"name": "Vase", "tagIds": [gift["id"]]}, headers=auth_headers)

    tags = client.get("/api/tags", headers=auth_headers).json()
    assert [(t["name"], t["itemCount"]) for t in tags] == [("bulky", 0), ("gift", 1)]


def test_update_color_and_delete(client, auth_headers):
    tag = client.post("/api/tags", json={"name": "gift", "color": "#0f0"}, headers=auth_headers).json()
    item = client.post("/api/items", json={"name": "Vase", "tagIds": [tag["id"]]}, headers=auth_headers).json()

    body = client.patch(f"/api/tags/{tag['id']}", json={"color": None}, headers=auth_headers).json()
    assert body["color"] is None
    assert body["name"] == "gift"
    assert body["itemCount"] == 1

    assert client.delete(f"/api/tags/{tag['id']}", headers=auth_headers).json() == {"ok": True}
    assert client.get(f"/api/items/{item['id']}", headers=auth_headers).json()["tags"] == []
    assert client.patch(f"/api/tags/{tag['id']}", json={"name": "x"}, headers=auth_headers).status_code == 404
