"""Inventory CRUD routes — status codes and JSON bodies per route."""

import pytest


def _create(client, **body):
    res = client.post("/inventory", json=body)
    assert res.status_code == 200, res.text
    return res.json()["id"]


def test_create_then_get_round_trip(client):
    res = client.post("/inventory", json={"name": "Widget", "quantity": 5})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Item added"

    got = client.get(f"/inventory/{body['id']}")
    assert got.status_code == 200
    assert got.json() == {
        "id": body["id"], "name": "Widget", "quantity": 5,
        "price": 0, "category": "", "supplier": "",
    }


def test_create_keeps_all_supplied_fields(client):
    item_id = _create(client, name="Bolt", quantity=40, price=1.25,
                      category="Hardware", supplier="Acme, Inc.")
    got = client.get(f"/inventory/{item_id}").json()
    assert got["price"] == 1.25
    assert got["category"] == "Hardware"
    assert got["supplier"] == "Acme, Inc."


def test_create_without_name_is_rejected(client, repo):
    res = client.post("/inventory", json={"quantity": 5})
    assert res.status_code == 400
    assert res.json() == {"error": "Name and quantity are required"}
    assert repo.rows == {}


@pytest.mark.parametrize("body", [
    {"name": "", "quantity": 1},
    {"name": "Nut"},
    {"name": "Nut", "quantity": None},
    {},
])
def test_create_missing_required_fields(client, body):
    res = client.post("/inventory", json=body)
    assert res.status_code == 400
    assert res.json()["error"] == "Name and quantity are required"


def test_create_without_body(client):
    res = client.post("/inventory")
    assert res.status_code == 400
    assert res.json() == {"error": "Name and quantity are required"}


def test_zero_and_negative_quantities_are_accepted(client):
    assert client.post("/inventory", json={"name": "Zero", "quantity": 0}).status_code == 200
    assert client.post("/inventory", json={"name": "Neg", "quantity": -3, "price": -1}).status_code == 200


def test_malformed_body_is_a_400(client):
    res = client.post("/inventory", json={"name": "Nut", "quantity": "lots"})
    assert res.status_code == 400
    assert "error" in res.json()


def test_list_is_sorted_by_name(client):
    for name in ["pear", "apple", "mango"]:
        _create(client, name=name, quantity=1)
    res = client.get("/inventory")
    assert res.status_code == 200
    assert [i["name"] for i in res.json()] == ["apple", "mango", "pear"]


def test_list_empty(client):
    res = client.get("/inventory")
    assert res.status_code == 200
    assert res.json() == []


def test_update_overwrites_every_field(client):
    item_id = _create(client, name="Cable", quantity=2, price=9.5,
                      category="Electrical", supplier="Volt")
    res = client.put(f"/inventory/{item_id}", json={"name": "Cable 2m", "quantity": 3})
    assert res.status_code == 200
    assert res.json() == {"message": "Item updated"}
    assert client.get(f"/inventory/{item_id}").json() == {
        "id": item_id, "name": "Cable 2m", "quantity": 3,
        "price": 0, "category": "", "supplier": "",
    }


def test_update_validation_runs_before_lookup(client):
    res = client.put("/inventory/999999", json={"quantity": 1})
    assert res.status_code == 400


def test_update_body_checked_before_non_numeric_id(client):
    res = client.put("/inventory/abc", json={"quantity": 1})
    assert res.status_code == 400
    assert res.json() == {"error": "Name and quantity are required"}

    res = client.put("/inventory/abc", json={"name": "Bolt", "quantity": 1})
    assert res.status_code == 404
    assert res.json() == {"error": "Item not found"}


@pytest.mark.parametrize("raw_id", ["0", "-1", "1.5", "1_0", "99999999999"])
def test_ids_outside_serial_range_are_not_found(client, raw_id):
    assert client.get(f"/inventory/{raw_id}").status_code == 404
    assert client.delete(f"/inventory/{raw_id}").status_code == 404


def test_delete_then_get_is_404(client):
    item_id = _create(client, name="Fuse", quantity=10)
    res = client.delete(f"/inventory/{item_id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Item deleted"}
    assert client.get(f"/inventory/{item_id}").status_code == 404


@pytest.mark.parametrize("method,kwargs", [
    ("get", {}),
    ("put", {"json": {"name": "Ghost", "quantity": 1}}),
    ("delete", {}),
])
def test_unknown_id_is_not_found(client, method, kwargs):
    res = getattr(client, method)("/inventory/999999", **kwargs)
    assert res.status_code == 404
    assert res.json() == {"error": "Item not found"}


def test_non_numeric_id_is_not_found(client):
    res = client.get("/inventory/abc")
    assert res.status_code == 404
    assert res.json() == {"error": "Item not found"}


@pytest.mark.parametrize("method,path,kwargs", [
    ("get", "/inventory", {}),
    ("get", "/inventory/1", {}),
    ("post", "/inventory", {"json": {"name": "X", "quantity": 1}}),
    ("put", "/inventory/1", {"json": {"name": "X", "quantity": 1}}),
    ("delete", "/inventory/1", {}),
])
def test_store_failure_is_a_generic_500(client, repo, method, path, kwargs):
    repo.fail = True
    res = getattr(client, method)(path, **kwargs)
    assert res.status_code == 500
    assert res.json() == {"error": "Database error"}


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"
