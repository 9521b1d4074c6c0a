from __future__ import annotations

import pytest

from product_catalog.core.exceptions import DataIntegrityError


@pytest.fixture
def product_dto() -> dict:
    return {
        "table": "products",
        "records": [
            {"id": 1, "date": "03-01-2023", "itemCode": "11111", "itemName": "Fina Lika", "itemQuantity": 30, "status": "Paid"},
            {"id": 2, "date": "03-01-2023", "itemCode": "11111", "itemName": "Test Inventory 2", "itemQuantity": 20, "status": "Paid"},
        ],
    }


def test_add_products_saves_records(client, auth_headers, product_dto, products_repo):
    resp = client.post("/products/add", json=product_dto, headers=auth_headers)

    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Records saved successfully"
    assert [p.item_name for p in products_repo.saved] == ["Fina Lika", "Test Inventory 2"]
    assert products_repo.saved[0].date.isoformat() == "2023-01-03"


def test_add_products_with_empty_records_returns_400(client, auth_headers):
    resp = client.post("/products/add", json={"table": "products", "records": []}, headers=auth_headers)

    assert resp.status_code == 400
    assert "Product records cannot be empty" in resp.get_json()["errors"]


def test_add_products_with_empty_table_returns_400(client, auth_headers, product_dto):
    product_dto["table"] = ""

    resp = client.post("/products/add", json=product_dto, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["Table name cannot be empty"]


def test_add_products_reports_bad_record_fields(client, auth_headers, product_dto):
    product_dto["records"][1]["itemQuantity"] = -5

    resp = client.post("/products/add", json=product_dto, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == ["records[1]: itemQuantity cannot be negative"]


def test_add_products_persistence_failure_returns_500(make_client, auth_headers, product_dto):
    client = make_client(fail_with=DataIntegrityError("Duplicate entry '1' for key 'PRIMARY'"))

    resp = client.post("/products/add", json=product_dto, headers=auth_headers)

    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Duplicate entry '1' for key 'PRIMARY'"


def test_add_products_without_token_returns_401(client, product_dto):
    assert client.post("/products/add", json=product_dto).status_code == 401


def test_get_all_products(make_client, auth_headers, product_list):
    client = make_client(product_list)

    resp = client.get("/products/all", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.mimetype == "application/json"
    body = resp.get_json()
    content = body["content"]
    assert content[0]["itemName"] == "Fina Lika"
    assert content[1]["itemName"] == "Test Inventory 2"
    for row, product in zip(content, product_list):
        assert row["status"] == product.status
        assert row["itemQuantity"] == product.item_quantity
        assert row["itemCode"] == product.item_code
        assert row["date"] == "2023-01-03"
    assert body["totalElements"] == 2
    assert body["totalPages"] == 1
    assert body["first"] is True and body["last"] is True


def test_get_all_products_pages_and_sorts(make_client, auth_headers, product_list):
    client = make_client(product_list)

    resp = client.get("/products/all?page=0&size=1&sort=itemQuantity,asc", headers=auth_headers)

    body = resp.get_json()
    assert [row["itemName"] for row in body["content"]] == ["Test Inventory 2"]
    assert body["size"] == 1
    assert body["totalPages"] == 2
    assert body["last"] is False
    assert body["sort"] == [{"property": "itemQuantity", "direction": "ASC"}]


def test_get_all_products_with_bad_paging_returns_400(client, auth_headers):
    resp = client.get("/products/all?sort=password", headers=auth_headers)

    assert resp.status_code == 400


def test_get_all_products_service_failure_returns_500(make_client, auth_headers):
    client = make_client(fail_with=DataIntegrityError("Error retrieving products"))

    resp = client.get("/products/all", headers=auth_headers)

    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Error retrieving products"


def test_get_all_products_with_huge_page_number_returns_400(client, auth_headers):
    resp = client.get("/products/all?page=99999999999999999999", headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "page must not exceed 1000000"
