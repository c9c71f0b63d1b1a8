"""
Integration tests for Product API endpoints.
"""

import pytest

pytestmark = [pytest.mark.integration, pytest.mark.django_db]


def _create_product(api_client, name, stock, office_id):
    response = api_client.post(
        "/api/v1/product/",
        {"name": name, "stock": stock, "office_id": office_id},
        format="json",
    )
    assert response.status_code == 201, response.data
    return response.data


class TestCreateProduct:
    """Tests for POST /api/v1/product/."""

    def test_create(self, api_client, db_office):
        data = _create_product(api_client, " gadget", 4, db_office.id)

        assert data["name"] == "GADGET"
        assert data["stock"] == 4
        assert data["office_id"] == db_office.id

    def test_negative_stock(self, api_client, db_office):
        response = api_client.post(
            "/api/v1/product/",
            {"name": "Gadget", "stock": -1, "office_id": db_office.id},
            format="json",
        )

        assert response.status_code == 400
        assert response.data["error"] == {
            "code": "VALIDATION_ERROR",
            "message": "Product stock cannot be negative",
        }

    @pytest.mark.parametrize("stock", [2_147_483_648, 2**63])
    def test_stock_above_column_maximum(self, api_client, db_office, stock):
        response = api_client.post(
            "/api/v1/product/",
            {"name": "Big", "stock": stock, "office_id": db_office.id},
            format="json",
        )

        assert response.status_code == 400
        assert response.data["error"]["code"] == "VALIDATION_ERROR"
        assert response.data["error"]["message"] == "Product stock cannot exceed 2147483647"

    def test_update_stock_above_column_maximum(self, api_client, db_product):
        response = api_client.put(
            f"/api/v1/product/{db_product.id}",
            {
                "id": db_product.id,
                "name": "Widget",
                "stock": 2**63,
                "office_id": db_product.office_id,
            },
            format="json",
        )

        assert response.status_code == 400
        assert api_client.get(f"/api/v1/product/{db_product.id}").data["stock"] == 10

    def test_unknown_office(self, api_client):
        response = api_client.post(
            "/api/v1/product/", {"name": "Gadget", "stock": 1, "office_id": 999}, format="json"
        )

        assert response.status_code == 404
        assert response.data["error"]["code"] == "OFFICE_NOT_FOUND"

    def test_duplicate_name(self, api_client, db_product):
        response = api_client.post(
            "/api/v1/product/",
            {"name": "widget", "stock": 1, "office_id": db_product.office_id},
            format="json",
        )

        assert response.status_code == 400
        assert response.data["error"]["code"] == "NAME_CONFLICT"


class TestProductDetail:
    """Tests for GET/PUT/DELETE /api/v1/product/<id>."""

    def test_get(self, api_client, db_product):
        response = api_client.get(f"/api/v1/product/{db_product.id}")

        assert response.status_code == 200
        assert response.data == {
            "id": db_product.id,
            "name": "WIDGET",
            "stock": 10,
            "office_id": db_product.office_id,
        }

    def test_update_stock(self, api_client, db_product):
        response = api_client.put(
            f"/api/v1/product/{db_product.id}",
            {
                "id": db_product.id,
                "name": "Widget",
                "stock": 25,
                "office_id": db_product.office_id,
            },
            format="json",
        )

        assert response.status_code == 200
        assert response.data["stock"] == 25

    def test_update_id_mismatch(self, api_client, db_product):
        response = api_client.put(
            f"/api/v1/product/{db_product.id}",
            {"id": 777, "name": "Widget", "stock": 1, "office_id": db_product.office_id},
            format="json",
        )

        assert response.status_code == 400
        assert response.data["error"]["code"] == "IDENTIFIER_MISMATCH"

    def test_delete(self, api_client, db_product):
        response = api_client.delete(f"/api/v1/product/{db_product.id}")

        assert response.status_code == 204
        assert api_client.get(f"/api/v1/product/{db_product.id}").status_code == 404

    def test_delete_not_found(self, api_client):
        response = api_client.delete("/api/v1/product/999")

        assert response.status_code == 404
        assert response.data["error"]["code"] == "PRODUCT_NOT_FOUND"


class TestTopProducts:
    """Tests for GET /api/v1/product/top-products/<franchise_id>."""

    def test_one_product_per_office(self, api_client, db_franchise, db_office):
        second = api_client.post(
            "/api/v1/office/", {"name": "Uptown", "franchise_id": db_franchise.id}, format="json"
        ).data
        _create_product(api_client, "P10", 10, db_office.id)
        p30 = _create_product(api_client, "P30", 30, db_office.id)
        p5 = _create_product(api_client, "P5", 5, second["id"])

        response = api_client.get(f"/api/v1/product/top-products/{db_franchise.id}")

        assert response.status_code == 200
        assert [product["id"] for product in response.data] == [p30["id"], p5["id"]]

    def test_unknown_franchise_is_empty(self, api_client):
        response = api_client.get("/api/v1/product/top-products/999")

        assert response.status_code == 200
        assert response.data == []
