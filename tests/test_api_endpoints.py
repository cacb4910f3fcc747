"""API endpoint tests using FastAPI TestClient."""

import pytest
from fastapi.testclient import TestClient

from catalog_admin.dependencies import get_db, get_reload_scheduler
from catalog_admin.main import app
from catalog_admin.services import InventoryView, ReloadScheduler, change_feed


@pytest.fixture
def scheduler(session_factory):
    """Reload scheduler on the shared feed, run on the request thread."""
    scheduler = ReloadScheduler(InventoryView(session_factory))
    scheduler.attach(change_feed)
    yield scheduler
    scheduler.detach()


@pytest.fixture
def client(session_factory, sample_catalog, scheduler):
    """Test client bound to the per-test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_reload_scheduler] = lambda: scheduler
    yield TestClient(app)
    app.dependency_overrides.clear()


def _new_product(**overrides):
    data = {
        "name": "Air Force 1",
        "brand_name": "nike",
        "type_name": "shoes",
        "list_price": "8995",
        "selling_price": "7995",
        "quantity": 2,
    }
    data.update(overrides)
    return data


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestProductEndpoints:
    """Test /api/v1/products."""

    def test_list_products(self, client):
        response = client.get("/api/v1/products")

        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data] == [1, 2, 3]
        assert data[0]["selling_price_display"] == "₹10999.00"

    def test_search(self, client):
        response = client.get("/api/v1/products", params={"search": "puma"})
        assert [p["name"] for p in response.json()] == ["Puma Suede Tee"]

    def test_get_product(self, client):
        response = client.get("/api/v1/products/1")
        assert response.status_code == 200
        assert response.json()["name"] == "Nike Air Max"

    def test_get_missing_product(self, client):
        response = client.get("/api/v1/products/99")
        assert response.status_code == 404
        assert response.json()["error"] == "NotFoundError"

    def test_create_product(self, client):
        response = client.post("/api/v1/products", json=_new_product())

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 4
        assert data["name"] == "Nike Air Force 1"
        assert data["brand_id"] == 1

    def test_create_rejects_selling_above_list(self, client):
        response = client.post(
            "/api/v1/products", json=_new_product(list_price="80", selling_price="100")
        )

        assert response.status_code == 400
        assert response.json()["error"] == "PriceInvariantViolation"
        assert len(client.get("/api/v1/products").json()) == 3

    def test_create_rejects_negative_quantity(self, client):
        response = client.post("/api/v1/products", json=_new_product(quantity=-1))
        assert response.status_code == 422

    def test_create_unknown_brand(self, client):
        response = client.post("/api/v1/products", json=_new_product(brand_name="Reebok"))
        assert response.status_code == 404

    def test_update_brand_recomposes_name(self, client):
        response = client.patch("/api/v1/products/1", json={"brand_name": "Puma"})

        assert response.status_code == 200
        assert response.json()["name"] == "Puma Air Max"

    @pytest.mark.parametrize("field", ["name", "quantity", "selling_price"])
    def test_update_rejects_null(self, client, field):
        response = client.patch("/api/v1/products/1", json={field: None})

        assert response.status_code == 422
        product = client.get("/api/v1/products/1").json()
        assert product["name"] == "Nike Air Max"
        assert product["quantity"] == 10

    def test_update_lowercase_brand_prefix(self, client):
        response = client.patch("/api/v1/products/1", json={"name": "nike Air Max 2"})
        assert response.json()["name"] == "Nike Air Max 2"

    def test_adjust_quantity(self, client):
        response = client.patch("/api/v1/products/1/quantity", json={"delta": -3})
        assert response.status_code == 200
        assert response.json()["quantity"] == 7

    def test_decrement_below_zero_rejected(self, client):
        response = client.patch("/api/v1/products/2/quantity", json={"delta": -1})

        assert response.status_code == 400
        assert response.json()["error"] == "InvalidQuantityError"

    def test_quantity_needs_exactly_one_field(self, client):
        response = client.patch(
            "/api/v1/products/1/quantity", json={"quantity": 1, "delta": 1}
        )
        assert response.status_code == 422

    def test_delete_product(self, client):
        assert client.delete("/api/v1/products/3").status_code == 204
        assert client.delete("/api/v1/products/3").status_code == 404

    def test_bulk_delete(self, client):
        response = client.post("/api/v1/products/bulk-delete", json={"ids": [1, 2, 99]})

        assert response.status_code == 200
        assert response.json() == {"requested": 3, "deleted": 2}

    def test_bulk_delete_empty(self, client):
        response = client.post("/api/v1/products/bulk-delete", json={"ids": []})
        assert response.json() == {"requested": 0, "deleted": 0}


class TestReferenceEndpoints:
    """Test /api/v1/brands and /api/v1/types."""

    def test_list_brands(self, client):
        response = client.get("/api/v1/brands")
        assert [b["name"] for b in response.json()] == ["Nike", "Puma"]

    def test_create_brand(self, client):
        response = client.post("/api/v1/brands", json={"name": "new balance"})

        assert response.status_code == 201
        assert response.json() == {"id": 3, "name": "New Balance"}

    def test_duplicate_brand(self, client):
        response = client.post("/api/v1/brands", json={"name": "NIKE"})
        assert response.status_code == 409

    def test_rename_brand(self, client):
        response = client.patch("/api/v1/brands/Nike", json={"new_name": "nyke"})

        assert response.status_code == 200
        data = response.json()
        assert data["new_name"] == "Nyke"
        assert data["products_updated"] == 2
        assert data["state"] == "done"
        assert client.get("/api/v1/products/1").json()["name"] == "Nyke Air Max"

    def test_rename_brand_to_existing(self, client):
        response = client.patch("/api/v1/brands/Nike", json={"new_name": "Puma"})
        assert response.status_code == 409

    def test_create_and_rename_type(self, client):
        assert client.post("/api/v1/types", json={"name": "bags"}).status_code == 201

        response = client.patch("/api/v1/types/Apparel", json={"new_name": "Clothing"})
        assert response.json()["products_updated"] == 1
        assert client.get("/api/v1/products/3").json()["type_name"] == "Clothing"


class TestInventoryEndpoints:
    """Test /api/v1/inventory."""

    def test_inventory(self, client):
        response = client.get("/api/v1/inventory")

        assert response.status_code == 200
        data = response.json()
        assert data["total_products"] == 3
        assert data["total_quantity"] == 35
        assert [t["name"] for t in data["product_types"]] == ["Shoes", "Apparel"]

    def test_inventory_follows_writes(self, client):
        client.get("/api/v1/inventory")
        client.post("/api/v1/products", json=_new_product())

        data = client.get("/api/v1/inventory").json()

        assert data["total_products"] == 4
        assert data["last_notification"]["title"] == "Product Added"

    def test_force_reload(self, client, scheduler):
        response = client.post("/api/v1/inventory/reload")

        assert response.status_code == 200
        assert response.json()["total_products"] == 3
        assert scheduler.view.reload_count == 1
