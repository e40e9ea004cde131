from decimal import Decimal

import pytest

from app.core.exceptions import NotFoundError
from app.schemas.sku import SKUCreate, SKUUpdate
from app.services.sku_repository import SKURepository, price_without_vat


def test_price_without_vat():
    assert price_without_vat(Decimal("118"), Decimal("18")) == Decimal("100.00")
    assert price_without_vat(Decimal("50"), Decimal("0")) == Decimal("50.00")
    assert price_without_vat(None, None) == Decimal("0.00")


def test_create_derives_net_buying_price(make_sku):
    sku = make_sku(buying_price="118", buying_vat="18")

    assert sku.buying_price_without_vat == Decimal("100.00")
    assert sku.kvi_label == "Background (BG)"


def test_buying_fields_default_to_zero(make_sku):
    sku = make_sku()
    assert sku.buying_price == Decimal("0")
    assert sku.buying_vat == Decimal("0")
    assert sku.buying_price_without_vat == Decimal("0")


def test_update_recomputes_only_when_buying_fields_change(db, make_sku):
    sku = make_sku(buying_price="118", buying_vat="18")

    SKURepository.update(db, sku.id, SKUUpdate(name="Whole Milk", buying_price=None))
    assert sku.buying_price_without_vat == Decimal("100.00")
    assert sku.buying_price == Decimal("118.00")

    SKURepository.update(db, sku.id, SKUUpdate(buying_vat="0"))
    assert sku.buying_price_without_vat == Decimal("118.00")


def test_unknown_category_rejected(db):
    with pytest.raises(NotFoundError):
        SKURepository.create(db, SKUCreate(
            name="Tea", unit="g", unit_value="100 g", selling_price="5", category_id="missing",
        ))


def test_filter_by_category_subtree(db, make_category, make_sku):
    food = make_category("Food")
    dairy = make_category("Dairy", food.id)
    drinks = make_category("Drinks")
    make_sku(name="Milk", category_id=dairy.id)
    make_sku(name="Cola", category_id=drinks.id)

    names = [sku.name for sku in SKURepository.get_all(db, category_id=food.id)]
    assert names == ["Milk"]


# ============================================================================
# HTTP
# ============================================================================

def test_sku_endpoints(client, make_category):
    food = make_category("Food")
    dairy = make_category("Dairy", food.id)

    response = client.post("/api/skus", json={
        "name": "Ayran",
        "brand": "Sutas",
        "unit": "ml",
        "unit_value": "250 ml",
        "category_id": dairy.id,
        "buying_price": "11,80",
        "buying_vat": 18,
        "selling_price": 15,
    })
    assert response.status_code == 201
    sku_id = response.json()["id"]

    body = client.get(f"/api/skus/{sku_id}").json()
    assert body["buying_price"] == 11.8
    assert body["buying_price_without_vat"] == 10.0
    assert body["category_name"] == "Dairy"
    assert [c["name"] for c in body["category_path"]] == ["Food", "Dairy"]

    assert len(client.get("/api/skus", params={"search": "ayr"}).json()) == 1

    response = client.put(f"/api/skus/{sku_id}", json={"selling_price": 16})
    assert response.json() == {"message": "SKU updated successfully"}

    assert client.delete(f"/api/skus/{sku_id}").status_code == 200
    assert client.get(f"/api/skus/{sku_id}").status_code == 404


def test_sku_rejects_bad_kvi_label(client):
    response = client.post("/api/skus", json={
        "name": "Tea", "unit": "g", "unit_value": "100 g", "selling_price": 5, "kvi_label": "Premium",
    })
    assert response.status_code == 422
