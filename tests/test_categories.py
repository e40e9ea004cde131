import pytest

from app.core.exceptions import DataValidationError, DependencyConflictError
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services.category_repository import CategoryRepository


def test_levels_follow_parents(make_category):
    root = make_category("Food")
    dairy = make_category("Dairy", root.id)
    milk = make_category("Milk", dairy.id)

    assert (root.level, dairy.level, milk.level) == (1, 2, 3)


def test_depth_is_limited(db, make_category):
    node = make_category("L1")
    for name in ("L2", "L3", "L4"):
        node = make_category(name, node.id)

    with pytest.raises(DataValidationError):
        CategoryRepository.create(db, CategoryCreate(name="L5", parent_id=node.id))


def test_duplicate_root_name_rejected(db, make_category):
    make_category("Food")
    with pytest.raises(DataValidationError):
        CategoryRepository.create(db, CategoryCreate(name="Food"))


def test_delete_blocked_by_children(db, make_category):
    root = make_category("Food")
    make_category("Dairy", root.id)

    with pytest.raises(DependencyConflictError) as exc_info:
        CategoryRepository.delete(db, root.id)
    assert exc_info.value.dependency == "categories"
    assert exc_info.value.count == 1


def test_delete_blocked_by_skus(db, make_category, make_sku):
    leaf = make_category("Dairy")
    make_sku(category_id=leaf.id)
    make_sku(name="Yogurt", category_id=leaf.id)

    with pytest.raises(DependencyConflictError) as exc_info:
        CategoryRepository.delete(db, leaf.id)
    assert exc_info.value.dependency == "skus"
    assert exc_info.value.count == 2


def test_move_relevels_subtree(db, make_category):
    food = make_category("Food")
    drinks = make_category("Drinks")
    juice = make_category("Juice", drinks.id)
    orange = make_category("Orange", juice.id)

    CategoryRepository.update(db, drinks.id, CategoryUpdate(parent_id=food.id))

    db.refresh(juice)
    db.refresh(orange)
    assert (juice.level, orange.level) == (3, 4)


def test_move_under_own_descendant_rejected(db, make_category):
    root = make_category("Food")
    child = make_category("Dairy", root.id)

    with pytest.raises(DataValidationError):
        CategoryRepository.update(db, root.id, CategoryUpdate(parent_id=child.id))


def test_tree_counts_skus_in_subtree(db, make_category, make_sku):
    food = make_category("Food")
    dairy = make_category("Dairy", food.id)
    make_sku(category_id=dairy.id)
    make_sku(name="Bread", category_id=food.id)

    tree = CategoryRepository.build_tree(db)

    assert len(tree) == 1
    assert tree[0].skus_count == 2
    assert tree[0].children[0].name == "Dairy"
    assert tree[0].children[0].skus_count == 1


# ============================================================================
# HTTP
# ============================================================================

def test_category_endpoints(client):
    response = client.post("/api/categories", json={"name": "Food"})
    assert response.status_code == 201
    root_id = response.json()["id"]

    child_id = client.post("/api/categories", json={"name": "Dairy", "parent_id": root_id}).json()["id"]

    listing = client.get("/api/categories", params={"level": 1}).json()
    assert [c["name"] for c in listing] == ["Food"]
    assert listing[0]["children_count"] == 1
    assert listing[0]["can_delete"] is False

    response = client.delete(f"/api/categories/{root_id}")
    assert response.status_code == 400
    assert response.json() == {
        "detail": "Cannot delete category. It has 1 child category(ies) that must be deleted first.",
        "details": {"type": "categories", "count": 1},
    }

    assert client.delete(f"/api/categories/{child_id}").json() == {"message": "Category deleted successfully"}
    assert client.delete(f"/api/categories/{root_id}").status_code == 200


def test_category_tree_endpoint(client, make_category):
    root = make_category("Food")
    make_category("Dairy", root.id)

    tree = client.get("/api/categories/tree").json()
    assert tree[0]["name"] == "Food"
    assert tree[0]["children"][0]["name"] == "Dairy"
    assert tree[0]["children"][0]["level"] == 2
