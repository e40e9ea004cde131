"""
Repository layer for the category tree.
Handles creation, moves, guarded deletion and tree assembly.
"""

from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import DataValidationError, DependencyConflictError, NotFoundError
from app.models.category import Category
from app.models.sku import SKU
from app.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse, CategoryTreeNode


class CategoryRepository:
    """Repository for Category operations"""

    @staticmethod
    def get_by_id(db: Session, category_id: str) -> Optional[Category]:
        """Get category by ID"""
        return db.query(Category).filter(Category.id == category_id).first()

    @staticmethod
    def get_or_404(db: Session, category_id: str) -> Category:
        category = CategoryRepository.get_by_id(db, category_id)
        if not category:
            raise NotFoundError("Category", category_id)
        return category

    @staticmethod
    def get_all(
        db: Session,
        parent_id: Optional[str] = None,
        level: Optional[int] = None,
    ) -> List[Category]:
        """Get categories, optionally filtered by parent or level"""
        query = db.query(Category)
        if parent_id:
            query = query.filter(Category.parent_id == parent_id)
        if level is not None:
            query = query.filter(Category.level == level)
        return query.order_by(Category.created_at.desc(), Category.name).all()

    @staticmethod
    def _resolve_parent_level(db: Session, parent_id: Optional[str]) -> int:
        """Level a node would get under parent_id, checked against the depth limit"""
        if not parent_id:
            return 1

        parent = CategoryRepository.get_by_id(db, parent_id)
        if not parent:
            raise NotFoundError("Category", parent_id, f'Parent category with ID "{parent_id}" not found')

        level = parent.level + 1
        if level > settings.CATEGORY_MAX_DEPTH:
            raise DataValidationError(
                f"Category tree is limited to {settings.CATEGORY_MAX_DEPTH} levels"
            )
        return level

    @staticmethod
    def _check_root_name(db: Session, name: str, exclude_id: Optional[str] = None) -> None:
        query = db.query(Category).filter(Category.parent_id.is_(None), Category.name == name)
        if exclude_id:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            raise DataValidationError(f"Category with name {name} already exists")

    @staticmethod
    def create(db: Session, category: CategoryCreate) -> Category:
        """Create a category node under an optional parent"""
        level = CategoryRepository._resolve_parent_level(db, category.parent_id)
        if level == 1:
            CategoryRepository._check_root_name(db, category.name)

        db_category = Category(name=category.name, parent_id=category.parent_id or None, level=level)
        db.add(db_category)
        db.commit()
        db.refresh(db_category)
        return db_category

    @staticmethod
    def update(db: Session, category_id: str, category_update: CategoryUpdate) -> Category:
        """
        Rename and/or move a category.

        Moving a node re-levels its whole subtree; a move that would create a
        cycle or exceed the depth limit is rejected.
        """
        db_category = CategoryRepository.get_or_404(db, category_id)
        update_data = category_update.model_dump(exclude_unset=True)

        if "parent_id" in update_data and update_data["parent_id"] != db_category.parent_id:
            new_parent_id = update_data["parent_id"] or None
            subtree = CategoryRepository.get_descendant_ids(db, category_id)
            if new_parent_id and new_parent_id in subtree:
                raise DataValidationError("A category cannot be moved under itself or its descendants")

            new_level = CategoryRepository._resolve_parent_level(db, new_parent_id)
            shift = new_level - db_category.level
            depth = CategoryRepository._subtree_depth(db, db_category)
            if new_level + depth > settings.CATEGORY_MAX_DEPTH:
                raise DataValidationError(
                    f"Category tree is limited to {settings.CATEGORY_MAX_DEPTH} levels"
                )

            if shift:
                for node in db.query(Category).filter(Category.id.in_(subtree)).all():
                    node.level += shift
            db_category.parent_id = new_parent_id

        if "name" in update_data and update_data["name"] is not None:
            if db_category.parent_id is None:
                CategoryRepository._check_root_name(db, update_data["name"], exclude_id=category_id)
            db_category.name = update_data["name"]

        db.commit()
        db.refresh(db_category)
        return db_category

    @staticmethod
    def delete(db: Session, category_id: str) -> None:
        """
        Delete a category node.

        Refused while the node still has children or any SKU is bound to the
        node or one of its descendants.
        """
        db_category = CategoryRepository.get_or_404(db, category_id)

        children_count = CategoryRepository.count_children(db, category_id)
        if children_count > 0:
            raise DependencyConflictError(
                f"Cannot delete category. It has {children_count} child category(ies) "
                f"that must be deleted first.",
                dependency="categories",
                count=children_count,
            )

        skus_count = CategoryRepository.count_skus(db, category_id)
        if skus_count > 0:
            raise DependencyConflictError(
                f"Cannot delete category. It is being used by {skus_count} product(s). "
                f"Please change the category of these products first.",
                dependency="skus",
                count=skus_count,
            )

        db.delete(db_category)
        db.commit()

    # ============================================================================
    # TREE QUERIES
    # ============================================================================

    @staticmethod
    def count_children(db: Session, category_id: str) -> int:
        return db.query(func.count(Category.id)).filter(Category.parent_id == category_id).scalar()

    @staticmethod
    def get_descendant_ids(db: Session, category_id: str) -> List[str]:
        """IDs of the node and every node below it"""
        result = [category_id]
        frontier = [category_id]
        while frontier:
            rows = db.query(Category.id).filter(Category.parent_id.in_(frontier)).all()
            frontier = [row.id for row in rows]
            result.extend(frontier)
        return result

    @staticmethod
    def _subtree_depth(db: Session, category: Category) -> int:
        """Number of levels below category (0 for a leaf)"""
        subtree = CategoryRepository.get_descendant_ids(db, category.id)
        deepest = db.query(func.max(Category.level)).filter(Category.id.in_(subtree)).scalar()
        return (deepest or category.level) - category.level

    @staticmethod
    def count_skus(db: Session, category_id: str) -> int:
        """SKUs bound to the node or any of its descendants"""
        subtree = CategoryRepository.get_descendant_ids(db, category_id)
        return db.query(func.count(SKU.id)).filter(SKU.category_id.in_(subtree)).scalar()

    @staticmethod
    def get_path(category: Optional[Category]) -> List[Category]:
        """Ancestors from the root down to category itself"""
        path = []
        seen = set()
        node = category
        while node is not None and node.id not in seen:
            seen.add(node.id)
            path.append(node)
            node = node.parent
        path.reverse()
        return path

    @staticmethod
    def to_response(db: Session, category: Category) -> CategoryResponse:
        children_count = CategoryRepository.count_children(db, category.id)
        skus_count = CategoryRepository.count_skus(db, category.id)
        return CategoryResponse(
            id=category.id,
            name=category.name,
            level=category.level,
            parent_id=category.parent_id,
            parent_name=category.parent.name if category.parent else None,
            children_count=children_count,
            skus_count=skus_count,
            can_delete=children_count == 0 and skus_count == 0,
            created_at=category.created_at,
        )

    @staticmethod
    def build_tree(db: Session, root_id: Optional[str] = None) -> List[CategoryTreeNode]:
        """
        Assemble the nested tree in memory from two queries.

        skus_count on each node covers its whole subtree.
        """
        categories = db.query(Category).order_by(Category.created_at.desc(), Category.name).all()
        direct_counts: Dict[str, int] = {
            row.category_id: row.count
            for row in db.query(SKU.category_id, func.count(SKU.id).label("count"))
            .filter(SKU.category_id.isnot(None))
            .group_by(SKU.category_id)
            .all()
        }

        children_of: Dict[Optional[str], List[Category]] = defaultdict(list)
        for category in categories:
            children_of[category.parent_id].append(category)

        def build(category: Category) -> CategoryTreeNode:
            children = [build(child) for child in children_of.get(category.id, [])]
            return CategoryTreeNode(
                id=category.id,
                name=category.name,
                level=category.level,
                created_at=category.created_at,
                skus_count=direct_counts.get(category.id, 0) + sum(c.skus_count for c in children),
                children=children,
            )

        if root_id:
            root = next((c for c in categories if c.id == root_id), None)
            if root is None:
                raise NotFoundError("Category", root_id)
            return [build(root)]

        return [build(category) for category in children_of.get(None, [])]
