"""
API Router for the category tree.
CRUD for category nodes at any level plus a nested tree view.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.category_repository import CategoryRepository
from app.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryTreeNode,
)
from app.schemas.common import CreatedResponse, MessageResponse

router = APIRouter(prefix="/categories", tags=["Categories"])


# ============================================================================
# READ ENDPOINTS
# ============================================================================

@router.get("", response_model=List[CategoryResponse])
def get_categories(
    parent_id: Optional[str] = Query(None, description="Only direct children of this category"),
    level: Optional[int] = Query(None, ge=1, description="Only categories at this depth (1 = root)"),
    db: Session = Depends(get_db),
):
    """
    Get categories with their dependency counts.

    **can_delete** is true only when the node has no children and no SKU is
    bound to it or anything below it.
    """
    categories = CategoryRepository.get_all(db, parent_id=parent_id, level=level)
    return [CategoryRepository.to_response(db, category) for category in categories]


@router.get("/tree", response_model=List[CategoryTreeNode])
def get_category_tree(db: Session = Depends(get_db)):
    """Get the whole category tree, roots first"""
    return CategoryRepository.build_tree(db)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, db: Session = Depends(get_db)):
    category = CategoryRepository.get_or_404(db, category_id)
    return CategoryRepository.to_response(db, category)


# ============================================================================
# WRITE ENDPOINTS
# ============================================================================

@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    """
    Create a category node.

    Omit **parent_id** for a root category. The level is derived from the
    parent and may not exceed the configured depth.
    """
    db_category = CategoryRepository.create(db, category)
    return CreatedResponse(id=db_category.id, message="Category created successfully")


@router.put("/{category_id}", response_model=MessageResponse)
def update_category(category_id: str, category_update: CategoryUpdate, db: Session = Depends(get_db)):
    """Rename a category or move it under another parent"""
    CategoryRepository.update(db, category_id, category_update)
    return MessageResponse(message="Category updated successfully")


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(category_id: str, db: Session = Depends(get_db)):
    """
    Delete a category.

    Refused with 400 while the category has children or SKUs; the response
    carries the blocking dependency type and count.
    """
    CategoryRepository.delete(db, category_id)
    return MessageResponse(message="Category deleted successfully")
