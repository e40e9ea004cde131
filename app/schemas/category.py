"""
Pydantic schemas for the category tree.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """Schema for creating a category node"""
    name: str = Field(..., min_length=1, max_length=255, description="Category name")
    parent_id: Optional[str] = Field(None, description="Parent category ID (omit for a root category)")


class CategoryUpdate(BaseModel):
    """Schema for renaming or moving a category node"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    parent_id: Optional[str] = Field(None, description="New parent category ID")


class CategoryResponse(BaseModel):
    """Category node with dependency counts"""
    id: str
    name: str
    level: int
    parent_id: Optional[str] = None
    parent_name: Optional[str] = None
    children_count: int = 0
    skus_count: int = 0
    can_delete: bool = True
    created_at: Optional[datetime] = None


class CategoryTreeNode(BaseModel):
    """Nested category node for tree views and the external API"""
    id: str
    name: str
    level: int
    created_at: Optional[datetime] = None
    skus_count: int = 0
    children: List["CategoryTreeNode"] = []


CategoryTreeNode.model_rebuild()
