"""
Category tree model.
A single self-referencing table holds every level of the category hierarchy.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_uuid


class Category(Base):
    """
    Category node.

    Table: categories
    level is 1 for root categories and parent.level + 1 below that.
    """
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False, index=True)
    parent_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)
    level = Column(Integer, nullable=False, default=1, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    parent = relationship("Category", remote_side=[id], back_populates="children")
    children = relationship("Category", back_populates="parent")
    skus = relationship("SKU", back_populates="category")

    def __repr__(self):
        return f"<Category(id='{self.id}', name='{self.name}', level={self.level})>"
