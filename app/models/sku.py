"""
SKU model - trackable product definitions.
"""

from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_uuid


KVI_LABELS = ("SKVI", "KVI", "Background (BG)", "Foreground (FG)")
DEFAULT_KVI_LABEL = "Background (BG)"


class SKU(Base):
    """SKU model - a product definition, not a price observation"""
    __tablename__ = "skus"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False, index=True)
    image = Column(String(500), nullable=True)  # URL or file reference
    brand = Column(String(255), nullable=True, index=True)
    unit = Column(String(50), nullable=False)  # g, kg, L, piece ...
    unit_value = Column(String(100), nullable=False)  # free text, e.g. "500 g"
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)
    kvi_label = Column(String(50), nullable=False, default=DEFAULT_KVI_LABEL)
    buying_price = Column(Numeric(12, 2), nullable=False, default=0)
    buying_vat = Column(Numeric(5, 2), nullable=False, default=0)  # percentage, e.g. 18 for 18%
    buying_price_without_vat = Column(Numeric(12, 2), nullable=False, default=0)
    selling_price = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    category = relationship("Category", back_populates="skus")
    price_mappings = relationship("PriceMapping", back_populates="sku", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<SKU(id='{self.id}', name='{self.name}', unit_value='{self.unit_value}')>"
