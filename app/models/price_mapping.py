"""
Price mapping model.
One price per (SKU, vendor, price-location) triple.
"""

from sqlalchemy import Column, String, Boolean, Numeric, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base, generate_uuid


class PriceMapping(Base):
    """
    Price mapping model - the central fact table.

    Table: price_mappings
    location_id has no foreign key: legacy rows point at the full
    locations table instead of price_locations.
    """
    __tablename__ = "price_mappings"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    sku_id = Column(String(36), ForeignKey("skus.id", ondelete="CASCADE"), nullable=False, index=True)
    vendor_id = Column(String(36), ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False, index=True)
    location_id = Column(String(36), nullable=False, index=True)
    price = Column(Numeric(12, 2), nullable=False)
    struck_price = Column(Numeric(12, 2), nullable=True)
    is_discounted = Column(Boolean, default=False, nullable=False)
    unit_price = Column(Numeric(18, 6), nullable=False)
    currency = Column(String(3), nullable=False, default="TRY")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    sku = relationship("SKU", back_populates="price_mappings")
    vendor = relationship("Vendor", back_populates="price_mappings")

    __table_args__ = (
        UniqueConstraint('sku_id', 'vendor_id', 'location_id', name='uq_price_mapping_triple'),
    )

    def __repr__(self):
        return f"<PriceMapping(id='{self.id}', sku_id='{self.sku_id}', vendor_id='{self.vendor_id}', price={self.price})>"
