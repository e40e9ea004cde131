"""
Location models.

Location holds the full demographic record of a place.
PriceLocation is the bare-name record that price mappings are keyed on.
The two are not interchangeable.
"""

from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func
from app.core.database import Base, generate_uuid


class Location(Base):
    """Full location with region and demographic metadata"""
    __tablename__ = "locations"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=True, index=True)  # legacy rows may lack a name
    city = Column(String(255), nullable=True, index=True)
    region = Column(String(255), nullable=True, index=True)
    demography = Column(String(255), nullable=True)
    size = Column(String(100), nullable=True)
    domains = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Location(id='{self.id}', name='{self.name}', city='{self.city}')>"


class PriceLocation(Base):
    """Simple location used as the join key for price mappings"""
    __tablename__ = "price_locations"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<PriceLocation(id='{self.id}', name='{self.name}')>"
