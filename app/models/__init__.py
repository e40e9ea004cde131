"""
Database models for the application.
"""

from app.core.database import Base
from app.models.category import Category
from app.models.sku import SKU
from app.models.vendor import Vendor
from app.models.location import Location, PriceLocation
from app.models.price_mapping import PriceMapping

__all__ = [
    "Base",
    "Category",
    "SKU",
    "Vendor",
    "Location",
    "PriceLocation",
    "PriceMapping",
]
