"""
Pydantic schemas for the read-only external API.
"""

from typing import List
from pydantic import BaseModel

from app.schemas.category import CategoryTreeNode
from app.schemas.location import LocationResponse, PriceLocationResponse
from app.schemas.price_mapping import PriceMappingResponse
from app.schemas.sku import SKUResponse
from app.schemas.vendor import VendorResponse


class ExternalDataResponse(BaseModel):
    """Every collection in one payload"""
    locations: List[LocationResponse] = []
    price_locations: List[PriceLocationResponse] = []
    skus: List[SKUResponse] = []
    vendors: List[VendorResponse] = []
    price_mappings: List[PriceMappingResponse] = []
    categories: List[CategoryTreeNode] = []
