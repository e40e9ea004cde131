"""
Pydantic schemas for price mappings and Excel import.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from app.schemas.common import Money, decimal_before
from app.services.numeric import MAX_MONEY


class PriceMappingUpsert(BaseModel):
    """
    Create or update the price for one (sku, vendor, location) triple.
    """
    sku_id: str = Field(..., min_length=1)
    vendor_id: str = Field(..., min_length=1)
    location_id: str = Field(..., min_length=1, description="Price-location ID")
    price: Decimal = Field(..., gt=0, le=MAX_MONEY, description="Current price")
    struck_price: Optional[Decimal] = Field(None, ge=0, le=MAX_MONEY, description="Previous price, must be lower than price")
    is_discounted: bool = False
    currency: Optional[str] = Field(None, min_length=3, max_length=3, description="ISO currency code")

    @field_validator("price", "struck_price", mode="before")
    @classmethod
    def parse_amount(cls, value):
        return decimal_before(value)

    @field_validator("is_discounted", mode="before")
    @classmethod
    def default_discount_flag(cls, value):
        return False if value is None else value


class PriceMappingResponse(BaseModel):
    """Price mapping joined with SKU, vendor and location display fields"""
    id: str
    sku_id: str
    vendor_id: str
    location_id: str
    price: Money
    struck_price: Optional[Money] = None
    is_discounted: bool
    unit_price: Money
    currency: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    sku_name: Optional[str] = None
    vendor_name: Optional[str] = None
    location_name: str
    brand: Optional[str] = None
    unit: Optional[str] = None
    unit_value: Optional[str] = None


class ExcelImportResponse(BaseModel):
    """Result of a bulk price import"""
    message: str
    successCount: int
    errorCount: int
    errors: List[str] = []
