"""
Pydantic schemas for SKUs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from app.schemas.common import Money, decimal_before
from app.services.numeric import MAX_MONEY

KviLabel = Literal["SKVI", "KVI", "Background (BG)", "Foreground (FG)"]


class SKUBase(BaseModel):
    """Fields shared by SKU create requests and responses"""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    image: Optional[str] = Field(None, max_length=500, description="Image URL or file reference")
    brand: Optional[str] = Field(None, max_length=255)
    unit: str = Field(..., min_length=1, max_length=50, description="Unit kind, e.g. g, kg, L, piece")
    unit_value: str = Field(..., min_length=1, max_length=100, description="Magnitude and unit, e.g. '500 g'")
    category_id: Optional[str] = Field(None, description="Bound category node")
    kvi_label: KviLabel = Field("Background (BG)", description="Merchandising classification")


class SKUCreate(SKUBase):
    """Schema for creating a SKU"""
    buying_price: Decimal = Field(Decimal("0"), ge=0, le=MAX_MONEY)
    buying_vat: Decimal = Field(Decimal("0"), ge=0, le=100, description="VAT percentage, e.g. 18")
    selling_price: Decimal = Field(..., ge=0, le=MAX_MONEY)

    @field_validator("buying_price", "buying_vat", mode="before")
    @classmethod
    def parse_optional_amount(cls, value):
        parsed = decimal_before(value)
        return Decimal("0") if parsed is None else parsed

    @field_validator("selling_price", mode="before")
    @classmethod
    def parse_selling_price(cls, value):
        return decimal_before(value)


class SKUUpdate(BaseModel):
    """Schema for updating a SKU. Only provided fields change."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    image: Optional[str] = Field(None, max_length=500)
    brand: Optional[str] = Field(None, max_length=255)
    unit: Optional[str] = Field(None, min_length=1, max_length=50)
    unit_value: Optional[str] = Field(None, min_length=1, max_length=100)
    category_id: Optional[str] = None
    kvi_label: Optional[KviLabel] = None
    buying_price: Optional[Decimal] = Field(None, ge=0, le=MAX_MONEY)
    buying_vat: Optional[Decimal] = Field(None, ge=0, le=100)
    selling_price: Optional[Decimal] = Field(None, ge=0, le=MAX_MONEY)

    @field_validator("buying_price", "buying_vat", "selling_price", mode="before")
    @classmethod
    def parse_amount(cls, value):
        return decimal_before(value)


class CategoryRef(BaseModel):
    id: str
    name: str
    level: int


class SKUResponse(SKUBase):
    """SKU with derived price and category path"""
    id: str
    buying_price: Money
    buying_vat: Money
    buying_price_without_vat: Money
    selling_price: Money
    category_name: Optional[str] = None
    category_path: List[CategoryRef] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
