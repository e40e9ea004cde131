"""
Pydantic schemas for vendors.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class VendorCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Vendor name")
    logo: Optional[str] = Field(None, max_length=500, description="Logo URL or file reference")


class VendorUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    logo: Optional[str] = Field(None, max_length=500)


class VendorResponse(BaseModel):
    id: str
    name: str
    logo: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
