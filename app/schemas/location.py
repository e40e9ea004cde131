"""
Pydantic schemas for full locations and price-locations.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


# ============================================================================
# Location Schemas
# ============================================================================

class LocationCreate(BaseModel):
    """All fields are required for new locations"""
    name: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    region: str = Field(..., min_length=1, max_length=255)
    demography: str = Field(..., min_length=1, max_length=255)
    size: str = Field(..., min_length=1, max_length=100)
    domains: List[str] = Field(..., min_length=1, description="Non-empty list of domains")


class LocationUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    city: Optional[str] = Field(None, min_length=1, max_length=255)
    region: Optional[str] = Field(None, min_length=1, max_length=255)
    demography: Optional[str] = Field(None, min_length=1, max_length=255)
    size: Optional[str] = Field(None, min_length=1, max_length=100)
    domains: Optional[List[str]] = Field(None, min_length=1, description="domains must be a non-empty list")


class LocationResponse(BaseModel):
    id: str
    name: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    demography: Optional[str] = None
    size: Optional[str] = None
    domains: List[str] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ============================================================================
# Price Location Schemas
# ============================================================================

class PriceLocationCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Name is required")


class PriceLocationUpdate(PriceLocationCreate):
    pass


class PriceLocationResponse(BaseModel):
    id: str
    name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
