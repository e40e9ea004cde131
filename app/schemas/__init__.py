"""
Schemas for the application.

This module exports all Pydantic models and schemas used for request/response validation.
"""

from app.schemas.common import (
    Money,
    MessageResponse,
    CreatedResponse,
)

from app.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryTreeNode,
)

from app.schemas.sku import (
    KviLabel,
    SKUBase,
    SKUCreate,
    SKUUpdate,
    SKUResponse,
    CategoryRef,
)

from app.schemas.vendor import (
    VendorCreate,
    VendorUpdate,
    VendorResponse,
)

from app.schemas.location import (
    # Full location schemas
    LocationCreate,
    LocationUpdate,
    LocationResponse,
    # Price location schemas
    PriceLocationCreate,
    PriceLocationUpdate,
    PriceLocationResponse,
)

from app.schemas.price_mapping import (
    PriceMappingUpsert,
    PriceMappingResponse,
    ExcelImportResponse,
)

from app.schemas.external import ExternalDataResponse

__all__ = [
    # Shared
    "Money",
    "MessageResponse",
    "CreatedResponse",

    # Category schemas
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryTreeNode",

    # SKU schemas
    "KviLabel",
    "SKUBase",
    "SKUCreate",
    "SKUUpdate",
    "SKUResponse",
    "CategoryRef",

    # Vendor schemas
    "VendorCreate",
    "VendorUpdate",
    "VendorResponse",

    # Location schemas
    "LocationCreate",
    "LocationUpdate",
    "LocationResponse",
    "PriceLocationCreate",
    "PriceLocationUpdate",
    "PriceLocationResponse",

    # Price mapping schemas
    "PriceMappingUpsert",
    "PriceMappingResponse",
    "ExcelImportResponse",
    "ExternalDataResponse",
]
