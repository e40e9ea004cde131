"""
Read-only external API for downstream consumers.

Same data as the admin endpoints, formatted with joined display fields.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.category_repository import CategoryRepository
from app.services.location_repository import LocationRepository, PriceLocationRepository
from app.services.price_mapping_repository import PriceMappingRepository
from app.services.sku_repository import SKURepository
from app.services.vendor_repository import VendorRepository
from app.schemas.category import CategoryTreeNode
from app.schemas.external import ExternalDataResponse
from app.schemas.location import LocationResponse, PriceLocationResponse
from app.schemas.price_mapping import PriceMappingResponse
from app.schemas.sku import SKUResponse
from app.schemas.vendor import VendorResponse

router = APIRouter(prefix="/external", tags=["External API"])


# ============================================================================
# LOCATIONS
# ============================================================================

@router.get("/locations", response_model=List[LocationResponse])
def external_locations(db: Session = Depends(get_db)):
    return LocationRepository.get_all(db)


@router.get("/locations/{location_id}", response_model=LocationResponse)
def external_location(location_id: str, db: Session = Depends(get_db)):
    return LocationRepository.get_or_404(db, location_id)


@router.get("/price-locations", response_model=List[PriceLocationResponse])
def external_price_locations(db: Session = Depends(get_db)):
    return PriceLocationRepository.get_all(db)


@router.get("/price-locations/{location_id}", response_model=PriceLocationResponse)
def external_price_location(location_id: str, db: Session = Depends(get_db)):
    return PriceLocationRepository.get_or_404(db, location_id)


# ============================================================================
# CATALOG
# ============================================================================

@router.get("/skus", response_model=List[SKUResponse])
def external_skus(
    category_id: Optional[str] = Query(None, description="Category at any level; includes its subtree"),
    db: Session = Depends(get_db),
):
    return [SKURepository.to_response(sku) for sku in SKURepository.get_all(db, category_id=category_id)]


@router.get("/skus/{sku_id}", response_model=SKUResponse)
def external_sku(sku_id: str, db: Session = Depends(get_db)):
    return SKURepository.to_response(SKURepository.get_or_404(db, sku_id))


@router.get("/vendors", response_model=List[VendorResponse])
def external_vendors(db: Session = Depends(get_db)):
    return VendorRepository.get_all(db)


@router.get("/vendors/{vendor_id}", response_model=VendorResponse)
def external_vendor(vendor_id: str, db: Session = Depends(get_db)):
    return VendorRepository.get_or_404(db, vendor_id)


@router.get("/categories", response_model=List[CategoryTreeNode])
def external_categories(db: Session = Depends(get_db)):
    """Nested category tree; skus_count covers each node's subtree"""
    return CategoryRepository.build_tree(db)


@router.get("/categories/{category_id}", response_model=CategoryTreeNode)
def external_category(category_id: str, db: Session = Depends(get_db)):
    return CategoryRepository.build_tree(db, root_id=category_id)[0]


# ============================================================================
# PRICES
# ============================================================================

@router.get("/price-mappings", response_model=List[PriceMappingResponse])
def external_price_mappings(db: Session = Depends(get_db)):
    return [PriceMappingRepository.to_response(db, m) for m in PriceMappingRepository.get_all(db)]


@router.get("/price-mappings/{mapping_id}", response_model=PriceMappingResponse)
def external_price_mapping(mapping_id: str, db: Session = Depends(get_db)):
    return PriceMappingRepository.to_response(db, PriceMappingRepository.get_or_404(db, mapping_id))


@router.get("/all", response_model=ExternalDataResponse)
def external_all(
    category_id: Optional[str] = Query(None, description="Limit SKUs to this category subtree"),
    db: Session = Depends(get_db),
):
    """
    Get every collection in a single response.

    Only the SKU list is affected by **category_id**.
    """
    return ExternalDataResponse(
        locations=[LocationResponse.model_validate(loc) for loc in LocationRepository.get_all(db)],
        price_locations=[PriceLocationResponse.model_validate(loc) for loc in PriceLocationRepository.get_all(db)],
        skus=[SKURepository.to_response(sku) for sku in SKURepository.get_all(db, category_id=category_id)],
        vendors=[VendorResponse.model_validate(vendor) for vendor in VendorRepository.get_all(db)],
        price_mappings=[PriceMappingRepository.to_response(db, m) for m in PriceMappingRepository.get_all(db)],
        categories=CategoryRepository.build_tree(db),
    )
