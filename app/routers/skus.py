"""
API Router for SKU endpoints.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.sku_repository import SKURepository
from app.schemas.sku import SKUCreate, SKUUpdate, SKUResponse
from app.schemas.common import CreatedResponse, MessageResponse

router = APIRouter(prefix="/skus", tags=["SKUs"])


@router.get("", response_model=List[SKUResponse])
def get_skus(
    category_id: Optional[str] = Query(None, description="Category at any level; includes its subtree"),
    search: Optional[str] = Query(None, description="Search name and brand"),
    db: Session = Depends(get_db),
):
    """Get SKUs with their category path, newest first"""
    skus = SKURepository.get_all(db, category_id=category_id, search=search)
    return [SKURepository.to_response(sku) for sku in skus]


@router.get("/{sku_id}", response_model=SKUResponse)
def get_sku(sku_id: str, db: Session = Depends(get_db)):
    return SKURepository.to_response(SKURepository.get_or_404(db, sku_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_sku(sku: SKUCreate, db: Session = Depends(get_db)):
    """
    Create a SKU.

    **Pricing:**
    - buying_price and buying_vat default to 0
    - buying_price_without_vat is derived as buying_price / (1 + buying_vat / 100)
    - selling_price is required
    """
    db_sku = SKURepository.create(db, sku)
    return CreatedResponse(id=db_sku.id, message="SKU created successfully")


@router.put("/{sku_id}", response_model=MessageResponse)
def update_sku(sku_id: str, sku_update: SKUUpdate, db: Session = Depends(get_db)):
    """Update a SKU; fields left out (or null prices) are unchanged"""
    SKURepository.update(db, sku_id, sku_update)
    return MessageResponse(message="SKU updated successfully")


@router.delete("/{sku_id}", response_model=MessageResponse)
def delete_sku(sku_id: str, db: Session = Depends(get_db)):
    """Delete a SKU and its price mappings"""
    SKURepository.delete(db, sku_id)
    return MessageResponse(message="SKU deleted successfully")
