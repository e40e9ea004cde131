"""
API Router for vendor endpoints.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.vendor_repository import VendorRepository
from app.schemas.vendor import VendorCreate, VendorUpdate, VendorResponse
from app.schemas.common import CreatedResponse, MessageResponse

router = APIRouter(prefix="/vendors", tags=["Vendors"])


@router.get("", response_model=List[VendorResponse])
def get_vendors(db: Session = Depends(get_db)):
    return VendorRepository.get_all(db)


@router.get("/{vendor_id}", response_model=VendorResponse)
def get_vendor(vendor_id: str, db: Session = Depends(get_db)):
    return VendorRepository.get_or_404(db, vendor_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_vendor(vendor: VendorCreate, db: Session = Depends(get_db)):
    db_vendor = VendorRepository.create(db, vendor)
    return CreatedResponse(id=db_vendor.id, message="Vendor created successfully")


@router.put("/{vendor_id}", response_model=MessageResponse)
def update_vendor(vendor_id: str, vendor_update: VendorUpdate, db: Session = Depends(get_db)):
    """Update a vendor. Leaving out the logo keeps the current one."""
    VendorRepository.update(db, vendor_id, vendor_update)
    return MessageResponse(message="Vendor updated successfully")


@router.delete("/{vendor_id}", response_model=MessageResponse)
def delete_vendor(vendor_id: str, db: Session = Depends(get_db)):
    """Delete a vendor and every price mapping that references it"""
    VendorRepository.delete(db, vendor_id)
    return MessageResponse(message="Vendor deleted successfully")
