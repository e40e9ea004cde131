"""
Repository layer for Vendor operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.vendor import Vendor
from app.schemas.vendor import VendorCreate, VendorUpdate


class VendorRepository:
    """Repository for Vendor operations"""

    @staticmethod
    def get_by_id(db: Session, vendor_id: str) -> Optional[Vendor]:
        return db.query(Vendor).filter(Vendor.id == vendor_id).first()

    @staticmethod
    def get_or_404(db: Session, vendor_id: str) -> Vendor:
        vendor = VendorRepository.get_by_id(db, vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return vendor

    @staticmethod
    def get_all(db: Session) -> List[Vendor]:
        return db.query(Vendor).order_by(Vendor.created_at.desc(), Vendor.name).all()

    @staticmethod
    def create(db: Session, vendor: VendorCreate) -> Vendor:
        db_vendor = Vendor(**vendor.model_dump())
        db.add(db_vendor)
        db.commit()
        db.refresh(db_vendor)
        return db_vendor

    @staticmethod
    def update(db: Session, vendor_id: str, vendor_update: VendorUpdate) -> Vendor:
        """Update a vendor; a missing logo keeps the current one"""
        db_vendor = VendorRepository.get_or_404(db, vendor_id)

        update_data = vendor_update.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(db_vendor, field, value)

        db.commit()
        db.refresh(db_vendor)
        return db_vendor

    @staticmethod
    def delete(db: Session, vendor_id: str) -> None:
        """Delete a vendor together with its price mappings"""
        db_vendor = VendorRepository.get_or_404(db, vendor_id)
        db.delete(db_vendor)
        db.commit()
