"""
Repository layer for full locations and price-locations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.location import Location, PriceLocation
from app.schemas.location import (
    LocationCreate, LocationUpdate,
    PriceLocationCreate, PriceLocationUpdate,
)


class LocationRepository:
    """Repository for full Location operations"""

    @staticmethod
    def get_by_id(db: Session, location_id: str) -> Optional[Location]:
        return db.query(Location).filter(Location.id == location_id).first()

    @staticmethod
    def get_or_404(db: Session, location_id: str) -> Location:
        location = LocationRepository.get_by_id(db, location_id)
        if not location:
            raise NotFoundError("Location", location_id)
        return location

    @staticmethod
    def get_all(db: Session) -> List[Location]:
        return db.query(Location).order_by(Location.created_at.desc()).all()

    @staticmethod
    def create(db: Session, location: LocationCreate) -> Location:
        db_location = Location(**location.model_dump())
        db.add(db_location)
        db.commit()
        db.refresh(db_location)
        return db_location

    @staticmethod
    def update(db: Session, location_id: str, location_update: LocationUpdate) -> Location:
        db_location = LocationRepository.get_or_404(db, location_id)

        update_data = location_update.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(db_location, field, value)

        db.commit()
        db.refresh(db_location)
        return db_location

    @staticmethod
    def delete(db: Session, location_id: str) -> None:
        db_location = LocationRepository.get_or_404(db, location_id)
        db.delete(db_location)
        db.commit()


class PriceLocationRepository:
    """Repository for PriceLocation operations"""

    @staticmethod
    def get_by_id(db: Session, location_id: str) -> Optional[PriceLocation]:
        return db.query(PriceLocation).filter(PriceLocation.id == location_id).first()

    @staticmethod
    def get_or_404(db: Session, location_id: str) -> PriceLocation:
        location = PriceLocationRepository.get_by_id(db, location_id)
        if not location:
            raise NotFoundError("Location", location_id, f'Price location with ID "{location_id}" not found')
        return location

    @staticmethod
    def get_all(db: Session) -> List[PriceLocation]:
        return db.query(PriceLocation).order_by(PriceLocation.created_at.desc(), PriceLocation.name).all()

    @staticmethod
    def create(db: Session, location: PriceLocationCreate) -> PriceLocation:
        db_location = PriceLocation(name=location.name)
        db.add(db_location)
        db.commit()
        db.refresh(db_location)
        return db_location

    @staticmethod
    def update(db: Session, location_id: str, location_update: PriceLocationUpdate) -> PriceLocation:
        db_location = PriceLocationRepository.get_or_404(db, location_id)
        db_location.name = location_update.name
        db.commit()
        db.refresh(db_location)
        return db_location

    @staticmethod
    def delete(db: Session, location_id: str) -> None:
        db_location = PriceLocationRepository.get_or_404(db, location_id)
        db.delete(db_location)
        db.commit()
