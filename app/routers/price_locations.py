"""
API Router for price-locations, the name-only locations prices are kept against.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.location_repository import PriceLocationRepository
from app.schemas.location import PriceLocationCreate, PriceLocationUpdate, PriceLocationResponse
from app.schemas.common import CreatedResponse, MessageResponse

router = APIRouter(prefix="/price-locations", tags=["Price Locations"])


@router.get("", response_model=List[PriceLocationResponse])
def get_price_locations(db: Session = Depends(get_db)):
    return PriceLocationRepository.get_all(db)


@router.get("/{location_id}", response_model=PriceLocationResponse)
def get_price_location(location_id: str, db: Session = Depends(get_db)):
    return PriceLocationRepository.get_or_404(db, location_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_price_location(location: PriceLocationCreate, db: Session = Depends(get_db)):
    db_location = PriceLocationRepository.create(db, location)
    return CreatedResponse(id=db_location.id, message="Price location created successfully")


@router.put("/{location_id}", response_model=MessageResponse)
def update_price_location(
    location_id: str,
    location_update: PriceLocationUpdate,
    db: Session = Depends(get_db),
):
    PriceLocationRepository.update(db, location_id, location_update)
    return MessageResponse(message="Price location updated successfully")


@router.delete("/{location_id}", response_model=MessageResponse)
def delete_price_location(location_id: str, db: Session = Depends(get_db)):
    PriceLocationRepository.delete(db, location_id)
    return MessageResponse(message="Price location deleted successfully")
