"""
API Router for full locations.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.location_repository import LocationRepository
from app.schemas.location import LocationCreate, LocationUpdate, LocationResponse
from app.schemas.common import CreatedResponse, MessageResponse

router = APIRouter(prefix="/locations", tags=["Locations"])


@router.get("", response_model=List[LocationResponse])
def get_locations(db: Session = Depends(get_db)):
    return LocationRepository.get_all(db)


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(location_id: str, db: Session = Depends(get_db)):
    return LocationRepository.get_or_404(db, location_id)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_location(location: LocationCreate, db: Session = Depends(get_db)):
    """
    Create a location.

    All fields are required and **domains** must be a non-empty list.
    """
    db_location = LocationRepository.create(db, location)
    return CreatedResponse(id=db_location.id, message="Location created successfully")


@router.put("/{location_id}", response_model=MessageResponse)
def update_location(location_id: str, location_update: LocationUpdate, db: Session = Depends(get_db)):
    LocationRepository.update(db, location_id, location_update)
    return MessageResponse(message="Location updated successfully")


@router.delete("/{location_id}", response_model=MessageResponse)
def delete_location(location_id: str, db: Session = Depends(get_db)):
    LocationRepository.delete(db, location_id)
    return MessageResponse(message="Location deleted successfully")
