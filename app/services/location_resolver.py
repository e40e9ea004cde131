"""
Location name resolution for price mappings.

Price mappings normally point at a price-location. Older rows point at the
full locations table instead. Resolvers are tried in a fixed order and the
first one that finds a name wins; lookups never raise.
"""

import logging
from typing import NamedTuple, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.location import Location, PriceLocation

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "Unknown Location"


class ResolvedLocation(NamedTuple):
    id: str
    name: str


class LocationResolver:
    """Looks a location id up in one table."""

    source = "base"

    def lookup(self, db: Session, location_id: str) -> Optional[ResolvedLocation]:
        raise NotImplementedError

    def resolve(self, db: Session, location_id: str) -> Optional[ResolvedLocation]:
        try:
            return self.lookup(db, location_id)
        except SQLAlchemyError as e:
            logger.warning(f"Could not resolve location {location_id} from {self.source}: {str(e)}")
            db.rollback()
            return None


class PriceLocationResolver(LocationResolver):
    source = "price_locations"

    def lookup(self, db: Session, location_id: str) -> Optional[ResolvedLocation]:
        location = db.query(PriceLocation).filter(PriceLocation.id == location_id).first()
        if location and location.name:
            return ResolvedLocation(location.id, location.name)
        return None


class LegacyLocationResolver(LocationResolver):
    """Full locations referenced by older price mappings."""

    source = "locations"

    def lookup(self, db: Session, location_id: str) -> Optional[ResolvedLocation]:
        location = db.query(Location).filter(Location.id == location_id).first()
        if not location:
            return None
        name = location.name or f"{location.city or 'Unknown'}, {location.region or 'Unknown'}"
        return ResolvedLocation(location.id, name)


DEFAULT_RESOLVERS: Sequence[LocationResolver] = (PriceLocationResolver(), LegacyLocationResolver())


def resolve_location(
    db: Session,
    location_id: Optional[str],
    resolvers: Sequence[LocationResolver] = DEFAULT_RESOLVERS,
) -> ResolvedLocation:
    """Return the display name for location_id, or "Unknown Location"."""
    if not location_id:
        return ResolvedLocation(location_id or "", UNKNOWN_LOCATION)

    for resolver in resolvers:
        resolved = resolver.resolve(db, location_id)
        if resolved is not None:
            return resolved

    return ResolvedLocation(location_id, UNKNOWN_LOCATION)
