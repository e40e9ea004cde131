"""
API routers for the application.
"""

from fastapi import APIRouter
from app.routers import categories, skus, vendors, locations, price_locations, price_mappings, external, system

api_router = APIRouter()

# Include routers
api_router.include_router(categories.router)  # Category tree
api_router.include_router(skus.router)
api_router.include_router(vendors.router)
api_router.include_router(locations.router)  # Full demographic locations
api_router.include_router(price_locations.router)  # Locations prices are keyed on
api_router.include_router(price_mappings.router)  # Price mappings & Excel import
api_router.include_router(external.router)  # Read-only external API
api_router.include_router(system.router)

__all__ = [
    "api_router", "categories", "skus", "vendors", "locations",
    "price_locations", "price_mappings", "external", "system",
]
