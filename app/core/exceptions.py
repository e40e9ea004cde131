"""
Domain exceptions.

Repositories raise these; main.py maps them to JSON responses.
"""

from typing import Optional


class PriceTrackerError(Exception):
    """Base class for all domain errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class NotFoundError(PriceTrackerError):
    """A referenced SKU, vendor, location or category does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Optional[str], message: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f'{entity} with ID "{entity_id}" not found')

    def to_dict(self) -> dict:
        return {"detail": self.message, "entity": self.entity, "id": self.entity_id}


class DataValidationError(PriceTrackerError):
    """Input failed a business rule (e.g. struck price not below price)."""


class DependencyConflictError(PriceTrackerError):
    """Deletion refused because dependents still reference the record."""

    def __init__(self, message: str, dependency: str, count: int):
        super().__init__(message)
        self.dependency = dependency
        self.count = count

    def to_dict(self) -> dict:
        return {
            "detail": self.message,
            "details": {"type": self.dependency, "count": self.count},
        }
