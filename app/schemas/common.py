"""
Shared schema types.
"""

from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BaseModel, PlainSerializer

from app.services.numeric import parse_decimal


# Decimals are kept exact in Python and emitted as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def decimal_before(value: Any) -> Optional[Decimal]:
    """Pre-validator applying the shared numeric parsing policy."""
    return parse_decimal(value)


class MessageResponse(BaseModel):
    """Generic acknowledgement"""
    message: str


class CreatedResponse(BaseModel):
    """Response for create and upsert endpoints"""
    id: str
    message: str
