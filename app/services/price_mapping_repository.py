"""
Repository layer for price mappings.

Holds the upsert engine: validate the prices, derive the unit price from the
SKU's unit value, then create or overwrite the single mapping for the
(sku, vendor, location) triple.
"""

import logging
from decimal import Decimal
from typing import List, NamedTuple, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.core.config import settings
from app.core.exceptions import DataValidationError, NotFoundError
from app.models.price_mapping import PriceMapping
from app.models.sku import SKU
from app.schemas.price_mapping import PriceMappingResponse
from app.services.location_repository import PriceLocationRepository
from app.services.location_resolver import resolve_location
from app.services.numeric import MAX_MONEY, quantize_money, quantize_unit_price
from app.services.sku_repository import SKURepository
from app.services.unit_value import extract_unit_value
from app.services.vendor_repository import VendorRepository

logger = logging.getLogger(__name__)

STRUCK_PRICE_ERROR = "Struck price must be lower than the regular price"


class UpsertResult(NamedTuple):
    mapping: PriceMapping
    created: bool

    @property
    def message(self) -> str:
        action = "created" if self.created else "updated"
        return f"Price mapping {action} successfully"


def compute_unit_price(price: Decimal, unit_value: Optional[str]) -> Decimal:
    """Price per unit of the SKU's unit value ("500 g" -> price / 500)."""
    return quantize_unit_price(price / extract_unit_value(unit_value))


def check_prices(
    price: Optional[Decimal],
    struck_price: Optional[Decimal],
) -> Tuple[Decimal, Optional[Decimal]]:
    """
    Round price and struck price to cents, then validate them.

    Returns the (price, struck_price) pair to store. The struck price is
    None when it was not given or rounds to 0.
    """
    for value in (price, struck_price):
        if value is not None and abs(value) > MAX_MONEY:
            raise DataValidationError(f"Price must not exceed {MAX_MONEY}")

    if price is None or quantize_money(price) <= 0:
        raise DataValidationError("Price must be greater than zero")
    price = quantize_money(price)

    if not struck_price or not quantize_money(struck_price):
        return price, None
    struck_price = quantize_money(struck_price)
    if struck_price < 0:
        raise DataValidationError("Struck price cannot be negative")
    if struck_price >= price:
        raise DataValidationError(STRUCK_PRICE_ERROR)
    return price, struck_price


def normalize_currency(currency: Optional[str]) -> str:
    code = (currency or settings.DEFAULT_CURRENCY).strip().upper()
    if len(code) != 3 or not code.isalpha():
        raise DataValidationError(f"Invalid currency code: {currency!r}")
    return code


class PriceMappingRepository:
    """Repository for PriceMapping operations"""

    @staticmethod
    def get_by_id(db: Session, mapping_id: str) -> Optional[PriceMapping]:
        return (
            db.query(PriceMapping)
            .options(joinedload(PriceMapping.sku), joinedload(PriceMapping.vendor))
            .filter(PriceMapping.id == mapping_id)
            .first()
        )

    @staticmethod
    def get_or_404(db: Session, mapping_id: str) -> PriceMapping:
        mapping = PriceMappingRepository.get_by_id(db, mapping_id)
        if not mapping:
            raise NotFoundError("PriceMapping", mapping_id, f'Price mapping with ID "{mapping_id}" not found')
        return mapping

    @staticmethod
    def get_by_triple(db: Session, sku_id: str, vendor_id: str, location_id: str) -> Optional[PriceMapping]:
        """The mapping for a (sku, vendor, location) triple, if any"""
        return db.query(PriceMapping).filter(
            PriceMapping.sku_id == sku_id,
            PriceMapping.vendor_id == vendor_id,
            PriceMapping.location_id == location_id,
        ).first()

    @staticmethod
    def count_by_triple(db: Session, sku_id: str, vendor_id: str, location_id: str) -> int:
        return db.query(PriceMapping).filter(
            PriceMapping.sku_id == sku_id,
            PriceMapping.vendor_id == vendor_id,
            PriceMapping.location_id == location_id,
        ).count()

    @staticmethod
    def get_all(
        db: Session,
        sku_id: Optional[str] = None,
        vendor_id: Optional[str] = None,
        location_id: Optional[str] = None,
    ) -> List[PriceMapping]:
        """Get price mappings, newest first, with SKU and vendor loaded"""
        query = db.query(PriceMapping).options(
            joinedload(PriceMapping.sku),
            joinedload(PriceMapping.vendor),
        )
        if sku_id:
            query = query.filter(PriceMapping.sku_id == sku_id)
        if vendor_id:
            query = query.filter(PriceMapping.vendor_id == vendor_id)
        if location_id:
            query = query.filter(PriceMapping.location_id == location_id)
        return query.order_by(PriceMapping.created_at.desc()).all()

    # ============================================================================
    # UPSERT ENGINE
    # ============================================================================

    @staticmethod
    def upsert(
        db: Session,
        sku_id: str,
        vendor_id: str,
        location_id: str,
        price: Decimal,
        struck_price: Optional[Decimal] = None,
        is_discounted: bool = False,
        currency: Optional[str] = None,
    ) -> UpsertResult:
        """
        Validate every input, then create or update the mapping.

        Nothing is written unless all checks pass.
        """
        sku = SKURepository.get_or_404(db, sku_id)
        price, struck_price = check_prices(price, struck_price)
        VendorRepository.get_or_404(db, vendor_id)
        PriceLocationRepository.get_or_404(db, location_id)

        return PriceMappingRepository.apply_price(
            db,
            sku=sku,
            vendor_id=vendor_id,
            location_id=location_id,
            price=price,
            struck_price=struck_price,
            is_discounted=is_discounted,
            currency=currency,
        )

    @staticmethod
    def apply_price(
        db: Session,
        sku: SKU,
        vendor_id: str,
        location_id: str,
        price: Decimal,
        struck_price: Optional[Decimal] = None,
        is_discounted: bool = False,
        currency: Optional[str] = None,
    ) -> UpsertResult:
        """
        Write one already-validated price.

        The unique constraint on the triple backs the lookup: if a concurrent
        insert wins, the winner's row is overwritten instead.
        """
        price = quantize_money(price)
        values = {
            "price": price,
            "struck_price": quantize_money(struck_price) if struck_price else None,
            "is_discounted": bool(is_discounted),
            "unit_price": compute_unit_price(price, sku.unit_value),
            "currency": normalize_currency(currency),
        }

        existing = PriceMappingRepository.get_by_triple(db, sku.id, vendor_id, location_id)
        if existing:
            return PriceMappingRepository._overwrite(db, existing, values)

        db_mapping = PriceMapping(sku_id=sku.id, vendor_id=vendor_id, location_id=location_id, **values)
        db.add(db_mapping)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            existing = PriceMappingRepository.get_by_triple(db, sku.id, vendor_id, location_id)
            if not existing:
                raise
            logger.info(f"Concurrent insert for sku={sku.id} vendor={vendor_id} location={location_id}, updating")
            return PriceMappingRepository._overwrite(db, existing, values)

        db.refresh(db_mapping)
        logger.info(f"Created price mapping {db_mapping.id} (sku={sku.id}, price={price})")
        return UpsertResult(db_mapping, True)

    @staticmethod
    def _overwrite(db: Session, mapping: PriceMapping, values: dict) -> UpsertResult:
        for field, value in values.items():
            setattr(mapping, field, value)
        db.commit()
        db.refresh(mapping)
        logger.info(f"Updated price mapping {mapping.id} (price={values['price']})")
        return UpsertResult(mapping, False)

    @staticmethod
    def delete(db: Session, mapping_id: str) -> None:
        db_mapping = PriceMappingRepository.get_or_404(db, mapping_id)
        db.delete(db_mapping)
        db.commit()

    # ============================================================================
    # FORMATTING
    # ============================================================================

    @staticmethod
    def to_response(db: Session, mapping: PriceMapping) -> PriceMappingResponse:
        """Join SKU, vendor and location display fields onto a mapping"""
        location = resolve_location(db, mapping.location_id)
        sku = mapping.sku
        vendor = mapping.vendor
        return PriceMappingResponse(
            id=mapping.id,
            sku_id=mapping.sku_id,
            vendor_id=mapping.vendor_id,
            location_id=location.id,
            price=mapping.price,
            struck_price=mapping.struck_price,
            is_discounted=mapping.is_discounted,
            unit_price=mapping.unit_price,
            currency=mapping.currency,
            created_at=mapping.created_at,
            updated_at=mapping.updated_at,
            sku_name=sku.name if sku else None,
            vendor_name=vendor.name if vendor else None,
            location_name=location.name,
            brand=sku.brand if sku else None,
            unit=sku.unit if sku else None,
            unit_value=sku.unit_value if sku else None,
        )
