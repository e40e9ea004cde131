"""
Repository layer for SKU operations.
Keeps buying_price_without_vat in step with buying_price and buying_vat.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.sku import SKU
from app.schemas.sku import SKUCreate, SKUUpdate, SKUResponse, CategoryRef
from app.services.category_repository import CategoryRepository
from app.services.numeric import quantize_money


def price_without_vat(buying_price: Optional[Decimal], buying_vat: Optional[Decimal]) -> Decimal:
    """
    Net buying price: price / (1 + vat/100) when vat > 0, else the price itself.
    """
    price = buying_price or Decimal("0")
    vat = buying_vat or Decimal("0")
    if vat > 0:
        return quantize_money(price / (1 + vat / Decimal("100")))
    return quantize_money(price)


class SKURepository:
    """Repository for SKU operations"""

    @staticmethod
    def get_by_id(db: Session, sku_id: str) -> Optional[SKU]:
        """Get SKU by ID"""
        return db.query(SKU).filter(SKU.id == sku_id).first()

    @staticmethod
    def get_or_404(db: Session, sku_id: str) -> SKU:
        sku = SKURepository.get_by_id(db, sku_id)
        if not sku:
            raise NotFoundError("SKU", sku_id)
        return sku

    @staticmethod
    def get_all(
        db: Session,
        category_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[SKU]:
        """
        Get SKUs, newest first.

        category_id matches SKUs bound to that node or anywhere below it.
        """
        query = db.query(SKU)

        if category_id:
            subtree = CategoryRepository.get_descendant_ids(db, category_id)
            query = query.filter(SKU.category_id.in_(subtree))

        if search:
            search_pattern = f"%{search}%"
            query = query.filter(
                or_(
                    SKU.name.ilike(search_pattern),
                    SKU.brand.ilike(search_pattern),
                )
            )

        return query.order_by(SKU.created_at.desc(), SKU.name).all()

    @staticmethod
    def _check_category(db: Session, category_id: Optional[str]) -> None:
        if category_id and not CategoryRepository.get_by_id(db, category_id):
            raise NotFoundError("Category", category_id)

    @staticmethod
    def create(db: Session, sku: SKUCreate) -> SKU:
        """Create a SKU and derive its net buying price"""
        SKURepository._check_category(db, sku.category_id)

        data = sku.model_dump()
        data["category_id"] = data.get("category_id") or None
        data["buying_price"] = quantize_money(sku.buying_price)
        data["selling_price"] = quantize_money(sku.selling_price)
        data["buying_price_without_vat"] = price_without_vat(sku.buying_price, sku.buying_vat)

        db_sku = SKU(**data)
        db.add(db_sku)
        db.commit()
        db.refresh(db_sku)
        return db_sku

    @staticmethod
    def update(db: Session, sku_id: str, sku_update: SKUUpdate) -> SKU:
        """
        Update a SKU. Only provided fields change.

        The net buying price is recomputed whenever buying_price or
        buying_vat is part of the update.
        """
        db_sku = SKURepository.get_or_404(db, sku_id)
        update_data = sku_update.model_dump(exclude_unset=True)

        if "category_id" in update_data:
            update_data["category_id"] = update_data["category_id"] or None
            SKURepository._check_category(db, update_data["category_id"])

        for field in ("buying_price", "buying_vat", "selling_price"):
            if field in update_data and update_data[field] is None:
                # null means "leave unchanged" for numeric fields
                del update_data[field]

        for field in ("buying_price", "selling_price"):
            if field in update_data:
                update_data[field] = quantize_money(update_data[field])

        for field, value in update_data.items():
            setattr(db_sku, field, value)

        if "buying_price" in update_data or "buying_vat" in update_data:
            db_sku.buying_price_without_vat = price_without_vat(db_sku.buying_price, db_sku.buying_vat)

        db.commit()
        db.refresh(db_sku)
        return db_sku

    @staticmethod
    def delete(db: Session, sku_id: str) -> None:
        """Delete a SKU together with its price mappings"""
        db_sku = SKURepository.get_or_404(db, sku_id)
        db.delete(db_sku)
        db.commit()

    @staticmethod
    def to_response(sku: SKU) -> SKUResponse:
        path = CategoryRepository.get_path(sku.category)
        return SKUResponse(
            id=sku.id,
            name=sku.name,
            image=sku.image,
            brand=sku.brand,
            unit=sku.unit,
            unit_value=sku.unit_value,
            category_id=sku.category_id,
            kvi_label=sku.kvi_label,
            buying_price=sku.buying_price or Decimal("0"),
            buying_vat=sku.buying_vat or Decimal("0"),
            buying_price_without_vat=sku.buying_price_without_vat or Decimal("0"),
            selling_price=sku.selling_price or Decimal("0"),
            category_name=sku.category.name if sku.category else None,
            category_path=[CategoryRef(id=c.id, name=c.name, level=c.level) for c in path],
            created_at=sku.created_at,
            updated_at=sku.updated_at,
        )
