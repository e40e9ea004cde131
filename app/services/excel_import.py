"""
Bulk price import from an Excel workbook.

Each data row is reconciled on its own: a bad row is reported and skipped,
good rows are committed as they go.
"""

import logging
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import DataValidationError
from app.services.excel_reader import SheetRow, read_first_sheet
from app.services.location_repository import PriceLocationRepository
from app.services.numeric import MAX_MONEY, is_blank, parse_bool, parse_decimal
from app.services.price_mapping_repository import PriceMappingRepository, check_prices
from app.services.sku_repository import SKURepository
from app.services.vendor_repository import VendorRepository

logger = logging.getLogger(__name__)

MISSING_FIELDS_ERROR = "Missing required fields (sku_id, vendor_id, location_id, price)"


class RowError(Exception):
    """A row that cannot be imported; the message goes into the report."""


def clean_id(value: Any) -> Optional[str]:
    """Cell value as an id string. Excel hands numeric ids back as floats."""
    if is_blank(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


class PriceImportService:
    """Reconciles spreadsheet rows into price mappings"""

    @staticmethod
    def import_workbook(db: Session, file_path: str) -> dict:
        """
        Import every row of the workbook's first sheet.

        Raises SpreadsheetReadError if the file can't be read and
        DataValidationError if it has more rows than allowed.
        """
        rows = read_first_sheet(file_path)
        if len(rows) > settings.IMPORT_MAX_ROWS:
            raise DataValidationError(
                f"Excel file has {len(rows)} rows, the maximum is {settings.IMPORT_MAX_ROWS}"
            )
        return PriceImportService.import_rows(db, rows)

    @staticmethod
    def import_rows(db: Session, rows: List[SheetRow]) -> dict:
        success_count = 0
        errors = []

        for row in rows:
            try:
                PriceImportService._import_row(db, row)
                success_count += 1
            except (RowError, DataValidationError) as e:
                errors.append(f"Row {row.number}: {str(e)}")
                logger.warning(f"Skipped row {row.number}: {str(e)}")
            except Exception as e:
                db.rollback()
                errors.append(f"Row {row.number}: {str(e)}")
                logger.warning(f"Failed to import row {row.number}: {str(e)}")

        logger.info(f"Excel import finished: {success_count} imported, {len(errors)} failed")
        return {
            "message": "Excel upload processed",
            "successCount": success_count,
            "errorCount": len(errors),
            "errors": errors[:settings.IMPORT_MAX_REPORTED_ERRORS],
        }

    @staticmethod
    def _import_row(db: Session, row: SheetRow) -> None:
        values = row.values
        sku_id = clean_id(values.get("sku_id"))
        vendor_id = clean_id(values.get("vendor_id"))
        location_id = clean_id(values.get("location_id"))
        raw_price = values.get("price")

        if not sku_id or not vendor_id or not location_id or is_blank(raw_price):
            raise RowError(MISSING_FIELDS_ERROR)

        price = parse_decimal(raw_price, "price", max_value=MAX_MONEY)
        if not price:
            raise RowError(MISSING_FIELDS_ERROR)

        struck_price = parse_decimal(values.get("struck_price"), "struck_price", max_value=MAX_MONEY)
        price, struck_price = check_prices(price, struck_price)

        sku = SKURepository.get_by_id(db, sku_id)
        if not sku:
            raise RowError(f'SKU with ID "{sku_id}" not found')
        if not VendorRepository.get_by_id(db, vendor_id):
            raise RowError(f'Vendor with ID "{vendor_id}" not found')
        if not PriceLocationRepository.get_by_id(db, location_id):
            raise RowError(f'Location with ID "{location_id}" not found')

        currency = values.get("currency")
        PriceMappingRepository.apply_price(
            db,
            sku=sku,
            vendor_id=vendor_id,
            location_id=location_id,
            price=price,
            struck_price=struck_price,
            is_discounted=parse_bool(values.get("is_discounted")),
            currency=None if is_blank(currency) else str(currency),
        )
