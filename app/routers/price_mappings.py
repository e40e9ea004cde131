"""
API Router for price mappings.
Single-record upsert, listing with joined display fields, and the Excel bulk import.
"""

import logging
import os
import tempfile
from typing import List, Optional
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.services.excel_import import PriceImportService
from app.services.excel_reader import SpreadsheetReadError
from app.services.price_mapping_repository import PriceMappingRepository
from app.schemas.price_mapping import PriceMappingUpsert, PriceMappingResponse, ExcelImportResponse
from app.schemas.common import CreatedResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Price Mappings"])

EXCEL_EXTENSIONS = (".xlsx", ".xls")


# ============================================================================
# PRICE MAPPING ENDPOINTS
# ============================================================================

@router.get("/price-mappings", response_model=List[PriceMappingResponse])
def get_price_mappings(
    sku_id: Optional[str] = Query(None, description="Filter by SKU"),
    vendor_id: Optional[str] = Query(None, description="Filter by vendor"),
    location_id: Optional[str] = Query(None, description="Filter by price-location"),
    db: Session = Depends(get_db),
):
    """Get price mappings with SKU, vendor and location names, newest first"""
    mappings = PriceMappingRepository.get_all(db, sku_id=sku_id, vendor_id=vendor_id, location_id=location_id)
    return [PriceMappingRepository.to_response(db, mapping) for mapping in mappings]


@router.get("/price-mappings/{mapping_id}", response_model=PriceMappingResponse)
def get_price_mapping(mapping_id: str, db: Session = Depends(get_db)):
    mapping = PriceMappingRepository.get_or_404(db, mapping_id)
    return PriceMappingRepository.to_response(db, mapping)


@router.post("/price-mappings", response_model=CreatedResponse)
def upsert_price_mapping(payload: PriceMappingUpsert, db: Session = Depends(get_db)):
    """
    Create or update the price for a (sku, vendor, location) triple.

    **Rules:**
    - price must be greater than zero
    - struck_price, when given and non-zero, must be lower than price
    - unit_price is derived from the SKU's unit value ("500 g" -> price / 500)
    - currency defaults to the configured default currency

    There is at most one mapping per triple; posting the same triple again
    overwrites it.
    """
    result = PriceMappingRepository.upsert(
        db,
        sku_id=payload.sku_id,
        vendor_id=payload.vendor_id,
        location_id=payload.location_id,
        price=payload.price,
        struck_price=payload.struck_price,
        is_discounted=payload.is_discounted,
        currency=payload.currency,
    )
    return CreatedResponse(id=result.mapping.id, message=result.message)


@router.delete("/price-mappings/{mapping_id}", response_model=MessageResponse)
def delete_price_mapping(mapping_id: str, db: Session = Depends(get_db)):
    PriceMappingRepository.delete(db, mapping_id)
    return MessageResponse(message="Price mapping deleted successfully")


# ============================================================================
# EXCEL IMPORT
# ============================================================================

@router.post("/upload-excel", response_model=ExcelImportResponse)
async def upload_excel(
    file: Optional[UploadFile] = File(None, description="Excel workbook (.xlsx or .xls)"),
    excel: Optional[UploadFile] = File(None, description="Same as file; field name used by older admin clients"),
    db: Session = Depends(get_db),
):
    """
    Bulk create/update price mappings from an Excel workbook.

    **Sheet format (first sheet, header row required):**
    sku_id, vendor_id, location_id, price, struck_price (optional),
    is_discounted (optional), currency (optional)

    Each row is imported on its own. Rows that fail are reported as
    "Row N: reason" (N is the sheet row, the header being row 1) and do not
    stop the rest of the import. At most the first 10 errors are returned.
    """
    file = file or excel
    if file is None or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    extension = os.path.splitext(file.filename)[1].lower()
    if extension not in EXCEL_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File must be an Excel file (.xlsx or .xls extension)"
        )

    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File size exceeds {settings.MAX_UPLOAD_SIZE_MB} MB limit"
        )

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(suffix=extension, dir=settings.UPLOAD_DIR)
    try:
        with os.fdopen(fd, "wb") as temp_file:
            temp_file.write(content)

        logger.info(f"Processing Excel upload {file.filename} ({len(content)} bytes)")
        report = PriceImportService.import_workbook(db, temp_path)
    except SpreadsheetReadError as e:
        logger.error(f"Could not read Excel upload {file.filename}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error processing Excel file: {str(e)}"
        )
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)

    return ExcelImportResponse(**report)
