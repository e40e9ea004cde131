from decimal import Decimal

import pytest

from app.core.exceptions import DataValidationError
from app.services.excel_import import PriceImportService
from app.services.excel_reader import SpreadsheetReadError, read_first_sheet
from app.services.price_mapping_repository import PriceMappingRepository

XLSX_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def refs(make_sku, make_vendor, make_price_location):
    return make_sku(unit_value="500 g"), make_vendor(), make_price_location()


def row(sku, vendor, location, price, **extra):
    return {"sku_id": sku.id, "vendor_id": vendor.id, "location_id": location.id, "price": price, **extra}


def test_reader_normalizes_headers_and_numbers_rows(write_workbook):
    path = write_workbook([
        {"SKU ID": "a", "Vendor-ID": "b", " Price ": 3},
        {"SKU ID": None, "Vendor-ID": None, " Price ": None},
        {"SKU ID": " c ", "Vendor-ID": "d", " Price ": 4},
    ])

    rows = read_first_sheet(str(path))

    assert [r.number for r in rows] == [2, 4]
    assert rows[0].values == {"sku_id": "a", "vendor_id": "b", "price": 3}
    assert rows[1].values["sku_id"] == "c"


def test_reader_rejects_unreadable_file(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"not a workbook")
    with pytest.raises(SpreadsheetReadError):
        read_first_sheet(str(path))


def test_import_reports_each_bad_row(db, refs, write_workbook):
    sku, vendor, location = refs
    path = write_workbook([
        row(sku, vendor, location, 20, struck_price=15, is_discounted="yes"),
        row(sku, vendor, location, None),
        row(sku, vendor, location, 10, struck_price=12),
        {**row(sku, vendor, location, 5), "sku_id": "ghost"},
        {**row(sku, vendor, location, 5), "vendor_id": "ghost"},
        {**row(sku, vendor, location, 5), "location_id": "ghost"},
        row(sku, vendor, location, "abc"),
    ])

    report = PriceImportService.import_workbook(db, str(path))

    assert report["message"] == "Excel upload processed"
    assert report["successCount"] == 1
    assert report["errorCount"] == 6
    assert report["errors"][:5] == [
        "Row 3: Missing required fields (sku_id, vendor_id, location_id, price)",
        "Row 4: Struck price must be lower than the regular price",
        'Row 5: SKU with ID "ghost" not found',
        'Row 6: Vendor with ID "ghost" not found',
        'Row 7: Location with ID "ghost" not found',
    ]
    assert report["errors"][5].startswith("Row 8: ")

    mapping = PriceMappingRepository.get_by_triple(db, sku.id, vendor.id, location.id)
    assert mapping.price == Decimal("20.00")
    assert mapping.struck_price == Decimal("15.00")
    assert mapping.is_discounted is True
    assert mapping.unit_price == Decimal("0.04")


def test_import_updates_existing_mapping(db, refs, write_workbook):
    sku, vendor, location = refs
    PriceImportService.import_workbook(db, str(write_workbook([row(sku, vendor, location, 20)], "first.xlsx")))
    report = PriceImportService.import_workbook(
        db, str(write_workbook([row(sku, vendor, location, 18)], "second.xlsx"))
    )

    assert report["successCount"] == 1
    assert PriceMappingRepository.count_by_triple(db, sku.id, vendor.id, location.id) == 1
    mapping = PriceMappingRepository.get_by_triple(db, sku.id, vendor.id, location.id)
    assert mapping.unit_price == Decimal("0.036")


def test_import_truncates_error_list(db, refs, write_workbook):
    sku, vendor, location = refs
    rows = [row(sku, vendor, location, 10, struck_price=50) for _ in range(15)]
    rows.append(row(sku, vendor, location, 10))

    report = PriceImportService.import_workbook(db, str(write_workbook(rows)))

    assert report["successCount"] == 1
    assert report["errorCount"] == 15
    assert len(report["errors"]) == 10
    assert report["successCount"] + report["errorCount"] == len(rows)


def test_import_rejects_too_many_rows(db, refs, write_workbook, monkeypatch):
    from app.core.config import settings

    sku, vendor, location = refs
    monkeypatch.setattr(settings, "IMPORT_MAX_ROWS", 2)
    path = write_workbook([row(sku, vendor, location, 1) for _ in range(3)])

    with pytest.raises(DataValidationError):
        PriceImportService.import_workbook(db, str(path))


# ============================================================================
# HTTP
# ============================================================================

def test_upload_excel_endpoint_cleans_up(client, refs, write_workbook, upload_dir):
    sku, vendor, location = refs
    path = write_workbook([
        row(sku, vendor, location, 20),
        row(sku, vendor, location, None),
    ])

    with open(path, "rb") as f:
        response = client.post("/api/upload-excel", files={"file": ("prices.xlsx", f, XLSX_TYPE)})

    assert response.status_code == 200
    assert response.json() == {
        "message": "Excel upload processed",
        "successCount": 1,
        "errorCount": 1,
        "errors": ["Row 3: Missing required fields (sku_id, vendor_id, location_id, price)"],
    }
    assert list(upload_dir.iterdir()) == []


def test_upload_excel_unreadable_workbook(client, upload_dir):
    response = client.post(
        "/api/upload-excel",
        files={"file": ("prices.xlsx", b"garbage", XLSX_TYPE)},
    )
    assert response.status_code == 500
    assert response.json()["detail"].startswith("Error processing Excel file:")
    assert list(upload_dir.iterdir()) == []


def test_upload_excel_request_errors(client, upload_dir, monkeypatch):
    from app.core.config import settings

    assert client.post("/api/upload-excel").status_code == 400

    response = client.post("/api/upload-excel", files={"file": ("prices.csv", b"a,b", "text/csv")})
    assert response.status_code == 400

    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)
    response = client.post("/api/upload-excel", files={"file": ("prices.xlsx", b"x", XLSX_TYPE)})
    assert response.status_code == 400
    assert "MB limit" in response.json()["detail"]


def test_import_checks_prices_after_rounding(db, refs, write_workbook):
    sku, vendor, location = refs
    path = write_workbook([
        row(sku, vendor, location, 10.004, struck_price=10.001),
        row(sku, vendor, location, 0.004),
        row(sku, vendor, location, "1e30"),
    ])

    report = PriceImportService.import_workbook(db, str(path))

    assert report["successCount"] == 0
    assert report["errors"] == [
        "Row 2: Struck price must be lower than the regular price",
        "Row 3: Price must be greater than zero",
        "Row 4: Number out of range for price: '1e30'",
    ]
    assert PriceMappingRepository.count_by_triple(db, sku.id, vendor.id, location.id) == 0


def test_upload_excel_accepts_excel_field(client, refs, write_workbook, upload_dir):
    sku, vendor, location = refs
    path = write_workbook([row(sku, vendor, location, 20)])

    with open(path, "rb") as f:
        response = client.post("/api/upload-excel", files={"excel": ("prices.xlsx", f, XLSX_TYPE)})

    assert response.status_code == 200
    assert response.json()["successCount"] == 1
    assert list(upload_dir.iterdir()) == []
