"""
Excel reader service.
Loads the first sheet of an uploaded workbook into plain row dicts.
"""

from typing import Any, Dict, List, NamedTuple

import pandas as pd


class SpreadsheetReadError(Exception):
    """The workbook could not be opened or parsed at all."""


class SheetRow(NamedTuple):
    number: int  # physical row in the sheet, header is row 1
    values: Dict[str, Any]


def normalize_header(header: Any) -> str:
    """'SKU ID' / 'sku-id' / ' sku_id ' -> 'sku_id'"""
    return str(header).strip().lower().replace(" ", "_").replace("-", "_")


def read_first_sheet(file_path: str) -> List[SheetRow]:
    """
    Read the first sheet of an Excel file.

    Returns rows in sheet order. Blank cells become None, string cells are
    stripped and fully blank rows are skipped without shifting row numbers.
    """
    try:
        df = pd.read_excel(file_path, sheet_name=0, dtype=object)
    except FileNotFoundError:
        raise SpreadsheetReadError(f"Excel file not found at: {file_path}")
    except Exception as e:
        raise SpreadsheetReadError(str(e))

    df.columns = [normalize_header(col) for col in df.columns]

    # Clean whitespace from string columns
    for col in df.columns:
        if df[col].dtype == 'object':
            df[col] = df[col].map(lambda v: (v.strip() or None) if isinstance(v, str) else v)

    df = df.dropna(how="all")
    df = df.astype(object).where(pd.notnull(df), None)

    rows = []
    for idx, row in df.iterrows():
        # +2 for the header row and 0-indexing
        rows.append(SheetRow(number=int(idx) + 2, values=row.to_dict()))
    return rows
