import io
import logging
from typing import Any, List, Sequence

import pandas as pd

from core.layout import COLUMNS, HEADER_ROWS, WIDTH
from core.types import PatientRecord

logger = logging.getLogger(__name__)

EXPORT_SHEET = "Patients"
EXPORT_FILENAME = "MOGC_Data_Export.xlsx"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def encode_records(records: Sequence[PatientRecord]) -> pd.DataFrame:
    """One row per record, one column per attribute."""
    return pd.DataFrame([r.to_dict() for r in records], columns=PatientRecord.field_names())


def to_xlsx_bytes(records: Sequence[PatientRecord], sheet_name: str = EXPORT_SHEET) -> bytes:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        encode_records(records).to_excel(writer, sheet_name=sheet_name, index=False)
    logger.info("exported %d patient(s) to sheet %r", len(records), sheet_name)
    return buf.getvalue()


def to_layout_grid(records: Sequence[PatientRecord], header_rows: int = HEADER_ROWS) -> List[List[Any]]:
    """Lay records back out in the tracking-sheet column order, with blank header rows."""
    grid: List[List[Any]] = [[None] * WIDTH for _ in range(header_rows)]
    for r in records:
        row: List[Any] = [None] * WIDTH
        for col in COLUMNS:
            row[col.index] = getattr(r, col.field)
        grid.append(row)
    return grid
