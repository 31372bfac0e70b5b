import logging
import numbers
from datetime import date, datetime, timedelta
from typing import Any, List, Optional, Sequence

import numpy as np
import pandas as pd

from core.layout import COLUMNS, FALLBACK_SHEET_INDEX, HEADER_ROWS, SHEET_NAME_HINT, WIDTH
from core.types import DecodeResult, PatientRecord, RowWarning

logger = logging.getLogger(__name__)

# Spreadsheet serial day 25569 is 1970-01-01.
UNIX_EPOCH_SERIAL = 25569
DATE_FORMAT = "%d/%m/%Y"


class SpreadsheetError(Exception):
    """The workbook could not be opened or has no patient sheet."""


class DateCellError(ValueError):
    """Numeric date cell outside the representable date range."""


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def excel_date(value: Any):
    """Serial day-count -> DD/MM/YYYY; text passes through; empty -> None."""
    if _is_empty(value) or value == "" or (_is_number(value) and value == 0):
        return None
    if _is_number(value):
        try:
            ms = round((float(value) - UNIX_EPOCH_SERIAL) * 86400 * 1000)
            return (datetime(1970, 1, 1) + timedelta(milliseconds=ms)).strftime(DATE_FORMAT)
        except (OverflowError, ValueError) as e:
            raise DateCellError(f"date serial {value!r} out of range") from e
    if isinstance(value, (datetime, date)):
        return value.strftime(DATE_FORMAT)
    return value


def _cell(row: Sequence[Any], index: int):
    if index >= len(row):
        return None
    value = row[index]
    return None if _is_empty(value) else value


def decode_row(row: Sequence[Any], problems: Optional[List[str]] = None) -> PatientRecord:
    values = {}
    for col in COLUMNS:
        v = _cell(row, col.index)
        if col.is_date:
            try:
                v = excel_date(v)
            except DateCellError as e:
                v = None
                if problems is not None:
                    problems.append(f"{col.field}: {e}")
        values[col.field] = v
    return PatientRecord(**values)


def decode_grid(grid: Sequence[Sequence[Any]], header_rows: int = HEADER_ROWS) -> DecodeResult:
    result = DecodeResult()
    for offset, row in enumerate(grid[header_rows:]):
        sheet_row = header_rows + offset + 1
        row = list(row or [])
        problems: List[str] = []
        record = decode_row(row, problems)
        result.warnings.extend(RowWarning(sheet_row, p) for p in problems)

        extra = [i for i in range(WIDTH, len(row)) if not _is_empty(row[i])]
        if extra:
            result.warnings.append(RowWarning(sheet_row, f"{len(extra)} cell(s) beyond column {WIDTH} ignored"))

        if not record.name:
            if any(not _is_empty(v) and v != "" for v in row):
                result.warnings.append(RowWarning(sheet_row, "no patient name; row skipped"))
            continue
        result.records.append(record)

    for w in result.warnings:
        logger.debug("row %d: %s", w.row, w.message)
    logger.info("decoded %d patient(s), %d row warning(s)", len(result.records), len(result.warnings))
    return result


def _to_python(value: Any):
    if isinstance(value, np.generic):
        return value.item()
    return value


def sheet_to_grid(df: pd.DataFrame) -> List[List[Any]]:
    return [[None if _is_empty(v) else _to_python(v) for v in row] for row in df.itertuples(index=False, name=None)]


def pick_sheet(names: List[str]) -> str:
    for name in names:
        if SHEET_NAME_HINT in str(name):
            return name
    if len(names) > FALLBACK_SHEET_INDEX:
        return names[FALLBACK_SHEET_INDEX]
    raise SpreadsheetError(f"No patient sheet found (sheets: {', '.join(map(str, names)) or 'none'})")


def read_workbook(source) -> List[List[Any]]:
    """Read the patient worksheet of an .xlsx/.xls file (path or file-like) as a grid."""
    try:
        sheets = pd.read_excel(source, sheet_name=None, header=None, dtype=object)
    except Exception as e:
        raise SpreadsheetError(f"Could not read workbook: {e}") from e
    name = pick_sheet(list(sheets.keys()))
    logger.info("reading sheet %r", name)
    return sheet_to_grid(sheets[name])


def decode_workbook(source) -> DecodeResult:
    grid = read_workbook(source)
    try:
        return decode_grid(grid)
    except Exception as e:
        raise SpreadsheetError(f"Could not decode patient sheet: {e}") from e
