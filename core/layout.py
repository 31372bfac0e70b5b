# Column layout of the MOGC tracking sheet; bump LAYOUT_VERSION when the sheet changes.
from dataclasses import dataclass
from typing import List

LAYOUT_VERSION = "2024-mogc"

# Title and grouping rows above the first patient row.
HEADER_ROWS = 3

# Sheet holding the patient rows; otherwise the third sheet of the workbook.
SHEET_NAME_HINT = "PENGISIAN DATA"
FALLBACK_SHEET_INDEX = 2


@dataclass(frozen=True)
class Column:
    index: int
    field: str
    is_date: bool = False


def _triple(base: str, start: int) -> List[Column]:
    # observation blocks are laid out status, date, value
    return [
        Column(start, f"{base}_status"),
        Column(start + 1, f"{base}_date", is_date=True),
        Column(start + 2, base),
    ]


COLUMNS: List[Column] = [
    Column(0, "id"),
    Column(1, "district"),
    Column(2, "clinic"),
    Column(3, "name"),
    Column(4, "ic"),
    Column(5, "age"),
    Column(6, "gender"),
    Column(7, "race"),
    Column(8, "diagnosis_date", is_date=True),
    Column(9, "diabetes_type"),
    Column(10, "mogc_reg_date", is_date=True),
    Column(11, "status"),
    # 12 is unused
    Column(13, "height"),
    Column(14, "weight"),
    *_triple("bmi", 15),
    *_triple("waist", 18),
    *_triple("bp", 21),
    *_triple("va", 24),
    *_triple("fundus", 27),
    *_triple("foot", 30),
    *_triple("rbs", 33),
    *_triple("hba1c", 36),
    *_triple("labs", 39),
    *_triple("urine_protein", 42),
    *_triple("microalbumin", 45),
    Column(48, "education_status"),
    Column(49, "education_date", is_date=True),
    Column(50, "counseling_status"),
]

WIDTH = max(c.index for c in COLUMNS) + 1
