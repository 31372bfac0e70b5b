import pytest

from core.layout import WIDTH
from core.types import PatientRecord

TITLE_ROWS = [
    ["MOGC PATIENT TRACKING"],
    ["DEMOGRAPHICS", None, None, None, None, None, None, None, "DIAGNOSIS"],
    ["NO", "DAERAH", "KLINIK", "NAMA", "IC"],
]


@pytest.fixture
def make_row():
    def _make(name, ic="800101011234", **cols):
        row = [None] * WIDTH
        row[0], row[1], row[2], row[3], row[4] = 1, "Kuala Muda", "KK Bedong", name, ic
        for index, value in cols.items():
            row[int(index.lstrip("c"))] = value
        return row
    return _make


@pytest.fixture
def title_rows():
    return [list(r) for r in TITLE_ROWS]


@pytest.fixture
def records():
    return [
        PatientRecord(name="Aminah", ic="800101011234", diabetes_type="Type 2", status="AKTIF", hba1c="6.2", bmi=23.0),
        PatientRecord(name="Ahmad bin Ali", ic="650505025671", diabetes_type="Type 2", status="AKTIF", hba1c="8.1%", bmi="27.4"),
        PatientRecord(name="Siti", ic="020202031118", diabetes_type="Type 1", status="TIDAK AKTIF", hba1c=None, bmi=19.5),
    ]
