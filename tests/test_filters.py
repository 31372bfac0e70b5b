from core.filters import filter_records
from core.types import PatientRecord


def test_empty_term_returns_everything(records):
    assert filter_records(records, "") == records


def test_name_match_ignores_case(records):
    assert [r.name for r in filter_records(records, "AHMAD")] == ["Ahmad bin Ali"]
    assert [r.name for r in filter_records(records, "i")] == ["Aminah", "Ahmad bin Ali", "Siti"]


def test_ic_substring(records):
    assert [r.name for r in filter_records(records, "0202")] == ["Siti"]


def test_numeric_cells_and_missing_values():
    rs = [PatientRecord(name=12345, ic=800101011234.0), PatientRecord(name="Siti", ic=None)]
    assert filter_records(rs, "8001") == [rs[0]]
    assert filter_records(rs, "234") == [rs[0]]
    assert filter_records(rs, "none") == []
