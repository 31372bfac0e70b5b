import pytest

from core.stats import compute_stats, diabetes_type_breakdown, leading_number, percent_of_total
from core.types import PatientRecord, SummaryStats


@pytest.mark.parametrize("value,expected", [
    ("6.2", 6.2), ("6.2%", 6.2), (" 7 ", 7.0), (".5", 0.5), (7, 7.0), (23.0, 23.0),
    ("abc", None), ("", None), (None, None), (float("nan"), None), (True, None),
])
def test_leading_number(value, expected):
    assert leading_number(value) == expected


def test_compute_stats(records):
    assert compute_stats(records) == SummaryStats(total=3, active=2, hba1c_controlled=1, bmi_normal=2)


def test_active_status_is_case_insensitive():
    rs = [PatientRecord(name="a", status="aktif"), PatientRecord(name="b", status="Active"), PatientRecord(name="c", status="Inactive")]
    assert compute_stats(rs).active == 2


def test_boundaries_are_exclusive():
    rs = [PatientRecord(name="a", hba1c="6.5", bmi=25), PatientRecord(name="b", hba1c="6.49", bmi="24.9")]
    stats = compute_stats(rs)
    assert (stats.hba1c_controlled, stats.bmi_normal) == (1, 1)


def test_empty():
    assert compute_stats([]) == SummaryStats()


def test_percent_of_total():
    assert percent_of_total(1, 3) == 33.3
    assert percent_of_total(2, 2) == 100.0
    assert percent_of_total(0, 0) == 0.0


def test_diabetes_type_breakdown(records):
    assert diabetes_type_breakdown(records) == {"Type 1": 1, "Type 2": 2}
