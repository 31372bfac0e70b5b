import io

import pandas as pd
import pytest

from core import actions
from core.source import ApiError, SubmissionError
from core.state import DashboardState
from core.types import PatientRecord


@pytest.fixture
def loaded(records):
    state = DashboardState(timeout=2.0)
    state.apply_records(state.begin_request(), records, "remote")
    return state


def test_refresh_replaces_records(loaded):
    calls = []

    def fetch(url, timeout):
        calls.append((url, timeout))
        return [PatientRecord(name="Zara")]

    assert actions.refresh(loaded, url="http://sheet.test", fetch=fetch) is None
    assert [r.name for r in loaded.records] == ["Zara"]
    assert calls == [("http://sheet.test", 2.0)]


def test_refresh_api_error_keeps_records(loaded, records):
    def fetch(url, timeout):
        raise ApiError("quota exceeded")

    assert actions.refresh(loaded, fetch=fetch) == "API Error: quota exceeded"
    assert loaded.error == "API Error: quota exceeded"
    assert loaded.records == records


def test_import_bad_file_keeps_records(loaded, records):
    err = actions.import_file(loaded, io.BytesIO(b"garbage"), name="bad.xlsx")
    assert err == actions.IMPORT_FAILED
    assert loaded.records == records


def test_add_patient_success_reloads(loaded):
    sent = []

    def submit(payload, url, timeout):
        sent.append(payload)

    def fetch(url, timeout):
        return [PatientRecord(name="Aminah"), PatientRecord(name="Zara")]

    err = actions.add_patient(loaded, "Zara", "800101011235", "1.75", "70.5", submit=submit, fetch=fetch)
    assert err is None
    assert sent[0]["gender"] == "Male"
    assert sent[0]["bmi"] == "23.0"
    assert [r.name for r in loaded.records] == ["Aminah", "Zara"]


def test_add_patient_failure_does_not_reload(loaded, records):
    def submit(payload, url, timeout):
        raise SubmissionError("timed out")

    def fetch(url, timeout):
        raise AssertionError("should not refetch")

    err = actions.add_patient(loaded, "Zara", "800101011235", "1.75", "70.5", submit=submit, fetch=fetch)
    assert err == "Failed to add patient. timed out"
    assert loaded.records == records


def test_import_workbook_with_bad_date_cell(loaded, make_row, title_rows):
    grid = title_rows + [make_row("Aminah", c10=12345678), make_row("Siti")]
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        pd.DataFrame(grid).to_excel(writer, sheet_name="PENGISIAN DATA", header=False, index=False)
    buf.seek(0)

    assert actions.import_file(loaded, buf, name="mogc.xlsx") is None
    assert [r.name for r in loaded.records] == ["Aminah", "Siti"]
    assert loaded.records[0].mogc_reg_date is None
    assert loaded.row_warnings == 1
    assert loaded.source == "mogc.xlsx"
