from core.state import DashboardState
from core.types import PatientRecord


def test_records_are_replaced_wholesale(records):
    state = DashboardState()
    state.apply_records(state.begin_request(), records, "remote")
    state.apply_records(state.begin_request(), [PatientRecord(name="Zara")], "upload.xlsx")
    assert [r.name for r in state.records] == ["Zara"]
    assert state.source == "upload.xlsx"


def test_error_keeps_records(records):
    state = DashboardState()
    state.apply_records(state.begin_request(), records, "remote")
    state.apply_error(state.begin_request(), "API Error: quota exceeded")
    assert state.error == "API Error: quota exceeded"
    assert state.records == records


def test_success_clears_error(records):
    state = DashboardState()
    state.apply_error(state.begin_request(), "boom")
    state.apply_records(state.begin_request(), records, "remote")
    assert state.error is None


def test_latest_request_wins(records):
    state = DashboardState()
    first = state.begin_request()
    second = state.begin_request()
    assert state.apply_records(second, records, "remote")
    assert not state.apply_records(first, [], "remote")
    assert not state.apply_error(first, "late failure")
    assert state.records == records
    assert state.error is None
