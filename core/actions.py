import logging
from typing import Callable, List, Optional

from core.calculator import derive_fields
from core.decoder import SpreadsheetError, decode_workbook
from core.source import API_URL, SourceError, build_payload, fetch_patients, submit_patient
from core.state import DashboardState
from core.types import PatientRecord

logger = logging.getLogger(__name__)

IMPORT_FAILED = "Failed to read Excel file. Please ensure it's the correct format."


def refresh(
    state: DashboardState,
    url: str = API_URL,
    fetch: Callable[..., List[PatientRecord]] = fetch_patients,
) -> Optional[str]:
    token = state.begin_request()
    try:
        records = fetch(url, timeout=state.timeout)
    except SourceError as e:
        logger.exception("Failed to fetch data")
        state.apply_error(token, e.banner)
        return e.banner
    state.apply_records(token, records, source="remote")
    return None


def import_file(state: DashboardState, upload, name: Optional[str] = None) -> Optional[str]:
    name = name or getattr(upload, "name", "upload")
    token = state.begin_request()
    try:
        result = decode_workbook(upload)
    except SpreadsheetError:
        logger.exception("Failed to read file %s", name)
        return IMPORT_FAILED
    state.apply_records(token, result.records, source=name, row_warnings=len(result.warnings))
    return None


def add_patient(
    state: DashboardState,
    name: str,
    ic: str,
    height: str,
    weight: str,
    url: str = API_URL,
    submit: Callable[..., None] = submit_patient,
    fetch: Callable[..., List[PatientRecord]] = fetch_patients,
) -> Optional[str]:
    """Post a new patient; on success reload the list from the source."""
    payload = build_payload(name, ic, height, weight, derive_fields(ic, height, weight))
    try:
        submit(payload, url=url, timeout=state.timeout)
    except SourceError as e:
        return e.banner
    refresh(state, url=url, fetch=fetch)
    return None
