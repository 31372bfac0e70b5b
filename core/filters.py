from typing import List, Sequence

from core.types import PatientRecord


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def filter_records(records: Sequence[PatientRecord], term: str) -> List[PatientRecord]:
    """Name match is case-insensitive, IC match is exact substring."""
    if not term:
        return list(records)
    needle = term.lower()
    return [
        r for r in records
        if (r.name is not None and needle in _text(r.name).lower())
        or (r.ic is not None and term in _text(r.ic))
    ]
