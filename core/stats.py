import re
from typing import Any, Dict, Optional, Sequence

from core.types import PatientRecord, SummaryStats

HBA1C_CONTROLLED_BELOW = 6.5
BMI_NORMAL_BELOW = 25.0
ACTIVE_STATUSES = {"AKTIF", "ACTIVE"}
DIABETES_TYPES = ("Type 1", "Type 2")

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def leading_number(value: Any) -> Optional[float]:
    """Numeric prefix of a cell, e.g. "6.2%" -> 6.2; None when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if value != value else float(value)
    m = _LEADING_NUMBER.match(str(value))
    return float(m.group(1)) if m else None


def _below(value: Any, limit: float) -> bool:
    x = leading_number(value)
    return x is not None and x < limit


def is_active(record: PatientRecord) -> bool:
    return str(record.status or "").strip().upper() in ACTIVE_STATUSES


def compute_stats(records: Sequence[PatientRecord]) -> SummaryStats:
    return SummaryStats(
        total=len(records),
        active=sum(1 for r in records if is_active(r)),
        hba1c_controlled=sum(1 for r in records if _below(r.hba1c, HBA1C_CONTROLLED_BELOW)),
        bmi_normal=sum(1 for r in records if _below(r.bmi, BMI_NORMAL_BELOW)),
    )


def percent_of_total(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(count / total * 100.0, 1)


def diabetes_type_breakdown(records: Sequence[PatientRecord]) -> Dict[str, int]:
    return {t: sum(1 for r in records if r.diabetes_type == t) for t in DIABETES_TYPES}
