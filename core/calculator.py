import math
from datetime import date
from typing import Any, Optional

from core.types import DerivedFields

IC_MIN_LENGTH = 12
# two-digit birth years above this are 19xx, the rest 20xx
CENTURY_THRESHOLD = 25

# --- helpers ---

def _float(x: Any) -> Optional[float]:
    try:
        if x is None or (isinstance(x, str) and not x.strip()):
            return None
        return float(x)
    except (TypeError, ValueError, OverflowError):
        return None


def _ic(ic: Any) -> str:
    if ic is None:
        return ""
    if isinstance(ic, float) and ic.is_integer():
        ic = int(ic)  # numeric IC cells
    return str(ic)

# --- age / gender from IC ---

def birth_year(ic: Any) -> Optional[int]:
    s = _ic(ic)
    if len(s) < IC_MIN_LENGTH or not s[:2].isdecimal():
        return None
    header = int(s[:2])
    return 1900 + header if header > CENTURY_THRESHOLD else 2000 + header


def age_from_ic(ic: Any, current_year: Optional[int] = None) -> Optional[int]:
    year = birth_year(ic)
    if year is None:
        return None
    return (current_year or date.today().year) - year


def gender_from_ic(ic: Any) -> Optional[str]:
    s = _ic(ic)
    if len(s) < IC_MIN_LENGTH or not s[-1].isdecimal():
        return None
    return "Female" if int(s[-1]) % 2 == 0 else "Male"

# --- BMI ---

def bmi(height: Any, weight: Any) -> Optional[float]:
    h, w = _float(height), _float(weight)
    if h is None or w is None or not (math.isfinite(h) and math.isfinite(w)) or h <= 0:
        return None
    h2 = h * h
    if h2 <= 0:
        return None  # underflow
    value = w / h2
    return round(value, 1) if math.isfinite(value) else None


def derive_fields(ic: Any, height: Any, weight: Any, current_year: Optional[int] = None) -> DerivedFields:
    return DerivedFields(
        age=age_from_ic(ic, current_year),
        gender=gender_from_ic(ic),
        bmi=bmi(height, weight),
    )
