from dataclasses import dataclass, field, fields
from typing import Protocol, List, Dict, Any, Optional

Cell = Any  # str | int | float | datetime | None


@dataclass
class PatientRecord:
    id: Cell = None
    district: Optional[str] = None
    clinic: Optional[str] = None
    name: Cell = None
    ic: Cell = None  # national ID
    age: Cell = None
    gender: Optional[str] = None  # "Male"/"Female"
    race: Optional[str] = None
    diagnosis_date: Optional[str] = None
    diabetes_type: Optional[str] = None
    mogc_reg_date: Optional[str] = None
    status: Optional[str] = None  # "AKTIF" / anything else is inactive

    height: Cell = None  # m
    weight: Cell = None  # kg
    bmi_status: Optional[str] = None
    bmi_date: Optional[str] = None
    bmi: Cell = None
    waist_status: Optional[str] = None
    waist_date: Optional[str] = None
    waist: Cell = None

    bp_status: Optional[str] = None
    bp_date: Optional[str] = None
    bp: Cell = None
    va_status: Optional[str] = None
    va_date: Optional[str] = None
    va: Cell = None
    fundus_status: Optional[str] = None
    fundus_date: Optional[str] = None
    fundus: Cell = None
    foot_status: Optional[str] = None
    foot_date: Optional[str] = None
    foot: Cell = None
    rbs_status: Optional[str] = None
    rbs_date: Optional[str] = None
    rbs: Cell = None
    hba1c_status: Optional[str] = None
    hba1c_date: Optional[str] = None
    hba1c: Cell = None
    labs_status: Optional[str] = None  # FSL/LFT/RP
    labs_date: Optional[str] = None
    labs: Cell = None
    urine_protein_status: Optional[str] = None
    urine_protein_date: Optional[str] = None
    urine_protein: Cell = None
    microalbumin_status: Optional[str] = None
    microalbumin_date: Optional[str] = None
    microalbumin: Cell = None
    education_status: Optional[str] = None
    education_date: Optional[str] = None
    counseling_status: Optional[str] = None

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, Cell]:
        return {name: getattr(self, name) for name in self.field_names()}


@dataclass
class DerivedFields:
    age: Optional[int] = None
    gender: Optional[str] = None
    bmi: Optional[float] = None


@dataclass
class RowWarning:
    row: int  # 1-based sheet row
    message: str


@dataclass
class DecodeResult:
    records: List[PatientRecord] = field(default_factory=list)
    warnings: List[RowWarning] = field(default_factory=list)


@dataclass
class SummaryStats:
    total: int = 0
    active: int = 0
    hba1c_controlled: int = 0
    bmi_normal: int = 0


class DashboardTab(Protocol):
    id: str
    title: str
    def render(self, state: Any) -> None: ...
