import json
import logging
import re
from typing import Any, Dict, List, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from core.types import DerivedFields, PatientRecord

logger = logging.getLogger(__name__)

API_URL = "https://script.google.com/macros/s/AKfycbw6RixyCNFAJGCDChVJA0KU_iaqy3jNYVibpBWVemwi25fIOv_Wr6mM1rkFJdLyEoteeg/exec"
DEFAULT_TIMEOUT = 15.0

# Not collected by the form yet.
DEFAULT_DIABETES_TYPE = "Type 2"
DEFAULT_RACE = "Malay"


class SourceError(Exception):
    """Base class; ``banner`` is the text shown to the user."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    @property
    def banner(self) -> str:
        return self.detail


class TransportError(SourceError):
    @property
    def banner(self) -> str:
        return f"Failed to connect to backend: {self.detail}"


class ApiError(SourceError):
    @property
    def banner(self) -> str:
        return f"API Error: {self.detail}"


class FormatError(SourceError):
    @property
    def banner(self) -> str:
        return "Received invalid data format from server (expected array)."


class SubmissionError(SourceError):
    @property
    def banner(self) -> str:
        return f"Failed to add patient. {self.detail}"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def _snake(key: str) -> str:
    return re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key).lower()


FIELD_KEYS = {_camel(n): n for n in PatientRecord.field_names()}


def record_from_json(obj: Dict[str, Any]) -> PatientRecord:
    values = {}
    for key, value in obj.items():
        field = FIELD_KEYS.get(key) or FIELD_KEYS.get(_camel(_snake(key)))
        if field is not None and value != "":
            values[field] = value
    return PatientRecord(**values)


def record_to_json(record: PatientRecord) -> Dict[str, Any]:
    return {_camel(k): v for k, v in record.to_dict().items()}


def _request(req: Request, timeout: float) -> bytes:
    try:
        with urlopen(req, timeout=timeout) as resp:
            return resp.read()
    except HTTPError as e:
        raise TransportError(f"HTTP error! status: {e.code}") from e
    except URLError as e:
        raise TransportError(str(e.reason)) from e
    except (TimeoutError, OSError) as e:
        raise TransportError(str(e) or type(e).__name__) from e


def fetch_patients(url: str = API_URL, timeout: float = DEFAULT_TIMEOUT) -> List[PatientRecord]:
    req = Request(url, headers={"Accept": "application/json"})
    body = _request(req, timeout)
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        logger.error("source returned non-JSON body (%d bytes)", len(body))
        raise FormatError("response is not JSON") from e

    if isinstance(data, dict) and data.get("error"):
        logger.error("API Error: %s", data["error"])
        raise ApiError(str(data["error"]))
    if not isinstance(data, list):
        logger.error("API returned non-array: %r", data)
        raise FormatError(f"expected array, got {type(data).__name__}")

    records = [record_from_json(o) for o in data if isinstance(o, dict)]
    logger.info("fetched %d patient(s)", len(records))
    return records


def build_payload(name: str, ic: str, height: Any, weight: Any, derived: DerivedFields) -> Dict[str, Any]:
    def _s(v: Optional[Any]) -> str:
        return "" if v is None else str(v)

    return {
        "name": name,
        "ic": ic,
        "age": _s(derived.age),
        "gender": _s(derived.gender),
        "height": height,
        "weight": weight,
        "bmi": _s(derived.bmi),
        "diabetesType": DEFAULT_DIABETES_TYPE,
        "race": DEFAULT_RACE,
    }


def submit_patient(payload: Dict[str, Any], url: str = API_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
    req = Request(
        url,
        data=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        _request(req, timeout)
    except TransportError as e:
        logger.error("Error adding patient: %s", e.detail)
        raise SubmissionError(e.detail) from e
    logger.info("submitted patient %r", payload.get("name"))
