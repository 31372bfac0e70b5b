import logging
from dataclasses import dataclass, field
from typing import List, Optional

from core.types import PatientRecord

logger = logging.getLogger(__name__)


@dataclass
class DashboardState:
    """The one in-memory patient list, replaced wholesale on every load.

    Loads are tagged with a token from begin_request(); only the most recently
    issued token may change the state, so the last request started wins.
    """
    records: List[PatientRecord] = field(default_factory=list)
    error: Optional[str] = None
    source: Optional[str] = None  # "remote" / file name
    loaded: bool = False
    row_warnings: int = 0
    timeout: float = 15.0
    _latest: int = 0

    def begin_request(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest

    def apply_records(self, token: int, records: List[PatientRecord], source: str, row_warnings: int = 0) -> bool:
        if not self.is_current(token):
            logger.info("dropping stale response (token %d, latest %d)", token, self._latest)
            return False
        self.records = list(records)
        self.source = source
        self.row_warnings = row_warnings
        self.error = None
        self.loaded = True
        return True

    def apply_error(self, token: int, message: str) -> bool:
        if not self.is_current(token):
            logger.info("dropping stale error (token %d, latest %d)", token, self._latest)
            return False
        self.error = message
        self.loaded = True
        return True
