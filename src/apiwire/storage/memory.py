"""In-process authorization store."""

import copy
import threading
from typing import Any, Dict, Optional


class MemoryAuthorizationStore:
    """Keeps the record in memory; nothing survives the process."""

    def __init__(self, record: Optional[Dict[str, Any]] = None):
        self._record = copy.deepcopy(record)
        self._lock = threading.Lock()

    def load(self) -> Optional[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._record)

    def save(self, record: Dict[str, Any]) -> None:
        with self._lock:
            self._record = copy.deepcopy(record)

    def delete(self) -> None:
        with self._lock:
            self._record = None
