"""
Observer lists for client and monitor events.

Each broadcaster owns its subscribers; there is no process-wide registry.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")


@dataclass(frozen=True)
class LoggedOutEvent:
    """Emitted after a client dropped its authorization."""

    client: Any
    reason: str = "logout"


class EventBroadcaster(Generic[E]):
    """Synchronous fan-out of events to subscribed callables."""

    def __init__(self, name: str = "event"):
        self.name = name
        self._subscribers: List[Callable[[E], None]] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Callable[[E], None]) -> Callable[[], None]:
        """Register ``callback``; returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Callable[[E], None]) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def emit(self, event: E) -> None:
        """Deliver ``event`` to every subscriber on the calling thread.

        A failing subscriber is logged and does not stop delivery to the rest.
        """
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                logger.exception(f"{self.name} subscriber {callback!r} failed")

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)
