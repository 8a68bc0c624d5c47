"""
Connectivity bulletins.

A bulletin is a displayable message with a priority and an optional
auto-dismiss duration; ``None`` means it stays until replaced.
"""

from dataclasses import dataclass
from typing import Optional

from apiwire.constants import MAXIMUM_BULLETIN_PRIORITY, REACHABLE_BULLETIN_DURATION_SECONDS
from apiwire.models import Endpoint

from .flags import ReachabilityFlags

REACHABLE_TITLE = "Your connection to {endpoint_name} is now working."
UNREACHABLE_TITLE = "There is a problem with your connection to {endpoint_name}."


@dataclass(frozen=True)
class MessageBulletin:
    title: str
    priority: int = 0
    duration: Optional[float] = None

    @property
    def is_persistent(self) -> bool:
        return self.duration is None


@dataclass(frozen=True)
class ReachabilityBulletin(MessageBulletin):
    flags: ReachabilityFlags = ReachabilityFlags.NONE

    @classmethod
    def for_flags(cls, endpoint: Endpoint, flags: ReachabilityFlags) -> "ReachabilityBulletin":
        """Map ``flags`` to a bulletin for ``endpoint``.

        Reachable: a success message dismissed after a few seconds.
        Otherwise: a warning that persists.
        """
        if flags.is_reachable:
            title = REACHABLE_TITLE.format(endpoint_name=endpoint.name)
            duration: Optional[float] = REACHABLE_BULLETIN_DURATION_SECONDS
        else:
            title = UNREACHABLE_TITLE.format(endpoint_name=endpoint.name)
            duration = None

        return cls(
            title=title,
            priority=MAXIMUM_BULLETIN_PRIORITY,
            duration=duration,
            flags=flags,
        )
