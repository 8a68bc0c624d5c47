"""Connectivity notifier."""

from .bulletin import MessageBulletin, ReachabilityBulletin
from .flags import ReachabilityFlags
from .monitor import ReachabilityMonitor, probe_flags

__all__ = [
    "MessageBulletin",
    "ReachabilityBulletin",
    "ReachabilityFlags",
    "ReachabilityMonitor",
    "probe_flags",
]
