"""Reachability flag set."""

from enum import Flag, auto


class ReachabilityFlags(Flag):
    """Connectivity state of a destination, as reported by the platform or a probe."""

    NONE = 0
    TRANSIENT_CONNECTION = auto()
    REACHABLE = auto()
    CONNECTION_REQUIRED = auto()
    CONNECTION_ON_TRAFFIC = auto()
    INTERVENTION_REQUIRED = auto()
    CONNECTION_ON_DEMAND = auto()
    IS_LOCAL_ADDRESS = auto()
    IS_DIRECT = auto()
    IS_WWAN = auto()

    @property
    def is_reachable(self) -> bool:
        return ReachabilityFlags.REACHABLE in self
