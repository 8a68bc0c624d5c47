"""
Reachability probing and change notification.

``probe_flags`` derives a flag set by opening a TCP connection to the
endpoint. ``ReachabilityMonitor`` turns a stream of flag sets into bulletins,
publishing only when the reachable/unreachable classification flips.
"""

import ipaddress
import logging
import socket
import threading
from typing import Optional

from apiwire.api.events import EventBroadcaster
from apiwire.constants import DEFAULT_PROBE_PORT, DEFAULT_PROBE_TIMEOUT_SECONDS
from apiwire.models import Endpoint

from .bulletin import ReachabilityBulletin
from .flags import ReachabilityFlags

logger = logging.getLogger(__name__)


def probe_flags(
    endpoint: Endpoint,
    port: int = DEFAULT_PROBE_PORT,
    timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
) -> ReachabilityFlags:
    """Connect to ``endpoint.host:port`` and report the result as flags."""
    try:
        with socket.create_connection((endpoint.host, port), timeout=timeout) as sock:
            peer = sock.getpeername()[0]
    except OSError as e:
        logger.debug(f"Probe of {endpoint.host}:{port} failed: {e}")
        return ReachabilityFlags.NONE

    flags = ReachabilityFlags.REACHABLE
    try:
        address = ipaddress.ip_address(peer)
    except ValueError:
        return flags
    if address.is_loopback or address.is_private or address.is_link_local:
        flags |= ReachabilityFlags.IS_LOCAL_ADDRESS
    return flags


class ReachabilityMonitor:
    """Publishes a ReachabilityBulletin each time the endpoint's reachability flips.

    The first update always publishes.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        port: int = DEFAULT_PROBE_PORT,
        timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
    ):
        self.endpoint = endpoint
        self.port = port
        self.timeout = timeout
        self.bulletins: EventBroadcaster[ReachabilityBulletin] = EventBroadcaster("bulletins")
        self._reachable: Optional[bool] = None
        self._lock = threading.Lock()

    @property
    def is_reachable(self) -> Optional[bool]:
        """Last classification, or None before the first update."""
        return self._reachable

    def update(self, flags: ReachabilityFlags) -> Optional[ReachabilityBulletin]:
        """Record ``flags``; return and publish a bulletin if reachability changed."""
        with self._lock:
            reachable = flags.is_reachable
            if reachable == self._reachable:
                return None
            self._reachable = reachable

        bulletin = ReachabilityBulletin.for_flags(self.endpoint, flags)
        logger.info(bulletin.title)
        self.bulletins.emit(bulletin)
        return bulletin

    def check(self) -> Optional[ReachabilityBulletin]:
        """Probe the endpoint once and feed the result to ``update``."""
        return self.update(probe_flags(self.endpoint, self.port, self.timeout))
