"""
Unit tests for reachability bulletins.
"""

import pytest

from apiwire.constants import MAXIMUM_BULLETIN_PRIORITY
from apiwire.reachability import ReachabilityBulletin, ReachabilityFlags


@pytest.mark.unit
class TestReachabilityBulletin:
    def test_reachable_is_transient(self, endpoint):
        bulletin = ReachabilityBulletin.for_flags(endpoint, ReachabilityFlags.REACHABLE)

        assert bulletin.title == "Your connection to Example is now working."
        assert bulletin.duration == 4
        assert not bulletin.is_persistent
        assert bulletin.priority == MAXIMUM_BULLETIN_PRIORITY

    @pytest.mark.parametrize(
        "flags",
        [
            ReachabilityFlags.NONE,
            ReachabilityFlags.CONNECTION_REQUIRED,
            ReachabilityFlags.TRANSIENT_CONNECTION | ReachabilityFlags.IS_WWAN,
        ],
    )
    def test_unreachable_persists(self, endpoint, flags):
        bulletin = ReachabilityBulletin.for_flags(endpoint, flags)

        assert bulletin.title == "There is a problem with your connection to Example."
        assert bulletin.duration is None
        assert bulletin.is_persistent
        assert bulletin.flags == flags

    def test_reachable_with_other_flags(self, endpoint):
        flags = ReachabilityFlags.REACHABLE | ReachabilityFlags.IS_WWAN
        assert ReachabilityBulletin.for_flags(endpoint, flags).duration == 4

    def test_same_input_same_bulletin(self, endpoint):
        first = ReachabilityBulletin.for_flags(endpoint, ReachabilityFlags.REACHABLE)
        second = ReachabilityBulletin.for_flags(endpoint, ReachabilityFlags.REACHABLE)
        assert first == second
