"""
Unit tests for reachability probing and the change monitor.
"""

from unittest.mock import MagicMock, patch

import pytest

from apiwire.reachability import ReachabilityFlags, ReachabilityMonitor, probe_flags


def fake_connection(peer):
    sock = MagicMock()
    sock.__enter__.return_value = sock
    sock.getpeername.return_value = (peer, 443)
    return sock


@pytest.mark.unit
class TestProbeFlags:
    @patch("apiwire.reachability.monitor.socket.create_connection")
    def test_public_peer(self, mock_connect, endpoint):
        mock_connect.return_value = fake_connection("93.184.216.34")

        assert probe_flags(endpoint, timeout=2) == ReachabilityFlags.REACHABLE
        mock_connect.assert_called_once_with(("api.example.com", 443), timeout=2)

    @patch("apiwire.reachability.monitor.socket.create_connection")
    def test_local_peer(self, mock_connect, endpoint):
        mock_connect.return_value = fake_connection("192.168.1.10")

        flags = probe_flags(endpoint)
        assert flags.is_reachable
        assert ReachabilityFlags.IS_LOCAL_ADDRESS in flags

    @patch("apiwire.reachability.monitor.socket.create_connection")
    def test_connection_failure(self, mock_connect, endpoint):
        mock_connect.side_effect = OSError("unreachable")

        flags = probe_flags(endpoint)
        assert flags == ReachabilityFlags.NONE
        assert not flags.is_reachable


@pytest.mark.unit
class TestReachabilityMonitor:
    def test_first_update_publishes(self, endpoint):
        monitor = ReachabilityMonitor(endpoint)
        received = []
        monitor.bulletins.subscribe(received.append)

        bulletin = monitor.update(ReachabilityFlags.NONE)

        assert received == [bulletin]
        assert bulletin.is_persistent
        assert monitor.is_reachable is False

    def test_publishes_only_on_change(self, endpoint):
        monitor = ReachabilityMonitor(endpoint)
        received = []
        monitor.bulletins.subscribe(received.append)

        monitor.update(ReachabilityFlags.REACHABLE)
        assert monitor.update(ReachabilityFlags.REACHABLE | ReachabilityFlags.IS_WWAN) is None
        monitor.update(ReachabilityFlags.NONE)
        assert monitor.update(ReachabilityFlags.CONNECTION_REQUIRED) is None
        monitor.update(ReachabilityFlags.REACHABLE)

        assert [b.duration for b in received] == [4, None, 4]

    @patch("apiwire.reachability.monitor.probe_flags")
    def test_check_probes(self, mock_probe, endpoint):
        mock_probe.return_value = ReachabilityFlags.REACHABLE
        monitor = ReachabilityMonitor(endpoint, port=8443, timeout=1)

        bulletin = monitor.check()

        mock_probe.assert_called_once_with(endpoint, 8443, 1)
        assert bulletin.title == "Your connection to Example is now working."
