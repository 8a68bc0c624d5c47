"""
Unit tests for the event broadcaster.
"""

from unittest.mock import Mock

import pytest

from apiwire.api.events import EventBroadcaster


@pytest.mark.unit
class TestEventBroadcaster:
    def test_emit_reaches_all_subscribers_in_order(self):
        broadcaster = EventBroadcaster()
        calls = []
        broadcaster.subscribe(lambda e: calls.append(("first", e)))
        broadcaster.subscribe(lambda e: calls.append(("second", e)))

        broadcaster.emit("ping")

        assert calls == [("first", "ping"), ("second", "ping")]

    def test_failing_subscriber_does_not_block_others(self, caplog):
        broadcaster = EventBroadcaster("test")
        after = Mock()
        broadcaster.subscribe(Mock(side_effect=RuntimeError("boom")))
        broadcaster.subscribe(after)

        broadcaster.emit("ping")

        after.assert_called_once_with("ping")
        assert "test subscriber" in caplog.text

    def test_unsubscribe(self):
        broadcaster = EventBroadcaster()
        listener = Mock()
        broadcaster.subscribe(listener)
        assert len(broadcaster) == 1

        broadcaster.unsubscribe(listener)
        broadcaster.unsubscribe(listener)
        broadcaster.emit("ping")

        listener.assert_not_called()
        assert len(broadcaster) == 0
