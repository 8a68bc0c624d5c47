"""Authenticated API client and its events."""

from .client import APIClient
from .events import EventBroadcaster, LoggedOutEvent

__all__ = ["APIClient", "EventBroadcaster", "LoggedOutEvent"]
