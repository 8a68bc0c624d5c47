"""
Persistence contract for the authorization record.

The client owns the in-memory authorization; a store only keeps the opaque
record between runs.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuthorizationStore(Protocol):
    """Save/load/delete of a single authorization record."""

    def load(self) -> Optional[Dict[str, Any]]:
        """Return the stored record, or None when nothing is stored."""
        ...

    def save(self, record: Dict[str, Any]) -> None:
        """Replace the stored record."""
        ...

    def delete(self) -> None:
        """Remove the stored record. Deleting an absent record is not an error."""
        ...
