"""Authorization persistence."""

from .encrypted_file import EncryptedFileAuthorizationStore
from .memory import MemoryAuthorizationStore
from .protocol import AuthorizationStore

__all__ = [
    "AuthorizationStore",
    "MemoryAuthorizationStore",
    "EncryptedFileAuthorizationStore",
]
