"""Security helpers."""

from .credentials import CredentialEncryption

__all__ = ["CredentialEncryption"]
