"""
Encryption of credentials at rest.

Authorization records are encrypted with Fernet symmetric encryption before
they touch the disk. The key lives in its own file, readable only by the owner.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

from apiwire.exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_KEY_FILE = Path.home() / ".apiwire" / "encryption.key"


class CredentialEncryption:
    """Encrypt and decrypt credential payloads using Fernet."""

    def __init__(self, key_file: Optional[Path] = None):
        """Initialize credential encryption.

        Args:
            key_file: Path to encryption key file (default: ~/.apiwire/encryption.key)
        """
        self.key_file = Path(key_file) if key_file else DEFAULT_KEY_FILE
        self._fernet: Optional[Fernet] = None

    def _ensure_key_exists(self) -> bytes:
        """Ensure encryption key exists, creating it if necessary.

        Raises:
            StorageError: If key file has insecure permissions
        """
        self.key_file.parent.mkdir(parents=True, exist_ok=True)

        if self.key_file.exists():
            self._validate_key_permissions()
            return self.key_file.read_bytes()

        key = Fernet.generate_key()

        # 0o600: owner read/write only
        self.key_file.touch(mode=0o600)
        self.key_file.write_bytes(key)

        logger.info(
            f"Generated new encryption key at {self.key_file}",
            extra={"key_file": str(self.key_file)},
        )
        return key

    def _validate_key_permissions(self) -> None:
        """Validate that key file has secure permissions.

        Raises:
            StorageError: If key file has insecure permissions
        """
        if os.name == "posix":
            stat_info = self.key_file.stat()
            if stat_info.st_mode & 0o077:
                raise StorageError(
                    "read key",
                    self.key_file,
                    f"insecure permissions {oct(stat_info.st_mode & 0o777)}, "
                    f"fix with: chmod 600 {self.key_file}",
                )

    def _get_fernet(self) -> Fernet:
        if self._fernet is None:
            self._fernet = Fernet(self._ensure_key_exists())
        return self._fernet

    def encrypt(self, plaintext: bytes) -> bytes:
        return self._get_fernet().encrypt(plaintext)

    def decrypt(self, token: bytes) -> bytes:
        """Decrypt a payload produced by ``encrypt``.

        Raises:
            ValueError: If decryption fails (invalid key or corrupted data)
        """
        try:
            return self._get_fernet().decrypt(token)
        except InvalidToken as e:
            raise ValueError(
                "Failed to decrypt credential. The encryption key may have changed "
                "or the credential data is corrupted"
            ) from e
