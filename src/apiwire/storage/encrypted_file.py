"""
Encrypted file authorization store.

The record is serialized to JSON, encrypted with Fernet and written to a file
created with owner-only permissions.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from apiwire.core.security import CredentialEncryption
from apiwire.exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_CREDENTIALS_FILE = Path.home() / ".apiwire" / "authorization.enc"


class EncryptedFileAuthorizationStore:
    """Persists the authorization record as an encrypted file."""

    def __init__(
        self,
        path: Optional[Path] = None,
        encryptor: Optional[CredentialEncryption] = None,
    ):
        self.path = Path(path).expanduser() if path else DEFAULT_CREDENTIALS_FILE
        self.encryptor = encryptor or CredentialEncryption(self.path.parent / "encryption.key")

    def load(self) -> Optional[Dict[str, Any]]:
        """Read the record.

        A missing file means no record. A file that cannot be decrypted or
        parsed, or a key file with loose permissions, is treated the same way
        and logged, so a damaged store never blocks the client from starting.
        Saving still fails until the key file is fixed.
        """
        if not self.path.exists():
            return None

        try:
            payload = self.path.read_bytes()
        except OSError as e:
            raise StorageError("load", self.path, str(e)) from e

        try:
            record = json.loads(self.encryptor.decrypt(payload))
        except StorageError as e:
            logger.warning(f"Ignoring authorization record at {self.path}: {e.message}")
            return None
        except (ValueError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable authorization record at {self.path}: {e}")
            return None

        if not isinstance(record, dict):
            logger.warning(f"Ignoring malformed authorization record at {self.path}")
            return None
        return record

    def save(self, record: Dict[str, Any]) -> None:
        payload = self.encryptor.encrypt(json.dumps(record).encode("utf-8"))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "wb") as f:
                # the mode argument only applies when the file is created
                if os.name == "posix":
                    os.fchmod(f.fileno(), 0o600)
                f.write(payload)
        except OSError as e:
            raise StorageError("save", self.path, str(e)) from e
        logger.debug(f"Saved authorization record to {self.path}")

    def delete(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageError("delete", self.path, str(e)) from e
        logger.debug(f"Deleted authorization record at {self.path}")
