"""
Versioned bearer credential.

Subclass ``Authorization`` to carry extra fields; bump ``CURRENT_VERSION``
whenever the stored shape changes so that records saved by an older release
are discarded on load instead of being misread.
"""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

VERSION_KEY = "savedVersion"


class Authorization(BaseModel):
    """Bearer token plus the schema version it was saved with."""

    CURRENT_VERSION: ClassVar[int] = 1

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    authorization_token: str = Field(alias="authorizationToken", min_length=1)
    saved_version: int = Field(alias=VERSION_KEY)

    @model_validator(mode="before")
    @classmethod
    def _default_version(cls, data: Any) -> Any:
        # New credentials are stamped with the version of the class creating them
        if isinstance(data, dict) and VERSION_KEY not in data and "saved_version" not in data:
            data = {**data, VERSION_KEY: cls.CURRENT_VERSION}
        return data

    @property
    def is_current(self) -> bool:
        return self.saved_version == type(self).CURRENT_VERSION

    def with_token(self, token: str) -> "Authorization":
        """Return a copy carrying a replacement token."""
        return self.model_copy(update={"authorization_token": token})

    def to_record(self) -> Dict[str, Any]:
        """Serialize for an AuthorizationStore."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls, record: Optional[Dict[str, Any]]) -> Optional["Authorization"]:
        """Parse a stored record.

        Returns None when the record is absent, unversioned, invalid, or was
        saved under a different version.
        """
        if not record or VERSION_KEY not in record:
            return None
        try:
            authorization = cls.model_validate(record)
        except ValidationError:
            return None
        if not authorization.is_current:
            return None
        return authorization
