"""
Endpoint: the logical network destination shared by the client and notifier.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union
from urllib.parse import quote, urlencode, urlunsplit

from .http import HTTPScheme


@dataclass(frozen=True)
class Endpoint:
    """Host, base path and display name of an API."""

    host: str
    base_path: Optional[str] = None
    name: str = ""

    def __post_init__(self):
        if not self.host:
            raise ValueError("Endpoint host must not be empty")
        if not self.name:
            object.__setattr__(self, "name", self.host)

    def url(
        self,
        scheme: Union[HTTPScheme, str] = HTTPScheme.HTTPS,
        path: Optional[Sequence[Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Build an absolute URL.

        Path components are stringified and percent-encoded individually, so a
        component containing ``/`` stays a single segment.
        """
        segments = [s for s in (self.base_path or "").split("/") if s]
        segments.extend(quote(str(component), safe="") for component in path or ())
        url_path = "/" + "/".join(segments) if segments else ""
        query_string = urlencode(query) if query else ""
        return urlunsplit((HTTPScheme(scheme.lower()).value, self.host, url_path, query_string, ""))
