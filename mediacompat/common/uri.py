# mediacompat/common/uri.py
from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from mediacompat.domain.errors import InvalidUriFormat

# control characters and whitespace are never valid inside a uri
_FORBIDDEN = re.compile(r"[\x00-\x20\x7f]")


@dataclass(frozen=True)
class MediaUri:
    """
    Parsed uri value used for icon and media locations.

    Only parse() should be used to build one from text; str() returns the
    canonical form, and parsing that form again yields an equal value.
    """
    scheme: str = ""
    authority: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, text: str) -> "MediaUri":
        if not isinstance(text, str):
            raise InvalidUriFormat(text, "uri must be a string")
        if not text:
            raise InvalidUriFormat(text, "empty uri")
        if _FORBIDDEN.search(text):
            raise InvalidUriFormat(text, "control character or whitespace in uri")
        try:
            parts = urlsplit(text)
            _ = parts.port  # raises ValueError for a non-numeric or out-of-range port
        except ValueError as exc:
            raise InvalidUriFormat(text, str(exc)) from exc
        return cls(
            scheme=parts.scheme,
            authority=parts.netloc,
            path=parts.path,
            query=parts.query,
            fragment=parts.fragment,
        )

    @property
    def is_absolute(self) -> bool:
        return bool(self.scheme)

    def __str__(self) -> str:
        if not self.authority and self.path.startswith("//"):
            # urlunsplit would fold the path into the authority here
            text = f"{self.scheme}:" if self.scheme else ""
            text += "//" + self.path
            if self.query:
                text += "?" + self.query
            if self.fragment:
                text += "#" + self.fragment
            return text
        return urlunsplit((self.scheme, self.authority, self.path, self.query, self.fragment))
