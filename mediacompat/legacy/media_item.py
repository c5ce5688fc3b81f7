# mediacompat/legacy/media_item.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from PIL import Image

from mediacompat.common.uri import MediaUri

FLAG_BROWSABLE = 1
FLAG_PLAYABLE = 2

# descriptions coming from loosely typed callers may still hold the raw string
UriLike = Union[MediaUri, str]


@dataclass(frozen=True)
class MediaDescription:
    """
    Display subset of an item in the legacy schema. Every field is optional;
    uri fields are parsed lazily by the converters.
    """
    media_id: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    description: Optional[str] = None
    icon_bitmap: Optional[Image.Image] = None
    icon_uri: Optional[UriLike] = None
    extras: Optional[Mapping[str, Any]] = None
    media_uri: Optional[UriLike] = None


@dataclass(frozen=True)
class LegacyMediaItem:
    description: MediaDescription
    flags: int = 0

    def __post_init__(self):
        if not isinstance(self.description, MediaDescription):
            raise ValueError("LegacyMediaItem.description is required")
        if isinstance(self.flags, bool) or not isinstance(self.flags, int):
            raise ValueError("LegacyMediaItem.flags must be an int")

    @property
    def media_id(self) -> Optional[str]:
        return self.description.media_id

    def is_browsable(self) -> bool:
        return bool(self.flags & FLAG_BROWSABLE)

    def is_playable(self) -> bool:
        return bool(self.flags & FLAG_PLAYABLE)
