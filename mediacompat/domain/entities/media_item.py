# mediacompat/domain/entities/media_item.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mediacompat.domain.entities.metadata import MediaMetadata
from mediacompat.domain.enums.item_flag import ItemFlag


@dataclass(frozen=True)
class MediaItem:
    """
    Browsable/playable entry of the new schema.

    Invariants that we keep here:
      - media_id is a non-empty string
      - flags is an int bitmask of ItemFlag values, stored bit for bit
        (unknown and sign bits included)
    The metadata is optional; when present it is not required to repeat the
    media id.
    """
    media_id: str = ""
    metadata: Optional[MediaMetadata] = None
    flags: int = 0

    def __post_init__(self):
        if not isinstance(self.media_id, str) or not self.media_id:
            raise ValueError("MediaItem.media_id is required")
        if self.metadata is not None and not isinstance(self.metadata, MediaMetadata):
            raise ValueError("MediaItem.metadata must be a MediaMetadata")
        if isinstance(self.flags, bool) or not isinstance(self.flags, int):
            raise ValueError("MediaItem.flags must be an int")

    @property
    def is_browsable(self) -> bool:
        return bool(self.flags & ItemFlag.browsable)

    @property
    def is_playable(self) -> bool:
        return bool(self.flags & ItemFlag.playable)

    class Builder:
        def __init__(self, flags: ItemFlag | int = 0) -> None:
            self._flags = flags
            self._media_id: Optional[str] = None
            self._metadata: Optional[MediaMetadata] = None

        def set_media_id(self, media_id: Optional[str]) -> "MediaItem.Builder":
            self._media_id = media_id
            return self

        def set_metadata(self, metadata: Optional[MediaMetadata]) -> "MediaItem.Builder":
            self._metadata = metadata
            return self

        def build(self) -> "MediaItem":
            media_id = self._media_id
            if not media_id and self._metadata is not None:
                # fall back to the id carried by the metadata
                media_id = self._metadata.media_id
            return MediaItem(media_id=media_id or "", metadata=self._metadata, flags=self._flags)
