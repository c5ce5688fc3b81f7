# mediacompat/services/mappers/media_item.py
from __future__ import annotations

from typing import Iterable, List, Optional

from mediacompat.domain.entities.media_item import MediaItem
from mediacompat.legacy.media_item import LegacyMediaItem, MediaDescription
from mediacompat.services.mappers.metadata import (
    legacy_description_to_metadata,
    metadata_to_legacy_description,
)


def to_legacy_item(item: Optional[MediaItem]) -> Optional[LegacyMediaItem]:
    if item is None:
        return None
    if item.metadata is None:
        description = MediaDescription(media_id=item.media_id)
    else:
        description = metadata_to_legacy_description(item.metadata, item.media_id)
    return LegacyMediaItem(description=description, flags=int(item.flags))


def to_item(legacy_item: Optional[LegacyMediaItem]) -> Optional[MediaItem]:
    if legacy_item is None or not legacy_item.media_id:
        return None
    metadata = legacy_description_to_metadata(legacy_item.description)
    return (
        MediaItem.Builder(legacy_item.flags)
        .set_media_id(legacy_item.media_id)
        .set_metadata(metadata)
        .build()
    )


def to_legacy_items(items: Optional[Iterable[MediaItem]]) -> Optional[List[LegacyMediaItem]]:
    """Convert items in order; None entries are skipped."""
    if items is None:
        return None
    converted = (to_legacy_item(i) for i in items)
    return [c for c in converted if c is not None]


def to_items(legacy_items: Optional[Iterable[LegacyMediaItem]]) -> Optional[List[MediaItem]]:
    """Convert legacy items in order; items without a media id are skipped."""
    if legacy_items is None:
        return None
    converted = (to_item(i) for i in legacy_items)
    return [c for c in converted if c is not None]
