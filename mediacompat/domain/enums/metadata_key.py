# mediacompat/domain/enums/metadata_key.py
from __future__ import annotations

from enum import StrEnum
from typing import Dict, Optional

from mediacompat.domain.enums.metadata_value_type import MetadataValueType


class MetadataKey(StrEnum):
    """
    Key vocabulary shared by the new and the legacy metadata bags.
    Members are plain strings, so user/custom keys mix freely with them.
    """
    media_id = "mediacompat.metadata.MEDIA_ID"
    title = "mediacompat.metadata.TITLE"
    display_title = "mediacompat.metadata.DISPLAY_TITLE"
    display_subtitle = "mediacompat.metadata.DISPLAY_SUBTITLE"
    display_description = "mediacompat.metadata.DISPLAY_DESCRIPTION"
    display_icon = "mediacompat.metadata.DISPLAY_ICON"
    display_icon_uri = "mediacompat.metadata.DISPLAY_ICON_URI"
    media_uri = "mediacompat.metadata.MEDIA_URI"
    extras = "mediacompat.metadata.EXTRAS"

    artist = "mediacompat.metadata.ARTIST"
    album = "mediacompat.metadata.ALBUM"
    duration = "mediacompat.metadata.DURATION"
    user_rating = "mediacompat.metadata.USER_RATING"
    rating = "mediacompat.metadata.RATING"


_KEY_TYPES: Dict[str, MetadataValueType] = {
    MetadataKey.media_id: MetadataValueType.text,
    MetadataKey.title: MetadataValueType.text,
    MetadataKey.display_title: MetadataValueType.text,
    MetadataKey.display_subtitle: MetadataValueType.text,
    MetadataKey.display_description: MetadataValueType.text,
    MetadataKey.display_icon: MetadataValueType.bitmap,
    MetadataKey.display_icon_uri: MetadataValueType.text,
    MetadataKey.media_uri: MetadataValueType.text,
    MetadataKey.extras: MetadataValueType.extras,
    MetadataKey.artist: MetadataValueType.text,
    MetadataKey.album: MetadataValueType.text,
    MetadataKey.duration: MetadataValueType.long,
    MetadataKey.user_rating: MetadataValueType.rating,
    MetadataKey.rating: MetadataValueType.rating,
}


def expected_type(key: str) -> Optional[MetadataValueType]:
    """Declared value type of a vocabulary key, None for custom keys."""
    return _KEY_TYPES.get(key)


def check_key_type(key: str, value_type: MetadataValueType) -> None:
    expected = expected_type(key)
    if expected is not None and expected != value_type:
        raise ValueError(f"key {key!r} holds {expected.value} values, not {value_type.value}")
