# mediacompat/services/mappers/metadata.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from PIL import Image

from mediacompat.common.logging import get_logger
from mediacompat.common.settings import ConversionConfig, get_settings
from mediacompat.common.uri import MediaUri
from mediacompat.domain.entities.metadata import MediaMetadata
from mediacompat.domain.enums.metadata_key import MetadataKey, expected_type
from mediacompat.domain.enums.metadata_value_type import MetadataValueType
from mediacompat.legacy.media_item import MediaDescription, UriLike
from mediacompat.legacy.metadata import LegacyMetadata, with_extension_entries
from mediacompat.legacy.rating import LegacyRating
from mediacompat.services.mappers.rating import to_legacy_rating, to_rating

logger = get_logger("mediacompat.mappers.metadata")


def _uri_text(value: Optional[UriLike]) -> Optional[str]:
    if isinstance(value, MediaUri):
        return str(value)
    if not value:
        return None
    # raw strings are parsed so that malformed values fail here, not downstream
    return str(MediaUri.parse(value))


def _parse_uri(text: Optional[str]) -> Optional[MediaUri]:
    if not text:
        return None
    return MediaUri.parse(text)


def _log_dropped(direction: str, keys: List[str], cfg: ConversionConfig) -> None:
    if keys and cfg.log_dropped_keys:
        logger.debug("%s: dropped %d unsupported value(s): %s", direction, len(keys), ", ".join(keys))


# ---------------------------------------------------------------------------
# Description <-> metadata
# ---------------------------------------------------------------------------
def legacy_description_to_metadata(desc: Optional[MediaDescription]) -> Optional[MediaMetadata]:
    """
    Build a MediaMetadata from a legacy description.

    media_id is always written (even when empty); every other field only when
    the description carries it. The legacy title lands under display_title.
    Raises InvalidUriFormat if a uri field holds a malformed string.
    """
    if desc is None:
        return None

    builder = MediaMetadata.Builder()
    builder.put_text(MetadataKey.media_id, desc.media_id if desc.media_id is not None else "")

    if desc.title is not None:
        builder.put_text(MetadataKey.display_title, desc.title)
    if desc.description is not None:
        builder.put_text(MetadataKey.display_description, desc.description)
    if desc.subtitle is not None:
        builder.put_text(MetadataKey.display_subtitle, desc.subtitle)
    if desc.icon_bitmap is not None:
        builder.put_bitmap(MetadataKey.display_icon, desc.icon_bitmap)
    icon_uri = _uri_text(desc.icon_uri)
    if icon_uri is not None:
        builder.put_text(MetadataKey.display_icon_uri, icon_uri)
    if desc.extras is not None:
        builder.set_extras(desc.extras)
    media_uri = _uri_text(desc.media_uri)
    if media_uri is not None:
        builder.put_text(MetadataKey.media_uri, media_uri)

    return builder.build()


def metadata_to_legacy_description(metadata: MediaMetadata, media_id: Optional[str] = None) -> MediaDescription:
    """
    Project a MediaMetadata onto the legacy description fields.

    The semantic title wins over display_title here; the reverse conversion
    only knows display_title, so that distinction does not survive a round
    trip. Raises InvalidUriFormat for malformed icon or media uris.
    """
    title = metadata.get_text(MetadataKey.title)
    if title is None:
        title = metadata.get_text(MetadataKey.display_title)

    return MediaDescription(
        media_id=media_id if media_id is not None else metadata.media_id,
        title=title,
        subtitle=metadata.get_text(MetadataKey.display_subtitle),
        description=metadata.get_text(MetadataKey.display_description),
        icon_bitmap=metadata.get_bitmap(MetadataKey.display_icon),
        icon_uri=_parse_uri(metadata.get_text(MetadataKey.display_icon_uri)),
        extras=metadata.get_extras(),
        media_uri=_parse_uri(metadata.get_text(MetadataKey.media_uri)),
    )


# ---------------------------------------------------------------------------
# Metadata bag <-> legacy metadata bag
# ---------------------------------------------------------------------------
def metadata_to_legacy_metadata(metadata: Optional[MediaMetadata]) -> Optional[LegacyMetadata]:
    """
    Convert every entry of `metadata` into a LegacyMetadata.

    Text, long, bitmap and rating values go through the typed builder. Float
    and extras values have no legacy type: their keys are collected during
    the first pass and, once the typed bag is built, merged back as raw
    storage entries (floats under their own key, the extras blob under the
    extras key). Anything else is dropped.
    """
    if metadata is None:
        return None
    cfg = get_settings().conversion

    builder = LegacyMetadata.Builder()
    skipped_keys: List[str] = []
    dropped: List[str] = []
    for key, entry in metadata.entries.items():
        if entry.type == MetadataValueType.text:
            builder.put_text(key, entry.value)
        elif entry.type == MetadataValueType.rating:
            legacy_rating = to_legacy_rating(entry.value)
            if legacy_rating is None:
                dropped.append(key)
            else:
                builder.put_rating(key, legacy_rating)
        elif entry.type == MetadataValueType.bitmap:
            builder.put_bitmap(key, entry.value)
        elif entry.type == MetadataValueType.long:
            builder.put_long(key, entry.value)
        else:
            # no float or extras type in the legacy bag
            skipped_keys.append(key)

    result = builder.build()

    extension: Dict[str, Any] = {}
    for key in skipped_keys:
        entry = metadata.entries[key]
        if entry.type == MetadataValueType.float and cfg.keep_float_values:
            extension[key] = entry.value
        elif key == MetadataKey.extras and entry.type == MetadataValueType.extras and cfg.keep_extras:
            extension[key] = entry.value
        else:
            dropped.append(key)

    _log_dropped("metadata -> legacy", dropped, cfg)
    if not extension:
        return result
    return with_extension_entries(result, extension)


def _fits(key: str, value_type: MetadataValueType) -> bool:
    expected = expected_type(key)
    return expected is None or expected == value_type


def legacy_metadata_to_metadata(legacy: Optional[LegacyMetadata]) -> Optional[MediaMetadata]:
    """
    Convert a LegacyMetadata, including raw compatibility entries, back into
    a MediaMetadata. Values whose type does not fit the key are dropped.
    """
    if legacy is None:
        return None
    cfg = get_settings().conversion

    builder = MediaMetadata.Builder()
    dropped: List[str] = []
    for key, value in legacy.raw.items():
        if isinstance(value, str) and _fits(key, MetadataValueType.text):
            builder.put_text(key, value)
        elif isinstance(value, int) and not isinstance(value, bool) and _fits(key, MetadataValueType.long):
            builder.put_long(key, value)
        elif isinstance(value, float) and _fits(key, MetadataValueType.float):
            builder.put_float(key, value)
        elif isinstance(value, Image.Image) and _fits(key, MetadataValueType.bitmap):
            builder.put_bitmap(key, value)
        elif isinstance(value, LegacyRating) and _fits(key, MetadataValueType.rating):
            rating = to_rating(value)
            if rating is None:
                dropped.append(key)
            else:
                builder.put_rating(key, rating)
        elif key == MetadataKey.extras and isinstance(value, Mapping):
            builder.set_extras(value)
        else:
            dropped.append(key)

    _log_dropped("legacy -> metadata", dropped, cfg)
    return builder.build()
