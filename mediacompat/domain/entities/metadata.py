# mediacompat/domain/entities/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from PIL import Image

from mediacompat.domain.entities.rating import Rating
from mediacompat.domain.enums.metadata_key import MetadataKey, check_key_type
from mediacompat.domain.enums.metadata_value_type import MetadataValueType


@dataclass(frozen=True)
class MetadataValue:
    """One typed entry of a MediaMetadata bag."""
    type: MetadataValueType
    value: Any


@dataclass(frozen=True)
class MediaMetadata:
    """
    Ordered, immutable key -> MetadataValue bag of the new schema.

    Entries keep insertion order, which is also the order conversions walk
    them in. Build instances with MediaMetadata.Builder; the typed getters
    return None (or 0 / 0.0 for numbers) when the key is missing or holds a
    different type.
    """
    entries: Mapping[str, MetadataValue] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if not isinstance(self.entries, MappingProxyType):
            object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        for key, entry in self.entries.items():
            if not isinstance(entry, MetadataValue):
                raise ValueError(f"entry {key!r} is not a MetadataValue")
            check_key_type(key, entry.type)

    # ---- Bag access ----------------------------------------------------------

    def keys(self) -> List[str]:
        return list(self.entries.keys())

    def contains_key(self, key: str) -> bool:
        return key in self.entries

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get_value(self, key: str) -> Optional[MetadataValue]:
        return self.entries.get(key)

    def _typed(self, key: str, value_type: MetadataValueType) -> Any:
        entry = self.entries.get(key)
        if entry is None or entry.type != value_type:
            return None
        return entry.value

    # ---- Typed getters -------------------------------------------------------

    def get_text(self, key: str) -> Optional[str]:
        return self._typed(key, MetadataValueType.text)

    def get_long(self, key: str) -> int:
        v = self._typed(key, MetadataValueType.long)
        return 0 if v is None else v

    def get_float(self, key: str) -> float:
        v = self._typed(key, MetadataValueType.float)
        return 0.0 if v is None else v

    def get_bitmap(self, key: str) -> Optional[Image.Image]:
        return self._typed(key, MetadataValueType.bitmap)

    def get_rating(self, key: str) -> Optional[Rating]:
        return self._typed(key, MetadataValueType.rating)

    def get_extras(self) -> Optional[Mapping[str, Any]]:
        return self._typed(MetadataKey.extras, MetadataValueType.extras)

    @property
    def media_id(self) -> Optional[str]:
        return self.get_text(MetadataKey.media_id)

    # ---- Builder -------------------------------------------------------------

    class Builder:
        """
        Mutable builder for MediaMetadata. Passing None as a value removes
        the key. Vocabulary keys only accept their declared value type.
        """

        def __init__(self, source: Optional["MediaMetadata"] = None) -> None:
            self._entries: Dict[str, MetadataValue] = dict(source.entries) if source is not None else {}

        def _put(self, key: str, value_type: MetadataValueType, value: Any) -> "MediaMetadata.Builder":
            if not isinstance(key, str) or not key:
                raise ValueError("metadata key must be a non-empty string")
            check_key_type(key, value_type)
            if value is None:
                self._entries.pop(key, None)
            else:
                self._entries[key] = MetadataValue(value_type, value)
            return self

        def put_text(self, key: str, value: Optional[str]) -> "MediaMetadata.Builder":
            if value is not None and not isinstance(value, str):
                value = str(value)
            return self._put(key, MetadataValueType.text, value)

        def put_long(self, key: str, value: Optional[int]) -> "MediaMetadata.Builder":
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"long value for {key!r} must be an int")
            return self._put(key, MetadataValueType.long, value)

        def put_float(self, key: str, value: Optional[float]) -> "MediaMetadata.Builder":
            if value is not None:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"float value for {key!r} must be a number")
                value = float(value)
            return self._put(key, MetadataValueType.float, value)

        def put_bitmap(self, key: str, value: Optional[Image.Image]) -> "MediaMetadata.Builder":
            if value is not None and not isinstance(value, Image.Image):
                raise ValueError(f"bitmap value for {key!r} must be a PIL image")
            return self._put(key, MetadataValueType.bitmap, value)

        def put_rating(self, key: str, value: Optional[Rating]) -> "MediaMetadata.Builder":
            if value is not None and not isinstance(value, Rating):
                raise ValueError(f"rating value for {key!r} must be a Rating")
            return self._put(key, MetadataValueType.rating, value)

        def set_extras(self, extras: Optional[Mapping[str, Any]]) -> "MediaMetadata.Builder":
            if extras is not None:
                if not isinstance(extras, Mapping):
                    raise ValueError("extras must be a mapping")
                extras = MappingProxyType(dict(extras))
            return self._put(MetadataKey.extras, MetadataValueType.extras, extras)

        def build(self) -> "MediaMetadata":
            return MediaMetadata(entries=MappingProxyType(dict(self._entries)))
