# mediacompat/legacy/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from PIL import Image

from mediacompat.domain.enums.metadata_key import check_key_type
from mediacompat.domain.enums.metadata_value_type import MetadataValueType
from mediacompat.legacy.rating import LegacyRating


@dataclass(frozen=True)
class LegacyMetadata:
    """
    Legacy metadata bag. Its typed surface only knows text, long, bitmap and
    rating values; `raw` is the underlying storage, which may additionally
    hold compatibility entries merged by with_extension_entries().
    """
    raw: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if not isinstance(self.raw, MappingProxyType):
            object.__setattr__(self, "raw", MappingProxyType(dict(self.raw)))

    def keys(self) -> List[str]:
        return list(self.raw.keys())

    def contains_key(self, key: str) -> bool:
        return key in self.raw

    def __contains__(self, key: object) -> bool:
        return key in self.raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def get_raw(self, key: str) -> Any:
        return self.raw.get(key)

    def get_text(self, key: str) -> Optional[str]:
        v = self.raw.get(key)
        return v if isinstance(v, str) else None

    def get_long(self, key: str) -> int:
        v = self.raw.get(key)
        if isinstance(v, bool) or not isinstance(v, int):
            return 0
        return v

    def get_bitmap(self, key: str) -> Optional[Image.Image]:
        v = self.raw.get(key)
        return v if isinstance(v, Image.Image) else None

    def get_rating(self, key: str) -> Optional[LegacyRating]:
        v = self.raw.get(key)
        return v if isinstance(v, LegacyRating) else None

    class Builder:
        def __init__(self, source: Optional["LegacyMetadata"] = None) -> None:
            self._raw: Dict[str, Any] = dict(source.raw) if source is not None else {}

        def _put(self, key: str, value_type: MetadataValueType, value: Any) -> "LegacyMetadata.Builder":
            if not isinstance(key, str) or not key:
                raise ValueError("metadata key must be a non-empty string")
            check_key_type(key, value_type)
            if value is None:
                self._raw.pop(key, None)
            else:
                self._raw[key] = value
            return self

        def put_text(self, key: str, value: Optional[str]) -> "LegacyMetadata.Builder":
            if value is not None and not isinstance(value, str):
                value = str(value)
            return self._put(key, MetadataValueType.text, value)

        def put_long(self, key: str, value: Optional[int]) -> "LegacyMetadata.Builder":
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"long value for {key!r} must be an int")
            return self._put(key, MetadataValueType.long, value)

        def put_bitmap(self, key: str, value: Optional[Image.Image]) -> "LegacyMetadata.Builder":
            if value is not None and not isinstance(value, Image.Image):
                raise ValueError(f"bitmap value for {key!r} must be a PIL image")
            return self._put(key, MetadataValueType.bitmap, value)

        def put_rating(self, key: str, value: Optional[LegacyRating]) -> "LegacyMetadata.Builder":
            if value is not None and not isinstance(value, LegacyRating):
                raise ValueError(f"rating value for {key!r} must be a LegacyRating")
            return self._put(key, MetadataValueType.rating, value)

        def build(self) -> "LegacyMetadata":
            return LegacyMetadata(raw=MappingProxyType(dict(self._raw)))


def with_extension_entries(metadata: LegacyMetadata, entries: Mapping[str, Any]) -> LegacyMetadata:
    """
    Return a copy of `metadata` whose storage also carries `entries`.

    This is the second phase of building a legacy bag from values it has no
    typed setter for. Only floats and extras mappings are accepted; existing
    keys are overwritten in place, new keys are appended in the given order.
    """
    raw = dict(metadata.raw)
    for key, value in entries.items():
        if isinstance(value, bool) or not isinstance(value, (float, Mapping)):
            raise ValueError(f"extension entry {key!r} must be a float or a mapping")
        raw[key] = MappingProxyType(dict(value)) if isinstance(value, Mapping) else value
    return LegacyMetadata(raw=MappingProxyType(raw))
