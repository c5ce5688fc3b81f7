from __future__ import annotations
from enum import StrEnum

class MetadataValueType(StrEnum):
    text = "text"
    long = "long"
    float = "float"
    bitmap = "bitmap"
    rating = "rating"
    extras = "extras"
