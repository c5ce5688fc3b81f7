from mediacompat.domain.enums.item_flag import ItemFlag
from mediacompat.domain.enums.metadata_key import MetadataKey
from mediacompat.domain.enums.metadata_value_type import MetadataValueType
from mediacompat.domain.enums.rating_style import RatingStyle
__all__ = [
    "ItemFlag",
    "MetadataKey",
    "MetadataValueType",
    "RatingStyle",
]
