# mediacompat/legacy/rating.py
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class LegacyRatingStyle(IntEnum):
    NONE = 0
    HEART = 1
    THUMB_UP_DOWN = 2
    THREE_STARS = 3
    FOUR_STARS = 4
    FIVE_STARS = 5
    PERCENTAGE = 6


RATING_NOT_RATED = -1.0

_MAX_STARS = {
    LegacyRatingStyle.THREE_STARS: 3,
    LegacyRatingStyle.FOUR_STARS: 4,
    LegacyRatingStyle.FIVE_STARS: 5,
}


@dataclass(frozen=True)
class LegacyRating:
    """
    Rating of the legacy schema. The style is a plain int so that ratings
    produced by newer peers with styles we do not know still load; value is
    RATING_NOT_RATED (-1.0) while unrated.
    """
    style: int = LegacyRatingStyle.NONE
    value: float = RATING_NOT_RATED

    def __post_init__(self):
        if isinstance(self.style, bool) or not isinstance(self.style, int):
            raise ValueError(f"LegacyRating.style must be an int, got {self.style!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError("LegacyRating.value must be a number")
        object.__setattr__(self, "value", float(self.value))
        if self.value < 0:
            object.__setattr__(self, "value", RATING_NOT_RATED)
            return
        if self.style in (LegacyRatingStyle.HEART, LegacyRatingStyle.THUMB_UP_DOWN):
            if self.value not in (0.0, 1.0):
                raise ValueError("heart/thumb rating value must be 0 or 1")
        elif self.style in _MAX_STARS:
            if self.value > _MAX_STARS[self.style]:
                raise ValueError(f"star rating must be between 0 and {_MAX_STARS[self.style]}")
        elif self.style == LegacyRatingStyle.PERCENTAGE:
            if self.value > 100:
                raise ValueError("percentage rating must be between 0 and 100")

    @classmethod
    def new_unrated_rating(cls, style: int) -> "LegacyRating":
        return cls(style=int(style))

    @classmethod
    def new_heart_rating(cls, has_heart: bool) -> "LegacyRating":
        return cls(style=LegacyRatingStyle.HEART, value=1.0 if has_heart else 0.0)

    @classmethod
    def new_thumb_rating(cls, thumb_is_up: bool) -> "LegacyRating":
        return cls(style=LegacyRatingStyle.THUMB_UP_DOWN, value=1.0 if thumb_is_up else 0.0)

    @classmethod
    def new_star_rating(cls, style: int, star_rating: float) -> "LegacyRating":
        if style not in _MAX_STARS:
            raise ValueError(f"invalid star rating style {style!r}")
        if star_rating < 0:
            raise ValueError("star rating must be >= 0")
        return cls(style=int(style), value=float(star_rating))

    @classmethod
    def new_percentage_rating(cls, percent: float) -> "LegacyRating":
        if percent < 0:
            raise ValueError("percentage rating must be >= 0")
        return cls(style=LegacyRatingStyle.PERCENTAGE, value=float(percent))

    def get_rating_style(self) -> int:
        return self.style

    def is_rated(self) -> bool:
        return self.value >= 0.0

    def has_heart(self) -> bool:
        return self.style == LegacyRatingStyle.HEART and self.value == 1.0

    def is_thumb_up(self) -> bool:
        return self.style == LegacyRatingStyle.THUMB_UP_DOWN and self.value == 1.0

    def get_star_rating(self) -> float:
        if self.style in _MAX_STARS and self.is_rated():
            return self.value
        return RATING_NOT_RATED

    def get_percent_rating(self) -> float:
        if self.style == LegacyRatingStyle.PERCENTAGE and self.is_rated():
            return self.value
        return RATING_NOT_RATED
