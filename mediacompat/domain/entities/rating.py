# mediacompat/domain/entities/rating.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mediacompat.domain.enums.rating_style import RatingStyle

NOT_RATED = -1.0


@dataclass(frozen=True)
class Rating:
    """
    Tagged rating value. `style` is always set; `value` is None while the
    rating is unrated, which keeps the style around for a later re-rating.

    Value encoding per style:
      - heart / thumb_up_down: 1.0 (has heart / thumb up) or 0.0
      - star styles: 0..max_stars
      - percentage: 0..100
    Prefer the factory classmethods over the raw constructor.
    """
    style: RatingStyle = RatingStyle.none
    value: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.style, RatingStyle):
            raise ValueError(f"Rating.style must be a RatingStyle, got {self.style!r}")
        if self.value is None:
            return
        if self.style == RatingStyle.none:
            raise ValueError("a rating without style cannot carry a value")
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError("Rating.value must be a number")
        if self.style in (RatingStyle.heart, RatingStyle.thumb_up_down):
            if self.value not in (0.0, 1.0):
                raise ValueError(f"{self.style.value} rating value must be 0 or 1")
        elif self.style.is_star:
            if self.value < 0 or self.value > self.style.max_stars:
                raise ValueError(f"star rating must be between 0 and {self.style.max_stars}")
        elif self.style == RatingStyle.percentage:
            if self.value < 0 or self.value > 100:
                raise ValueError("percentage rating must be between 0 and 100")

    # ---- Factories -----------------------------------------------------------

    @classmethod
    def unrated(cls, style: RatingStyle) -> "Rating":
        return cls(style=RatingStyle(style))

    @classmethod
    def heart(cls, has_heart: bool) -> "Rating":
        return cls(style=RatingStyle.heart, value=1.0 if has_heart else 0.0)

    @classmethod
    def thumb(cls, is_thumb_up: bool) -> "Rating":
        return cls(style=RatingStyle.thumb_up_down, value=1.0 if is_thumb_up else 0.0)

    @classmethod
    def star(cls, style: RatingStyle, stars: float) -> "Rating":
        style = RatingStyle(style)
        if not style.is_star:
            raise ValueError(f"{style.value} is not a star rating style")
        return cls(style=style, value=float(stars))

    @classmethod
    def percentage(cls, percent: float) -> "Rating":
        return cls(style=RatingStyle.percentage, value=float(percent))

    # ---- Accessors -----------------------------------------------------------

    @property
    def is_rated(self) -> bool:
        return self.value is not None

    @property
    def has_heart(self) -> bool:
        return self.style == RatingStyle.heart and self.value == 1.0

    @property
    def is_thumb_up(self) -> bool:
        return self.style == RatingStyle.thumb_up_down and self.value == 1.0

    @property
    def star_rating(self) -> float:
        if self.style.is_star and self.is_rated:
            return float(self.value)  # type: ignore[arg-type]
        return NOT_RATED

    @property
    def percent_rating(self) -> float:
        if self.style == RatingStyle.percentage and self.is_rated:
            return float(self.value)  # type: ignore[arg-type]
        return NOT_RATED
