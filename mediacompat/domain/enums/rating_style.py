from __future__ import annotations
from enum import StrEnum

class RatingStyle(StrEnum):
    none = "none"
    heart = "heart"
    thumb_up_down = "thumb_up_down"
    three_stars = "three_stars"
    four_stars = "four_stars"
    five_stars = "five_stars"
    percentage = "percentage"

    @property
    def max_stars(self) -> int:
        """Number of stars for the star styles, 0 for everything else."""
        return _MAX_STARS.get(self, 0)

    @property
    def is_star(self) -> bool:
        return self in _MAX_STARS


_MAX_STARS = {
    RatingStyle.three_stars: 3,
    RatingStyle.four_stars: 4,
    RatingStyle.five_stars: 5,
}
