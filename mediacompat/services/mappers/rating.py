# mediacompat/services/mappers/rating.py
from __future__ import annotations

from typing import Optional

from mediacompat.common.logging import get_logger
from mediacompat.domain.entities.rating import Rating
from mediacompat.domain.enums.rating_style import RatingStyle
from mediacompat.legacy.rating import LegacyRating, LegacyRatingStyle

logger = get_logger("mediacompat.mappers.rating")

_TO_LEGACY_STYLE = {
    RatingStyle.none: LegacyRatingStyle.NONE,
    RatingStyle.heart: LegacyRatingStyle.HEART,
    RatingStyle.thumb_up_down: LegacyRatingStyle.THUMB_UP_DOWN,
    RatingStyle.three_stars: LegacyRatingStyle.THREE_STARS,
    RatingStyle.four_stars: LegacyRatingStyle.FOUR_STARS,
    RatingStyle.five_stars: LegacyRatingStyle.FIVE_STARS,
    RatingStyle.percentage: LegacyRatingStyle.PERCENTAGE,
}
_FROM_LEGACY_STYLE = {int(v): k for k, v in _TO_LEGACY_STYLE.items()}


def to_legacy_rating(rating: Optional[Rating]) -> Optional[LegacyRating]:
    if rating is None:
        return None
    style = _TO_LEGACY_STYLE[rating.style]
    if not rating.is_rated:
        return LegacyRating.new_unrated_rating(style)

    if style in (LegacyRatingStyle.THREE_STARS, LegacyRatingStyle.FOUR_STARS, LegacyRatingStyle.FIVE_STARS):
        return LegacyRating.new_star_rating(style, rating.star_rating)
    if style == LegacyRatingStyle.HEART:
        return LegacyRating.new_heart_rating(rating.has_heart)
    if style == LegacyRatingStyle.THUMB_UP_DOWN:
        return LegacyRating.new_thumb_rating(rating.is_thumb_up)
    if style == LegacyRatingStyle.PERCENTAGE:
        return LegacyRating.new_percentage_rating(rating.percent_rating)
    # unreachable for the current RatingStyle members; catches styles added later
    logger.debug("unsupported rating style %s, rating dropped", rating.style)
    return None


def to_rating(legacy: Optional[LegacyRating]) -> Optional[Rating]:
    if legacy is None:
        return None
    style = _FROM_LEGACY_STYLE.get(legacy.get_rating_style())
    if style is None:
        logger.debug("unknown legacy rating style %s, rating dropped", legacy.get_rating_style())
        return None
    if not legacy.is_rated():
        return Rating.unrated(style)

    if style.is_star:
        return Rating.star(style, legacy.get_star_rating())
    if style == RatingStyle.heart:
        return Rating.heart(legacy.has_heart())
    if style == RatingStyle.thumb_up_down:
        return Rating.thumb(legacy.is_thumb_up())
    if style == RatingStyle.percentage:
        return Rating.percentage(legacy.get_percent_rating())
    logger.debug("unsupported rating style %s, rating dropped", style)
    return None
