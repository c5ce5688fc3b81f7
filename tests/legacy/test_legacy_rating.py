import pytest
from mediacompat.legacy.rating import RATING_NOT_RATED, LegacyRating, LegacyRatingStyle


def test_unrated_rating_keeps_style():
    r = LegacyRating.new_unrated_rating(LegacyRatingStyle.FOUR_STARS)
    assert r.get_rating_style() == LegacyRatingStyle.FOUR_STARS
    assert not r.is_rated()
    assert r.get_star_rating() == RATING_NOT_RATED


def test_unknown_style_is_allowed_while_unrated():
    r = LegacyRating.new_unrated_rating(42)
    assert r.get_rating_style() == 42
    assert not r.is_rated()


def test_negative_value_normalises_to_not_rated():
    r = LegacyRating(style=LegacyRatingStyle.PERCENTAGE, value=-7)
    assert r.value == RATING_NOT_RATED
    assert r == LegacyRating.new_unrated_rating(LegacyRatingStyle.PERCENTAGE)


def test_typed_factories():
    assert LegacyRating.new_heart_rating(True).has_heart()
    assert not LegacyRating.new_heart_rating(False).has_heart()
    assert LegacyRating.new_thumb_rating(True).is_thumb_up()
    assert LegacyRating.new_star_rating(LegacyRatingStyle.THREE_STARS, 2).get_star_rating() == 2.0
    assert LegacyRating.new_percentage_rating(12.5).get_percent_rating() == 12.5


@pytest.mark.parametrize(
    "make",
    [
        lambda: LegacyRating.new_star_rating(LegacyRatingStyle.HEART, 1),
        lambda: LegacyRating.new_star_rating(LegacyRatingStyle.THREE_STARS, 3.5),
        lambda: LegacyRating.new_star_rating(LegacyRatingStyle.FIVE_STARS, -1),
        lambda: LegacyRating.new_percentage_rating(101),
        lambda: LegacyRating.new_percentage_rating(-1),
        lambda: LegacyRating(style=LegacyRatingStyle.HEART, value=0.5),
        lambda: LegacyRating(style="heart", value=1.0),
        lambda: LegacyRating(style=True, value=1.0),
    ],
)
def test_invalid_ratings_raise(make):
    with pytest.raises(ValueError):
        make()
