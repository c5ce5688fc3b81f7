import pytest
from mediacompat.domain.enums.metadata_key import MetadataKey
from mediacompat.legacy.metadata import LegacyMetadata, with_extension_entries
from mediacompat.legacy.rating import LegacyRating


def test_builder_and_typed_getters(bitmap):
    rating = LegacyRating.new_heart_rating(True)
    m = (
        LegacyMetadata.Builder()
        .put_text(MetadataKey.title, "T")
        .put_long(MetadataKey.duration, 42)
        .put_bitmap(MetadataKey.display_icon, bitmap)
        .put_rating(MetadataKey.user_rating, rating)
        .build()
    )
    assert m.get_text(MetadataKey.title) == "T"
    assert m.get_long(MetadataKey.duration) == 42
    assert m.get_bitmap(MetadataKey.display_icon) is bitmap
    assert m.get_rating(MetadataKey.user_rating) == rating
    assert m.keys() == [MetadataKey.title, MetadataKey.duration, MetadataKey.display_icon, MetadataKey.user_rating]


def test_builder_has_no_float_setter():
    assert not hasattr(LegacyMetadata.Builder(), "put_float")


def test_builder_rejects_wrong_types():
    with pytest.raises(ValueError):
        LegacyMetadata.Builder().put_long("n", 1.5)
    with pytest.raises(ValueError):
        LegacyMetadata.Builder().put_text(MetadataKey.duration, "long key")


def test_extension_entries_are_raw_only():
    base = LegacyMetadata.Builder().put_text("a", "1").build()
    m = with_extension_entries(base, {"gain": 0.25, MetadataKey.extras: {"k": "v"}})

    assert m.get_raw("gain") == 0.25
    assert dict(m.get_raw(MetadataKey.extras)) == {"k": "v"}
    # none of the typed getters recognise the extension values
    assert m.get_text("gain") is None
    assert m.get_long("gain") == 0
    assert m.get_rating("gain") is None
    assert m.get_bitmap("gain") is None
    assert m.keys() == ["a", "gain", MetadataKey.extras]
    # the typed bag it came from is untouched
    assert base.keys() == ["a"]


@pytest.mark.parametrize("bad", ["text", 3, True, None])
def test_extension_entries_only_take_floats_and_mappings(bad):
    base = LegacyMetadata.Builder().build()
    with pytest.raises(ValueError):
        with_extension_entries(base, {"x": bad})


def test_raw_storage_is_read_only():
    m = LegacyMetadata.Builder().put_text("a", "1").build()
    with pytest.raises(TypeError):
        m.raw["a"] = "2"  # type: ignore[index]
