import pytest
from mediacompat.domain.entities.metadata import MediaMetadata, MetadataValue
from mediacompat.domain.entities.rating import Rating
from mediacompat.domain.enums.metadata_key import MetadataKey, expected_type
from mediacompat.domain.enums.metadata_value_type import MetadataValueType


def test_builder_typed_values(bitmap):
    heart = Rating.heart(True)
    m = (
        MediaMetadata.Builder()
        .put_text(MetadataKey.media_id, "song-1")
        .put_text(MetadataKey.title, "Title")
        .put_long(MetadataKey.duration, 180_000)
        .put_float("custom.gain", 0.5)
        .put_bitmap(MetadataKey.display_icon, bitmap)
        .put_rating(MetadataKey.user_rating, heart)
        .set_extras({"k": "v"})
        .build()
    )
    assert m.media_id == "song-1"
    assert m.get_text(MetadataKey.title) == "Title"
    assert m.get_long(MetadataKey.duration) == 180_000
    assert m.get_float("custom.gain") == 0.5
    assert m.get_bitmap(MetadataKey.display_icon) is bitmap
    assert m.get_rating(MetadataKey.user_rating) == heart
    assert dict(m.get_extras()) == {"k": "v"}
    assert len(m) == 7


def test_keys_keep_insertion_order():
    m = (
        MediaMetadata.Builder()
        .put_text("z", "1")
        .put_long("a", 2)
        .put_text(MetadataKey.media_id, "id")
        .build()
    )
    assert m.keys() == ["z", "a", MetadataKey.media_id]
    assert list(m) == m.keys()
    assert m.contains_key("a") and "z" in m
    assert not m.contains_key("missing")


def test_typed_getters_ignore_other_types():
    m = MediaMetadata.Builder().put_text("custom", "text").build()
    assert m.get_long("custom") == 0
    assert m.get_float("custom") == 0.0
    assert m.get_rating("custom") is None
    assert m.get_bitmap("custom") is None
    assert m.get_extras() is None
    assert m.get_value("custom") == MetadataValue(MetadataValueType.text, "text")


def test_put_none_removes_key():
    m = MediaMetadata.Builder().put_text("a", "1").put_text("a", None).build()
    assert not m.contains_key("a")


@pytest.mark.parametrize(
    "put",
    [
        lambda b: b.put_long(MetadataKey.title, 1),
        lambda b: b.put_text(MetadataKey.display_icon, "x"),
        lambda b: b.put_float(MetadataKey.duration, 1.0),
        lambda b: b.put_text(MetadataKey.extras, "x"),
    ],
)
def test_vocabulary_keys_keep_their_type(put):
    with pytest.raises(ValueError):
        put(MediaMetadata.Builder())


@pytest.mark.parametrize(
    "put",
    [
        lambda b: b.put_long("n", True),
        lambda b: b.put_long("n", 1.5),
        lambda b: b.put_float("n", False),
        lambda b: b.put_bitmap("n", b"png"),
        lambda b: b.put_rating("n", 5),
        lambda b: b.set_extras(["not", "a", "mapping"]),
        lambda b: b.put_text("", "empty key"),
    ],
)
def test_builder_rejects_wrong_values(put):
    with pytest.raises(ValueError):
        put(MediaMetadata.Builder())


def test_built_metadata_is_immutable_and_detached():
    extras = {"a": 1}
    builder = MediaMetadata.Builder().put_text("t", "x").set_extras(extras)
    m = builder.build()
    builder.put_text("t", "changed")
    extras["a"] = 2
    assert m.get_text("t") == "x"
    assert m.get_extras()["a"] == 1
    with pytest.raises(TypeError):
        m.entries["t"] = MetadataValue(MetadataValueType.text, "y")  # type: ignore[index]


def test_builder_copies_source():
    base = MediaMetadata.Builder().put_text("a", "1").build()
    derived = MediaMetadata.Builder(base).put_long("b", 2).build()
    assert base.keys() == ["a"]
    assert derived.keys() == ["a", "b"]


def test_put_float_coerces_ints():
    m = MediaMetadata.Builder().put_float("f", 3).build()
    assert isinstance(m.get_float("f"), float)


def test_constructor_validates_entries():
    with pytest.raises(ValueError):
        MediaMetadata(entries={MetadataKey.title: MetadataValue(MetadataValueType.long, 1)})
    with pytest.raises(ValueError):
        MediaMetadata(entries={"x": "raw"})  # type: ignore[dict-item]


def test_expected_type_for_custom_key_is_none():
    assert expected_type("my.custom.key") is None
    assert expected_type(MetadataKey.media_id) == MetadataValueType.text
