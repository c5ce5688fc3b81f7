import pytest
from mediacompat.legacy.media_item import FLAG_BROWSABLE, FLAG_PLAYABLE, LegacyMediaItem, MediaDescription


def test_legacy_item_proxies_media_id_and_flags():
    item = LegacyMediaItem(MediaDescription(media_id="x"), FLAG_BROWSABLE | FLAG_PLAYABLE)
    assert item.media_id == "x"
    assert item.is_browsable() and item.is_playable()


def test_legacy_item_media_id_may_be_missing():
    item = LegacyMediaItem(MediaDescription(title="no id"))
    assert item.media_id is None
    assert item.flags == 0


@pytest.mark.parametrize("kw", [{"description": None}, {"description": MediaDescription(), "flags": "1"}])
def test_legacy_item_validation(kw):
    with pytest.raises(ValueError):
        LegacyMediaItem(**kw)
