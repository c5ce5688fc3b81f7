# tests/conftest.py
from __future__ import annotations
import pytest
from PIL import Image

from mediacompat.common import settings as settings_module


@pytest.fixture(autouse=True)
def _fresh_settings():
    # every test sees settings built from its own environment
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()


@pytest.fixture()
def bitmap() -> Image.Image:
    return Image.new("RGB", (4, 4), color=(200, 10, 10))


@pytest.fixture()
def other_bitmap() -> Image.Image:
    return Image.new("L", (2, 2))
