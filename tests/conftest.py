import pytest
from PIL import Image

from aquamark.imaging.gradient import GRADIENT_ASSET_ENV, gradient_source


@pytest.fixture(autouse=True)
def bundled_gradient_asset(monkeypatch):
    monkeypatch.delenv(GRADIENT_ASSET_ENV, raising=False)
    gradient_source.cache_clear()
    yield
    gradient_source.cache_clear()


@pytest.fixture
def white_background() -> Image.Image:
    return Image.new("RGBA", (100, 100), (255, 255, 255, 255))
