import pytest
from PIL import Image

from aquamark.exceptions import DegenerateSizeError
from aquamark.imaging.scaler import clamp_percent, fit_inside, scale_overlay


def test_wide_overlay_fits_inside_square_box() -> None:
    overlay = Image.new("RGBA", (2000, 100), (0, 0, 255, 255))

    scaled = scale_overlay(overlay, 500, 500, 20, 20)

    assert scaled.size == (100, 5)


@pytest.mark.parametrize(
    ("background", "percents", "overlay_size"),
    [
        ((1000, 800), (20, 20), (300, 120)),
        ((1920, 1080), (25, 10), (64, 64)),
        ((640, 480), (50, 50), (33, 700)),
        ((1003, 777), (17, 33), (1234, 567)),
        ((500, 500), (100, 100), (10, 40)),
    ],
)
def test_scaled_overlay_stays_inside_box_and_keeps_aspect(
    background: tuple[int, int], percents: tuple[int, int], overlay_size: tuple[int, int]
) -> None:
    box_width = background[0] * percents[0] // 100
    box_height = background[1] * percents[1] // 100
    overlay = Image.new("RGBA", overlay_size, (10, 20, 30, 255))

    scaled = scale_overlay(overlay, background[0], background[1], *percents)

    assert scaled.width <= box_width
    assert scaled.height <= box_height
    assert scaled.width == box_width or scaled.height == box_height
    if scaled.width == box_width:
        assert abs(scaled.height - overlay_size[1] * box_width / overlay_size[0]) <= 1
    else:
        assert abs(scaled.width - overlay_size[0] * box_height / overlay_size[1]) <= 1


def test_small_overlay_grows_to_meet_box() -> None:
    overlay = Image.new("RGBA", (10, 10), (0, 0, 0, 255))
    assert scale_overlay(overlay, 1000, 1000, 20, 20).size == (200, 200)


def test_fit_inside_never_returns_zero_side() -> None:
    assert fit_inside((10000, 1), (100, 100)) == (100, 1)


def test_overlay_alpha_is_preserved() -> None:
    overlay = Image.new("RGBA", (40, 20), (255, 0, 0, 255))
    overlay.paste((0, 0, 0, 0), (0, 0, 20, 20))

    scaled = scale_overlay(overlay, 100, 100, 20, 20)

    assert scaled.mode == "RGBA"
    assert scaled.size == (20, 10)
    assert scaled.getpixel((0, 0))[3] == 0
    assert scaled.getpixel((19, 5))[3] == 255


@pytest.mark.parametrize("dimensions", [(0, 0), (None, None), (4, 4), (500, 0)])
def test_degenerate_box_is_rejected(dimensions: tuple[int | None, int | None]) -> None:
    overlay = Image.new("RGBA", (10, 10))
    with pytest.raises(DegenerateSizeError):
        scale_overlay(overlay, dimensions[0], dimensions[1], 20, 20)


def test_percentages_are_clamped() -> None:
    assert clamp_percent(0) == 1
    assert clamp_percent(150) == 100
    assert clamp_percent(42) == 42
