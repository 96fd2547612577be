import io

import pytest
from PIL import Image

from aquamark.exceptions import ImageEncodeError
from aquamark.imaging.compositor import (
    GRADIENT_Z,
    OVERLAY_Z,
    build_layers,
    compose_layers,
    encode_png,
    flatten_layers,
    png_compress_level,
)

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)


def _layers(background: Image.Image):
    gradient = Image.new("RGBA", (100, 30), RED)
    overlay = Image.new("RGBA", (20, 20), BLUE)
    return build_layers(background, gradient, "south", overlay, "south")


def test_overlay_sits_above_gradient(white_background: Image.Image) -> None:
    canvas = flatten_layers(_layers(white_background))

    assert canvas.getpixel((50, 90)) == BLUE
    assert canvas.getpixel((5, 90)) == RED
    assert canvas.getpixel((5, 5)) == WHITE


def test_swapping_stack_order_changes_output(white_background: Image.Image) -> None:
    layers = _layers(white_background)
    expected = flatten_layers(layers)

    layers[1].z, layers[2].z = OVERLAY_Z, GRADIENT_Z
    swapped = flatten_layers(layers)

    assert swapped.getpixel((50, 90)) == RED
    assert swapped.tobytes() != expected.tobytes()


def test_layers_without_gradient(white_background: Image.Image) -> None:
    overlay = Image.new("RGBA", (20, 20), BLUE)
    layers = build_layers(white_background, None, "north", overlay, "northeast")

    assert [layer.z for layer in layers] == [0, 2]
    assert flatten_layers(layers).getpixel((90, 5)) == BLUE


def test_background_input_is_left_untouched(white_background: Image.Image) -> None:
    flatten_layers(_layers(white_background))
    assert white_background.getpixel((50, 90)) == WHITE


def test_composition_is_deterministic(white_background: Image.Image) -> None:
    gradient = Image.new("RGBA", (100, 30), (0, 0, 0, 128))
    overlay = Image.new("RGBA", (20, 20), BLUE)

    first = compose_layers(white_background, gradient, "south", overlay, "southwest", 90)
    second = compose_layers(white_background, gradient, "south", overlay, "southwest", 90)

    assert first.data == second.data
    assert first.format == "png"
    assert first.content_type == "image/png"
    assert (first.width, first.height) == (100, 100)


def test_quality_changes_compression_not_pixels() -> None:
    image = Image.linear_gradient("L").convert("RGBA").resize((300, 200))

    low = encode_png(image, 1)
    high = encode_png(image, 100)

    assert len(low) != len(high)
    with Image.open(io.BytesIO(low)) as decoded_low, Image.open(io.BytesIO(high)) as decoded_high:
        assert decoded_low.size == decoded_high.size == (300, 200)
        assert decoded_low.tobytes() == decoded_high.tobytes()


def test_png_compress_level_mapping() -> None:
    assert png_compress_level(1) == 9
    assert png_compress_level(100) == 0
    assert png_compress_level(90) == 1


def test_encode_failure_is_wrapped() -> None:
    with pytest.raises(ImageEncodeError):
        encode_png(Image.new("CMYK", (4, 4)), 90)
