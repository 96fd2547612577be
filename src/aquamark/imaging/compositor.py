from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from PIL import Image

from aquamark.exceptions import ImageEncodeError
from aquamark.imaging.position import anchor_offset
from aquamark.imaging.scaler import clamp_percent
from aquamark.models.options import Band, Gravity
from aquamark.models.result import WatermarkResult

logger = logging.getLogger(__name__)

OUTPUT_FORMAT = "png"

BACKGROUND_Z = 0
GRADIENT_Z = 1
OVERLAY_Z = 2


@dataclass(slots=True)
class Layer:
    image: Image.Image
    gravity: str
    z: int


def png_compress_level(quality: int) -> int:
    """Map quality 1..100 onto zlib effort 9..0. PNG stays lossless either way."""
    return round((100 - clamp_percent(quality)) * 9 / 99)


def build_layers(
    background: Image.Image,
    gradient: Image.Image | None,
    gradient_band: Band,
    overlay: Image.Image,
    overlay_gravity: Gravity,
) -> list[Layer]:
    layers = [Layer(image=background, gravity="north", z=BACKGROUND_Z)]
    if gradient is not None:
        layers.append(Layer(image=gradient, gravity=gradient_band, z=GRADIENT_Z))
    layers.append(Layer(image=overlay, gravity=overlay_gravity, z=OVERLAY_Z))
    return layers


def flatten_layers(layers: list[Layer]) -> Image.Image:
    ordered = sorted(layers, key=lambda layer: layer.z)
    # convert() returns a copy; the background input is left as is
    canvas = ordered[0].image.convert("RGBA")

    for layer in ordered[1:]:
        source = layer.image.convert("RGBA")
        dest = anchor_offset(canvas.size, source.size, layer.gravity)
        logger.debug("Compositing z=%d %dx%d at %s", layer.z, source.width, source.height, dest)
        canvas.alpha_composite(source, dest=dest)
    return canvas


def encode_png(image: Image.Image, quality: int) -> bytes:
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG", compress_level=png_compress_level(quality))
    except (OSError, ValueError) as exc:
        raise ImageEncodeError(f"Unable to encode composite as {OUTPUT_FORMAT}: {exc}") from exc
    return buffer.getvalue()


def compose_layers(
    background: Image.Image,
    gradient: Image.Image | None,
    gradient_band: Band,
    overlay: Image.Image,
    overlay_gravity: Gravity,
    quality: int,
) -> WatermarkResult:
    layers = build_layers(background, gradient, gradient_band, overlay, overlay_gravity)
    canvas = flatten_layers(layers)
    data = encode_png(canvas, quality)
    return WatermarkResult(data=data, format=OUTPUT_FORMAT, width=canvas.width, height=canvas.height)
