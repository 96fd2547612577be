from __future__ import annotations

import asyncio
import io
import logging

from PIL import Image, UnidentifiedImageError

from aquamark.exceptions import DimensionUnavailableError, ImageDecodeError
from aquamark.imaging.compositor import compose_layers
from aquamark.imaging.gradient import gradient_source, synthesize_gradient
from aquamark.imaging.position import resolve_band
from aquamark.imaging.scaler import scale_overlay
from aquamark.models.options import CompositeOptions, GradientEnabled
from aquamark.models.result import WatermarkResult
from aquamark.output.metrics import Timer

logger = logging.getLogger(__name__)


def preload_gradient_source() -> None:
    """Load the shared gradient asset eagerly; a missing asset fails here, at startup."""
    gradient_source()


def decode_image(data: bytes, role: str) -> Image.Image:
    if not data:
        raise ImageDecodeError(f"Unable to decode {role} image: no data", role=role)

    try:
        with Image.open(io.BytesIO(data)) as opened:
            opened.load()
            image = opened.convert("RGBA")
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise ImageDecodeError(f"Unable to decode {role} image: {exc}", role=role) from exc

    width, height = image.size
    if width <= 0 or height <= 0:
        raise DimensionUnavailableError(f"{role.capitalize()} image has no usable dimensions: {width}x{height}")
    return image


def watermark_images(
    background: Image.Image,
    overlay: Image.Image,
    options: CompositeOptions,
) -> WatermarkResult:
    timer = Timer()
    width, height = background.size
    if width <= 0 or height <= 0:
        raise DimensionUnavailableError(f"Background image has no usable dimensions: {width}x{height}")

    band = resolve_band(options.gravity)

    gradient = None
    if isinstance(options.gradient, GradientEnabled):
        gradient = synthesize_gradient(
            width,
            height,
            options.gradient.height_percent,
            light=options.gradient.light,
            band=band,
        )
        logger.debug("Gradient band %s: %dx%d light=%s", band, gradient.width, gradient.height, options.gradient.light)

    scaled_overlay = scale_overlay(
        overlay,
        width,
        height,
        options.overlay_width_percent,
        options.overlay_height_percent,
    )
    logger.debug("Overlay scaled from %dx%d to %dx%d", *overlay.size, *scaled_overlay.size)

    result = compose_layers(background, gradient, band, scaled_overlay, options.gravity, options.quality)
    logger.info(
        "Watermarked %dx%d background (gravity=%s, gradient=%s) in %.3fs",
        width,
        height,
        options.gravity,
        options.gradient.kind,
        timer.elapsed(),
    )
    return result


def watermark(background: bytes, overlay: bytes, options: CompositeOptions) -> WatermarkResult:
    """Decode both inputs, composite [background, gradient, overlay] and encode the result."""
    background_image = decode_image(background, "background")
    overlay_image = decode_image(overlay, "overlay")
    return watermark_images(background_image, overlay_image, options)


async def watermark_async(background: bytes, overlay: bytes, options: CompositeOptions) -> WatermarkResult:
    """Same contract as :func:`watermark` for asyncio hosts.

    The two inputs are decoded concurrently on worker threads; composition
    and encoding then run sequentially on another worker thread.
    """
    background_image, overlay_image = await asyncio.gather(
        asyncio.to_thread(decode_image, background, "background"),
        asyncio.to_thread(decode_image, overlay, "overlay"),
    )
    return await asyncio.to_thread(watermark_images, background_image, overlay_image, options)
