"""Directional contrast gradient placed behind the overlay.

The source asset is black, transparent at the top and darkening towards the
bottom. It is decoded once per process and only ever read afterwards, so
concurrent calls can share it without locking.
"""

from __future__ import annotations

import logging
import os
from functools import cache
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from aquamark.exceptions import ConfigurationError, DegenerateSizeError
from aquamark.imaging.position import rotation_angle
from aquamark.imaging.scaler import percent_of
from aquamark.models.options import Position

logger = logging.getLogger(__name__)

GRADIENT_ASSET_ENV = "AQUAMARK_GRADIENT_ASSET"
_BUNDLED_GRADIENT_PATH = Path(__file__).resolve().parents[1] / "assets" / "gradient.png"


def gradient_asset_path() -> Path:
    override = os.getenv(GRADIENT_ASSET_ENV)
    return Path(override) if override else _BUNDLED_GRADIENT_PATH


def _load_gradient_source(asset_path: Path) -> Image.Image:
    if not asset_path.is_file():
        raise ConfigurationError(f"Gradient asset not found: {asset_path}")

    try:
        with Image.open(asset_path) as opened:
            source = opened.convert("RGBA")
    except (UnidentifiedImageError, OSError) as exc:
        raise ConfigurationError(f"Unable to load gradient asset {asset_path}: {exc}") from exc

    logger.info("Loaded gradient asset %s (%dx%d)", asset_path, source.width, source.height)
    return source


@cache
def gradient_source() -> Image.Image:
    """Shared gradient asset, resolved and decoded once per process.

    Treat as read-only: every transform returns a new image.
    """
    return _load_gradient_source(gradient_asset_path())


def negate_colors(image: Image.Image) -> Image.Image:
    red, green, blue, alpha = image.convert("RGBA").split()
    inverted = ImageOps.invert(Image.merge("RGB", (red, green, blue)))
    return Image.merge("RGBA", (*inverted.split(), alpha))


def synthesize_gradient(
    background_width: int | None,
    background_height: int | None,
    height_percent: int,
    light: bool = False,
    band: Position = "north",
) -> Image.Image:
    band_width = background_width or 0
    band_height = percent_of(background_height or 0, height_percent)
    if band_width <= 0 or band_height <= 0:
        raise DegenerateSizeError(
            f"Gradient band resolved to {band_width}x{band_height} for a "
            f"{background_width}x{background_height} background at {height_percent}%"
        )

    gradient = gradient_source().resize((band_width, band_height), Image.Resampling.BILINEAR)

    angle = rotation_angle(band)
    if angle:
        gradient = gradient.rotate(-angle, expand=True)

    if light:
        gradient = negate_colors(gradient)

    return gradient
