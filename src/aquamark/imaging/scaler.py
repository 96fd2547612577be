from __future__ import annotations

from PIL import Image

from aquamark.exceptions import DegenerateSizeError, DimensionUnavailableError


def clamp_percent(value: int) -> int:
    return max(1, min(100, int(value)))


def percent_of(length: int, percent: int) -> int:
    return length * clamp_percent(percent) // 100


def fit_inside(size: tuple[int, int], box: tuple[int, int]) -> tuple[int, int]:
    """Largest size with the aspect ratio of *size* that fits inside *box*.

    One side always matches the box exactly; the other is rounded and never
    drops below one pixel.
    """
    width, height = size
    box_width, box_height = box
    x_factor = width / box_width
    y_factor = height / box_height

    if x_factor >= y_factor:
        return box_width, min(box_height, max(1, round(height / x_factor)))
    return min(box_width, max(1, round(width / y_factor))), box_height


def scale_overlay(
    overlay: Image.Image,
    background_width: int | None,
    background_height: int | None,
    width_percent: int,
    height_percent: int,
) -> Image.Image:
    box = (
        percent_of(background_width or 0, width_percent),
        percent_of(background_height or 0, height_percent),
    )
    if box[0] <= 0 or box[1] <= 0:
        raise DegenerateSizeError(
            f"Overlay target box resolved to {box[0]}x{box[1]} for a "
            f"{background_width}x{background_height} background "
            f"({width_percent}% x {height_percent}%)"
        )

    if overlay.width <= 0 or overlay.height <= 0:
        raise DimensionUnavailableError(f"Overlay has no usable dimensions: {overlay.size}")

    target = fit_inside(overlay.size, box)
    source = overlay if overlay.mode == "RGBA" else overlay.convert("RGBA")
    if target == source.size:
        return source.copy()
    return source.resize(target, Image.Resampling.LANCZOS)
