from .exceptions import (
    AquamarkError,
    ConfigurationError,
    DegenerateSizeError,
    DimensionUnavailableError,
    ImageDecodeError,
    ImageEncodeError,
)
from .models import CompositeOptions, GradientDisabled, GradientEnabled, WatermarkResult
from .pipeline import decode_image, preload_gradient_source, watermark, watermark_async, watermark_images

__all__ = [
    "AquamarkError",
    "CompositeOptions",
    "ConfigurationError",
    "DegenerateSizeError",
    "DimensionUnavailableError",
    "GradientDisabled",
    "GradientEnabled",
    "ImageDecodeError",
    "ImageEncodeError",
    "WatermarkResult",
    "decode_image",
    "preload_gradient_source",
    "watermark",
    "watermark_async",
    "watermark_images",
]
