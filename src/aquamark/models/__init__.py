from .options import (
    DEFAULT_GRADIENT_HEIGHT_PERCENT,
    DEFAULT_OVERLAY_PERCENT,
    DEFAULT_QUALITY,
    GRAVITIES,
    Band,
    CompositeOptions,
    GradientDisabled,
    GradientEnabled,
    GradientSetting,
    Gravity,
    Position,
)
from .request import WatermarkRequest
from .result import WatermarkResult, content_type_for

__all__ = [
    "Band",
    "CompositeOptions",
    "DEFAULT_GRADIENT_HEIGHT_PERCENT",
    "DEFAULT_OVERLAY_PERCENT",
    "DEFAULT_QUALITY",
    "GRAVITIES",
    "GradientDisabled",
    "GradientEnabled",
    "GradientSetting",
    "Gravity",
    "Position",
    "WatermarkRequest",
    "WatermarkResult",
    "content_type_for",
]
