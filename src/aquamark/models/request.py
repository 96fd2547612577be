from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .options import (
    DEFAULT_GRADIENT_HEIGHT_PERCENT,
    DEFAULT_OVERLAY_PERCENT,
    DEFAULT_QUALITY,
    CompositeOptions,
    GradientDisabled,
    GradientEnabled,
    Gravity,
    Percent,
)


class WatermarkRequest(BaseModel):
    """Untyped caller input (form fields, options files, CLI flags) after validation."""

    model_config = ConfigDict(populate_by_name=True)

    gravity: Gravity
    quality: Percent = DEFAULT_QUALITY
    gradient: bool = False
    gradient_height: Percent = Field(default=DEFAULT_GRADIENT_HEIGHT_PERCENT, alias="gradientHeight")
    gradient_light: bool = Field(default=False, alias="gradientLight")
    overlay_width: Percent = Field(default=DEFAULT_OVERLAY_PERCENT, alias="overlayWidth")
    overlay_height: Percent = Field(default=DEFAULT_OVERLAY_PERCENT, alias="overlayHeight")

    def to_composite_options(self) -> CompositeOptions:
        gradient = (
            GradientEnabled(height_percent=self.gradient_height, light=self.gradient_light)
            if self.gradient
            else GradientDisabled()
        )
        return CompositeOptions(
            gravity=self.gravity,
            quality=self.quality,
            gradient=gradient,
            overlay_width_percent=self.overlay_width,
            overlay_height_percent=self.overlay_height,
        )
