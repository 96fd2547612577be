from __future__ import annotations

from typing import Annotated, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_QUALITY = 90
DEFAULT_GRADIENT_HEIGHT_PERCENT = 30
DEFAULT_OVERLAY_PERCENT = 20

# ``northwest`` is deliberately not accepted; see DESIGN.md.
Gravity = Literal["north", "northeast", "east", "southeast", "south", "southwest", "west"]
GRAVITIES: tuple[str, ...] = get_args(Gravity)

Band = Literal["north", "south"]
Position = Literal["north", "east", "south", "west"]

Percent = Annotated[int, Field(ge=1, le=100)]


class GradientDisabled(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["disabled"] = "disabled"


class GradientEnabled(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["enabled"] = "enabled"
    height_percent: Percent = DEFAULT_GRADIENT_HEIGHT_PERCENT
    light: bool = False


GradientSetting = Annotated[GradientDisabled | GradientEnabled, Field(discriminator="kind")]


class CompositeOptions(BaseModel):
    """Validated placement and encoding options for one composition call."""

    model_config = ConfigDict(frozen=True)

    gravity: Gravity
    quality: Percent = DEFAULT_QUALITY
    gradient: GradientSetting = Field(default_factory=GradientDisabled)
    overlay_width_percent: Percent = DEFAULT_OVERLAY_PERCENT
    overlay_height_percent: Percent = DEFAULT_OVERLAY_PERCENT
