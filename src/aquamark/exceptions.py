"""
Domain-specific exceptions for the watermark pipeline.

Every failure aborts the whole composition: no partial image is returned.
All exceptions inherit from ``AquamarkError`` so callers can use a single
broad catch when needed.
"""

from __future__ import annotations


class AquamarkError(Exception):
    """Base exception for all watermark errors."""


class ImageDecodeError(AquamarkError):
    """Raised when background or overlay bytes cannot be parsed as an image.

    Attributes
    ----------
    role:
        Which input failed, ``"background"`` or ``"overlay"``.
    """

    def __init__(self, message: str, role: str | None = None) -> None:
        super().__init__(message)
        self.role = role


class DimensionUnavailableError(AquamarkError):
    """Raised when a decoded image has no usable width/height."""


class DegenerateSizeError(AquamarkError):
    """Raised when a computed layer size resolves to zero or less."""


class ImageEncodeError(AquamarkError):
    """Raised when the final composite cannot be serialized."""


class ConfigurationError(AquamarkError):
    """Raised when required configuration (gradient asset, options file) is missing or invalid."""
