from __future__ import annotations

import mimetypes
from dataclasses import dataclass

FALLBACK_CONTENT_TYPE = "application/octet-stream"


def content_type_for(image_format: str) -> str:
    content_type, _ = mimetypes.guess_type(f"image.{image_format.lower()}")
    return content_type or FALLBACK_CONTENT_TYPE


@dataclass(slots=True, frozen=True)
class WatermarkResult:
    data: bytes
    format: str
    width: int
    height: int

    @property
    def content_type(self) -> str:
        return content_type_for(self.format)
