from __future__ import annotations

from pathlib import Path

from aquamark.output.writer import write_json

from .request import WatermarkRequest


def watermark_request_json_schema() -> dict:
    return WatermarkRequest.model_json_schema()


def write_request_schema(schema_path: Path) -> None:
    write_json(watermark_request_json_schema(), schema_path)
