from __future__ import annotations

import json
import mimetypes
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError as JsonSchemaValidationError
from jsonschema import validate
from pydantic import ValidationError

from .models.request import WatermarkRequest

SUPPORTED_IMAGE_TYPES = re.compile(r"jpeg|jpg|png")

MIN_VALID_EXAMPLE_YAML = """gravity: southeast
quality: 90
gradient: true
gradientHeight: 30
overlayWidth: 20
overlayHeight: 20
"""

_FIELD_ALIASES: dict[str, str] = {
    name: field.alias for name, field in WatermarkRequest.model_fields.items() if field.alias
}


class RequestValidationError(ValueError):
    """Raised when caller input cannot be turned into a :class:`WatermarkRequest`.

    ``errors`` maps each offending field to a human-readable message.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.errors: dict[str, str] = errors or {}


def _describe_input(item: dict[str, Any]) -> str:
    if item["type"] == "missing":
        return "got nothing"
    value = item.get("input")
    return f"got {type(value).__name__} {value}"


def _field_errors(exc: ValidationError) -> dict[str, str]:
    messages: dict[str, list[str]] = {}
    inputs: dict[str, str] = {}
    for item in exc.errors():
        field_name = str(item["loc"][0]) if item["loc"] else "request"
        messages.setdefault(field_name, []).append(item["msg"])
        inputs[field_name] = _describe_input(item)
    return {name: ", ".join([*reversed(msgs), inputs[name]]) for name, msgs in messages.items()}


def normalize_request_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Rename snake_case keys to the public camelCase field names."""
    return {_FIELD_ALIASES.get(key, key): value for key, value in fields.items()}


def parse_watermark_request(fields: Mapping[str, Any]) -> WatermarkRequest:
    try:
        return WatermarkRequest.model_validate(normalize_request_fields(fields))
    except ValidationError as exc:
        errors = _field_errors(exc)
        raise RequestValidationError(
            "Watermark request validation failed:\n" + "\n".join(f"- {name}: {msg}" for name, msg in errors.items()),
            errors=errors,
        ) from exc


def _default_schema_path() -> Path:
    return Path(__file__).resolve().parent / "schemas" / "watermark_request.schema.json"


def _parse_options_file(options_path: Path) -> dict[str, Any]:
    suffix = options_path.suffix.lower()
    content = options_path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        parsed = yaml.safe_load(content)
    elif suffix == ".json":
        parsed = json.loads(content)
    else:
        raise RequestValidationError(
            "Unsupported options format. Use .yaml, .yml, or .json files.\n\n"
            f"Minimal valid YAML example:\n{MIN_VALID_EXAMPLE_YAML}"
        )

    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise RequestValidationError(
            "Options root must be an object/map.\n\n"
            f"Minimal valid YAML example:\n{MIN_VALID_EXAMPLE_YAML}"
        )
    return parsed


def load_options_file(options_path: Path) -> dict[str, Any]:
    """Read and schema-check an options file without requiring every field."""
    if not options_path.exists():
        raise RequestValidationError(f"Options file not found: {options_path}")

    try:
        data = _parse_options_file(options_path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RequestValidationError(
            f"Unable to parse options file: {exc}\n\n"
            f"Minimal valid YAML example:\n{MIN_VALID_EXAMPLE_YAML}"
        ) from exc

    schema = json.loads(_default_schema_path().read_text(encoding="utf-8"))
    try:
        validate(instance=data, schema=schema)
    except JsonSchemaValidationError as exc:
        raise RequestValidationError(f"Options schema validation failed: {exc.message}") from exc

    return normalize_request_fields(data)


def load_watermark_request(options_path: Path) -> WatermarkRequest:
    return parse_watermark_request(load_options_file(options_path))


def is_supported_image_file(path: Path) -> bool:
    """Both the extension and the guessed MIME type must name jpeg/jpg/png."""
    extension = path.suffix.lower()
    mimetype, _ = mimetypes.guess_type(path.name)
    return bool(SUPPORTED_IMAGE_TYPES.search(extension)) and bool(
        mimetype and SUPPORTED_IMAGE_TYPES.search(mimetype)
    )
