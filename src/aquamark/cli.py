from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any

from aquamark.exceptions import AquamarkError, ConfigurationError
from aquamark.models.options import GRAVITIES
from aquamark.models.schema_export import write_request_schema
from aquamark.output.metrics import Timer
from aquamark.output.writer import write_bytes
from aquamark.pipeline import preload_gradient_source, watermark
from aquamark.request_loader import (
    RequestValidationError,
    is_supported_image_file,
    load_options_file,
    parse_watermark_request,
)


def _strip_optional_quotes(value: str) -> str:
    trimmed = value.strip()
    if len(trimmed) >= 2 and ((trimmed[0] == '"' and trimmed[-1] == '"') or (trimmed[0] == "'" and trimmed[-1] == "'")):
        return trimmed[1:-1]
    return trimmed


def _load_env_file(env_path: Path) -> None:
    if not env_path.exists() or not env_path.is_file():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, raw_value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue

        os.environ.setdefault(key, _strip_optional_quotes(raw_value))


def _load_default_env_files() -> None:
    cwd_env = Path.cwd() / ".env"
    project_root_env = Path(__file__).resolve().parents[2] / ".env"

    _load_env_file(project_root_env)
    if cwd_env != project_root_env:
        _load_env_file(cwd_env)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Watermark a background image with an overlay")
    parser.add_argument("--background", default=None, help="Background image (.png/.jpg/.jpeg)")
    parser.add_argument("--overlay", default=None, help="Overlay image, e.g. a logo (.png/.jpg/.jpeg)")
    parser.add_argument("--output", default=None, help="Where to write the watermarked PNG")
    parser.add_argument("--options", default=None, help="Options file (.yaml/.yml/.json); flags override it")
    parser.add_argument("--gravity", choices=GRAVITIES, default=None, help="Overlay placement")
    parser.add_argument("--quality", type=int, default=None, help="Encoder quality 1-100 (default 90)")
    parser.add_argument(
        "--gradient",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Draw a translucent contrast band behind the overlay",
    )
    parser.add_argument("--gradient-height", type=int, default=None, help="Band height, percent of background height")
    parser.add_argument(
        "--gradient-light",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use a lightening band instead of a darkening one",
    )
    parser.add_argument("--overlay-width", type=int, default=None, help="Overlay box width, percent of background")
    parser.add_argument("--overlay-height", type=int, default=None, help="Overlay box height, percent of background")
    parser.add_argument("--export-schema", default=None, help="Write the request JSON schema to this path and exit")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides = {
        "gravity": args.gravity,
        "quality": args.quality,
        "gradient": args.gradient,
        "gradientHeight": args.gradient_height,
        "gradientLight": args.gradient_light,
        "overlayWidth": args.overlay_width,
        "overlayHeight": args.overlay_height,
    }
    return {key: value for key, value in overrides.items() if value is not None}


def _require_image_file(path: Path, role: str) -> None:
    if not path.is_file():
        raise SystemExit(f"{role} file not found: {path}")
    if not is_supported_image_file(path):
        raise SystemExit(f"`{role}` file must be in jpeg|jpg|png format: {path}")


def main(argv: list[str] | None = None) -> None:
    _load_default_env_files()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    if args.export_schema:
        schema_path = Path(args.export_schema)
        write_request_schema(schema_path)
        print(f"Request schema written to {schema_path}")
        return

    if not args.background or not args.overlay or not args.output:
        raise SystemExit("--background, --overlay and --output are required unless --export-schema is used")

    try:
        preload_gradient_source()
    except ConfigurationError as exc:
        raise SystemExit(f"Startup failed: {exc}") from exc

    background_path = Path(args.background)
    overlay_path = Path(args.overlay)
    output_path = Path(args.output)
    _require_image_file(background_path, "background")
    _require_image_file(overlay_path, "overlay")

    timer = Timer()
    try:
        fields = load_options_file(Path(args.options)) if args.options else {}
        fields.update(_cli_overrides(args))
        request = parse_watermark_request(fields)
        result = watermark(background_path.read_bytes(), overlay_path.read_bytes(), request.to_composite_options())
    except RequestValidationError as exc:
        raise SystemExit(f"Validation error:\n{exc}") from exc
    except AquamarkError as exc:
        raise SystemExit(f"Watermark failed: {exc}") from exc

    write_bytes(result.data, output_path)

    print("Watermark written")
    print(f"- Output: {output_path}")
    print(f"- Format: {result.format} ({result.content_type})")
    print(f"- Size: {result.width}x{result.height}")
    print(f"- Execution time (s): {round(timer.elapsed(), 3)}")


if __name__ == "__main__":
    main()
