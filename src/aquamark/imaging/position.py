from __future__ import annotations

from aquamark.models.options import Band, Position

POSITIONS: tuple[Position, ...] = ("north", "east", "south", "west")

# Offsets in halves of the free space: 0 = flush start, 1 = centred, 2 = flush end.
_ANCHORS: dict[str, tuple[int, int]] = {
    "north": (1, 0),
    "northeast": (2, 0),
    "east": (2, 1),
    "southeast": (2, 2),
    "south": (1, 2),
    "southwest": (0, 2),
    "west": (0, 1),
}


def resolve_band(gravity: str) -> Band:
    """Coarse north/south band used only to orient the gradient."""
    return "north" if "north" in gravity else "south"


def rotation_angle(position: Position) -> int:
    """Clockwise rotation that turns the gradient's dark edge towards *position*."""
    return (POSITIONS.index(position) * 90 + 180) % 360


def anchor_offset(canvas_size: tuple[int, int], layer_size: tuple[int, int], gravity: str) -> tuple[int, int]:
    if gravity not in _ANCHORS:
        raise ValueError(f"Unsupported gravity: {gravity}")

    horizontal, vertical = _ANCHORS[gravity]
    free_width = canvas_size[0] - layer_size[0]
    free_height = canvas_size[1] - layer_size[1]
    return free_width * horizontal // 2, free_height * vertical // 2
