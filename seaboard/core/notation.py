"""Board coordinate notation helpers (``A1`` style labels)."""

from __future__ import annotations

import re

from seaboard.core.models import GRID_SIZE, Coord

_LABEL_RE = re.compile(r"^([A-Z])(\d{1,2})$", re.IGNORECASE)
_NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_valid_coordinate(coord: Coord, grid_size: int = GRID_SIZE) -> bool:
    return 0 <= coord.row < grid_size and 0 <= coord.col < grid_size


def adjacent_cells(coord: Coord, grid_size: int = GRID_SIZE) -> list[Coord]:
    """Return orthogonal neighbours that lie on the grid (up, down, left, right)."""
    result: list[Coord] = []
    for dr, dc in _NEIGHBOUR_OFFSETS:
        neighbour = Coord(coord.row + dr, coord.col + dc)
        if is_valid_coordinate(neighbour, grid_size):
            result.append(neighbour)
    return result


def coord_to_label(coord: Coord) -> str:
    """Column letter followed by the 1-based row, e.g. ``Coord(0, 0) -> "A1"``."""
    return f"{chr(ord('A') + coord.col)}{coord.row + 1}"


def label_to_coord(label: str, grid_size: int = GRID_SIZE) -> Coord | None:
    """Parse an ``A1`` style label; ``None`` when malformed or off the grid."""
    match = _LABEL_RE.match(label.strip())
    if match is None:
        return None
    col = ord(match.group(1).upper()) - ord("A")
    row = int(match.group(2)) - 1
    coord = Coord(row, col)
    if not is_valid_coordinate(coord, grid_size):
        return None
    return coord
