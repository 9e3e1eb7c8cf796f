"""Placement validation rule: bounds check plus overlap check."""

from __future__ import annotations

from collections.abc import Iterable

from seaboard.core.models import GRID_SIZE, Orientation, ShipPlacement, occupied_cells


def in_bounds(placement: ShipPlacement, grid_size: int = GRID_SIZE) -> bool:
    """Return whether a placed ship lies fully inside the grid."""
    row, col = placement.bow.row, placement.bow.col
    if placement.orientation is Orientation.HORIZONTAL:
        return 0 <= row < grid_size and 0 <= col and col + placement.length <= grid_size
    return 0 <= col < grid_size and 0 <= row and row + placement.length <= grid_size


def overlapping_ship(candidate: ShipPlacement, fleet: Iterable[ShipPlacement]) -> ShipPlacement | None:
    """Return the first other placed ship sharing a cell with the candidate."""
    cells = occupied_cells(candidate)
    if not cells:
        return None
    for other in fleet:
        if other.ship_type == candidate.ship_type or not other.is_placed:
            continue
        if cells & occupied_cells(other):
            return other
    return None


def overlaps(candidate: ShipPlacement, fleet: Iterable[ShipPlacement]) -> bool:
    """Return whether the candidate intersects any other placed ship."""
    return overlapping_ship(candidate, fleet) is not None


def placement_problem(
    candidate: ShipPlacement,
    fleet: Iterable[ShipPlacement],
    grid_size: int = GRID_SIZE,
) -> str | None:
    """Return why a candidate is rejected, or ``None`` when it is acceptable."""
    if not candidate.is_placed:
        return None
    if not in_bounds(candidate, grid_size):
        return "out of bounds"
    other = overlapping_ship(candidate, fleet)
    if other is not None:
        return f"overlaps {other.ship_type.value}"
    return None


def is_valid_placement(
    candidate: ShipPlacement,
    fleet: Iterable[ShipPlacement],
    grid_size: int = GRID_SIZE,
) -> bool:
    """Unplaced candidates are always valid; placed ones must pass both checks."""
    return placement_problem(candidate, fleet, grid_size) is None
