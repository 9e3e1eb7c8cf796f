"""Fleet validation and randomized construction."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from seaboard.core.board import OccupancyBoard
from seaboard.core.models import (
    GRID_SIZE,
    MAX_RANDOM_ATTEMPTS,
    Coord,
    FleetRoster,
    Orientation,
    ShipKind,
    ShipPlacement,
)

logger = logging.getLogger(__name__)


def validate_fleet(
    placements: Sequence[ShipPlacement],
    roster: FleetRoster,
    grid_size: int = GRID_SIZE,
) -> tuple[bool, str]:
    """Validate that a fleet is complete, fully placed and collision-free."""
    seen: set[ShipKind] = set()
    board = OccupancyBoard(size=grid_size)

    if len(placements) != len(roster):
        return False, f"Fleet must contain exactly {len(roster)} ships."

    for placement in placements:
        if placement.ship_type not in roster:
            return False, f"Unknown ship type: {placement.ship_type.value}."
        if placement.ship_type in seen:
            return False, f"Duplicate ship type: {placement.ship_type.value}."
        seen.add(placement.ship_type)
        if placement.length != roster[placement.ship_type]:
            return False, f"Wrong length for {placement.ship_type.value}."
        if not placement.is_placed:
            return False, f"{placement.ship_type.value} is not placed."
        if not board.can_place(placement):
            return False, f"Invalid placement for {placement.ship_type.value}."
        board.place_ship(len(seen), placement)
    return True, ""


def random_placement(
    ship_type: ShipKind,
    length: int,
    board: OccupancyBoard,
    rng: random.Random,
    max_attempts: int = MAX_RANDOM_ATTEMPTS,
) -> ShipPlacement | None:
    """Sample an in-bounds placement that avoids ships already on ``board``."""
    size = board.size
    for _ in range(max_attempts):
        orientation = rng.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
        max_row = size if orientation is Orientation.HORIZONTAL else size - length + 1
        max_col = size - length + 1 if orientation is Orientation.HORIZONTAL else size
        if max_row < 1 or max_col < 1:
            return None
        bow = Coord(row=rng.randrange(max_row), col=rng.randrange(max_col))
        candidate = ShipPlacement(ship_type, length, orientation, bow)
        if board.can_place(candidate):
            return candidate
    return None


def random_fleet(
    roster: FleetRoster,
    rng: random.Random,
    grid_size: int = GRID_SIZE,
    max_attempts: int = MAX_RANDOM_ATTEMPTS,
) -> tuple[ShipPlacement, ...] | None:
    """Place every roster ship in order on a fresh board.

    Each ship gets its own retry budget. When one exhausts it the whole pass is
    abandoned and ``None`` is returned, so callers never see a partial fleet.
    """
    board = OccupancyBoard(size=grid_size)
    placements: list[ShipPlacement] = []

    for ship_id, (ship_type, length) in enumerate(roster.items(), start=1):
        placement = random_placement(ship_type, length, board, rng, max_attempts)
        if placement is None:
            logger.warning(
                "random_fleet_exhausted ship_type=%s attempts=%d",
                ship_type.value,
                max_attempts,
                extra={"ship_type": ship_type.value, "placed": len(placements), "grid_size": grid_size},
            )
            return None
        board.place_ship(ship_id, placement)
        placements.append(placement)

    return tuple(placements)
