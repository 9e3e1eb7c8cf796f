"""Occupancy board projection of a fleet."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np

from seaboard.core.models import GRID_SIZE, Coord, ShipPlacement, cells_for_placement


@dataclass(slots=True)
class OccupancyBoard:
    """Numpy-backed occupancy grid; 0 is water, otherwise a ship id."""

    size: int = GRID_SIZE
    ships: np.ndarray = field(
        default_factory=lambda: np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int16)
    )

    def __post_init__(self) -> None:
        if self.ships.shape != (self.size, self.size):
            self.ships = np.zeros((self.size, self.size), dtype=np.int16)

    @classmethod
    def from_fleet(cls, placements: Iterable[ShipPlacement], size: int = GRID_SIZE) -> OccupancyBoard:
        """Project placed ships onto a fresh board; ids follow fleet order from 1."""
        board = cls(size=size)
        for ship_id, placement in enumerate(placements, start=1):
            if placement.is_placed:
                board.place_ship(ship_id, placement)
        return board

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is inside the board."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def can_place(self, placement: ShipPlacement) -> bool:
        """Return whether a placement is in bounds and hits only water."""
        for cell in cells_for_placement(placement):
            if not self.in_bounds(cell):
                return False
            if self.ships[cell.row, cell.col] != 0:
                return False
        return True

    def place_ship(self, ship_id: int, placement: ShipPlacement) -> None:
        """Mark a ship's cells with its id."""
        if not placement.is_placed or not self.can_place(placement):
            raise ValueError(f"Invalid placement for {placement.ship_type.value}.")
        for cell in cells_for_placement(placement):
            self.ships[cell.row, cell.col] = ship_id

    def ship_at(self, coord: Coord) -> int:
        """Return the ship id covering a cell, 0 for water or off-board."""
        if not self.in_bounds(coord):
            return 0
        return int(self.ships[coord.row, coord.col])

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.ships))
