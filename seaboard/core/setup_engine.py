"""Ship placement engine for the fleet setup phase.

The engine owns one fleet: exactly one placement per roster kind, kept in
roster order. Every geometric mutation builds a candidate, validates it against
the rest of the fleet and only then commits. Rejections are ordinary outcomes
reported through return values.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np

from seaboard.core.board import OccupancyBoard
from seaboard.core.fleet import random_fleet
from seaboard.core.models import (
    DEFAULT_ROSTER,
    GRID_SIZE,
    MAX_RANDOM_ATTEMPTS,
    Coord,
    FleetRoster,
    Orientation,
    ShipKind,
    SetupConfig,
    ShipPlacement,
    cells_for_placement,
)
from seaboard.core.placement_math import dropped_placement, grab_index_from_cell
from seaboard.core.rules import placement_problem
from seaboard.core.schema import fleet_to_payload, payload_to_fleet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SetupSnapshot:
    """Immutable view of engine state for renderers."""

    ships: tuple[ShipPlacement, ...]
    selected: ShipKind | None
    dragging: bool
    revision: int


class PlacementEngine:
    """Mutable fleet state guarded by the placement validation rule."""

    def __init__(
        self,
        roster: FleetRoster = DEFAULT_ROSTER,
        grid_size: int = GRID_SIZE,
        max_random_attempts: int = MAX_RANDOM_ATTEMPTS,
        rng: random.Random | None = None,
    ) -> None:
        self._config = SetupConfig(grid_size=grid_size, roster=roster, max_random_attempts=max_random_attempts)
        self._roster = roster
        self._grid_size = grid_size
        self._rng = rng if rng is not None else random.Random()
        self._ships: tuple[ShipPlacement, ...] = roster.initial_fleet()
        self._selected: ShipKind | None = None
        self._dragging = False
        self._revision = 0

    @classmethod
    def from_config(cls, config: SetupConfig, rng: random.Random | None = None) -> PlacementEngine:
        return cls(
            roster=config.roster,
            grid_size=config.grid_size,
            max_random_attempts=config.max_random_attempts,
            rng=rng,
        )

    @property
    def roster(self) -> FleetRoster:
        return self._roster

    @property
    def grid_size(self) -> int:
        return self._grid_size

    @property
    def ships(self) -> tuple[ShipPlacement, ...]:
        return self._ships

    @property
    def selected(self) -> ShipKind | None:
        return self._selected

    @property
    def dragging(self) -> bool:
        return self._dragging

    @property
    def revision(self) -> int:
        return self._revision

    def snapshot(self) -> SetupSnapshot:
        return SetupSnapshot(
            ships=self._ships,
            selected=self._selected,
            dragging=self._dragging,
            revision=self._revision,
        )

    # Commands

    def place_at(self, ship_type: ShipKind, row: int, col: int) -> bool:
        """Move a ship's bow to ``(row, col)`` keeping its orientation."""
        current = self.get(ship_type)
        if current is None:
            return False
        return self._commit(current.moved_to(Coord(row, col)))

    def upsert(self, placement: ShipPlacement) -> bool:
        """Write a fully formed placement, e.g. on drag-and-drop."""
        expected_length = self._roster.get(placement.ship_type)
        if expected_length is None:
            return False
        if placement.length != expected_length:
            logger.debug(
                "placement_rejected ship_type=%s reason=length %d != %d",
                placement.ship_type.value,
                placement.length,
                expected_length,
            )
            return False
        return self._commit(placement)

    def remove(self, ship_type: ShipKind) -> None:
        current = self.get(ship_type)
        if current is None or not current.is_placed:
            return
        self._write(current.unplaced())

    def update(
        self,
        ship_type: ShipKind,
        *,
        bow: Coord | None = None,
        orientation: Orientation | None = None,
    ) -> None:
        """Apply a partial change; invalid candidates are dropped silently."""
        current = self.get(ship_type)
        if current is None or (bow is None and orientation is None):
            return
        candidate = current
        if bow is not None:
            candidate = candidate.moved_to(bow)
        if orientation is not None:
            candidate = candidate.with_orientation(orientation)
        self._commit(candidate)

    def rotate(self, ship_type: ShipKind) -> bool:
        """Toggle orientation; placed ships must still satisfy the rule."""
        current = self.get(ship_type)
        if current is None:
            return False
        return self._commit(current.with_orientation(current.orientation.toggled()))

    def drop(self, ship_type: ShipKind, cell: Coord, grab_index: int = 0) -> bool:
        """Release a dragged ship so its grabbed cell lands on ``cell``."""
        current = self.get(ship_type)
        if current is None:
            return False
        return self.upsert(dropped_placement(current, cell, grab_index))

    def load_payload(self, payload: dict[str, object]) -> bool:
        """Replace the fleet with a complete payload; malformed payloads are rejected."""
        try:
            placements = payload_to_fleet(payload, self._roster, self._grid_size)
        except ValueError as exc:
            logger.debug("payload_rejected reason=%s", exc)
            return False
        self._ships = placements
        self._selected = None
        self._revision += 1
        return True

    def select(self, ship_type: ShipKind | None) -> None:
        if ship_type == self._selected:
            return
        self._selected = ship_type
        self._revision += 1

    def set_dragging(self, dragging: bool) -> None:
        if dragging == self._dragging:
            return
        self._dragging = dragging
        self._revision += 1

    def reset(self) -> None:
        """Start a fresh setup session."""
        self._restore_initial()
        logger.debug("setup_reset")

    def clear(self) -> None:
        """Wipe all ship positions."""
        self._restore_initial()
        logger.debug("fleet_cleared")

    def randomize(self) -> bool:
        """Replace the fleet with a random layout, or reset it on exhaustion."""
        placements = random_fleet(
            self._roster,
            self._rng,
            grid_size=self._grid_size,
            max_attempts=self._config.max_random_attempts,
        )
        if placements is None:
            self._ships = self._roster.initial_fleet()
            self._revision += 1
            return False
        self._ships = placements
        self._selected = None
        self._revision += 1
        logger.info("fleet_randomized ships=%d", len(placements))
        return True

    # Queries

    def get(self, ship_type: ShipKind) -> ShipPlacement | None:
        for placement in self._ships:
            if placement.ship_type == ship_type:
                return placement
        return None

    def is_placed(self, ship_type: ShipKind) -> bool:
        placement = self.get(ship_type)
        return placement is not None and placement.is_placed

    def is_valid(self, candidate: ShipPlacement) -> bool:
        return self.rejection_reason(candidate) is None

    def rejection_reason(self, candidate: ShipPlacement) -> str | None:
        """Explain why a candidate would be rejected, ``None`` if it is valid."""
        return placement_problem(candidate, self._ships, self._grid_size)

    def all_placed(self) -> bool:
        return all(placement.is_placed for placement in self._ships)

    def placed_ships(self) -> list[ShipPlacement]:
        return [placement for placement in self._ships if placement.is_placed]

    def unplaced_kinds(self) -> list[ShipKind]:
        return [placement.ship_type for placement in self._ships if not placement.is_placed]

    def ship_at(self, coord: Coord) -> ShipKind | None:
        """Return the kind of the placed ship covering a cell."""
        for placement in self._ships:
            if placement.is_placed and coord in cells_for_placement(placement):
                return placement.ship_type
        return None

    def grab_index_at(self, ship_type: ShipKind, cell: Coord) -> int | None:
        """Offset of ``cell`` inside a placed ship, for starting a drag."""
        placement = self.get(ship_type)
        if placement is None or not placement.is_placed:
            return None
        return grab_index_from_cell(placement, cell)

    def to_payload(self) -> dict[str, object] | None:
        """Payload of the completed fleet, ``None`` until every ship is placed."""
        if not self.all_placed():
            return None
        return fleet_to_payload(self._ships, self._grid_size)

    def occupancy(self) -> np.ndarray:
        """Occupancy grid with 1-based ship ids in roster order."""
        return OccupancyBoard.from_fleet(self._ships, self._grid_size).ships

    # Internals

    def _commit(self, candidate: ShipPlacement) -> bool:
        reason = self.rejection_reason(candidate)
        if reason is not None:
            logger.debug(
                "placement_rejected ship_type=%s row=%d col=%d orientation=%s reason=%s",
                candidate.ship_type.value,
                candidate.bow.row,
                candidate.bow.col,
                candidate.orientation.value,
                reason,
            )
            return False
        if self.get(candidate.ship_type) != candidate:
            self._write(candidate)
        return True

    def _write(self, placement: ShipPlacement) -> None:
        self._ships = tuple(
            placement if current.ship_type == placement.ship_type else current for current in self._ships
        )
        self._revision += 1

    def _restore_initial(self) -> None:
        self._ships = self._roster.initial_fleet()
        self._selected = None
        self._dragging = False
        self._revision += 1

