"""Core domain models used by the fleet setup engine."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum

GRID_SIZE = 10
# Columns are labelled A..Z.
MAX_GRID_SIZE = 26
MAX_RANDOM_ATTEMPTS = 100


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    def toggled(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class ShipKind(StrEnum):
    """Ship kinds of the setup roster."""

    CARRIER = "CARRIER"
    BATTLESHIP = "BATTLESHIP"
    DESTROYER = "DESTROYER"
    SUBMARINE = "SUBMARINE"
    PATROL_BOAT = "PATROL_BOAT"

    @property
    def default_length(self) -> int:
        return SHIP_LENGTHS[self]

    @property
    def display_name(self) -> str:
        return SHIP_NAMES[self]


SHIP_LENGTHS: dict[ShipKind, int] = {
    ShipKind.CARRIER: 5,
    ShipKind.BATTLESHIP: 4,
    ShipKind.DESTROYER: 3,
    ShipKind.SUBMARINE: 3,
    ShipKind.PATROL_BOAT: 2,
}

SHIP_NAMES: dict[ShipKind, str] = {
    ShipKind.CARRIER: "Carrier",
    ShipKind.BATTLESHIP: "Battleship",
    ShipKind.DESTROYER: "Destroyer",
    ShipKind.SUBMARINE: "Submarine",
    ShipKind.PATROL_BOAT: "Patrol Boat",
}


@dataclass(frozen=True, slots=True)
class Coord:
    """Grid coordinate."""

    row: int
    col: int


UNPLACED = Coord(-1, -1)


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship; ``bow`` is the anchor cell."""

    ship_type: ShipKind
    length: int
    orientation: Orientation = Orientation.HORIZONTAL
    bow: Coord = UNPLACED

    @property
    def is_placed(self) -> bool:
        return self.bow != UNPLACED

    def moved_to(self, bow: Coord) -> ShipPlacement:
        return replace(self, bow=bow)

    def with_orientation(self, orientation: Orientation) -> ShipPlacement:
        return replace(self, orientation=orientation)

    def unplaced(self) -> ShipPlacement:
        return replace(self, bow=UNPLACED)


def cells_for_placement(placement: ShipPlacement) -> list[Coord]:
    """Compute covered cells for a placement, bow first."""
    result: list[Coord] = []
    for i in range(placement.length):
        if placement.orientation is Orientation.HORIZONTAL:
            result.append(Coord(placement.bow.row, placement.bow.col + i))
        else:
            result.append(Coord(placement.bow.row + i, placement.bow.col))
    return result


def occupied_cells(placement: ShipPlacement) -> frozenset[Coord]:
    """Return the occupied-cell set; unplaced ships occupy nothing."""
    if not placement.is_placed:
        return frozenset()
    return frozenset(cells_for_placement(placement))


class FleetRoster(Mapping[ShipKind, int]):
    """Ordered, immutable ``kind -> length`` mapping."""

    __slots__ = ("_lengths",)

    def __init__(self, entries: Iterable[tuple[ShipKind, int]]) -> None:
        lengths: dict[ShipKind, int] = {}
        for ship_type, length in entries:
            ship_type = ShipKind(ship_type)
            if ship_type in lengths:
                raise ValueError(f"Duplicate ship type in roster: {ship_type.value}.")
            if int(length) < 1:
                raise ValueError(f"Ship length must be positive: {ship_type.value}={length}.")
            lengths[ship_type] = int(length)
        if not lengths:
            raise ValueError("Roster must contain at least one ship.")
        self._lengths = lengths

    @classmethod
    def from_kinds(cls, kinds: Iterable[ShipKind]) -> FleetRoster:
        """Build a roster using each kind's default length."""
        return cls((ship_type, ship_type.default_length) for ship_type in kinds)

    def __getitem__(self, ship_type: ShipKind) -> int:
        return self._lengths[ship_type]

    def __iter__(self) -> Iterator[ShipKind]:
        return iter(self._lengths)

    def __len__(self) -> int:
        return len(self._lengths)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FleetRoster):
            return NotImplemented
        return list(self._lengths.items()) == list(other._lengths.items())

    def __hash__(self) -> int:
        return hash(tuple(self._lengths.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{ship_type.value}={length}" for ship_type, length in self._lengths.items())
        return f"FleetRoster({inner})"

    @property
    def kinds(self) -> tuple[ShipKind, ...]:
        return tuple(self._lengths)

    @property
    def max_length(self) -> int:
        return max(self._lengths.values())

    def initial_fleet(self) -> tuple[ShipPlacement, ...]:
        """Return every roster ship unplaced and horizontal."""
        return tuple(ShipPlacement(ship_type, length) for ship_type, length in self._lengths.items())


DEFAULT_ROSTER = FleetRoster.from_kinds(
    (
        ShipKind.CARRIER,
        ShipKind.BATTLESHIP,
        ShipKind.PATROL_BOAT,
        ShipKind.SUBMARINE,
        ShipKind.DESTROYER,
    )
)


@dataclass(frozen=True, slots=True)
class SetupConfig:
    """Construction-time parameters of a placement engine."""

    grid_size: int = GRID_SIZE
    roster: FleetRoster = field(default_factory=lambda: DEFAULT_ROSTER)
    max_random_attempts: int = MAX_RANDOM_ATTEMPTS

    def __post_init__(self) -> None:
        if not 1 <= self.grid_size <= MAX_GRID_SIZE:
            raise ValueError(f"Grid size must be between 1 and {MAX_GRID_SIZE}, got {self.grid_size}.")
        if self.roster.max_length > self.grid_size:
            raise ValueError(
                f"Longest ship ({self.roster.max_length}) does not fit a {self.grid_size}x{self.grid_size} grid."
            )
        if self.max_random_attempts < 1:
            raise ValueError(f"Random placement budget must be at least 1, got {self.max_random_attempts}.")
