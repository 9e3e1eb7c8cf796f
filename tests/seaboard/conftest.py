from __future__ import annotations

import random

import pytest

from seaboard.core.models import Coord, Orientation, ShipKind, ShipPlacement
from seaboard.core.setup_engine import PlacementEngine


def make_valid_fleet() -> tuple[ShipPlacement, ...]:
    return (
        ShipPlacement(ShipKind.CARRIER, 5, Orientation.HORIZONTAL, Coord(0, 0)),
        ShipPlacement(ShipKind.BATTLESHIP, 4, Orientation.HORIZONTAL, Coord(2, 0)),
        ShipPlacement(ShipKind.PATROL_BOAT, 2, Orientation.HORIZONTAL, Coord(4, 0)),
        ShipPlacement(ShipKind.SUBMARINE, 3, Orientation.HORIZONTAL, Coord(6, 0)),
        ShipPlacement(ShipKind.DESTROYER, 3, Orientation.HORIZONTAL, Coord(8, 0)),
    )


@pytest.fixture
def valid_fleet() -> tuple[ShipPlacement, ...]:
    return make_valid_fleet()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def engine(seeded_rng: random.Random) -> PlacementEngine:
    return PlacementEngine(rng=seeded_rng)
