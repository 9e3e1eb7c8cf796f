import numpy as np
import pytest

from seaboard.core.board import OccupancyBoard
from seaboard.core.models import Coord, Orientation, ShipKind, ShipPlacement


def test_place_ship_marks_cells_with_id() -> None:
    board = OccupancyBoard()
    board.place_ship(3, ShipPlacement(ShipKind.PATROL_BOAT, 2, Orientation.VERTICAL, Coord(4, 4)))
    assert board.ship_at(Coord(4, 4)) == 3
    assert board.ship_at(Coord(5, 4)) == 3
    assert board.ship_at(Coord(6, 4)) == 0
    assert board.occupied_count() == 2


def test_can_place_rejects_overlap_and_out_of_bounds() -> None:
    board = OccupancyBoard()
    board.place_ship(1, ShipPlacement(ShipKind.CARRIER, 5, Orientation.HORIZONTAL, Coord(0, 0)))
    assert not board.can_place(ShipPlacement(ShipKind.DESTROYER, 3, Orientation.VERTICAL, Coord(0, 4)))
    assert not board.can_place(ShipPlacement(ShipKind.DESTROYER, 3, Orientation.HORIZONTAL, Coord(9, 8)))
    assert board.can_place(ShipPlacement(ShipKind.DESTROYER, 3, Orientation.VERTICAL, Coord(1, 4)))


def test_place_ship_raises_on_invalid_or_unplaced() -> None:
    board = OccupancyBoard()
    with pytest.raises(ValueError):
        board.place_ship(1, ShipPlacement(ShipKind.CARRIER, 5, Orientation.HORIZONTAL, Coord(0, 6)))
    with pytest.raises(ValueError):
        board.place_ship(1, ShipPlacement(ShipKind.CARRIER, 5))


def test_from_fleet_skips_unplaced_and_honours_size(valid_fleet) -> None:
    fleet = list(valid_fleet)
    fleet[1] = fleet[1].unplaced()
    board = OccupancyBoard.from_fleet(fleet)
    assert board.ships.dtype == np.int16
    assert board.occupied_count() == 5 + 2 + 3 + 3
    assert board.ship_at(Coord(2, 0)) == 0
    assert board.ship_at(Coord(4, 1)) == 3

    small = OccupancyBoard(size=4)
    assert small.ships.shape == (4, 4)
    assert small.ship_at(Coord(4, 0)) == 0
