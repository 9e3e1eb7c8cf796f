from seaboard.core.models import Coord
from seaboard.core.notation import adjacent_cells, coord_to_label, is_valid_coordinate, label_to_coord


def test_is_valid_coordinate() -> None:
    assert is_valid_coordinate(Coord(0, 0))
    assert is_valid_coordinate(Coord(9, 9))
    assert not is_valid_coordinate(Coord(10, 0))
    assert not is_valid_coordinate(Coord(0, -1))
    assert not is_valid_coordinate(Coord(6, 6), grid_size=6)


def test_adjacent_cells_in_corner_and_center() -> None:
    assert adjacent_cells(Coord(0, 0)) == [Coord(1, 0), Coord(0, 1)]
    assert adjacent_cells(Coord(5, 5)) == [Coord(4, 5), Coord(6, 5), Coord(5, 4), Coord(5, 6)]


def test_coord_labels() -> None:
    assert coord_to_label(Coord(0, 0)) == "A1"
    assert coord_to_label(Coord(9, 9)) == "J10"
    assert label_to_coord("A1") == Coord(0, 0)
    assert label_to_coord("j10") == Coord(9, 9)
    assert label_to_coord(" c4 ") == Coord(3, 2)


def test_label_to_coord_rejects_malformed_and_off_grid() -> None:
    assert label_to_coord("K1") is None
    assert label_to_coord("A11") is None
    assert label_to_coord("A0") is None
    assert label_to_coord("11") is None
    assert label_to_coord("") is None
