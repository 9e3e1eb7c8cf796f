"""Drag-and-drop geometry helpers for placement editors."""

from __future__ import annotations

from seaboard.core.models import Coord, Orientation, ShipPlacement


def grab_index_from_cell(placement: ShipPlacement, cell: Coord) -> int:
    """Compute relative grab index inside a ship from a clicked cell."""
    if placement.orientation is Orientation.HORIZONTAL:
        offset = cell.col - placement.bow.col
    else:
        offset = cell.row - placement.bow.row
    return min(max(0, offset), placement.length - 1)


def bow_from_grab_index(cell: Coord, orientation: Orientation, grab_index: int) -> Coord:
    """Resolve bow coordinate from the drop cell and relative grab index."""
    if orientation is Orientation.HORIZONTAL:
        return Coord(row=cell.row, col=cell.col - grab_index)
    return Coord(row=cell.row - grab_index, col=cell.col)


def dropped_placement(held: ShipPlacement, cell: Coord, grab_index: int) -> ShipPlacement:
    """Candidate placement for a held ship released over ``cell``."""
    return held.moved_to(bow_from_grab_index(cell, held.orientation, grab_index))
