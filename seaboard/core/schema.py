"""Fleet payload schema and conversion helpers."""

from __future__ import annotations

from collections.abc import Sequence

from seaboard.core.fleet import validate_fleet
from seaboard.core.models import (
    DEFAULT_ROSTER,
    GRID_SIZE,
    Coord,
    FleetRoster,
    Orientation,
    ShipKind,
    ShipPlacement,
)

PAYLOAD_VERSION = 1


def fleet_to_payload(fleet: Sequence[ShipPlacement], grid_size: int = GRID_SIZE) -> dict[str, object]:
    """Convert a fleet to a JSON-serializable payload."""
    return {
        "version": PAYLOAD_VERSION,
        "grid_size": grid_size,
        "ships": [
            {
                "type": placement.ship_type.value,
                "length": placement.length,
                "bow": [placement.bow.row, placement.bow.col],
                "orientation": placement.orientation.value,
            }
            for placement in fleet
        ],
    }


def payload_to_fleet(
    payload: dict[str, object],
    roster: FleetRoster = DEFAULT_ROSTER,
    grid_size: int = GRID_SIZE,
) -> tuple[ShipPlacement, ...]:
    """Convert a payload into a complete, validated fleet."""
    raw_version = payload.get("version", -1)
    if not isinstance(raw_version, (int, str)):
        raise ValueError("Payload version must be int-compatible.")
    if int(raw_version) != PAYLOAD_VERSION:
        raise ValueError("Unsupported payload version.")
    raw_grid_size = payload.get("grid_size", grid_size)
    if not isinstance(raw_grid_size, (int, str)):
        raise ValueError("Payload grid_size must be int-compatible.")
    if int(raw_grid_size) != grid_size:
        raise ValueError("Payload grid size mismatch.")

    raw_ships = payload.get("ships")
    if not isinstance(raw_ships, list):
        raise ValueError("Payload ships must be a list.")

    ships: list[ShipPlacement] = []
    for item in raw_ships:
        if not isinstance(item, dict):
            raise ValueError("Each payload ship must be an object.")
        try:
            ship_type = ShipKind(str(item["type"]))
            bow = item["bow"]
            if not isinstance(bow, list) or len(bow) != 2:
                raise ValueError("Ship bow must be a 2-item list.")
            row, col = int(bow[0]), int(bow[1])
            orientation = Orientation(str(item["orientation"]))
            length = int(item.get("length", roster.get(ship_type, ship_type.default_length)))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError("Malformed ship entry in payload.") from exc
        ships.append(ShipPlacement(ship_type, length, orientation, Coord(row=row, col=col)))

    valid, reason = validate_fleet(ships, roster, grid_size)
    if not valid:
        raise ValueError(reason)
    by_type = {placement.ship_type: placement for placement in ships}
    return tuple(by_type[ship_type] for ship_type in roster)
