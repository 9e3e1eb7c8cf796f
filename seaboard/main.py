"""Application entry point: build a random fleet and print it."""

from __future__ import annotations

import logging

from seaboard.core.models import Coord
from seaboard.core.notation import coord_to_label
from seaboard.core.setup_engine import PlacementEngine
from seaboard.infra.config import load_default_env_files, load_setup_config
from seaboard.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)

WATER = "."


def render_fleet(engine: PlacementEngine) -> str:
    """Render the grid as text, one letter per ship kind."""
    size = engine.grid_size
    occupancy = engine.occupancy()
    symbols = {ship_id: placement.ship_type.value[0] for ship_id, placement in enumerate(engine.ships, start=1)}
    header = "    " + " ".join(coord_to_label(Coord(0, col))[0] for col in range(size))
    lines = [header]
    for row in range(size):
        cells = " ".join(symbols.get(int(occupancy[row, col]), WATER) for col in range(size))
        lines.append(f"{row + 1:>3} {cells}")
    return "\n".join(lines)


def main() -> int:
    """Run a one-shot random setup."""
    load_default_env_files()
    setup_logging()
    try:
        config = load_setup_config()
        engine = PlacementEngine.from_config(config)
        logger.info(
            "setup_config grid_size=%d ships=%d attempts=%d",
            config.grid_size,
            len(config.roster),
            config.max_random_attempts,
        )
        placed = engine.randomize()
        print(render_fleet(engine))
        for placement in engine.placed_ships():
            print(
                f"{placement.ship_type.display_name:<12} {coord_to_label(placement.bow):<4} "
                f"{placement.orientation.value.lower()}"
            )
        return 0 if placed and engine.all_placed() else 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
