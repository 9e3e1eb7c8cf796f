"""Setup configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from seaboard.core.models import (
    DEFAULT_ROSTER,
    GRID_SIZE,
    MAX_RANDOM_ATTEMPTS,
    FleetRoster,
    SetupConfig,
    ShipKind,
)

__all__ = ["SetupConfig", "load_default_env_files", "load_env_file", "load_setup_config", "parse_roster"]

DEFAULT_ENV_FILES: tuple[str, ...] = (".env.seaboard", ".env.seaboard.local")


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left-to-right; later files overwrite earlier values."""
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_setup_config() -> SetupConfig:
    """Build setup configuration from SEABOARD_* env vars."""
    return SetupConfig(
        grid_size=_int("SEABOARD_GRID_SIZE", GRID_SIZE),
        roster=_roster("SEABOARD_FLEET", DEFAULT_ROSTER),
        max_random_attempts=_int("SEABOARD_RANDOM_ATTEMPTS", MAX_RANDOM_ATTEMPTS),
    )


def parse_roster(raw: str) -> FleetRoster:
    """Parse ``KIND`` or ``KIND:LENGTH`` items separated by commas."""
    entries: list[tuple[ShipKind, int]] = []
    for part in raw.split(","):
        item = part.strip()
        if not item:
            continue
        name, _, length_text = item.partition(":")
        try:
            ship_type = ShipKind(name.strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unknown ship type in fleet: {name.strip()!r}.") from exc
        try:
            length = int(length_text) if length_text.strip() else ship_type.default_length
        except ValueError as exc:
            raise ValueError(f"Ship length must be an integer: {item!r}.") from exc
        entries.append((ship_type, length))
    return FleetRoster(entries)


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _roster(name: str, default: FleetRoster) -> FleetRoster:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return parse_roster(raw)
