from __future__ import annotations

import os

import pytest

from seaboard.core.models import DEFAULT_ROSTER, FleetRoster, ShipKind
from seaboard.infra.config import (
    SetupConfig,
    load_default_env_files,
    load_env_file,
    load_setup_config,
    parse_roster,
)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\nB='two'\n#comment\nINVALID\nC=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("C", "already")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)
    load_env_file(str(env_file))
    assert os.environ.get("A") == "1"
    assert os.environ.get("B") == "two"
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("C") == "already"


def test_load_env_file_missing_is_noop(tmp_path) -> None:
    load_env_file(str(tmp_path / ".env.missing"))


def test_load_default_env_files_honors_order(tmp_path, monkeypatch) -> None:
    base_env = tmp_path / ".env.seaboard"
    local_env = tmp_path / ".env.seaboard.local"
    base_env.write_text("A=base\nB=base\n", encoding="utf-8")
    local_env.write_text("B=local\n", encoding="utf-8")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)

    load_default_env_files(paths=(str(base_env), str(local_env)))
    assert os.environ.get("A") == "base"
    assert os.environ.get("B") == "local"


def test_load_setup_config_defaults(monkeypatch) -> None:
    for name in ("SEABOARD_GRID_SIZE", "SEABOARD_FLEET", "SEABOARD_RANDOM_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)
    config = load_setup_config()
    assert config == SetupConfig()
    assert config.grid_size == 10
    assert config.roster == DEFAULT_ROSTER
    assert config.max_random_attempts == 100


def test_load_setup_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SEABOARD_GRID_SIZE", "8")
    monkeypatch.setenv("SEABOARD_FLEET", "carrier, destroyer:2")
    monkeypatch.setenv("SEABOARD_RANDOM_ATTEMPTS", "not-a-number")
    config = load_setup_config()
    assert config.grid_size == 8
    assert config.roster == FleetRoster([(ShipKind.CARRIER, 5), (ShipKind.DESTROYER, 2)])
    assert config.max_random_attempts == 100


def test_parse_roster_rejects_unknown_kind_and_bad_length() -> None:
    with pytest.raises(ValueError):
        parse_roster("FRIGATE:3")
    with pytest.raises(ValueError):
        parse_roster("CARRIER:x")
    with pytest.raises(ValueError):
        parse_roster(" , ")


def test_setup_config_validation() -> None:
    with pytest.raises(ValueError):
        SetupConfig(grid_size=0)
    with pytest.raises(ValueError):
        SetupConfig(grid_size=4)
    with pytest.raises(ValueError):
        SetupConfig(max_random_attempts=0)
    with pytest.raises(ValueError):
        SetupConfig(grid_size=27)
    assert SetupConfig(grid_size=26).grid_size == 26


def test_setup_config_is_the_core_model() -> None:
    from seaboard.core import models

    assert SetupConfig is models.SetupConfig


def test_load_setup_config_rejects_oversized_grid(monkeypatch) -> None:
    monkeypatch.setenv("SEABOARD_GRID_SIZE", "30")
    monkeypatch.delenv("SEABOARD_FLEET", raising=False)
    with pytest.raises(ValueError):
        load_setup_config()
