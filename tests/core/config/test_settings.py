"""Tests for jobwire settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from jobwire.core.config import MAX_VARINT, ConfigManager, JobWireSettings
from jobwire.core.exceptions import JobWireError


def test_defaults() -> None:
    settings = JobWireSettings()

    assert settings.debug is False
    assert settings.wire.max_field_bytes is None
    assert settings.logging.level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOBWIRE_WIRE__MAX_FIELD_BYTES", "64")
    monkeypatch.setenv("JOBWIRE_LOGGING__LEVEL", "DEBUG")

    settings = JobWireSettings()

    assert settings.wire.max_field_bytes == 64
    assert settings.logging.level == "DEBUG"


def test_toml_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.toml"
    settings = JobWireSettings(debug=True, wire={"max_field_bytes": 4096})

    settings.save_to_file(path)
    loaded = JobWireSettings.load_from_file(path)

    assert loaded.debug is True
    assert loaded.wire.max_field_bytes == 4096


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        JobWireSettings.load_from_file(tmp_path / "absent.toml")


def test_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("wire = [unterminated", encoding="utf-8")

    with pytest.raises(JobWireError) as info:
        JobWireSettings.load_from_file(path)

    assert info.value.error_code == "CONFIGURATION_ERROR"


def test_manager_uses_defaults_without_file(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.toml")

    assert manager.settings.wire.max_field_bytes is None
    assert not manager.config_path.exists()


def test_manager_update_save_and_reload(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.toml")
    manager.update(debug=True)
    manager.save()

    reloaded = ConfigManager(tmp_path / "config.toml")

    assert reloaded.settings.debug is True

    reloaded.reset()
    assert reloaded.settings.debug is False


def test_limit_above_varint_range_is_rejected() -> None:
    with pytest.raises(ValueError):
        JobWireSettings(wire={"max_field_bytes": MAX_VARINT + 1})
