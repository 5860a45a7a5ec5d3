"""Unit tests for presstrack config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from presstrack.config import ConfigError, LogLevel, load_config


@pytest.mark.unit
def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    """Missing config file should yield deterministic defaults."""
    config = load_config(tmp_path / "missing.yaml")

    assert config.console.prompt == "presstrack> "
    assert config.console.log_level == LogLevel.WARNING
    assert config.commands.aliases == {}


@pytest.mark.unit
def test_load_config_reads_yaml(tmp_path: Path) -> None:
    """YAML payloads set console and alias values."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "console": {"prompt": "> ", "log_level": "DEBUG"},
                "commands": {"aliases": {"rm": "delete"}},
            }
        ),
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.console.prompt == "> "
    assert config.console.log_level == LogLevel.DEBUG
    assert config.commands.aliases == {"rm": "delete"}


@pytest.mark.unit
def test_load_config_reads_json(tmp_path: Path) -> None:
    """JSON payloads are decoded by suffix."""
    config_path = tmp_path / "config.json"
    config_path.write_text('{"commands":{"aliases":{"ls":"list"}}}', encoding="utf-8")

    assert load_config(config_path).commands.aliases == {"ls": "list"}


@pytest.mark.unit
def test_load_config_empty_file_is_defaults(tmp_path: Path) -> None:
    """An empty YAML document falls back to defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path).commands.aliases == {}


@pytest.mark.unit
def test_load_config_rejects_invalid_json(tmp_path: Path) -> None:
    """Invalid JSON should raise deterministic config error."""
    config_path = tmp_path / "config.json"
    config_path.write_text("{not-json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid config JSON"):
        load_config(config_path)


@pytest.mark.unit
def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    """Root payload must be an object."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="root must be an object"):
        load_config(config_path)


@pytest.mark.unit
def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    """Unknown keys fail validation."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("console:\n  colour: red\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid config payload"):
        load_config(config_path)
