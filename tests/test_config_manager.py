"""Unit tests for the settings file."""

from pathlib import Path

import pytest

from filesig.config import ConfigError, ConfigManager, FilesigConfig, validate_config
from filesig.detection import RESUME_MIME_TYPES


def _fresh_manager(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ConfigManager:
    monkeypatch.setenv("HOME", str(tmp_path))
    return ConfigManager()


def test_ensure_exists_creates_default_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)

    path = manager.ensure_exists()

    assert path == tmp_path / ".filesig" / "config.yaml"
    text = path.read_text(encoding="utf-8")
    assert "filesig configuration file" in text
    assert "Last updated:" in text

    config = manager.load()
    assert isinstance(config, FilesigConfig)
    assert config.detection.header_length == 24
    assert set(config.policy.allowed_mime_types) == RESUME_MIME_TYPES


def test_partial_file_keeps_other_defaults(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.yaml")
    manager.save({"detection": {"header_length": 32}, "logging": {"level": "INFO"}})

    config = manager.load()

    assert config.detection.header_length == 32
    assert config.logging.level == "INFO"
    assert config.policy.accept_plain_text is True
    assert config.cli.quiet_default is False


def test_environment_does_not_override_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = ConfigManager(tmp_path / "config.yaml")
    manager.save({"policy": {"allowed_mime_types": ["application/pdf"]}})
    monkeypatch.setenv("FILESIG__POLICY__ALLOWED_MIME_TYPES", "[application/zip]")

    assert manager.load().policy.allowed_mime_types == ["application/pdf"]


def test_read_values_returns_empty_mapping_without_file(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "missing" / "config.yaml")

    assert manager.read_values() == {}
    assert manager.read_text() == ""


def test_non_mapping_file_raises_config_error(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.yaml")
    manager.ensure_exists()

    manager.path.write_text("- not-a-mapping", encoding="utf-8")

    with pytest.raises(ConfigError):
        manager.load()


def test_broken_yaml_raises_config_error(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.yaml")
    manager.path.write_text("detection: [broken", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        manager.read_values()


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "config.yaml")
    manager.save({"detection": {"offset": 4}})

    with pytest.raises(ConfigError):
        manager.load()


@pytest.mark.parametrize(
    "values",
    [
        {"detection": {"header_length": "not-an-int"}},
        {"detection": {"header_length": 0}},
        {"logging": {"level": "TRACE"}},
    ],
)
def test_validate_config_invalid_value_raises(values: dict) -> None:
    with pytest.raises(ConfigError, match="Invalid configuration values"):
        validate_config(values)
