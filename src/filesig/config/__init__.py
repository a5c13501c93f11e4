"""Settings file handling for filesig.

Settings live in a YAML file, by default ``~/.filesig/config.yaml``. The file
holds any subset of :class:`FilesigConfig`; omitted keys keep their defaults.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .exceptions import ConfigError
from .models import FilesigConfig

DEFAULT_CONFIG_PATH = Path("~/.filesig/config.yaml")
_FILE_HEADER = (
    "# filesig configuration file\n"
    "# Change it with `filesig config edit` or `filesig config set KEY --value VALUE`.\n"
)


def validate_config(data: Mapping[str, Any]) -> FilesigConfig:
    """Build settings from a partial mapping.

    Args:
        data: Nested section/key mapping, as stored in the settings file.

    Returns:
        FilesigConfig: Defaults with every value in ``data`` applied.

    Raises:
        ConfigError: If a key is unknown or a value fails validation.
    """
    try:
        return FilesigConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration values: {exc}") from exc


class ConfigManager:
    """Read and write the YAML settings file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = (path or DEFAULT_CONFIG_PATH).expanduser()

    def ensure_exists(self) -> Path:
        """Write a file holding the defaults unless one is already present."""
        if not self.path.exists():
            self.save(FilesigConfig())
        return self.path

    def read_text(self) -> str:
        if not self.path.exists():
            return ""
        return self.path.read_text(encoding="utf-8")

    def read_values(self) -> dict[str, Any]:
        """Return the raw mapping stored in the file; empty when the file is absent.

        Raises:
            ConfigError: If the file is not YAML or its top level is not a mapping.
        """
        try:
            data = yaml.safe_load(self.read_text()) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{self.path} must contain a mapping at the top level.")
        return data

    def load(self) -> FilesigConfig:
        """Return the effective settings, creating the file on first use."""
        self.ensure_exists()
        return validate_config(self.read_values())

    def save(self, data: FilesigConfig | Mapping[str, Any]) -> None:
        """Overwrite the file with ``data`` under a header and a timestamp line."""
        if isinstance(data, FilesigConfig):
            data = data.model_dump(mode="python")
        stamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        body = yaml.safe_dump(dict(data), sort_keys=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(f"{_FILE_HEADER}# Last updated: {stamp}\n{body}", encoding="utf-8")


__all__ = [
    "ConfigManager",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "FilesigConfig",
    "validate_config",
]
