"""Configuration models describing filesig settings."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from filesig.detection.catalog import HEADER_LENGTH
from filesig.detection.classifiers import RESUME_MIME_TYPES


class FilesigBaseModel(BaseModel):
    """Shared configuration for filesig Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class DetectionSettings(FilesigBaseModel):
    """Options controlling how files are read for detection.

    Attributes:
        header_length: Number of leading bytes read from each file.
    """

    header_length: int = Field(default=HEADER_LENGTH, ge=1)


class PolicySettings(FilesigBaseModel):
    """Acceptance policy applied by the `check` command.

    Attributes:
        allowed_mime_types: MIME types accepted when no `--allow` flag is given.
        accept_plain_text: Whether unrecognized content that looks like text passes.
    """

    allowed_mime_types: List[str] = Field(default_factory=lambda: sorted(RESUME_MIME_TYPES))
    accept_plain_text: bool = True


class LoggingSettings(FilesigBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "WARNING"


class CLIOptions(FilesigBaseModel):
    """CLI behavior defaults.

    Attributes:
        quiet_default: Whether commands suppress non-error output by default.
        json_default: Whether commands emit JSON by default.
    """

    quiet_default: bool = False
    json_default: bool = False


class FilesigConfig(FilesigBaseModel):
    """Top-level configuration struct for filesig.

    Attributes:
        detection: File reading settings.
        policy: Allow-list settings for uploads.
        logging: Logging configuration.
        cli: CLI presentation defaults.
    """

    detection: DetectionSettings = Field(default_factory=DetectionSettings)
    policy: PolicySettings = Field(default_factory=PolicySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLIOptions = Field(default_factory=CLIOptions)


__all__ = [
    "FilesigBaseModel",
    "DetectionSettings",
    "PolicySettings",
    "LoggingSettings",
    "CLIOptions",
    "FilesigConfig",
]
