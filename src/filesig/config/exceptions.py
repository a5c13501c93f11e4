"""Errors raised while loading or validating filesig settings."""


class ConfigError(Exception):
    """The settings file, or a value written to it, is invalid."""
