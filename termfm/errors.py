"""Configuration errors and value checks."""

from __future__ import annotations

from typing import TypeVar

_T = TypeVar("_T", int, float)


class ConfigError(ValueError):
    """Raised when a configuration value is missing or malformed."""


def check_min(field: str, value: _T, minimum: _T, message: str) -> _T:
    """Return ``value`` if it is at least ``minimum``, otherwise raise ConfigError."""
    if value < minimum:
        raise ConfigError(f"Config `{field}` format error: {message}")
    return value