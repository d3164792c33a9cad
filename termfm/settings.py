"""Task worker and logging settings."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from termfm.errors import ConfigError, check_min


def _section(text: str, name: str) -> Mapping[str, Any]:
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
    section = document.get(name)
    if not isinstance(section, dict):
        raise ConfigError(f"missing [{name}] section")
    return section


def _u8(data: Mapping[str, Any], key: str, section: str) -> int:
    try:
        value = data[key]
    except KeyError as exc:
        raise ConfigError(f"missing field `{key}` in [{section}]") from exc
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ConfigError(f"`{section}.{key}` must be an integer from 0 to 255, got {value!r}")
    return value


@dataclass(frozen=True)
class TasksConfig:
    """Worker counts and retry limit for background tasks."""

    micro_workers: int
    macro_workers: int
    bizarre_retry: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TasksConfig:
        """Build from the ``[tasks]`` table, checking the lower bounds."""
        return cls(
            micro_workers=check_min(
                "micro_workers", _u8(data, "micro_workers", "tasks"), 3, "Cannot be less than 3"
            ),
            macro_workers=check_min(
                "macro_workers", _u8(data, "macro_workers", "tasks"), 5, "Cannot be less than 5"
            ),
            bizarre_retry=check_min(
                "bizarre_retry", _u8(data, "bizarre_retry", "tasks"), 3, "Cannot be less than 3"
            ),
        )

    @classmethod
    def load(cls, text: str) -> TasksConfig:
        return cls.from_dict(_section(text, "tasks"))


@dataclass(frozen=True)
class LogConfig:
    """Whether logging is enabled."""

    enabled: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LogConfig:
        """Build from the ``[log]`` table."""
        try:
            enabled = data["enabled"]
        except KeyError as exc:
            raise ConfigError("missing field `enabled` in [log]") from exc
        if not isinstance(enabled, bool):
            raise ConfigError(f"`log.enabled` must be a boolean, got {enabled!r}")
        return cls(enabled=enabled)

    @classmethod
    def load(cls, text: str) -> LogConfig:
        return cls.from_dict(_section(text, "log"))