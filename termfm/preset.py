"""Merging of user configuration over the built-in presets."""

from __future__ import annotations

import copy
import tomllib
from pathlib import Path
from typing import Any

from termfm.errors import ConfigError
from termfm.paths import config_dir


def merge_tables(user: dict[str, Any], base: dict[str, Any], depth: int = 2) -> dict[str, Any]:
    """Fill ``user`` in place with entries from ``base`` and return it.

    Missing keys are copied from ``base``. Within ``depth`` levels, nested tables
    are merged and other values are replaced by the preset; ``icons`` is never
    merged.
    """
    for key, value in base.items():
        if key not in user:
            user[key] = copy.deepcopy(value)
            continue
        if key == "icons" or depth <= 1:
            continue
        current = user[key]
        if isinstance(current, dict) and isinstance(value, dict):
            merge_tables(current, value, depth - 1)
            continue
        user[key] = copy.deepcopy(value)
    return user


def merge_user_config(
    filename: str, base_text: str, directory: str | Path | None = None
) -> dict[str, Any]:
    """Read ``filename`` from the config directory and merge it over ``base_text``."""
    if directory is None:
        directory = config_dir()
        if directory is None:
            raise ConfigError("cannot determine the configuration directory")
    try:
        user_text = (Path(directory) / filename).read_text(encoding="utf-8")
    except OSError:
        user_text = ""
    try:
        user = tomllib.loads(user_text)
        base = tomllib.loads(base_text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {filename}: {exc}") from exc
    return merge_tables(user, base, 2)