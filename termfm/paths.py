"""Per-user configuration and state directories."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

APP_NAME = "termfm"


def _home(env: Mapping[str, str]) -> Path | None:
    home = env.get("HOME")
    if home:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError:
        return None


def _xdg(env: Mapping[str, str], var: str, fallback: str) -> Path | None:
    value = env.get(var)
    if value and Path(value).is_absolute():
        return Path(value) / APP_NAME
    home = _home(env)
    return home / fallback / APP_NAME if home is not None else None


def _windows(env: Mapping[str, str], leaf: str) -> Path | None:
    base = env.get("APPDATA")
    return Path(base) / APP_NAME / leaf if base else None


def config_dir(env: Mapping[str, str] | None = None) -> Path | None:
    """Directory holding the user's configuration files."""
    env = os.environ if env is None else env
    if os.name == "nt":
        return _windows(env, "config")
    return _xdg(env, "XDG_CONFIG_HOME", ".config")


def state_dir(env: Mapping[str, str] | None = None) -> Path | None:
    """Directory holding logs and other persistent state."""
    env = os.environ if env is None else env
    if os.name == "nt":
        return _windows(env, "state")
    return _xdg(env, "XDG_STATE_HOME", ".local/state")