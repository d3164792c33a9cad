"""Image preview backends and preview settings."""

from __future__ import annotations

import enum
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from termfm.errors import ConfigError


class PreviewAdaptor(enum.Enum):
    """How images are drawn in the terminal."""

    KITTY = "kitty"
    ITERM2 = "iterm2"
    SIXEL = "sixel"
    X11 = "x11"
    WAYLAND = "wayland"
    CHAFA = "chafa"

    @classmethod
    def detect(
        cls, env: Mapping[str, str] | None = None, windows: bool | None = None
    ) -> PreviewAdaptor:
        """Pick the adaptor suited to the terminal described by ``env``."""
        env = os.environ if env is None else env
        windows = os.name == "nt" if windows is None else windows

        if "KITTY_WINDOW_ID" in env or "KONSOLE_VERSION" in env:
            return cls.KITTY

        term = env.get("TERM", "")
        if term == "xterm-kitty":
            return cls.KITTY
        if term == "foot":
            return cls.SIXEL

        program = env.get("TERM_PROGRAM", "")
        if program == "iTerm.app":
            return cls.ITERM2
        if program == "WezTerm":
            return cls.ITERM2 if windows else cls.KITTY
        if program in ("vscode", "Hyper"):
            return cls.SIXEL

        session = env.get("XDG_SESSION_TYPE", "")
        if session == "x11":
            return cls.X11
        if session == "wayland":
            return cls.WAYLAND
        return cls.CHAFA

    def needs_ueberzug(self) -> bool:
        """Whether drawing goes through an external ueberzug process."""
        return self not in (PreviewAdaptor.KITTY, PreviewAdaptor.ITERM2, PreviewAdaptor.SIXEL)

    def __str__(self) -> str:
        return self.value


def _uint(data: Mapping[str, Any], key: str) -> int:
    try:
        value = data[key]
    except KeyError as exc:
        raise ConfigError(f"missing field `{key}` in [preview]") from exc
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 0xFFFFFFFF:
        raise ConfigError(f"`preview.{key}` must be a non-negative integer, got {value!r}")
    return value


@dataclass(frozen=True)
class PreviewConfig:
    """The ``[preview]`` section of the main configuration."""

    adaptor: PreviewAdaptor
    tab_size: int
    max_width: int
    max_height: int

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], adaptor: PreviewAdaptor | None = None
    ) -> PreviewConfig:
        """Build from the ``[preview]`` table; the adaptor is detected if not given."""
        return cls(
            adaptor=PreviewAdaptor.detect() if adaptor is None else adaptor,
            tab_size=_uint(data, "tab_size"),
            max_width=_uint(data, "max_width"),
            max_height=_uint(data, "max_height"),
        )

    @classmethod
    def load(cls, text: str, adaptor: PreviewAdaptor | None = None) -> PreviewConfig:
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc
        section = document.get("preview")
        if not isinstance(section, dict):
            raise ConfigError("missing [preview] section")
        return cls.from_dict(section, adaptor)