"""Key bindings: keys, commands and the per-layer keymap."""

from __future__ import annotations

import enum
import re
import shlex
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from termfm.errors import ConfigError


class KeyCode(enum.Enum):
    """Non-character keys; a character key is represented by the character itself."""

    NULL = "Null"
    BACKSPACE = "Backspace"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    TAB = "Tab"
    DELETE = "Delete"
    INSERT = "Insert"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    ESC = "Esc"


_NAMED_CODES: dict[str, KeyCode | str] = {
    code.value: code for code in KeyCode if code is not KeyCode.NULL
}
_NAMED_CODES["Space"] = " "

_PIECES = re.compile(r"[^-]*-|[^-]+")


def _ascii_upper(c: str) -> str:
    return c.upper() if c.isascii() else c


@dataclass(frozen=True)
class Key:
    """A key press with its modifiers; ``code`` is a KeyCode or a single character."""

    code: KeyCode | str = KeyCode.NULL
    shift: bool = False
    ctrl: bool = False
    alt: bool = False

    @classmethod
    def parse(cls, text: str) -> Key:
        """Parse ``a``, ``A`` or bracketed forms such as ``<C-S-Tab>``."""
        if not text:
            raise ConfigError("empty key")
        if not (text.startswith("<") and text.endswith(">")):
            c = text[0]
            return cls(code=c, shift=c.isascii() and c.isupper())

        code: KeyCode | str = KeyCode.NULL
        shift = ctrl = alt = False
        pieces = _PIECES.findall(text[1:-1])
        for index, piece in enumerate(pieces):
            if piece == "S-":
                shift = True
            elif piece == "C-":
                ctrl = True
            elif piece == "A-":
                alt = True
            elif piece in _NAMED_CODES:
                code = _NAMED_CODES[piece]
            elif index == len(pieces) - 1:
                code = piece[0]
            else:
                raise ConfigError(f"unknown key: {piece}")

        if code is KeyCode.NULL:
            raise ConfigError("empty key")
        return cls(code=code, shift=shift, ctrl=ctrl, alt=alt)

    def plain(self) -> str | None:
        """The character typed, if this is a character key without Ctrl or Alt."""
        if isinstance(self.code, str) and not self.ctrl and not self.alt:
            return self.code
        return None

    def __str__(self) -> str:
        c = self.plain()
        if c is not None:
            if self.shift:
                c = _ascii_upper(c)
            return "<Space>" if c == " " else c

        parts = ["<"]
        if self.ctrl:
            parts.append("C-")
        if self.alt:
            parts.append("A-")
        if self.shift and not isinstance(self.code, str):
            parts.append("S-")

        if isinstance(self.code, str):
            if self.code == " ":
                parts.append("Space")
            else:
                parts.append(_ascii_upper(self.code) if self.shift else self.code)
        elif self.code is KeyCode.NULL:
            parts.append("Unknown")
        else:
            parts.append(self.code.value)
        parts.append(">")
        return "".join(parts)


@dataclass
class Exec:
    """A command with positional arguments and ``--name=value`` options."""

    cmd: str
    args: list[str] = field(default_factory=list)
    named: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> Exec:
        """Split a shell-like command line into a command, arguments and options."""
        try:
            words = shlex.split(text)
        except ValueError as exc:
            raise ConfigError(f"invalid exec {text!r}: {exc}") from exc
        if not words:
            raise ConfigError("`exec` cannot be empty")

        cmd, *rest = words
        args: list[str] = []
        named: dict[str, str] = {}
        for arg in rest:
            if arg.startswith("--"):
                key, _, value = arg.partition("=")
                named[key.lstrip("-")] = value
            else:
                args.append(arg)
        return cls(cmd=cmd, args=args, named=dict(sorted(named.items())))

    def __str__(self) -> str:
        words = [self.cmd, *self.args]
        words.extend(f"--{key}={value}" for key, value in sorted(self.named.items()))
        return shlex.join(words)


def parse_execs(value: str | list[str]) -> list[Exec]:
    """Parse one exec string or a list of them."""
    if isinstance(value, str):
        return [Exec.parse(value)]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return [Exec.parse(v) for v in value]
    raise ConfigError(f"expected a exec string, e.g. tab_switch 0, got {value!r}")


@dataclass
class Control:
    """A key sequence bound to one or more commands."""

    on: list[Key]
    exec: list[Exec]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Control:
        try:
            on = data["on"]
            execs = data["exec"]
        except KeyError as exc:
            raise ConfigError(f"missing field `{exc.args[0]}` in keymap entry") from exc
        if not isinstance(on, list) or not all(isinstance(k, str) for k in on):
            raise ConfigError(f"`on` must be a list of keys, got {on!r}")
        return cls(on=[Key.parse(k) for k in on], exec=parse_execs(execs))


class KeymapLayer(enum.Enum):
    MANAGER = "manager"
    TASKS = "tasks"
    SELECT = "select"
    INPUT = "input"
    WHICH = "which"


@dataclass
class Keymap:
    """Bindings for each layer of the interface."""

    manager: list[Control]
    tasks: list[Control]
    select: list[Control]
    input: list[Control]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Keymap:
        sections: dict[str, list[Control]] = {}
        for name in ("manager", "tasks", "select", "input"):
            try:
                entries = data[name]["keymap"]
            except (KeyError, TypeError) as exc:
                raise ConfigError(f"missing `{name}.keymap` in keymap") from exc
            if not isinstance(entries, list):
                raise ConfigError(f"`{name}.keymap` must be a list")
            sections[name] = [Control.from_dict(entry) for entry in entries]
        return cls(**sections)

    @classmethod
    def load(cls, text: str) -> Keymap:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid keymap: {exc}") from exc
        return cls.from_dict(data)

    def get(self, layer: KeymapLayer) -> list[Control]:
        """Bindings for ``layer``; the which layer has none of its own."""
        if layer is KeymapLayer.WHICH:
            raise ValueError("the which layer has no keymap")
        return getattr(self, layer.value)