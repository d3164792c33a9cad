"""Glob patterns matched against file names or full paths."""

from __future__ import annotations

import os
import re
from pathlib import PurePath

from termfm.errors import ConfigError

_CLASS_SPECIAL = set("\\]^-[")


def _class_char(c: str) -> str:
    return "\\" + c if c in _CLASS_SPECIAL else c


def _char_class(body: str, negate: bool) -> str:
    parts = []
    k = 0
    while k < len(body):
        if k + 2 < len(body) and body[k + 1] == "-":
            parts.append(f"{_class_char(body[k])}-{_class_char(body[k + 2])}")
            k += 3
        else:
            parts.append(_class_char(body[k]))
            k += 1
    return "[" + ("^" if negate else "") + "".join(parts) + "]"


def _compile(pattern: str) -> re.Pattern[str]:
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == "*":
            if not out or out[-1] != ".*":
                out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            j = i
            negate = False
            if j < n and pattern[j] == "!":
                negate = True
                j += 1
            start = j
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close < 0:
                raise ConfigError(f"invalid range pattern: {pattern!r}")
            out.append(_char_class(pattern[start:close], negate))
            i = close + 1
        else:
            out.append(re.escape(c))
    try:
        return re.compile("".join(out), re.DOTALL)
    except re.error as exc:
        raise ConfigError(f"invalid pattern {pattern!r}: {exc}") from exc


class Pattern:
    """A glob pattern; a trailing slash restricts it to folders."""

    __slots__ = ("text", "is_folder", "full_path", "_regex")

    def __init__(self, text: str) -> None:
        trimmed = text.rstrip("/")
        self.text = text
        self.is_folder = len(trimmed) < len(text)
        self.full_path = "/" in trimmed
        self._regex = _compile(trimmed)

    def matches(self, text: str) -> bool:
        """Whether the whole of ``text`` matches the pattern."""
        return self._regex.fullmatch(text) is not None

    def match_path(self, path: str | os.PathLike[str], is_folder: bool | None = None) -> bool:
        """Match a path by name, or in full if the pattern contains a slash."""
        if is_folder is not None and is_folder != self.is_folder:
            return False
        full = os.fspath(path)
        if self.full_path:
            return self.matches(full)
        name = PurePath(full).name
        if not name or name == "..":
            name = full
        return self.matches(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Pattern) and other.text == self.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self) -> str:
        return f"Pattern({self.text!r})"