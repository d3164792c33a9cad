"""Openers and the rules that choose them by file name or MIME type."""

from __future__ import annotations

import os
import re
import shlex
import tomllib
import warnings
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from termfm.errors import ConfigError
from termfm.pattern import Pattern

MIME_DIR = "inode/directory"

_INDEX = re.compile(r"\+?[0-9]+")


def _legacy_arg(arg: str) -> str:
    if not arg.startswith("$"):
        return shlex.quote(arg)
    if _INDEX.fullmatch(arg[1:]):
        return f"${int(arg[1:]) + 1}"
    return arg


@dataclass(frozen=True, order=True)
class Opener:
    """A command used to open files."""

    exec: str
    block: bool = False
    display_name: str = ""
    spread: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Opener:
        """Build an opener, accepting the older ``cmd`` and ``args`` form."""
        exec_ = data.get("exec")
        if exec_ is None:
            cmd = data.get("cmd")
            args = data.get("args")
            if cmd is None:
                raise ConfigError("missing field `exec`")
            if args is None:
                raise ConfigError("missing field `args`")
            if not isinstance(cmd, str) or not isinstance(args, list):
                raise ConfigError("`cmd` must be a string and `args` a list of strings")
            if not all(isinstance(a, str) for a in args):
                raise ConfigError("`args` must be a list of strings")
            warnings.warn(
                "`cmd` and `args` are deprecated in favor of `exec`",
                DeprecationWarning,
                stacklevel=2,
            )
            exec_ = f"{cmd} {' '.join(_legacy_arg(a) for a in args)}"

        if not isinstance(exec_, str):
            raise ConfigError(f"`exec` must be a string, got {exec_!r}")
        if not exec_:
            raise ConfigError("`exec` cannot be empty")

        block = data.get("block", False)
        if not isinstance(block, bool):
            raise ConfigError(f"`block` must be a boolean, got {block!r}")

        display_name = data.get("display_name")
        if display_name is None:
            words = exec_.split()
            if not words:
                raise ConfigError("`exec` cannot be blank")
            display_name = words[0]
        elif not isinstance(display_name, str):
            raise ConfigError(f"`display_name` must be a string, got {display_name!r}")

        spread = "$*" in exec_ or "$@" in exec_
        return cls(exec=exec_, block=block, display_name=display_name, spread=spread)


@dataclass(frozen=True)
class OpenRule:
    """Selects the opener group ``use`` for files matching a name or MIME pattern."""

    name: Pattern | None
    mime: Pattern | None
    use: str

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> OpenRule:
        use = data.get("use")
        if not isinstance(use, str):
            raise ConfigError("open rule needs a `use` string")
        name = data.get("name")
        mime = data.get("mime")
        for label, value in (("name", name), ("mime", mime)):
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"open rule `{label}` must be a string, got {value!r}")
        return cls(
            name=Pattern(name) if name is not None else None,
            mime=Pattern(mime) if mime is not None else None,
            use=use,
        )

    def _matches(self, path: str | os.PathLike[str], mime: str) -> bool:
        if self.mime is not None and self.mime.matches(mime):
            return True
        return self.name is not None and self.name.match_path(path, mime == MIME_DIR)


class Open:
    """Named opener groups together with the rules that select them."""

    def __init__(self, openers: Mapping[str, Iterable[Opener]], rules: Iterable[OpenRule]) -> None:
        self._openers = {
            name: tuple(dict.fromkeys(group)) for name, group in sorted(openers.items())
        }
        self._rules = list(rules)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Open:
        """Build from a document with ``[opener]`` and ``[open]`` tables."""
        opener = data.get("opener")
        if not isinstance(opener, dict):
            raise ConfigError("missing [opener] table")
        open_ = data.get("open")
        if not isinstance(open_, dict) or not isinstance(open_.get("rules"), list):
            raise ConfigError("missing `open.rules` list")

        groups: dict[str, list[Opener]] = {}
        for name, entries in opener.items():
            if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
                raise ConfigError(f"`opener.{name}` must be a list of tables")
            groups[name] = [Opener.from_dict(e) for e in entries]

        rules = []
        for rule in open_["rules"]:
            if not isinstance(rule, dict):
                raise ConfigError(f"open rule must be a table, got {rule!r}")
            rules.append(OpenRule._from_dict(rule))
        return cls(groups, rules)

    @classmethod
    def load(cls, text: str) -> Open:
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc
        return cls.from_dict(document)

    def openers(self, path: str | os.PathLike[str], mime: str) -> tuple[Opener, ...] | None:
        """Openers of the first matching rule whose group exists."""
        for rule in self._rules:
            if rule._matches(path, mime):
                group = self._openers.get(rule.use)
                if group is not None:
                    return group
        return None

    def block_opener(self, path: str | os.PathLike[str], mime: str) -> Opener | None:
        """The first blocking opener for the file, if any."""
        group = self.openers(path, mime)
        if group is None:
            return None
        return next((o for o in group if o.block), None)

    def common_openers(
        self, targets: Iterable[tuple[str | os.PathLike[str], str]]
    ) -> list[Opener]:
        """Openers shared by every target that has any, in first-seen order."""
        grouped = [g for p, m in targets if (g := self.openers(p, m)) is not None]
        flat = dict.fromkeys(o for group in grouped for o in group)
        return [o for o in flat if all(o in group for group in grouped)]