"""Theme configuration: colours, styles, file type rules and icons."""

from __future__ import annotations

import enum
import re
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from termfm.errors import ConfigError, check_min
from termfm.pattern import Pattern

_HEX_BYTE = re.compile(r"\+?[0-9A-Fa-f]{1,2}")


class Modifier(enum.Flag):
    """Text attributes a style can switch on or off."""

    BOLD = enum.auto()
    UNDERLINED = enum.auto()


@dataclass(frozen=True)
class Color:
    """An RGB colour; ``rgb`` of None means the terminal's default colour."""

    rgb: tuple[int, int, int] | None = None

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``#rrggbb``."""
        if len(text.encode("utf-8")) < 7:
            raise ConfigError(f"Invalid color: {text}")
        parts = (text[1:3], text[3:5], text[5:7])
        if not all(_HEX_BYTE.fullmatch(p) for p in parts):
            raise ConfigError(f"Invalid color: {text}")
        r, g, b = (int(p, 16) for p in parts)
        return cls((r, g, b))

    def fg(self) -> TermStyle:
        """A style with this colour as foreground."""
        return TermStyle(fg=self)

    def bg(self) -> TermStyle:
        """A style with this colour as background."""
        return TermStyle(bg=self)


@dataclass(frozen=True)
class TermStyle:
    """A resolved terminal style: colours plus modifiers to add and to remove."""

    fg: Color | None = None
    bg: Color | None = None
    add_modifier: Modifier = field(default=Modifier(0))
    sub_modifier: Modifier = field(default=Modifier(0))

    def with_fg(self, color: Color) -> TermStyle:
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> TermStyle:
        return replace(self, bg=color)

    def add(self, modifier: Modifier) -> TermStyle:
        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=self.sub_modifier & ~modifier,
        )

    def remove(self, modifier: Modifier) -> TermStyle:
        return replace(
            self,
            add_modifier=self.add_modifier & ~modifier,
            sub_modifier=self.sub_modifier | modifier,
        )


def _require(data: Mapping[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, Mapping):
        raise ConfigError(f"`{where}` must be a table")
    try:
        return data[key]
    except KeyError as exc:
        raise ConfigError(f"missing field `{key}` in {where}") from exc


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"`{where}` must be a string, got {value!r}")
    return value


def _opt_color(data: Mapping[str, Any], key: str) -> Color | None:
    value = data.get(key)
    return None if value is None else Color.parse(_string(value, key))


def _opt_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise ConfigError(f"`{key}` must be a boolean, got {value!r}")
    return value


def _opt_pattern(data: Mapping[str, Any], key: str) -> Pattern | None:
    value = data.get(key)
    return None if value is None else Pattern(_string(value, key))


@dataclass(frozen=True)
class ColorGroup:
    """Colours for the normal, select and unset modes."""

    normal: Color
    select: Color
    unset: Color

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ColorGroup:
        return cls(
            **{
                name: Color.parse(_string(_require(data, name, "color group"), name))
                for name in ("normal", "select", "unset")
            }
        )


@dataclass(frozen=True)
class Style:
    """A configured style; unset attributes are left alone."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool | None = None
    underline: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Style:
        if not isinstance(data, Mapping):
            raise ConfigError(f"style must be a table, got {data!r}")
        return cls(
            fg=_opt_color(data, "fg"),
            bg=_opt_color(data, "bg"),
            bold=_opt_bool(data, "bold"),
            underline=_opt_bool(data, "underline"),
        )

    def get(self) -> TermStyle:
        """Resolve into a terminal style."""
        style = TermStyle()
        if self.fg is not None:
            style = style.with_fg(self.fg)
        if self.bg is not None:
            style = style.with_bg(self.bg)
        if self.bold is not None:
            style = style.add(Modifier.BOLD) if self.bold else style.remove(Modifier.BOLD)
        if self.underline is not None:
            style = (
                style.add(Modifier.UNDERLINED)
                if self.underline
                else style.remove(Modifier.UNDERLINED)
            )
        return style


@dataclass(frozen=True)
class Filetype:
    """A style applied to files matching a name or MIME pattern."""

    name: Pattern | None
    mime: Pattern | None
    style: Style

    def matches(self, path: str | Path, mime: str | None, is_dir: bool) -> bool:
        if self.name is not None and self.name.match_path(path, is_dir):
            return True
        if mime is not None:
            return self.mime is not None and self.mime.matches(mime)
        return False


def parse_filetypes(data: Mapping[str, Any]) -> list[Filetype]:
    """Parse the ``[filetype]`` table with its ``rules`` list."""
    rules = _require(data, "rules", "[filetype]")
    if not isinstance(rules, list):
        raise ConfigError("`filetype.rules` must be a list")
    result = []
    for rule in rules:
        if not isinstance(rule, Mapping):
            raise ConfigError(f"filetype rule must be a table, got {rule!r}")
        result.append(
            Filetype(
                name=_opt_pattern(rule, "name"),
                mime=_opt_pattern(rule, "mime"),
                style=Style.from_dict(rule),
            )
        )
    return result


@dataclass(frozen=True)
class Icon:
    """An icon shown for paths matching ``name``."""

    name: Pattern
    display: str


def parse_icons(data: Mapping[str, Any]) -> list[Icon]:
    """Parse an ``icons`` table mapping patterns to icons, keeping its order."""
    if not isinstance(data, Mapping):
        raise ConfigError('expected a icon rule, e.g. "*.md" = ""')
    return [Icon(name=Pattern(key), display=_string(value, key)) for key, value in data.items()]


@dataclass(frozen=True)
class Tab:
    active: Style
    inactive: Style
    max_width: int


@dataclass(frozen=True)
class StatusSeparator:
    opening: str
    closing: str


@dataclass(frozen=True)
class Status:
    primary: ColorGroup
    secondary: ColorGroup
    tertiary: ColorGroup
    body: ColorGroup
    emphasis: ColorGroup
    info: ColorGroup
    success: ColorGroup
    warning: ColorGroup
    danger: ColorGroup
    separator: StatusSeparator


@dataclass(frozen=True)
class Progress:
    gauge: Style
    label: Style


@dataclass(frozen=True)
class Selection:
    hovered: Style


@dataclass(frozen=True)
class Marker:
    selecting: Style
    selected: Style


@dataclass(frozen=True)
class ThemePreview:
    hovered: Style
    syntect_theme: Path


_STATUS_GROUPS = (
    "primary",
    "secondary",
    "tertiary",
    "body",
    "emphasis",
    "info",
    "success",
    "warning",
    "danger",
)


def _style(data: Mapping[str, Any], key: str, where: str) -> Style:
    return Style.from_dict(_require(data, key, where))


def _tab(data: Mapping[str, Any]) -> Tab:
    max_width = _require(data, "max_width", "[tab]")
    if not isinstance(max_width, int) or isinstance(max_width, bool) or not 0 <= max_width <= 255:
        raise ConfigError(f"`tab.max_width` must be an integer from 0 to 255, got {max_width!r}")
    return Tab(
        active=_style(data, "active", "[tab]"),
        inactive=_style(data, "inactive", "[tab]"),
        max_width=check_min("max_width", max_width, 1, "Must be greater than 0"),
    )


def _status(data: Mapping[str, Any]) -> Status:
    groups = {
        name: ColorGroup.from_dict(_require(data, name, "[status]")) for name in _STATUS_GROUPS
    }
    separator = _require(data, "separator", "[status]")
    return Status(
        **groups,
        separator=StatusSeparator(
            opening=_string(_require(separator, "opening", "[status.separator]"), "opening"),
            closing=_string(_require(separator, "closing", "[status.separator]"), "closing"),
        ),
    )


@dataclass(frozen=True)
class Theme:
    """The whole theme."""

    tab: Tab
    status: Status
    progress: Progress
    selection: Selection
    marker: Marker
    preview: ThemePreview
    filetypes: list[Filetype]
    icons: list[Icon]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Theme:
        progress = _require(data, "progress", "theme")
        selection = _require(data, "selection", "theme")
        marker = _require(data, "marker", "theme")
        preview = _require(data, "preview", "theme")
        syntect = Path(_string(_require(preview, "syntect_theme", "[preview]"), "syntect_theme"))
        return cls(
            tab=_tab(_require(data, "tab", "theme")),
            status=_status(_require(data, "status", "theme")),
            progress=Progress(
                gauge=_style(progress, "gauge", "[progress]"),
                label=_style(progress, "label", "[progress]"),
            ),
            selection=Selection(hovered=_style(selection, "hovered", "[selection]")),
            marker=Marker(
                selecting=_style(marker, "selecting", "[marker]"),
                selected=_style(marker, "selected", "[marker]"),
            ),
            preview=ThemePreview(
                hovered=_style(preview, "hovered", "[preview]"),
                syntect_theme=syntect.expanduser().absolute(),
            ),
            filetypes=parse_filetypes(_require(data, "filetype", "theme")),
            icons=parse_icons(_require(data, "icons", "theme")),
        )

    @classmethod
    def load(cls, text: str) -> Theme:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid theme: {exc}") from exc
        return cls.from_dict(data)