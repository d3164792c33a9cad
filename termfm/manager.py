"""File manager settings: layout ratios, sorting and display options."""

from __future__ import annotations

import enum
import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from termfm.errors import ConfigError

FOLDER_MARGIN = 2
PREVIEW_BORDER = 2
PREVIEW_MARGIN = 2

_U16_MAX = 0xFFFF


def _u16(value: int) -> int:
    return value & _U16_MAX


def _sub(a: int, b: int) -> int:
    return max(a - b, 0)


def _bool(data: Mapping[str, Any], key: str, section: str) -> bool:
    try:
        value = data[key]
    except KeyError as exc:
        raise ConfigError(f"missing field `{key}` in [{section}]") from exc
    if not isinstance(value, bool):
        raise ConfigError(f"`{section}.{key}` must be a boolean, got {value!r}")
    return value


class SortBy(enum.Enum):
    """Order in which folder entries are listed."""

    ALPHABETICAL = "alphabetical"
    CREATED = "created"
    MODIFIED = "modified"
    SIZE = "size"

    @classmethod
    def parse(cls, value: str) -> SortBy:
        """Parse a sort order name, raising ConfigError if it is unknown."""
        try:
            return cls(value)
        except ValueError as exc:
            raise ConfigError(f"invalid sort_by value: {value}") from exc


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class ManagerLayout:
    """Relative widths of the parent, current and preview columns."""

    parent: int
    current: int
    preview: int
    all: int

    @classmethod
    def from_ratio(cls, ratio: Sequence[int]) -> ManagerLayout:
        """Build a layout from three non-negative ratios, not all zero."""
        values = list(ratio)
        if len(values) != 3:
            raise ConfigError(f"invalid layout ratio: {values!r}")
        if not all(isinstance(r, int) and not isinstance(r, bool) and r >= 0 for r in values):
            raise ConfigError(f"invalid layout ratio: {values!r}")
        if all(r == 0 for r in values):
            raise ConfigError(f"at least one layout ratio must be non-zero: {values!r}")
        parent, current, preview = values
        return cls(parent=parent, current=current, preview=preview, all=sum(values))

    def preview_rect(self, columns: int, rows: int) -> Rect:
        """Area of the preview pane inside its border, for a terminal of the given size."""
        x = _u16(columns * (self.parent + self.current) // self.all)
        width = _u16(columns * self.preview // self.all)
        return Rect(
            x=min(x + PREVIEW_BORDER // 2, _U16_MAX),
            y=PREVIEW_MARGIN // 2,
            width=_sub(width, PREVIEW_BORDER),
            height=_sub(rows, PREVIEW_MARGIN),
        )

    def preview_height(self, columns: int, rows: int) -> int:
        return self.preview_rect(columns, rows).height

    def folder_rect(self, columns: int, rows: int) -> Rect:
        """Area of the current folder column, for a terminal of the given size."""
        return Rect(
            x=_u16(columns * self.parent // self.all),
            y=FOLDER_MARGIN // 2,
            width=_u16(columns * self.current // self.all),
            height=_sub(rows, FOLDER_MARGIN),
        )

    def folder_height(self, columns: int, rows: int) -> int:
        return self.folder_rect(columns, rows).height


@dataclass(frozen=True)
class ManagerConfig:
    """The ``[manager]`` section of the main configuration."""

    layout: ManagerLayout
    sort_by: SortBy
    sort_reverse: bool
    sort_dir_first: bool
    show_hidden: bool
    show_symlink: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ManagerConfig:
        """Build from the contents of the ``[manager]`` table."""
        try:
            layout = data["layout"]
            sort_by = data["sort_by"]
        except KeyError as exc:
            raise ConfigError(f"missing field `{exc.args[0]}` in [manager]") from exc
        if not isinstance(layout, list):
            raise ConfigError(f"invalid layout ratio: {layout!r}")
        if not isinstance(sort_by, str):
            raise ConfigError(f"invalid sort_by value: {sort_by!r}")
        return cls(
            layout=ManagerLayout.from_ratio(layout),
            sort_by=SortBy.parse(sort_by),
            sort_reverse=_bool(data, "sort_reverse", "manager"),
            sort_dir_first=_bool(data, "sort_dir_first", "manager"),
            show_hidden=_bool(data, "show_hidden", "manager"),
            show_symlink=_bool(data, "show_symlink", "manager"),
        )

    @classmethod
    def load(cls, text: str) -> ManagerConfig:
        """Read the ``[manager]`` section from a TOML document."""
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc
        section = document.get("manager")
        if not isinstance(section, dict):
            raise ConfigError("missing [manager] section")
        return cls.from_dict(section)