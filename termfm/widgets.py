"""Layout and label computations for the interface widgets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from wcwidth import wcwidth

from termfm.manager import Rect

_T = TypeVar("_T")

_PERMISSION_ROLES = {
    "-": "tertiary",
    "r": "warning",
    "w": "danger",
    "x": "info",
    "s": "info",
    "S": "info",
    "t": "info",
    "T": "info",
}


def _char_width(c: str) -> int:
    return max(wcwidth(c), 0)


def truncate_width(text: str, max_width: int) -> str:
    """Keep characters while the width so far is below ``max_width``.

    The last character kept may push the width past ``max_width``.
    """
    kept: list[str] = []
    width = 0
    for c in text:
        if width >= max_width:
            break
        kept.append(c)
        width += _char_width(c)
    return "".join(kept)


def tab_label(index: int, name: str, max_width: int) -> str:
    """Label of the tab at zero-based ``index``, padded with a space each side."""
    text = str(index + 1)
    if max_width >= 3:
        text = truncate_width(f"{text} {name}", max_width)
    return f" {text} "


def permission_roles(mode: str) -> list[tuple[str, str]]:
    """Pair each character of a permission string with the status colour it uses."""
    return [(c, _PERMISSION_ROLES.get(c, "success")) for c in mode]


def position_labels(cursor: int, length: int) -> tuple[str, str]:
    """Percentage and ``cursor/length`` labels for the status bar."""
    percent = 0 if cursor == 0 or length == 0 else (cursor + 1) * 100 // length
    percent_label = "  Top " if percent == 0 else f" {percent:>3}% "
    count_label = f" {min(cursor + 1, length):>2}/{length:<2} "
    return percent_label, count_label


def progress_label(percent: int, left: object) -> str | None:
    """Label of the progress gauge, or None once everything is done."""
    if percent >= 100:
        return None
    return f"{percent:>3}%, {left} left"


def split_candidates(candidates: Iterable[_T]) -> tuple[list[_T], list[_T], list[_T]]:
    """Deal candidates round-robin into three columns."""
    items = list(candidates)
    return items[0::3], items[1::3], items[2::3]


def which_area(width: int, height: int, count: int) -> Rect:
    """Area of the key hint popup for ``count`` candidates in a screen of the given size."""
    rows = (count + 2) // 3 + 2
    return Rect(
        x=1,
        y=max(height - (rows + 2), 0),
        width=max(width - 2, 0),
        height=rows,
    )


def key_padding(keys: Sequence[str]) -> str:
    """Spaces that right-align the remaining keys of a binding in a 10-byte column."""
    return " " * max(10 - len("".join(keys).encode("utf-8")), 0)


def expand_clear(x: int, y: int, width: int, height: int) -> Rect:
    """Grow an area by one cell on each side where it does not touch the screen edge."""
    if x > 0:
        x, width = x - 1, width + 2
    if y > 0:
        y, height = y - 1, height + 2
    return Rect(x=x, y=y, width=width, height=height)