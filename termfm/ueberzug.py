"""Image display through an external ueberzug process."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable
from typing import Any

from termfm.paths import APP_NAME
from termfm.preview import PreviewAdaptor

Spawn = Callable[[list[str]], Any]


def add_command(path: str | os.PathLike[str], x: int, y: int, width: int, height: int) -> str:
    """Command line that shows the image at ``path`` in the given cell area."""
    return (
        f'{{"action":"add","identifier":"{APP_NAME}","x":{x},"y":{y},'
        f'"max_width":{width},"max_height":{height},"path":"{os.fsdecode(path)}"}}\n'
    )


def remove_command() -> str:
    """Command line that removes the shown image."""
    return f'{{"action":"remove","identifier":"{APP_NAME}"}}\n'


def _launch(args: list[str]) -> subprocess.Popen[bytes]:
    return subprocess.Popen(args, stdin=subprocess.PIPE, stderr=subprocess.DEVNULL)


class Ueberzug:
    """Keeps an ueberzug layer process running and feeds it commands.

    The process is restarted whenever it has exited; failures to start it or to
    write to it are ignored, as displaying images is best effort.
    """

    def __init__(self, adaptor: PreviewAdaptor, spawn: Spawn | None = None) -> None:
        self._args = ["ueberzug", "layer", "-so", str(adaptor)]
        self._spawn = _launch if spawn is None else spawn
        self._child: Any = self._create()

    def _create(self) -> Any:
        try:
            return self._spawn(list(self._args))
        except OSError:
            return None

    def _send(self, command: str) -> None:
        if self._child is not None and self._child.poll() is not None:
            self._child = None
        if self._child is None:
            self._child = self._create()
        if self._child is None:
            return
        try:
            self._child.stdin.write(command.encode("utf-8"))
            self._child.stdin.flush()
        except (OSError, ValueError):
            pass

    def show(self, path: str | os.PathLike[str], x: int, y: int, width: int, height: int) -> None:
        """Show the image at ``path`` in the given cell area."""
        self._send(add_command(path, x, y, width, height))

    def hide(self) -> None:
        """Remove the shown image."""
        self._send(remove_command())

    def close(self) -> None:
        """Stop the process."""
        child, self._child = self._child, None
        if child is None:
            return
        try:
            child.stdin.close()
        except (OSError, ValueError):
            pass
        child.kill()
        child.wait()

    def __enter__(self) -> Ueberzug:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()