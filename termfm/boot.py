"""Start-up arguments and the directories the program works in."""

from __future__ import annotations

import argparse
import hashlib
import os
import tempfile
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from termfm.errors import ConfigError
from termfm.paths import APP_NAME, state_dir as default_state_dir

VERSION = "0.1.3"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command-line options."""
    parser = argparse.ArgumentParser(prog=APP_NAME)
    parser.add_argument("--version", "-V", action="version", version=f"{APP_NAME} {VERSION}")
    parser.add_argument("--cwd", "-c", type=Path, help="Set the current working directory")
    parser.add_argument(
        "--cwd-file", type=Path, help="Write the cwd on exit to this file"
    )
    parser.add_argument(
        "--chooser-file",
        type=Path,
        help="Write the selected files on open emitted by the chooser mode",
    )
    return parser.parse_args(argv)


def _absolute(path: Path) -> Path:
    return path.expanduser().absolute()


def _initial_cwd(requested: Path | None) -> Path:
    if requested is not None:
        candidate = _absolute(requested)
        if candidate.is_dir():
            return candidate
    try:
        return Path(os.getcwd())
    except OSError:
        return Path("/")


@dataclass(frozen=True)
class Boot:
    """Working, cache and state directories plus the optional output files."""

    cwd: Path
    cache_dir: Path
    state_dir: Path
    cwd_file: Path | None = None
    chooser_file: Path | None = None

    @classmethod
    def from_args(
        cls,
        argv: Sequence[str] | None = None,
        cache_dir: str | os.PathLike[str] | None = None,
        state_dir: str | os.PathLike[str] | None = None,
    ) -> Boot:
        """Parse ``argv`` and create the cache and state directories if needed."""
        args = parse_args(argv)

        cache = Path(cache_dir) if cache_dir is not None else Path(tempfile.gettempdir()) / APP_NAME
        if state_dir is None:
            state_dir = default_state_dir()
            if state_dir is None:
                raise ConfigError("cannot determine the state directory")
        state = Path(state_dir)

        if not cache.is_dir():
            cache.mkdir()
        if not state.is_dir():
            state.mkdir(parents=True)

        return cls(
            cwd=_initial_cwd(args.cwd),
            cache_dir=cache,
            state_dir=state,
            cwd_file=args.cwd_file,
            chooser_file=args.chooser_file,
        )

    def cache(self, path: str | os.PathLike[str]) -> Path:
        """Cache file for ``path``, named by the MD5 digest of the path."""
        digest = hashlib.md5(os.fsencode(path)).hexdigest()
        return self.cache_dir / digest

    def tmpfile(self, prefix: str) -> Path:
        """A fresh path in the cache directory, named by the current time."""
        micros = time.time_ns() // 1000
        return self.cache_dir / f"{prefix}-{micros}"