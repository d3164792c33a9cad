# termfm

Building blocks for a terminal file manager: configuration parsing, key
bindings, colour themes, opener rules, image encoding for terminal graphics
protocols and text layout helpers for the interface.

## Installation

```
pip install .
```

With the `test` extra, pytest is installed as well:

```
pip install ".[test]"
```

## Modules

- `termfm.errors`: `ConfigError`, a `ValueError` raised for missing or
  malformed configuration, and `check_min` for lower-bound checks.
- `termfm.pattern`: `Pattern`, a glob pattern (`*`, `?`, `[...]`, `[!...]`).
  A trailing `/` restricts it to folders; a pattern containing `/` is matched
  against the full path, otherwise against the file name
  (`Pattern.match_path`).
- `termfm.paths`: `config_dir` and `state_dir`, the per-user configuration
  and state directories.
- `termfm.preset`: `merge_tables` fills a user table with preset entries, two
  levels deep, never merging `icons`; `merge_user_config` reads a TOML file
  from the configuration directory and merges it over a preset given as text.
- `termfm.keymap`: `Key.parse` reads key notation such as `a`, `A` or
  `<C-S-Tab>`; `Exec.parse` splits a command such as
  `tab_switch 1 --relative` into command, arguments and `--name=value`
  options; `Control`, `KeymapLayer` and `Keymap` (`Keymap.load`,
  `Keymap.get`) hold the bindings of the manager, tasks, select and input
  layers.
- `termfm.manager`: `SortBy`, `Rect`, `ManagerLayout` (pane ratios and the
  preview and folder areas for a given terminal size) and `ManagerConfig`
  for the `[manager]` section.
- `termfm.opener`: `Opener`, `OpenRule` and `Open`, which picks openers by
  file name or MIME type (`openers`, `block_opener`, `common_openers`).
  The older `cmd`/`args` form of an opener is accepted with a
  `DeprecationWarning`.
- `termfm.preview`: `PreviewAdaptor.detect` chooses kitty, iterm2, sixel,
  x11, wayland or chafa output from the environment; `PreviewConfig` holds
  the `[preview]` section.
- `termfm.settings`: `TasksConfig` (worker counts and retry limit, with their
  minimums checked) and `LogConfig`.
- `termfm.theme`: `Color`, `ColorGroup`, `Style`, `TermStyle`, `Modifier`,
  `Filetype`, `Icon` and `Theme.load` for a full theme document.
- `termfm.boot`: `parse_args` for the options `--cwd`/`-c`, `--cwd-file`,
  `--chooser-file` and `--version`; `Boot.from_args` creates the cache and
  state directories; `Boot.cache` names a cache file by the MD5 digest of a
  path and `Boot.tmpfile` names a fresh file by the current time.
- `termfm.image`: `fit_size`, `crop`, `precache` and `precache_anyway`
  downscale images with Pillow and store JPEG caches.
- `termfm.kitty`, `termfm.iterm2`, `termfm.sixel`: `encode` turns a Pillow
  image into the escape sequences of each protocol; `termfm.kitty.hide`
  deletes the drawn images.
- `termfm.ueberzug`: `Ueberzug` keeps an `ueberzug layer` process running,
  restarting it when it has exited, and sends it `add` and `remove`
  commands (`show`, `hide`, `close`; usable as a context manager).
- `termfm.widgets`: tab labels, permission colours, status line position
  labels, the progress label, the key hint popup area and column split, and
  the padding around cleared areas.

## Example

```python
from termfm.keymap import Exec, Key

key = Key.parse("<C-a>")
print(str(key))             # <C-a>

exec_ = Exec.parse("tab_switch 1 --relative")
print(exec_.cmd, exec_.args, exec_.named)
# tab_switch ['1'] {'relative': ''}
```

```python
from termfm.manager import ManagerLayout

layout = ManagerLayout.from_ratio([1, 4, 3])
print(layout.folder_rect(80, 24))
```

## Directories

On POSIX systems `config_dir` is `$XDG_CONFIG_HOME/termfm` when that
variable holds an absolute path, otherwise `~/.config/termfm`; `state_dir`
is `$XDG_STATE_HOME/termfm` or `~/.local/state/termfm`. On Windows they are
`%APPDATA%\termfm\config` and `%APPDATA%\termfm\state`. The default cache
directory of `Boot` is `termfm` in the system temporary directory.

## What this package does not do

termfm is a library. It has no command to run and no interactive screen: it
does not list folders, handle key presses, run file operations or draw the
interface. No default configuration files are shipped; preset text must be
passed to `merge_user_config` by the caller.

## Running the tests

```
pytest
```