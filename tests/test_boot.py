import re

import pytest

from termfm.boot import Boot, parse_args


@pytest.fixture
def dirs(tmp_path):
    return tmp_path / "cache", tmp_path / "state" / "deep"


def test_parse_args_files(tmp_path):
    args = parse_args(["--cwd-file", str(tmp_path / "cwd"), "--chooser-file", "chosen"])
    assert args.cwd_file == tmp_path / "cwd"
    assert str(args.chooser_file) == "chosen"
    assert args.cwd is None


def test_parse_args_version():
    with pytest.raises(SystemExit):
        parse_args(["--version"])


def test_from_args_uses_cwd_and_creates_dirs(tmp_path, dirs):
    cache, state = dirs
    boot = Boot.from_args(["--cwd", str(tmp_path)], cache_dir=cache, state_dir=state)
    assert boot.cwd == tmp_path
    assert cache.is_dir()
    assert state.is_dir()
    assert boot.cwd_file is None


def test_from_args_falls_back_to_process_cwd(tmp_path, dirs, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cache, state = dirs
    boot = Boot.from_args(["-c", str(tmp_path / "absent")], cache_dir=cache, state_dir=state)
    assert boot.cwd.resolve() == tmp_path.resolve()


def test_cache_is_stable_and_distinct(dirs):
    cache, state = dirs
    boot = Boot.from_args([], cache_dir=cache, state_dir=state)
    first = boot.cache("/home/user/a.png")
    assert first == boot.cache("/home/user/a.png")
    assert first != boot.cache("/home/user/b.png")
    assert first.parent == cache
    assert re.fullmatch(r"[0-9a-f]{32}", first.name)


def test_tmpfile(dirs):
    cache, state = dirs
    boot = Boot.from_args([], cache_dir=cache, state_dir=state)
    path = boot.tmpfile("shell")
    assert path.parent == cache
    assert re.fullmatch(r"shell-[0-9]+", path.name)