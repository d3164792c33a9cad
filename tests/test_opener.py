import pytest

from termfm.errors import ConfigError
from termfm.opener import MIME_DIR, Open, Opener

CONFIG = """
[opener]
folder = [{ exec = 'cd "$1"', display_name = "Enter" }]
edit = [
  { exec = 'vim "$@"', block = true },
  { exec = 'xdg-open "$@"' },
  { exec = 'vim "$@"', block = true },
]
open = [{ exec = 'xdg-open "$@"' }]

[open]
rules = [
  { name = "*/", use = "folder" },
  { mime = "text/*", use = "edit" },
  { name = "*.missing", use = "nothing" },
  { name = "*", use = "open" },
]
"""


@pytest.fixture
def open_config():
    return Open.load(CONFIG)


def test_opener_defaults():
    opener = Opener.from_dict({"exec": 'vim "$@"'})
    assert opener.display_name == "vim"
    assert opener.block is False
    assert opener.spread is True


def test_opener_without_spread():
    opener = Opener.from_dict({"exec": 'less "$1"', "block": True, "display_name": "Pager"})
    assert opener.spread is False
    assert opener.block is True
    assert opener.display_name == "Pager"


def test_opener_legacy_fields():
    with pytest.warns(DeprecationWarning):
        opener = Opener.from_dict({"cmd": "open", "args": ["$0", "$*", "a b"]})
    assert opener.exec == "open $1 $* 'a b'"
    assert opener.spread is True


@pytest.mark.parametrize(
    "data, message",
    [({}, "exec"), ({"cmd": "open"}, "args"), ({"exec": ""}, "cannot be empty")],
)
def test_opener_errors(data, message):
    with pytest.raises(ConfigError, match=message):
        Opener.from_dict(data)


def test_rule_by_mime(open_config):
    group = open_config.openers("a.txt", "text/plain")
    assert [o.exec for o in group] == ['vim "$@"', 'xdg-open "$@"']


def test_missing_group_falls_through(open_config):
    group = open_config.openers("x.missing", "application/octet-stream")
    assert [o.exec for o in group] == ['xdg-open "$@"']


def test_folder_rule_needs_directory(open_config):
    folder = open_config.openers("/home/user/dir", MIME_DIR)
    assert folder[0].display_name == "Enter"
    other = open_config.openers("/home/user/dir", "application/octet-stream")
    assert other[0].display_name == "xdg-open"


def test_block_opener(open_config):
    assert open_config.block_opener("a.txt", "text/plain").exec == 'vim "$@"'
    assert open_config.block_opener("a.bin", "application/octet-stream") is None


def test_common_openers(open_config):
    text = open_config.common_openers([("a.txt", "text/plain"), ("b.md", "text/markdown")])
    assert [o.exec for o in text] == ['vim "$@"', 'xdg-open "$@"']
    mixed = open_config.common_openers([("a.txt", "text/plain"), ("a.bin", "application/zip")])
    assert [o.exec for o in mixed] == ['xdg-open "$@"']


def test_common_openers_empty(open_config):
    assert open_config.common_openers([]) == []


def test_no_rule_matches():
    config = Open.from_dict({"opener": {}, "open": {"rules": [{"mime": "image/*", "use": "x"}]}})
    assert config.openers("a.txt", "text/plain") is None


def test_missing_rules():
    with pytest.raises(ConfigError):
        Open.from_dict({"opener": {}})