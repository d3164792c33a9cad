import pytest

from termfm.errors import ConfigError
from termfm.keymap import (
    Control,
    Exec,
    Key,
    KeyCode,
    Keymap,
    KeymapLayer,
    parse_execs,
)


def test_plain_character_key():
    key = Key.parse("a")
    assert key.plain() == "a"
    assert not key.shift


def test_uppercase_character_sets_shift():
    key = Key.parse("A")
    assert key.shift
    assert key.code == "A"


def test_bracketed_modifiers():
    key = Key.parse("<C-S-Tab>")
    assert key.ctrl and key.shift and not key.alt
    assert key.code is KeyCode.TAB
    assert key.plain() is None


def test_space_key():
    key = Key.parse("<Space>")
    assert key.code == " "
    assert str(key) == "<Space>"


def test_dash_as_last_piece_is_a_character():
    key = Key.parse("<C-->")
    assert key.ctrl
    assert key.code == "-"


@pytest.mark.parametrize(
    "text", ["a", "A", "<C-a>", "<A-Enter>", "<S-Tab>", "<F5>", "<Esc>", "<C-Space>", "<PageDown>"]
)
def test_key_string_round_trip(text):
    assert str(Key.parse(text)) == text


@pytest.mark.parametrize("text", ["", "<>", "<C->", "<Foo-a>"])
def test_invalid_keys(text):
    with pytest.raises(ConfigError):
        Key.parse(text)


def test_exec_parse_args_and_named():
    e = Exec.parse("cd ~/docs --interactive")
    assert e.cmd == "cd"
    assert e.args == ["~/docs"]
    assert e.named == {"interactive": ""}


def test_exec_named_value_and_negative_arg():
    e = Exec.parse("arrow -1 --state=true")
    assert e.args == ["-1"]
    assert e.named == {"state": "true"}


def test_exec_quoted_argument():
    e = Exec.parse("shell 'echo hello world' --block")
    assert e.args == ["echo hello world"]
    assert e.named == {"block": ""}


def test_exec_string_round_trip():
    e = Exec.parse("shell 'ls -la' --confirm --block")
    assert Exec.parse(str(e)) == e


def test_empty_exec_is_an_error():
    with pytest.raises(ConfigError):
        Exec.parse("   ")


def test_parse_execs_accepts_string_and_list():
    assert [e.cmd for e in parse_execs("quit")] == ["quit"]
    assert [e.cmd for e in parse_execs(["escape", "quit"])] == ["escape", "quit"]
    with pytest.raises(ConfigError):
        parse_execs(3)


def test_control_from_dict():
    c = Control.from_dict({"on": ["g", "g"], "exec": "arrow -99999999"})
    assert c.on == [Key.parse("g"), Key.parse("g")]
    assert c.exec[0].args == ["-99999999"]
    with pytest.raises(ConfigError):
        Control.from_dict({"on": ["q"]})


KEYMAP_TOML = """
[manager]
keymap = [
    { on = ["q"], exec = "quit" },
    { on = ["<Esc>"], exec = ["escape", "close"] },
]
[tasks]
keymap = [{ on = ["w"], exec = "close" }]
[select]
keymap = []
[input]
keymap = []
"""


def test_keymap_load_and_get():
    keymap = Keymap.load(KEYMAP_TOML)
    manager = keymap.get(KeymapLayer.MANAGER)
    assert len(manager) == 2
    assert [e.cmd for e in manager[1].exec] == ["escape", "close"]
    assert keymap.get(KeymapLayer.SELECT) == []
    assert keymap.get(KeymapLayer.TASKS)[0].on == [Key.parse("w")]


def test_keymap_which_layer_has_no_bindings():
    keymap = Keymap.load(KEYMAP_TOML)
    with pytest.raises(ValueError):
        keymap.get(KeymapLayer.WHICH)


def test_keymap_missing_section():
    with pytest.raises(ConfigError):
        Keymap.load("[manager]\nkeymap = []\n")