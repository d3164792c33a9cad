import pytest

from termfm.errors import ConfigError
from termfm.pattern import Pattern


def test_star_matches_file_name():
    p = Pattern("*.md")
    assert p.matches("README.md")
    assert not p.matches("README.txt")


def test_trailing_slash_marks_folder():
    p = Pattern("build/")
    assert p.is_folder
    assert not p.full_path
    assert p.match_path("/home/user/build", True)
    assert not p.match_path("/home/user/build", False)


def test_match_path_uses_file_name():
    p = Pattern("*.md")
    assert p.match_path("/home/user/notes.md", False)
    assert p.match_path("/home/user/notes.md", None)
    assert not p.match_path("/home/user/notes.md", True)


def test_full_path_pattern():
    p = Pattern("/home/*/notes.md")
    assert p.full_path
    assert p.match_path("/home/user/notes.md", False)
    assert not p.match_path("/srv/user/notes.md", False)


def test_question_mark_and_classes():
    assert Pattern("a?c").matches("abc")
    assert not Pattern("a?c").matches("ac")
    assert Pattern("[a-c]x").matches("bx")
    assert not Pattern("[!a-c]x").matches("bx")
    assert Pattern("[!a-c]x").matches("zx")


def test_literal_special_characters_are_escaped():
    assert Pattern("a+b.txt").matches("a+b.txt")
    assert not Pattern("a+b.txt").matches("aab.txt")


def test_unclosed_bracket_is_an_error():
    with pytest.raises(ConfigError):
        Pattern("[abc")


def test_equality_by_text():
    patterns = {Pattern("*.rs"), Pattern("*.rs"), Pattern("*.md")}
    assert len(patterns) == 2
    assert Pattern("*.rs") == Pattern("*.rs")
    assert not (Pattern("*.rs") == Pattern("*.md"))