# File: tests/test_escape.py
import pytest

from robots_scout.parser.escape import maybe_escape_pattern


@pytest.mark.parametrize(
    "src,expected",
    [
        ("http://www.example.com", "http://www.example.com"),
        ("/a/b/c", "/a/b/c"),
        ("á", "%C3%A1"),
        ("%aa", "%AA"),
        ("/SanJoséSellers", "/SanJos%C3%A9Sellers"),
        ("/foo/%ab/é", "/foo/%AB/%C3%A9"),
        ("/*.pdf$", "/*.pdf$"),
        ("", ""),
    ],
)
def test_escape(src, expected):
    assert maybe_escape_pattern(src) == expected


@pytest.mark.parametrize("src", ["%", "/%4", "/a%zz", "/100%"])
def test_incomplete_escapes_are_copied(src):
    assert maybe_escape_pattern(src) == src


def test_bytes_input():
    assert maybe_escape_pattern(b"/caf\xc3\xa9") == "/caf%C3%A9"


@pytest.mark.parametrize("src", ["/SanJoséSellers", "/%aa%bB", "/mixed%e9é"])
def test_escape_is_idempotent(src):
    once = maybe_escape_pattern(src)
    assert maybe_escape_pattern(once) == once
