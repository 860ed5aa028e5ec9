# File: tests/test_pattern.py
import pytest

from robots_scout.matcher.pattern import NO_MATCH_PRIORITY, match_priority, matches


@pytest.mark.parametrize(
    "path,pattern,expected",
    [
        ("/anything", "", True),
        ("/fish", "/fish", True),
        ("/fish.html", "/fish", True),
        ("/fishheads/yummy.html", "/fish", True),
        ("/Fish.asp", "/fish", False),
        ("/catfish", "/fish", False),
        ("/filename.pdf", "/*.pdf$", True),
        ("/folder/filename.pdf", "/*.pdf$", True),
        ("/filename.pdf?params", "/*.pdf$", False),
        ("/filename.pdf.html", "/*.pdf$", False),
        ("/", "/$", True),
        ("/page", "/$", False),
        ("", "$", True),
        ("/", "$", False),
        ("/admin", "*/admin", True),
        ("/x/admin/y", "*/admin", True),
        ("/foo123bar", "/foo**bar", True),
        ("/foobar", "/foo**bar", True),
        ("/foo", "/foo**bar", False),
        ("/a$b", "/a$b", True),
        ("/ab", "/a$b", False),
        ("/fish.php?id=1", "/fish*.php", True),
        ("/", "*", True),
    ],
)
def test_matches(path, pattern, expected):
    assert matches(path, pattern) is expected


def test_match_priority():
    assert match_priority("/foo", "") == 0
    assert match_priority("/foo/bar", "/foo") == 4
    assert match_priority("/foo/bar", "/*/bar") == 6
    assert match_priority("/baz", "/foo") == NO_MATCH_PRIORITY


def test_long_inputs_are_fast():
    path = "/" + "a" * 5000
    pattern = "/" + "*a" * 200 + "b"
    assert not matches(path, pattern)
