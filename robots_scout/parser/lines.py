# File: robots_scout/parser/lines.py
"""robots_scout.parser.lines: Splits raw robots.txt content into numbered logical lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Iterator, List, Union

__all__ = (
    "BROWSER_MAX_URL_LENGTH",
    "LINE_LENGTH_SAFETY_FACTOR",
    "MAX_LINE_LEN",
    "UTF8_BOM",
    "LogicalLine",
    "to_bytes",
    "split_lines",
    "line_texts",
)

# Internet Explorer's historical URL length limit.
BROWSER_MAX_URL_LENGTH: Final[int] = 2083
LINE_LENGTH_SAFETY_FACTOR: Final[int] = 8
MAX_LINE_LEN: Final[int] = BROWSER_MAX_URL_LENGTH * LINE_LENGTH_SAFETY_FACTOR

UTF8_BOM: Final[bytes] = b"\xef\xbb\xbf"

_LINE_BREAK_RE: Final[re.Pattern[bytes]] = re.compile(rb"\r\n|\r|\n")

RobotsBody = Union[bytes, bytearray, str, None]


@dataclass(frozen=True, slots=True)
class LogicalLine:
    """One line of robots.txt, 1-based, without its terminator."""

    number: int
    text: bytes
    too_long: bool = False

    def decode(self) -> str:
        return self.text.decode("utf-8", errors="replace")


def to_bytes(robots_body: RobotsBody) -> bytes:
    """Return the body as bytes; ``None`` becomes an empty file."""
    if robots_body is None:
        return b""
    if isinstance(robots_body, str):
        # surrogateescape keeps bytes that arrived through a lossy decode
        try:
            return robots_body.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError:
            # lone surrogates outside U+DC80..U+DCFF have no byte to restore
            return robots_body.encode("utf-8", errors="replace")
    return bytes(robots_body)


def split_lines(robots_body: RobotsBody) -> Iterator[LogicalLine]:
    """Yield the logical lines of *robots_body*.

    A leading UTF-8 byte order mark is dropped. ``\\r\\n``, ``\\r`` and ``\\n``
    all terminate a line, ``\\r\\n`` counting once. The last line is emitted
    even without a terminator, so empty content still yields one empty line.
    Lines of :data:`MAX_LINE_LEN` bytes or more are flagged, not truncated.
    """
    content = to_bytes(robots_body)
    if content.startswith(UTF8_BOM):
        content = content[len(UTF8_BOM):]

    number = 0
    start = 0
    for match in _LINE_BREAK_RE.finditer(content):
        number += 1
        yield _make_line(number, content[start:match.start()])
        start = match.end()
    yield _make_line(number + 1, content[start:])


def line_texts(robots_body: RobotsBody) -> List[str]:
    """Decoded text of every logical line, index ``n - 1`` for line ``n``."""
    return [line.decode() for line in split_lines(robots_body)]


def _make_line(number: int, text: bytes) -> LogicalLine:
    return LogicalLine(number=number, text=text, too_long=len(text) >= MAX_LINE_LEN)
