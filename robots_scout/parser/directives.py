# File: robots_scout/parser/directives.py
"""robots_scout.parser.directives: Tokenizes robots.txt lines and classifies their directives.

The module turns raw content into a lazy stream of :class:`ParsedLine`
records, one per logical line, in file order. Lines carrying a directive hold a
:class:`Directive`; every line keeps its :class:`LineMetadata` for diagnostics.
Nothing here raises on malformed input: a line that cannot be read as
``key: value`` is reported as a non-directive line and skipped by consumers.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Final, Iterator, Optional, Tuple

from robots_scout.logger import logger
from robots_scout.parser.escape import maybe_escape_pattern
from robots_scout.parser.lines import LogicalLine, RobotsBody, split_lines

__all__ = (
    "DirectiveKind",
    "LineMetadata",
    "Directive",
    "ParsedLine",
    "classify_key",
    "tokenize_line",
    "parse_line",
    "iter_parsed_lines",
    "parse_directives",
)

_WHITESPACE: Final[bytes] = b" \t"


class DirectiveKind(str, enum.Enum):
    """Directive types understood by the parser."""

    USER_AGENT = "user-agent"
    ALLOW = "allow"
    DISALLOW = "disallow"
    SITEMAP = "sitemap"
    CRAWL_DELAY = "crawl-delay"
    UNKNOWN = "unknown"

    @property
    def is_pattern(self) -> bool:
        """True when the value is a path pattern and must be normalized."""
        return self not in (DirectiveKind.USER_AGENT, DirectiveKind.SITEMAP)


_KEY_PREFIXES: Final[Tuple[Tuple[str, DirectiveKind], ...]] = (
    ("user-agent", DirectiveKind.USER_AGENT),
    ("allow", DirectiveKind.ALLOW),
    ("disallow", DirectiveKind.DISALLOW),
    ("sitemap", DirectiveKind.SITEMAP),
    ("crawl-delay", DirectiveKind.CRAWL_DELAY),
)


@dataclass(slots=True)
class LineMetadata:
    """Flags describing how a single line was read."""

    is_empty: bool = False
    has_comment: bool = False
    is_comment: bool = False
    has_directive: bool = False
    is_line_too_long: bool = False
    is_missing_colon_separator: bool = False


@dataclass(frozen=True, slots=True)
class Directive:
    """A classified ``key: value`` pair taken from one line."""

    line_number: int
    kind: DirectiveKind
    key: str
    value: str
    metadata: LineMetadata = field(default_factory=LineMetadata, compare=False, repr=False)


@dataclass(slots=True)
class ParsedLine:
    """Result of reading one logical line."""

    number: int
    metadata: LineMetadata = field(default_factory=LineMetadata)
    directive: Optional[Directive] = None


def classify_key(key: str) -> DirectiveKind:
    """Case-insensitive prefix match of *key* against the known directives."""
    lowered = key.lower()
    for prefix, kind in _KEY_PREFIXES:
        if lowered.startswith(prefix):
            return kind
    return DirectiveKind.UNKNOWN


def tokenize_line(line: bytes, metadata: LineMetadata) -> Optional[Tuple[bytes, bytes]]:
    """Split *line* into ``(key, value)`` or return ``None`` for non-directives.

    Everything from the first ``#`` is a comment. The separator is ``:``; as an
    extension a single run of spaces/tabs is accepted instead, but only when
    it leaves exactly two tokens, so ``User-agent FooBot`` is read while
    ``Random garbage line`` is not. *metadata* is updated in place.
    """
    comment = line.find(b"#")
    if comment != -1:
        metadata.has_comment = True
        line = line[:comment]
    line = line.strip()

    if not line:
        metadata.is_comment = metadata.has_comment
        metadata.is_empty = not metadata.has_comment
        return None

    separator = line.find(b":")
    if separator == -1:
        separator = _whitespace_separator(line)
        if separator == -1:
            return None
        metadata.is_missing_colon_separator = True

    key = line[:separator].strip()
    if not key:
        return None
    value = line[separator + 1:].strip()
    metadata.has_directive = True
    return key, value


def _whitespace_separator(line: bytes) -> int:
    position = next((i for i, byte in enumerate(line) if byte in _WHITESPACE), -1)
    if position == -1:
        return -1
    value = line[position:].lstrip(_WHITESPACE)
    if not value or any(byte in _WHITESPACE for byte in value):
        return -1
    return position


def parse_line(line: LogicalLine) -> ParsedLine:
    """Read one logical line into a :class:`ParsedLine`."""
    parsed = ParsedLine(number=line.number)
    parsed.metadata.is_line_too_long = line.too_long
    if line.too_long:
        logger.debug("Line %d exceeds %d bytes", line.number, len(line.text))

    tokens = tokenize_line(line.text, parsed.metadata)
    if tokens is None:
        return parsed

    raw_key, raw_value = tokens
    key = raw_key.decode("utf-8", errors="replace")
    kind = classify_key(key)
    if kind.is_pattern:
        value = maybe_escape_pattern(raw_value)
    else:
        value = raw_value.decode("utf-8", errors="replace")

    parsed.directive = Directive(
        line_number=line.number, kind=kind, key=key, value=value, metadata=parsed.metadata
    )
    return parsed


def iter_parsed_lines(robots_body: RobotsBody) -> Iterator[ParsedLine]:
    """Lazily parse every line of *robots_body*, directives or not."""
    for line in split_lines(robots_body):
        yield parse_line(line)


def parse_directives(robots_body: RobotsBody) -> Iterator[Directive]:
    """Lazily yield the directives of *robots_body* in line order."""
    for parsed in iter_parsed_lines(robots_body):
        if parsed.directive is None:
            if not (parsed.metadata.is_empty or parsed.metadata.is_comment):
                logger.debug("Skipping non-directive line %d", parsed.number)
            continue
        if parsed.directive.kind is DirectiveKind.UNKNOWN:
            logger.debug(
                "Unknown directive %r on line %d", parsed.directive.key, parsed.number
            )
        yield parsed.directive
