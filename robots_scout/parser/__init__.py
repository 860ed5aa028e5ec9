"""robots_scout.parser: Line splitting, tokenizing and directive classification."""

from robots_scout.parser.directives import (
    Directive,
    DirectiveKind,
    LineMetadata,
    ParsedLine,
    classify_key,
    iter_parsed_lines,
    parse_directives,
    tokenize_line,
)
from robots_scout.parser.escape import maybe_escape_pattern
from robots_scout.parser.lines import MAX_LINE_LEN, LogicalLine, line_texts, split_lines

__all__ = [
    "Directive",
    "DirectiveKind",
    "LineMetadata",
    "LogicalLine",
    "MAX_LINE_LEN",
    "ParsedLine",
    "classify_key",
    "iter_parsed_lines",
    "line_texts",
    "maybe_escape_pattern",
    "parse_directives",
    "split_lines",
    "tokenize_line",
]
