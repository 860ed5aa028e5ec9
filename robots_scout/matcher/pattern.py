# File: robots_scout/matcher/pattern.py
"""robots_scout.matcher.pattern: Wildcard and end-anchor matching of robots.txt patterns.

Both the path and the pattern come from third parties, so matching is a
dynamic program over path offsets rather than backtracking: worst case is
``O(len(path) * len(pattern))`` time and ``O(len(path))`` memory however many
``*`` the pattern holds.
"""

from __future__ import annotations

from typing import Final, List

__all__ = ("NO_MATCH_PRIORITY", "WILDCARD", "END_ANCHOR", "matches", "match_priority")

NO_MATCH_PRIORITY: Final[int] = -1
WILDCARD: Final[str] = "*"
END_ANCHOR: Final[str] = "$"


def matches(path: str, pattern: str) -> bool:
    """Return True if *path* matches *pattern*.

    The pattern is anchored at the start of the path. ``*`` matches any run of
    characters, ``$`` anchors the end of the path but only as the last
    character of the pattern; anywhere else it is a literal. Comparison is
    case-sensitive.
    """
    if not pattern:
        return True

    pathlen = len(path)
    last = len(pattern) - 1
    # Offsets into path that can follow the part of pattern consumed so far,
    # kept in increasing order so positions[0] is the minimum.
    positions: List[int] = [0]

    for index, char in enumerate(pattern):
        if char == END_ANCHOR and index == last:
            return positions[-1] == pathlen

        if char == WILDCARD:
            positions = list(range(positions[0], pathlen + 1))
            continue

        positions = [pos + 1 for pos in positions if pos < pathlen and path[pos] == char]
        if not positions:
            return False

    return True


def match_priority(path: str, pattern: str) -> int:
    """Priority of *pattern* against *path*.

    ``-1`` means no match, ``0`` an empty pattern, otherwise the pattern
    length: longer patterns outrank shorter ones.
    """
    if not pattern:
        return 0
    return len(pattern) if matches(path, pattern) else NO_MATCH_PRIORITY
