# robots_scout/matcher/models.py
"""
Data models for the RobotsScout matcher.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from robots_scout.matcher.pattern import NO_MATCH_PRIORITY


class Direction(str, enum.Enum):
    ALLOW = "allow"
    DISALLOW = "disallow"


class Scope(str, enum.Enum):
    GLOBAL = "global"
    SPECIFIC = "specific"


@dataclass(frozen=True, slots=True)
class Rule:
    """An Allow/Disallow pattern kept from one parse of robots.txt."""

    pattern: str
    direction: Direction
    scope: Scope
    line_number: int


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    """Best match seen so far for one direction and scope."""

    scope: Scope
    priority: int = NO_MATCH_PRIORITY
    line_number: int = 0

    @property
    def matched(self) -> bool:
        return self.priority > NO_MATCH_PRIORITY

    def fold(self, priority: int, line_number: int, scope: Scope) -> MatchCandidate:
        """Return the candidate after considering a new match.

        A strictly higher priority always wins; at equal priority a specific
        match replaces a global one.
        """
        if priority > self.priority or (
            priority == self.priority
            and priority > NO_MATCH_PRIORITY
            and scope is Scope.SPECIFIC
            and self.scope is Scope.GLOBAL
        ):
            return replace(self, priority=priority, line_number=line_number, scope=scope)
        return self


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of checking one URL.

    ``line_number`` 0 and an empty ``line_text`` mean no rule matched and the
    URL is allowed by default.
    """

    allowed: bool
    line_number: int = 0
    line_text: str = ""


@dataclass(frozen=True, slots=True)
class Sitemap:
    """A Sitemap URL and the line that declared it. Sitemaps are never agent-scoped."""

    url: str
    line_number: int
