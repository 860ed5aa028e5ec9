# File: robots_scout/matcher/decision.py
"""robots_scout.matcher.decision: Longest-match decision over a compiled rule set.

Rules of the target agent's own sections are consulted first. If the file has
such a section but none of its rules match, the URL is allowed and ``*`` rules
are not looked at. Only agents without a section of their own fall back to
``*``. Within the chosen scope the longest matching pattern wins and Allow
wins ties. No match at all means allowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from robots_scout.logger import logger
from robots_scout.matcher.models import Decision, Direction, MatchCandidate, Rule, Scope
from robots_scout.matcher.pattern import match_priority
from robots_scout.matcher.rules import RuleSet

__all__ = ("Candidates", "collect_candidates", "disallow_wins", "decide", "disallow_ignore_global")


@dataclass(frozen=True, slots=True)
class Candidates:
    """Best allow/disallow match per scope for one path."""

    allow_specific: MatchCandidate = MatchCandidate(Scope.SPECIFIC)
    disallow_specific: MatchCandidate = MatchCandidate(Scope.SPECIFIC)
    allow_global: MatchCandidate = MatchCandidate(Scope.GLOBAL)
    disallow_global: MatchCandidate = MatchCandidate(Scope.GLOBAL)

    @property
    def has_specific(self) -> bool:
        return self.allow_specific.matched or self.disallow_specific.matched

    @property
    def has_global(self) -> bool:
        return self.allow_global.matched or self.disallow_global.matched


def collect_candidates(rules: Iterable[Rule], path: str) -> Candidates:
    """Evaluate every rule against *path* and keep the best match of each kind."""
    best = {
        (Direction.ALLOW, Scope.SPECIFIC): MatchCandidate(Scope.SPECIFIC),
        (Direction.DISALLOW, Scope.SPECIFIC): MatchCandidate(Scope.SPECIFIC),
        (Direction.ALLOW, Scope.GLOBAL): MatchCandidate(Scope.GLOBAL),
        (Direction.DISALLOW, Scope.GLOBAL): MatchCandidate(Scope.GLOBAL),
    }
    for rule in rules:
        priority = match_priority(path, rule.pattern)
        if priority < 0:
            continue
        key = (rule.direction, rule.scope)
        best[key] = best[key].fold(priority, rule.line_number, rule.scope)

    return Candidates(
        allow_specific=best[(Direction.ALLOW, Scope.SPECIFIC)],
        disallow_specific=best[(Direction.DISALLOW, Scope.SPECIFIC)],
        allow_global=best[(Direction.ALLOW, Scope.GLOBAL)],
        disallow_global=best[(Direction.DISALLOW, Scope.GLOBAL)],
    )


def disallow_wins(disallow: MatchCandidate, allow: MatchCandidate) -> bool:
    """Disallow needs a strictly longer match; equal length goes to Allow."""
    return disallow.priority > allow.priority


def _verdict(disallow: MatchCandidate, allow: MatchCandidate) -> Tuple[bool, int]:
    if disallow_wins(disallow, allow):
        return False, disallow.line_number
    return True, allow.line_number


def decide(rule_set: RuleSet, path: str) -> Decision:
    """Decide whether *path* may be fetched under *rule_set*."""
    candidates = collect_candidates(rule_set.rules, path)

    if candidates.has_specific:
        allowed, line = _verdict(candidates.disallow_specific, candidates.allow_specific)
    elif rule_set.found_matching_agent_section:
        allowed, line = True, 0
    elif candidates.has_global:
        allowed, line = _verdict(candidates.disallow_global, candidates.allow_global)
    else:
        allowed, line = True, 0

    decision = Decision(allowed=allowed, line_number=line, line_text=rule_set.line_text(line))
    logger.debug(
        "%s %s for %r (line %d)",
        "Allow" if allowed else "Disallow",
        path,
        rule_set.user_agent,
        line,
    )
    return decision


def disallow_ignore_global(rule_set: RuleSet, path: str) -> bool:
    """True if the agent's own rules disallow *path*; ``*`` rules are ignored."""
    candidates = collect_candidates(rule_set.scoped(Scope.SPECIFIC), path)
    if not candidates.has_specific:
        return False
    return disallow_wins(candidates.disallow_specific, candidates.allow_specific)
