"""robots_scout.matcher: Pattern matching, block tracking, rule storage and the final decision."""

from robots_scout.matcher.decision import decide, disallow_ignore_global
from robots_scout.matcher.models import Decision, Direction, MatchCandidate, Rule, Scope, Sitemap
from robots_scout.matcher.pattern import match_priority, matches
from robots_scout.matcher.rules import RuleSet, build_rule_set, compile_rules

__all__ = [
    "Decision",
    "Direction",
    "MatchCandidate",
    "Rule",
    "RuleSet",
    "Scope",
    "Sitemap",
    "build_rule_set",
    "compile_rules",
    "decide",
    "disallow_ignore_global",
    "match_priority",
    "matches",
]
