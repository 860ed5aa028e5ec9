# File: robots_scout/matcher/rules.py
"""robots_scout.matcher.rules: Builds the immutable rule set of one robots.txt for one agent.

The directive stream is folded once: block membership is tracked with
:func:`robots_scout.matcher.blocks.transition`, and every Allow/Disallow that
belongs to a global or target-specific block is kept as a :class:`Rule`.
Checking a path afterwards only replays the pattern matcher over these rules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, Iterable, List, Optional, Sequence, Tuple

from robots_scout.logger import logger
from robots_scout.matcher.blocks import INITIAL_STATE, BlockMode, BlockState, transition
from robots_scout.matcher.models import Direction, Rule, Scope, Sitemap
from robots_scout.parser.directives import Directive, DirectiveKind, parse_directives
from robots_scout.parser.lines import RobotsBody, line_texts
from robots_scout.utils import remove_duplicates

__all__ = (
    "INDEX_PAGES",
    "RuleSet",
    "RuleAccumulator",
    "index_directory_pattern",
    "parse_crawl_delay",
    "build_rule_set",
    "compile_rules",
)

INDEX_PAGES: Final[Tuple[str, ...]] = ("index.htm", "index.html")


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Everything one parse of robots.txt yields for one user agent."""

    user_agent: str
    rules: Tuple[Rule, ...] = ()
    found_matching_agent_section: bool = False
    sitemap_entries: Tuple[Sitemap, ...] = ()
    crawl_delay_specific: Optional[float] = None
    crawl_delay_global: Optional[float] = None
    lines: Tuple[str, ...] = ()

    @property
    def sitemaps(self) -> List[str]:
        """Unique sitemap URLs in the order they first appear."""
        return remove_duplicates([entry.url for entry in self.sitemap_entries])

    @property
    def crawl_delay(self) -> Optional[float]:
        """Crawl-delay for the agent: its own section first, then ``*``."""
        if self.found_matching_agent_section and self.crawl_delay_specific is not None:
            return self.crawl_delay_specific
        return self.crawl_delay_global

    def line_text(self, line_number: int) -> str:
        if line_number <= 0 or line_number > len(self.lines):
            return ""
        return self.lines[line_number - 1]

    def scoped(self, scope: Scope) -> Tuple[Rule, ...]:
        return tuple(rule for rule in self.rules if rule.scope is scope)


def index_directory_pattern(pattern: str) -> Optional[str]:
    """``/foo/index.html`` -> ``/foo/$``; ``None`` if the last segment is not an index page."""
    slash = pattern.rfind("/")
    if slash == -1 or pattern[slash + 1:] not in INDEX_PAGES:
        return None
    return pattern[:slash + 1] + "$"


def parse_crawl_delay(value: str) -> Optional[float]:
    """Seconds as a non-negative finite number, ``None`` when unusable."""
    try:
        delay = float(value)
    except ValueError:
        return None
    if not math.isfinite(delay) or delay < 0:
        return None
    return delay


class RuleAccumulator:
    """Folds directives, in file order, into a :class:`RuleSet`."""

    def __init__(self, user_agent: str) -> None:
        self.user_agent = user_agent
        self.state: BlockState = INITIAL_STATE
        self.found_matching_agent_section = False
        self._rules: List[Rule] = []
        self._sitemaps: List[Sitemap] = []
        self._crawl_delay_specific: Optional[float] = None
        self._crawl_delay_global: Optional[float] = None

    def feed(self, directive: Directive) -> None:
        self.state = transition(self.state, directive, self.user_agent)
        if self.state.mode is BlockMode.SPECIFIC:
            self.found_matching_agent_section = True

        kind = directive.kind
        if kind is DirectiveKind.ALLOW:
            self._add_allow(directive)
        elif kind is DirectiveKind.DISALLOW:
            self._add_disallow(directive)
        elif kind is DirectiveKind.SITEMAP:
            if directive.value:
                self._sitemaps.append(Sitemap(url=directive.value, line_number=directive.line_number))
        elif kind is DirectiveKind.CRAWL_DELAY:
            self._set_crawl_delay(directive)

    def result(self, lines: Sequence[str] = ()) -> RuleSet:
        return RuleSet(
            user_agent=self.user_agent,
            rules=tuple(self._rules),
            found_matching_agent_section=self.found_matching_agent_section,
            sitemap_entries=tuple(self._sitemaps),
            crawl_delay_specific=self._crawl_delay_specific,
            crawl_delay_global=self._crawl_delay_global,
            lines=tuple(lines),
        )

    def _add_allow(self, directive: Directive) -> None:
        scope = self.state.scope
        if scope is None:
            return
        self._store(directive.value, Direction.ALLOW, scope, directive.line_number)

        directory = index_directory_pattern(directive.value)
        if directory is not None:
            logger.debug(
                "Line %d: %r also allows %r", directive.line_number, directive.value, directory
            )
            self._store(directory, Direction.ALLOW, scope, directive.line_number)

    def _add_disallow(self, directive: Directive) -> None:
        scope = self.state.scope
        # an empty Disallow allows everything and must not compete with Allow rules
        if scope is None or not directive.value:
            return
        self._store(directive.value, Direction.DISALLOW, scope, directive.line_number)

    def _store(self, pattern: str, direction: Direction, scope: Scope, line_number: int) -> None:
        self._rules.append(
            Rule(pattern=pattern, direction=direction, scope=scope, line_number=line_number)
        )

    def _set_crawl_delay(self, directive: Directive) -> None:
        scope = self.state.scope
        if scope is None:
            return
        delay = parse_crawl_delay(directive.value)
        if delay is None:
            logger.debug(
                "Ignoring crawl-delay %r on line %d", directive.value, directive.line_number
            )
            return
        if scope is Scope.SPECIFIC:
            self._crawl_delay_specific = delay
        else:
            self._crawl_delay_global = delay


def build_rule_set(
    directives: Iterable[Directive], user_agent: str, lines: Sequence[str] = ()
) -> RuleSet:
    """Fold *directives* for *user_agent*; *lines* provide text for decisions."""
    accumulator = RuleAccumulator(user_agent)
    for directive in directives:
        accumulator.feed(directive)
    return accumulator.result(lines)


def compile_rules(robots_body: RobotsBody, user_agent: str) -> RuleSet:
    """Parse *robots_body* once and keep the rules relevant to *user_agent*."""
    rule_set = build_rule_set(parse_directives(robots_body), user_agent, line_texts(robots_body))
    logger.debug(
        "Compiled %d rules for %r (specific section found: %s)",
        len(rule_set.rules),
        user_agent,
        rule_set.found_matching_agent_section,
    )
    return rule_set
