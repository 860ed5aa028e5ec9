# File: robots_scout/robots.py
"""robots_scout.robots: Public entry point: parse robots.txt once, check many URLs.

Example::

    from robots_scout import Robots

    robots = Robots(robots_txt, "FooBot")
    decision = robots.check("https://example.com/admin/page.html")
    decision.allowed      # False
    decision.line_number  # 2
    decision.line_text    # "Disallow: /admin/"

The target agent should already be reduced to its product token
(``FooBot``, not ``FooBot/2.1``); see :func:`robots_scout.utils.is_valid_target_agent`.
A :class:`Robots` instance is immutable after construction, so repeated checks
never influence each other.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from robots_scout.matcher.decision import decide, disallow_ignore_global
from robots_scout.matcher.models import Decision, Rule, Sitemap
from robots_scout.matcher.rules import RuleSet, compile_rules
from robots_scout.parser.lines import RobotsBody
from robots_scout.utils import get_path_params_query

__all__ = ("Robots", "query", "is_allowed")


class Robots:
    """Rules of one robots.txt as seen by one user agent."""

    def __init__(self, robots_body: RobotsBody, user_agent: str) -> None:
        self.user_agent = user_agent or ""
        self.rule_set: RuleSet = compile_rules(robots_body, self.user_agent)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self.rule_set.rules

    @property
    def sitemaps(self) -> List[str]:
        return self.rule_set.sitemaps

    @property
    def sitemap_entries(self) -> Tuple[Sitemap, ...]:
        return self.rule_set.sitemap_entries

    @property
    def crawl_delay(self) -> Optional[float]:
        return self.rule_set.crawl_delay

    @property
    def found_matching_agent_section(self) -> bool:
        return self.rule_set.found_matching_agent_section

    def check(self, url: str) -> Decision:
        """Check a full URL (or a bare path) against the rules."""
        return self.check_path(get_path_params_query(url))

    def check_path(self, path: str) -> Decision:
        """Check an already reduced path, which must start with ``/``."""
        return decide(self.rule_set, path)

    def is_allowed(self, url: str) -> bool:
        return self.check(url).allowed

    def disallow_ignore_global(self, url: str) -> bool:
        """Like ``not is_allowed`` but looking only at the agent's own sections."""
        return disallow_ignore_global(self.rule_set, get_path_params_query(url))

    def __repr__(self) -> str:
        return f"Robots(user_agent={self.user_agent!r}, rules={len(self.rules)})"


def query(robots_body: RobotsBody, user_agent: str) -> Robots:
    """Parse *robots_body* for *user_agent*."""
    return Robots(robots_body, user_agent)


def is_allowed(robots_body: RobotsBody, user_agent: str, url: str) -> bool:
    """One-shot check of *url* for *user_agent*."""
    return Robots(robots_body, user_agent).is_allowed(url)
