# robots_scout/__init__.py
"""
RobotsScout package initializer.
Defines package version and exposes the robots.txt matching API.
"""
__version__ = "0.1.0"

from robots_scout.matcher.models import Decision, Sitemap
from robots_scout.parser.directives import parse_directives
from robots_scout.robots import Robots, is_allowed, query
from robots_scout.utils import get_path_params_query, is_valid_target_agent

__all__ = [
    "__version__",
    "Decision",
    "Robots",
    "Sitemap",
    "get_path_params_query",
    "is_allowed",
    "is_valid_target_agent",
    "parse_directives",
    "query",
]
