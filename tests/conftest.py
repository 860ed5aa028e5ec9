# File: tests/conftest.py
import json
from pathlib import Path
from typing import Callable

import pytest

from robots_scout.logger import init_logging
from robots_scout.robots import Robots

SAMPLE_ROBOTS = """\
User-agent: *
Disallow: /admin/
Disallow: /private/*.secret$
Allow: /admin/public/
Crawl-delay: 2

User-agent: FooBot
Disallow: /
Allow: /public/index.html

Sitemap: https://example.com/sitemap.xml
"""


@pytest.fixture()
def sample_robots() -> str:
    """Return a small robots.txt with a global and a FooBot section."""
    return SAMPLE_ROBOTS


@pytest.fixture()
def robots_file(tmp_path) -> Path:
    """Write the sample robots.txt to a temporary file."""
    path = tmp_path / "robots.txt"
    path.write_text(SAMPLE_ROBOTS, encoding="utf-8")
    return path


@pytest.fixture()
def write_config(tmp_path, robots_file) -> Callable[..., Path]:
    """
    Factory writing a JSON config that points at the sample robots.txt.
    Keyword arguments override config fields.
    """

    def _write(name: str = "config.json", **overrides) -> Path:
        data = {
            "robots_file": str(robots_file),
            "user_agent": "FooBot",
            "urls": ["https://example.com/", "https://example.com/public/"],
        }
        data.update(overrides)
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def allowed() -> Callable[[str, str, str], bool]:
    """Shortcut: is *url* allowed for *agent* under *robots_txt*."""

    def _allowed(robots_txt: str, agent: str, url: str) -> bool:
        return Robots(robots_txt, agent).check(url).allowed

    return _allowed


@pytest.fixture(autouse=True)
def reset_logging():
    """CliRunner swaps sys.stderr; rebuild the handlers after every test."""
    yield
    init_logging()
