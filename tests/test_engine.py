# File: tests/test_engine.py
import json

import pytest

from robots_scout.aggregator import CheckReport, aggregate_results
from robots_scout.config import load_config
from robots_scout.engine import Engine, check_urls, read_robots, resolve_agent
from robots_scout.matcher.models import Decision
from robots_scout.report import render_html, render_json

URLS = ["https://example.com/", "https://example.com/public/", "/admin/public/x"]


@pytest.fixture()
def report(sample_robots) -> CheckReport:
    return check_urls(sample_robots, "FooBot", URLS, source="robots.txt")


def test_check_urls(report):
    assert [(e.path, e.allowed, e.line_number) for e in report.entries] == [
        ("/", False, 8),
        ("/public/", True, 9),
        ("/admin/public/x", False, 8),
    ]
    assert report.entries[0].line_text == "Disallow: /"
    assert report.allowed_count == 1
    assert report.disallowed_count == 2
    assert report.crawl_delay == 2.0
    assert report.sitemaps == ["https://example.com/sitemap.xml"]


def test_report_to_dict_and_json(report):
    data = report.to_dict()
    assert data["user_agent"] == "FooBot"
    assert data["source"] == "robots.txt"
    assert data["summary"] == {"total": 3, "allowed": 1, "disallowed": 2}
    assert json.loads(report.json()) == data
    assert "\n  " in report.json(pretty=True)


def test_aggregate_results_empty():
    report = aggregate_results("FooBot", [])
    assert report.entries == []
    assert report.sitemaps == []
    assert report.to_dict()["summary"]["total"] == 0


def test_aggregate_results_keeps_order():
    results = [
        ("u1", "/a", Decision(True)),
        ("u2", "/b", Decision(False, 3, "Disallow: /b")),
    ]
    report = aggregate_results("FooBot", results, crawl_delay=1.5, sitemaps=["s"])
    assert [e.url for e in report.entries] == ["u1", "u2"]
    assert report.entries[1].line_text == "Disallow: /b"
    assert report.crawl_delay == 1.5


@pytest.mark.parametrize(
    "agent,reduce,expected",
    [
        ("FooBot", True, "FooBot"),
        ("FooBot/2.1", True, "FooBot"),
        ("FooBot/2.1", False, "FooBot/2.1"),
        ("123", True, ""),
    ],
)
def test_resolve_agent(agent, reduce, expected):
    assert resolve_agent(agent, reduce) == expected


def test_read_robots(robots_file, tmp_path):
    assert read_robots(robots_file).startswith(b"User-agent: *")
    with pytest.raises(FileNotFoundError):
        read_robots(tmp_path / "absent.txt")


def test_engine_run(write_config):
    engine = Engine(Engine.load_config(str(write_config(user_agent="FooBot/1.0"))))
    assert engine.user_agent == "FooBot"
    report = engine.run()
    assert [e.allowed for e in report.entries] == [False, True]
    assert report.user_agent == "FooBot"
    assert report.source.endswith("robots.txt")

    override = engine.run(["/public/index.html"])
    assert [e.allowed for e in override.entries] == [True]


def test_engine_missing_robots(write_config, robots_file):
    cfg = load_config(write_config())
    robots_file.unlink()
    with pytest.raises(FileNotFoundError):
        Engine(cfg).run()


def test_render_json(report, tmp_path):
    out = render_json(report, tmp_path / "out" / "report.json")
    assert out.exists()
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["summary"]["disallowed"] == 2
    assert data["entries"][1]["path"] == "/public/"


def test_render_html_builtin_template(report, tmp_path):
    out = render_html(report, None, tmp_path / "report.html")
    html = out.read_text(encoding="utf-8")
    assert "FooBot" in html
    assert "Disallow: /" in html
    assert "https://example.com/sitemap.xml" in html
    assert "crawl-delay: 2.0" in html


def test_render_html_custom_template(report, tmp_path):
    templates = tmp_path / "tpl"
    templates.mkdir()
    (templates / "report.html.j2").write_text(
        "{{ user_agent }}:{{ allowed_count }}/{{ disallowed_count }}", encoding="utf-8"
    )
    out = render_html(report, templates, tmp_path / "custom.html")
    assert out.read_text(encoding="utf-8") == "FooBot:1/2"
