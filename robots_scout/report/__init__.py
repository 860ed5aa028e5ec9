# File: robots_scout/report/__init__.py
"""robots_scout.report: Генерация отчётов (JSON и HTML) для CLI и тестов."""

from __future__ import annotations

from robots_scout.report.html_report import render_html
from robots_scout.report.json_report import render_json

__all__ = ["render_json", "render_html"]
