# File: robots_scout/aggregator.py
"""robots_scout.aggregator: Модуль агрегатора результатов проверки URL."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from robots_scout.matcher.models import Decision


@dataclass(slots=True)
class CheckEntry:
    """Результат проверки одного URL."""

    url: str
    path: str
    allowed: bool
    line_number: int = 0
    line_text: str = ""


@dataclass(slots=True)
class CheckReport:
    """Результаты проверки набора URL для одного User-Agent."""

    user_agent: str
    source: str = ""
    crawl_delay: Optional[float] = None
    sitemaps: List[str] = field(default_factory=list)
    entries: List[CheckEntry] = field(default_factory=list)

    @property
    def allowed_count(self) -> int:
        return sum(1 for entry in self.entries if entry.allowed)

    @property
    def disallowed_count(self) -> int:
        return len(self.entries) - self.allowed_count

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["summary"] = {
            "total": len(self.entries),
            "allowed": self.allowed_count,
            "disallowed": self.disallowed_count,
        }
        return data

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление CheckReport."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(
    user_agent: str,
    results: Iterable[Tuple[str, str, Decision]],
    *,
    source: str = "",
    crawl_delay: Optional[float] = None,
    sitemaps: Optional[List[str]] = None,
) -> CheckReport:
    """Собирает тройки (url, path, Decision) в CheckReport."""
    entries = [
        CheckEntry(
            url=url,
            path=path,
            allowed=decision.allowed,
            line_number=decision.line_number,
            line_text=decision.line_text,
        )
        for url, path, decision in results
    ]
    return CheckReport(
        user_agent=user_agent,
        source=source,
        crawl_delay=crawl_delay,
        sitemaps=list(sitemaps or []),
        entries=entries,
    )
