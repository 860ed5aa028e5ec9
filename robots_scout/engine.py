# File: robots_scout/engine.py
"""robots_scout.engine: Orchestration layer: чтение robots.txt, проверка URL и агрегация результатов."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from robots_scout.aggregator import CheckReport, aggregate_results
from robots_scout.config import CheckerConfig, load_config
from robots_scout.logger import logger
from robots_scout.parser.lines import RobotsBody
from robots_scout.robots import Robots
from robots_scout.utils import extract_user_agent, get_path_params_query, is_valid_target_agent

__all__ = ["Engine", "check_urls", "resolve_agent", "read_robots"]


def resolve_agent(user_agent: str, reduce: bool = True) -> str:
    """Сокращает User-Agent до продуктового токена, если он невалиден."""
    if is_valid_target_agent(user_agent):
        return user_agent
    if not reduce:
        logger.info("User-agent %r contains characters outside [a-zA-Z_-]", user_agent)
        return user_agent
    reduced = extract_user_agent(user_agent)
    logger.info("User-agent %r reduced to %r", user_agent, reduced)
    return reduced


def read_robots(path: Union[str, Path]) -> bytes:
    """Читает robots.txt как байты; кодировку разбирает парсер."""
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("robots.txt not found: %s", p)
        raise FileNotFoundError(f"robots.txt not found: {p}")
    return p.read_bytes()


def check_urls(
    robots_body: RobotsBody,
    user_agent: str,
    urls: Iterable[str],
    *,
    source: str = "",
) -> CheckReport:
    """Разбирает robots.txt один раз и проверяет каждый URL."""
    robots = Robots(robots_body, user_agent)
    results = []
    for url in urls:
        path = get_path_params_query(url)
        results.append((url, path, robots.check_path(path)))
    report = aggregate_results(
        user_agent,
        results,
        source=source,
        crawl_delay=robots.crawl_delay,
        sitemaps=robots.sitemaps,
    )
    logger.info(
        "Checked %d URLs for %r: %d allowed, %d disallowed",
        len(report.entries),
        user_agent,
        report.allowed_count,
        report.disallowed_count,
    )
    return report


class Engine:
    """Фасад для CLI и тестов: загрузка конфига, чтение robots.txt и проверка URL."""

    @staticmethod
    def load_config(path: Optional[str]) -> CheckerConfig:
        """Загружает конфиг из YAML/JSON."""
        return load_config(path)

    def __init__(self, config: CheckerConfig) -> None:
        self.config = config
        self.user_agent = resolve_agent(config.user_agent, config.reduce_user_agent)

    def load_robots(self) -> bytes:
        return read_robots(self.config.robots_file)

    def run(self, urls: Optional[List[str]] = None) -> CheckReport:
        """Проверяет urls (по умолчанию из конфига) и возвращает CheckReport."""
        logger.info("Checking %s as %r", self.config.robots_file, self.user_agent)
        targets = self.config.urls if urls is None else urls
        return check_urls(
            self.load_robots(),
            self.user_agent,
            targets,
            source=str(self.config.robots_file),
        )
