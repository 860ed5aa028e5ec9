# File: robots_scout/utils.py
"""robots_scout.utils: Утилиты для URL и User-Agent: выделение пути, продуктового токена, дедупликация."""

from __future__ import annotations

import re
from typing import Collection, Final, List, Sequence
from urllib.parse import urlsplit

from robots_scout.logger import logger

__all__: Sequence[str] = (
    "get_path_params_query",
    "extract_user_agent",
    "is_valid_user_agent",
    "is_valid_target_agent",
    "remove_duplicates",
)

_SCHEME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_AGENT_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z_-]*")
_VALID_AGENT_RE: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z_-]+")


def get_path_params_query(url: str | None) -> str:
    """Возвращает путь, параметры и query из URL; результат всегда начинается с "/".

    Схема, authority и fragment отбрасываются. Примеры::

        'http://example.com/a/b?c=d#e' -> '/a/b?c=d'
        '//example.com/path'           -> '/path'
        'example.com/a;b#c'            -> '/a;b'
        ''                             -> '/'
    """
    if not url:
        return "/"

    if url.startswith("//"):
        to_parse = f"http:{url}"
    elif url.startswith("/"):
        to_parse = f"http://dummy{url}"
    elif _SCHEME_RE.match(url):
        to_parse = url
    else:
        to_parse = f"http://{url}"

    try:
        parts = urlsplit(to_parse)
    except ValueError as exc:
        logger.debug("Unparsable URL %r: %s", url, exc)
        return "/"

    path = parts.path or "/"
    if not path.startswith("/"):
        path = "/" + path
    if parts.query:
        path = f"{path}?{parts.query}"
    elif to_parse.split("#", 1)[0].endswith("?"):
        path += "?"
    return path


def extract_user_agent(user_agent: str | None) -> str:
    """Продуктовый токен User-Agent: префикс из символов [a-zA-Z_-].

    'MyBot/2.1' -> 'MyBot', 'Mozilla-5' -> 'Mozilla-', '123Bot' -> ''.
    """
    if not user_agent:
        return ""
    match = _AGENT_TOKEN_RE.match(user_agent)
    return match.group(0) if match else ""


def is_valid_user_agent(user_agent: str | None) -> bool:
    """True, если строка непустая и состоит только из [a-zA-Z_-]."""
    return bool(user_agent) and _VALID_AGENT_RE.fullmatch(user_agent) is not None


# Name used by crawlers validating their own identity before matching.
is_valid_target_agent = is_valid_user_agent


def remove_duplicates(items: Collection[str]) -> List[str]:
    """Удаляет дубликаты, сохраняя порядок первого появления."""
    unique = list(dict.fromkeys(items))
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate entries", removed)
    return unique
