# File: robots_scout/logger.py
"""robots_scout.logger: Логгер RobotsScout.

Все модули пишут в один именованный логгер::

    from robots_scout.logger import logger
    logger.debug("Skipping non-directive line %d", number)

Вывод идёт в stderr: stdout команд ``check`` и ``run`` занят JSON-результатом.
По умолчанию уровень WARNING, поэтому разбор robots.txt как библиотеки молчит;
CLI перенастраивает логгер опциями ``--log-level``, ``--log-file`` и ``--log-format``.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Union

LOGGER_NAME: Final[str] = "RobotsScout"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# ротация файла логов: 5 MiB, три архива
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3

Level = Union[int, str]


def _build_handlers(log_file: Union[str, Path, None], fmt: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: Level = "WARNING",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Настраивает логгер RobotsScout и возвращает его.

    Args:
        level: уровень, числом или именем (``"DEBUG"``).
        log_file: файл логов с ротацией; None означает только stderr.
        log_format: формат для :class:`logging.Formatter`.
        replace_handlers: снять ранее установленные обработчики.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()
    for handler in _build_handlers(log_file, log_format):
        lg.addHandler(handler)
    # сообщения не дублируются через root-логгер приложения
    lg.propagate = False
    return lg


def init_logging(
    level: Level = "WARNING",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Вызывается CLI один раз на команду; всегда заменяет обработчики."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
