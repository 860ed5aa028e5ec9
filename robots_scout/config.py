# === FILE: robots_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации RobotsScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


class CheckerConfig(BaseModel):
    """Конфигурация одного запуска проверки URL по robots.txt."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    robots_file: Path = Field(..., description="Путь к файлу robots.txt.")
    user_agent: str = Field("RobotsScout", min_length=1, description="Имя проверяемого краулера.")
    urls: List[str] = Field(default_factory=list, description="URL для проверки.")
    reduce_user_agent: bool = Field(
        True, description="Сокращать User-Agent до продуктового токена ([a-zA-Z_-])."
    )
    fail_on_disallow: bool = Field(
        False, description="Код выхода 2, если хотя бы один URL запрещён."
    )

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("urls", mode="before")
    def _drop_blank_urls(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [u.strip() for u in v if not isinstance(u, str) or u.strip()]
        return v

    @model_validator(mode="after")
    def _check_robots_file_exists(self) -> CheckerConfig:
        if not self.robots_file.is_file():
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), str(self.robots_file)
            )
        return self


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def _resolve_robots_file(data: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    """Относительный robots_file считается от папки конфига."""
    robots_file = data.get("robots_file")
    if isinstance(robots_file, str) and robots_file:
        candidate = Path(robots_file).expanduser()
        if not candidate.is_absolute():
            candidate = base_dir / candidate
        data = {**data, "robots_file": candidate}
    return data


def load_config(path: Union[str, Path, None]) -> CheckerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CheckerConfig.
    При отсутствии файла конфига или файла robots.txt бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG.resolve()
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    data = _resolve_robots_file(data, path_obj.parent)
    return CheckerConfig(**data)
