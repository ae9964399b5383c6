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
from typing import Any, Callable, Dict, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RobotsConfig(BaseModel):
    """Настройки загрузки и проверки robots.txt."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field("RobotsScout/1.0", min_length=1, description="Заголовок User-Agent и агент по умолчанию.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на загрузку robots.txt (секунд).")
    max_bytes: int = Field(512_000, gt=0, description="Сколько байт robots.txt разбирать, остальное отбрасывается.")
    allow_on_missing: bool = Field(
        True, description="Ответ 4xx на robots.txt означает «разрешено всё»."
    )

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _mapping(data: Any, fmt: str, path: Path) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"{path}: ожидался словарь настроек {fmt}, получено {type(data).__name__}")
    return data


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        return _mapping(yaml.safe_load(path.read_text(encoding="utf-8")), "YAML", path)
    except yaml.YAMLError as exc:
        raise ValueError(f"{path}: не удалось разобрать YAML: {exc}") from exc


def _read_json(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        return _mapping(json.loads(text), "JSON", path)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: не удалось разобрать JSON: {exc}") from exc


_READERS: Dict[str, Callable[[Path], dict[str, Any]]] = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}


def _missing(path: Path) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))


def load_config(path: Union[str, Path, None]) -> RobotsConfig:
    """
    Собирает RobotsConfig из файла YAML/JSON.

    Без path берётся DEFAULT_CONFIG_PATH относительно текущего каталога;
    CLI в этом случае просто использует RobotsConfig() по умолчанию.
    Пустой файл означает «все настройки по умолчанию».
    """
    cfg_path = DEFAULT_CONFIG_PATH if path is None else Path(path).expanduser().resolve()
    if not cfg_path.is_file():
        raise _missing(cfg_path)

    reader = _READERS.get(cfg_path.suffix.lower())
    if reader is None:
        raise ValueError(f"{cfg_path}: поддерживаются только .yaml, .yml и .json")
    return RobotsConfig(**reader(cfg_path))
