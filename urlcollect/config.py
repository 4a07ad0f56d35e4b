"""
Модуль для загрузки и валидации конфигурации сборщика urlcollect.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from urlcollect.models import HttpMethod


class CollectorConfig(BaseModel):
    """Параметры одного запуска сборщика."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    method: HttpMethod = Field(HttpMethod.GET, description="HTTP-метод: GET или HEAD.")
    workers: int = Field(10, ge=1, description="Число параллельных воркеров.")
    verify_tls: bool = Field(False, description="Проверять TLS-сертификаты серверов.")

    @field_validator("method", mode="before")
    def _exact_method(cls, v: Any) -> Any:
        # регистр важен: "get" не принимается
        if isinstance(v, str) and v not in {m.value for m in HttpMethod}:
            raise ValueError(f"method must be one of GET, HEAD; got {v!r}")
        return v


_DEFAULT_CFG = Path("configs/default.yaml")
_SECTION = "collector"
_FIELDS = ", ".join(CollectorConfig.model_fields)


def _parse_text(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Конфиг сборщика {path} не читается как YAML: {exc}") from exc
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Конфиг сборщика {path} не читается как JSON: {exc}") from exc
    raise ValueError(f"Конфиг сборщика должен быть .yaml, .yml или .json, получено {suffix!r}")


def _collector_settings(path: Path) -> dict[str, Any]:
    """
    Достаёт настройки сборщика из файла.

    Поля (timeout, method, workers, verify_tls) могут лежать на верхнем уровне или в секции ``collector:``,
    если сборщик настраивается из общего конфига приложения.
    """
    data = _parse_text(path) or {}
    if isinstance(data, dict) and _SECTION in data:
        data = data[_SECTION] or {}
    if not isinstance(data, dict):
        raise TypeError(
            f"Настройки сборщика в {path} должны быть mapping с полями {_FIELDS}, "
            f"получено {type(data).__name__}"
        )
    return data


def load_config(path: Union[str, Path, None]) -> CollectorConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CollectorConfig.
    Без пути берётся configs/default.yaml; если файла нет, бросает FileNotFoundError.
    """
    path_obj = _DEFAULT_CFG if path is None else Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))
    return CollectorConfig(**_collector_settings(path_obj))
