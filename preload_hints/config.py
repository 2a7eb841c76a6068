# === FILE: preload_hints/config.py ===
"""
Модуль для загрузки и валидации конфигурации preload_hints.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from preload_hints.logger import logger


class PreloadMode(str, Enum):
    """Режим формирования preload-подсказок."""

    OFF = "off"
    MANUAL = "manual"
    AUTO = "auto"
    PRIORITY = "priority"


class OptimizeConfig(BaseModel):
    """Конфигурация одного запуска обработки страницы."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    preconnect_enabled: bool = Field(False, description="Добавлять preconnect для внешних хостов.")
    preload_mode: PreloadMode = Field(PreloadMode.OFF, description="Режим preload-подсказок.")
    priority_templates_extra: List[str] = Field(
        default_factory=list, description="Дополнительные шаблоны для режима priority."
    )
    per_page_limit_enabled: bool = Field(False, description="Ограничивать число preload на странице.")
    per_page_limit_count: int = Field(0, ge=0, description="Лимит preload на странице (0 = без лимита).")
    board_url: Optional[str] = Field(None, description="Корневой URL сайта.")
    priority_container_class: str = Field(
        "p-body-pageContent", min_length=1, description="Класс контейнера priority-области."
    )

    # Настройки загрузки страниц для CLI
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("PreloadHintsBot/1.0", min_length=1, description="Заголовок User-Agent.")
    retry_times: int = Field(3, ge=0, description="Число повторных попыток при 5xx.")

    @field_validator("priority_templates_extra", mode="before")
    def _split_templates(cls, v: Any) -> Any:
        # хост-приложение хранит список как textarea, по шаблону на строку
        if isinstance(v, str):
            v = v.split("\n")
        if isinstance(v, list):
            return [t.strip() for t in v if isinstance(t, str) and t.strip()]
        return v

    @field_validator("board_url", mode="before")
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            return v or None
        return v

    @model_validator(mode="after")
    def _check_limit(self) -> OptimizeConfig:
        if self.per_page_limit_enabled and self.per_page_limit_count == 0:
            logger.warning("per_page_limit_enabled is set but per_page_limit_count is 0; no limit applied")
        return self

    @property
    def per_page_limit(self) -> Optional[int]:
        """Действующий лимит или None, если ограничение выключено."""
        if self.per_page_limit_enabled and self.per_page_limit_count:
            return self.per_page_limit_count
        return None


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


def load_config(path: Union[str, Path, None]) -> OptimizeConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект OptimizeConfig.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
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

    try:
        return OptimizeConfig(**data)
    except ValidationError:
        raise


__all__ = ["OptimizeConfig", "PreloadMode", "load_config"]
