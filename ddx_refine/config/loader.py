"""
DDx Refine — Завантаження конфігурації з YAML

Приклад:
    save_config(DDxRefineConfig(), "configs/ddx.yaml")
    config = load_config("configs/ddx.yaml")
"""
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .settings import DDxRefineConfig


def save_config(config: DDxRefineConfig, path: Union[str, Path]) -> None:
    """Зберегти конфігурацію (каталог створюється за потреби)"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(asdict(config), f, default_flow_style=False, allow_unicode=True, sort_keys=False)


def read_config_dict(path: Union[str, Path]) -> Dict[str, Any]:
    """Сирий словник з YAML; порожній файл → {}"""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path]) -> DDxRefineConfig:
    """Завантажити конфігурацію; відсутні ключі беруться за замовчуванням"""
    return DDxRefineConfig.from_dict(read_config_dict(path))
