"""DDx Refine — Модуль конфігурації"""
from .settings import (
    DDxRefineConfig,
    get_default_config,
    RefinementConfig,
    PredictionServiceConfig,
    FALLBACK_DIAGNOSIS,
)
from .loader import save_config, load_config, read_config_dict

__all__ = [
    "DDxRefineConfig",
    "get_default_config",
    "RefinementConfig",
    "PredictionServiceConfig",
    "FALLBACK_DIAGNOSIS",
    "save_config",
    "load_config",
    "read_config_dict",
]
