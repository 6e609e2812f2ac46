"""
DDx Refine — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Типізації
- Легкого доступу через config.refinement.max_rounds
- Серіалізації в YAML
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


# Текст, яким закінчується протокол, коли сервіс не дав жодного кандидата
FALLBACK_DIAGNOSIS = "Unable to determine a single disease"


# =============================================================================
# REFINEMENT PROTOCOL
# =============================================================================

@dataclass
class RefinementConfig:
    """Параметри протоколу уточнення"""

    # Бюджет раундів уточнення
    max_rounds: int = 3

    # Діагноз, якщо після вичерпання бюджету немає кандидатів
    fallback_diagnosis: str = FALLBACK_DIAGNOSIS

    def __post_init__(self):
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {self.max_rounds}")


# =============================================================================
# PREDICTION SERVICE
# =============================================================================

@dataclass
class PredictionServiceConfig:
    """Параметри віддаленого сервісу прогнозу"""

    base_url: str = "http://localhost:5000"
    predict_path: str = "/predict"
    symptoms_path: str = "/symptoms"

    # Таймаут запиту (секунди)
    timeout_seconds: float = 10.0

    @property
    def predict_url(self) -> str:
        return self.base_url.rstrip("/") + self.predict_path

    @property
    def symptoms_url(self) -> str:
        return self.base_url.rstrip("/") + self.symptoms_path


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class DDxRefineConfig:
    """
    Головна конфігурація DDx Refine

    Приклад використання:
        config = DDxRefineConfig()
        print(config.refinement.max_rounds)  # 3
        print(config.prediction_service.predict_url)
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "DDx Refine"

    # Компоненти
    refinement: RefinementConfig = field(default_factory=RefinementConfig)
    prediction_service: PredictionServiceConfig = field(default_factory=PredictionServiceConfig)

    # Каталог симптомів (JSON файл), None = брати з сервісу прогнозу
    symptom_catalog_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DDxRefineConfig":
        """Створити конфігурацію зі словника (наприклад, з YAML)"""
        data = dict(data or {})

        refinement = RefinementConfig(**_known(RefinementConfig, data.pop("refinement", None)))
        service = PredictionServiceConfig(
            **_known(PredictionServiceConfig, data.pop("prediction_service", None))
        )

        return cls(
            refinement=refinement,
            prediction_service=service,
            **_known(cls, data),
        )


def _known(cls, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Відкинути невідомі ключі"""
    if not data:
        return {}
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> DDxRefineConfig:
    """Отримати конфігурацію за замовчуванням"""
    return DDxRefineConfig()
