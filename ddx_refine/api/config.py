"""
DDx Refine — API Configuration

Налаштування FastAPI сервера, сервісу прогнозу та каталогу симптомів.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional
import os

from ddx_refine.config import DDxRefineConfig, load_config


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = True

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Конфігурація протоколу (YAML), None = за замовчуванням
    config_path: Optional[str] = None

    # Сервіс прогнозу та каталог (перекривають YAML)
    prediction_service_url: Optional[str] = None
    symptom_catalog_path: Optional[str] = None
    max_rounds: Optional[int] = None

    # Сесії
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # API
    api_prefix: str = "/api"
    api_title: str = "DDx Refine API"
    api_description: str = "Інтерактивна диференціальна діагностика з уточненням симптомів"

    def __post_init__(self):
        """Автоматичне визначення каталогу симптомів"""
        if self.symptom_catalog_path is None:
            current = Path(__file__).parent.parent.parent

            for root in (current, Path.cwd()):
                catalog_path = root / "data" / "symptoms.json"
                if catalog_path.exists():
                    self.symptom_catalog_path = str(catalog_path)
                    break

    def build_app_config(self) -> DDxRefineConfig:
        """Зібрати конфігурацію протоколу: YAML + перекриття з env"""
        if self.config_path and Path(self.config_path).exists():
            app_config = load_config(self.config_path)
        else:
            app_config = DDxRefineConfig()

        if self.prediction_service_url:
            app_config.prediction_service.base_url = self.prediction_service_url
        if self.symptom_catalog_path:
            app_config.symptom_catalog_path = self.symptom_catalog_path
        if self.max_rounds is not None:
            # replace() повторно запускає валідацію RefinementConfig
            app_config.refinement = replace(app_config.refinement, max_rounds=self.max_rounds)

        return app_config

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Створити конфігурацію з environment variables"""
        max_rounds = os.getenv("MAX_REFINEMENT_ROUNDS")
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            config_path=os.getenv("DDX_CONFIG_PATH"),
            prediction_service_url=os.getenv("PREDICTION_SERVICE_URL"),
            symptom_catalog_path=os.getenv("SYMPTOM_CATALOG_PATH"),
            max_rounds=int(max_rounds) if max_rounds else None,
        )


# Глобальна конфігурація
config = APIConfig.from_env()
