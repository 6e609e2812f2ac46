"""
DDx Refine — API Dependencies

Dependency Injection для FastAPI.
Клієнт сервісу прогнозу, каталог симптомів, сховище сесій.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional
import threading
import uuid

from ddx_refine.catalog import (
    CatalogSnapshot,
    HttpSymptomCatalog,
    JsonFileSymptomCatalog,
    load_catalog,
)
from ddx_refine.config import DDxRefineConfig
from ddx_refine.prediction import HttpPredictionClient, PredictionClient
from ddx_refine.refinement import RefinementSession

from .config import config


class ServicesManager:
    """
    Менеджер зовнішніх сервісів — створює клієнт прогнозу та
    завантажує каталог симптомів один раз.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.is_loaded = False
        self.app_config: DDxRefineConfig = DDxRefineConfig()
        self.client: Optional[PredictionClient] = None
        self.catalog = CatalogSnapshot()

    def load(
        self,
        app_config: Optional[DDxRefineConfig] = None,
        client: Optional[PredictionClient] = None,
        catalog: Optional[CatalogSnapshot] = None,
    ) -> bool:
        """
        Підготувати сервіси.

        Args:
            app_config: Конфігурація (за замовчуванням з APIConfig)
            client: Клієнт прогнозу (за замовчуванням HTTP)
            catalog: Готовий знімок каталогу

        Returns:
            True якщо каталог доступний
        """
        self.app_config = app_config or config.build_app_config()
        self.client = client or HttpPredictionClient(self.app_config.prediction_service)

        if catalog is None:
            if self.app_config.symptom_catalog_path:
                source = JsonFileSymptomCatalog(self.app_config.symptom_catalog_path)
            else:
                source = HttpSymptomCatalog(self.app_config.prediction_service)
            catalog = load_catalog(source)
        self.catalog = catalog

        self.is_loaded = True
        return self.catalog.is_available

    async def close(self) -> None:
        """Закрити клієнт прогнозу"""
        if isinstance(self.client, HttpPredictionClient):
            await self.client.aclose()
        self.client = None
        self.is_loaded = False

    @property
    def max_rounds(self) -> int:
        return self.app_config.refinement.max_rounds

    @property
    def prediction_service_url(self) -> str:
        if isinstance(self.client, HttpPredictionClient):
            return self.client.config.predict_url
        return type(self.client).__name__ if self.client else "not configured"


class SessionManager:
    """
    Менеджер сесій уточнення.
    Зберігає активні сесії в пам'яті.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sessions: Dict[str, RefinementSession] = {}
        self.lock = threading.Lock()

    def create_session(self, services: ServicesManager) -> RefinementSession:
        """Створити нову (неініціалізовану) сесію"""
        refinement = services.app_config.refinement

        session = RefinementSession(
            client=services.client,
            max_rounds=refinement.max_rounds,
            fallback_diagnosis=refinement.fallback_diagnosis,
            session_id=str(uuid.uuid4())[:8],
        )

        with self.lock:
            # Очистка старих сесій
            self._cleanup_old_sessions()

            if len(self.sessions) >= config.max_sessions:
                oldest = min(self.sessions.values(), key=lambda s: s.updated_at)
                del self.sessions[oldest.session_id]

            self.sessions[session.session_id] = session

        return session

    def get_session(self, session_id: str) -> Optional[RefinementSession]:
        """Отримати сесію"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Видалити сесію"""
        with self.lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                return True
        return False

    def clear(self) -> None:
        with self.lock:
            self.sessions.clear()

    def get_active_count(self) -> int:
        """Кількість активних сесій"""
        return len(self.sessions)

    def list_ids(self) -> List[str]:
        return list(self.sessions.keys())

    def _cleanup_old_sessions(self):
        """Видалити застарілі сесії"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, session in self.sessions.items()
            if now - session.updated_at > timeout and not session.is_busy
        ]

        for sid in expired:
            del self.sessions[sid]


# Глобальні менеджери
services_manager = ServicesManager()
session_manager = SessionManager()


# Dependency functions для FastAPI
def get_services() -> ServicesManager:
    """Dependency: отримати менеджер сервісів"""
    if not services_manager.is_loaded:
        services_manager.load()
    return services_manager


def get_sessions() -> SessionManager:
    """Dependency: отримати менеджер сесій"""
    return session_manager
