"""
DDx Refine — REST API модуль

FastAPI REST API для протоколу уточнення.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Сервіси та сховище сесій
- errors.py: Помилки протоколу → HTTP статуси

Запуск:
    uvicorn ddx_refine.api.app:app --reload --port 8000

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET    /                              - Root info
    GET    /health                        - Health check

    GET    /api/symptoms                  - Каталог симптомів
    GET    /api/symptoms/search?q=        - Пошук симптомів

    POST   /api/sessions                  - Почати сесію (start)
    GET    /api/sessions/{id}             - Стан сесії
    PUT    /api/sessions/{id}/selection   - Змінити вибір симптомів
    POST   /api/sessions/{id}/confirm     - Відповісти на питання
    POST   /api/sessions/{id}/reset       - Скинути сесію
    DELETE /api/sessions/{id}             - Видалити сесію
"""

from .app import app
from .dependencies import services_manager, session_manager, get_services, get_sessions


__all__ = [
    "app",
    "services_manager",
    "session_manager",
    "get_services",
    "get_sessions",
]
