"""
DDx Refine — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from ddx_refine import __version__

from ..dependencies import get_services, get_sessions, ServicesManager, SessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    services: ServicesManager = Depends(get_services),
    sessions: SessionManager = Depends(get_sessions)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Каталог симптомів недоступний → статус "degraded"
    (сесії працюють, але вибір симптомів неможливий).
    """
    return HealthResponse(
        status="ok" if services.catalog.is_available else "degraded",
        version=__version__,
        catalog_available=services.catalog.is_available,
        catalog_symptoms=len(services.catalog.symptoms),
        active_sessions=sessions.get_active_count(),
        prediction_service=services.prediction_service_url,
        max_rounds=services.max_rounds,
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "DDx Refine API",
        "version": __version__,
        "description": "Інтерактивна диференціальна діагностика з уточненням симптомів",
        "docs": "/docs",
        "health": "/health",
    }
