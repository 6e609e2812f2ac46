"""
DDx Refine — Symptoms Routes

Endpoints для каталогу симптомів:
- Список всіх симптомів
- Пошук симптомів
"""

from typing import List
from fastapi import APIRouter, Depends, Query

from ddx_refine.schemas import SymptomInfo

from ..dependencies import get_services, ServicesManager
from ..models import SymptomSearchResponse

router = APIRouter(prefix="/symptoms", tags=["Symptoms"])


@router.get("", response_model=List[SymptomInfo])
async def list_symptoms(
    services: ServicesManager = Depends(get_services),
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0)
) -> List[SymptomInfo]:
    """
    Отримати список симптомів каталогу.

    - **limit**: Максимальна кількість (1-1000)
    - **offset**: Зсув для пагінації

    Якщо каталог недоступний, повертається порожній список.
    """
    return services.catalog.symptoms[offset:offset + limit]


@router.get("/search", response_model=SymptomSearchResponse)
async def search_symptoms(
    q: str = Query(..., min_length=1, max_length=100),
    limit: int = Query(default=20, ge=1, le=100),
    services: ServicesManager = Depends(get_services)
) -> SymptomSearchResponse:
    """
    Пошук симптомів за текстом (в id та назві).
    """
    results = services.catalog.search(q, limit=limit)

    return SymptomSearchResponse(
        query=q,
        results=results,
        total=len(results)
    )
