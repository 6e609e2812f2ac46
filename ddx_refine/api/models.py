"""
DDx Refine — API Models

Pydantic моделі для запитів та відповідей API.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ddx_refine.refinement import SessionStatus
from ddx_refine.schemas import Outcome, RoundRecord, SymptomInfo


# ============================================================
# Symptom Models
# ============================================================

class SymptomSearchResponse(BaseModel):
    """Відповідь на пошук симптомів"""
    query: str
    results: List[SymptomInfo]
    total: int


# ============================================================
# Session Models
# ============================================================

class StartSessionRequest(BaseModel):
    """Запит на створення сесії або зміну вибору симптомів"""
    symptoms: List[str] = Field(
        default_factory=list,
        description="Початкові симптоми",
        examples=[["fever", "cough"]]
    )


class ConfirmRequest(BaseModel):
    """Відповідь на уточнююче питання"""
    symptom: str = Field(..., description="Симптом з follow_ups")
    confirmed: bool = Field(..., description="true = так, false = ні")

    class Config:
        json_schema_extra = {
            "example": {"symptom": "chills", "confirmed": True}
        }


class SessionState(BaseModel):
    """Стан сесії уточнення"""
    session_id: str
    status: SessionStatus
    outcome: Optional[Outcome] = None

    # Докази
    evidence: List[str] = Field(default_factory=list)
    confirmed_symptoms: List[str] = Field(default_factory=list)
    denied_symptoms: List[str] = Field(default_factory=list)

    # Раунди
    round: int = 0
    max_rounds: int = 3
    remaining_rounds: int = 3

    # Для UI
    is_terminal: bool = False
    is_busy: bool = False
    accepts_confirmation: bool = False

    stop_reason: Optional[str] = None
    history: List[RoundRecord] = Field(default_factory=list)

    created_at: datetime
    updated_at: datetime


class ConfirmResponse(BaseModel):
    """Результат відповіді на питання"""
    accepted: bool
    session_state: SessionState


# ============================================================
# System Models
# ============================================================

class HealthResponse(BaseModel):
    """Відповідь health check"""
    status: str
    version: str
    catalog_available: bool
    catalog_symptoms: int
    active_sessions: int
    prediction_service: str
    max_rounds: int


class ErrorResponse(BaseModel):
    """Помилка протоколу"""
    error: str
    detail: Optional[str] = None
