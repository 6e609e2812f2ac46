"""
DDx Refine — Схеми результату прогнозу (Outcome)

Pydantic моделі для трьох варіантів результату:
- Resolved: один діагноз (термінальний)
- Ambiguous: кандидати + уточнюючі симптоми (нетермінальний)
- Escalated: сервіс просить передати користувача іншому каналу (термінальний)
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class OutcomeKind(str, Enum):
    """Тип результату"""
    RESOLVED = "resolved"
    AMBIGUOUS = "ambiguous"
    ESCALATED = "escalated"


class Resolved(BaseModel):
    """
    Один остаточний діагноз.

    Приклад:
        outcome = Resolved(diagnosis="Flu")

    forced=True означає, що діагноз вибрано примусово з останнього
    списку кандидатів (вичерпано бюджет або немає питань).
    """
    kind: Literal["resolved"] = "resolved"
    diagnosis: str = Field(..., min_length=1, description="Назва захворювання")
    forced: bool = Field(default=False, description="Примусове зведення з Ambiguous")
    candidates: List[str] = Field(
        default_factory=list,
        description="Кандидати, з яких обрано діагноз при примусовому зведенні"
    )

    @property
    def is_terminal(self) -> bool:
        return True

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {"kind": "resolved", "diagnosis": "Flu", "forced": False, "candidates": []}
        }


class Ambiguous(BaseModel):
    """
    Кілька кандидатів та уточнюючі симптоми.

    Порядок candidates задає сервіс, він не пересортовується.
    Порожній follow_ups означає, що питань для розрізнення більше немає.
    """
    kind: Literal["ambiguous"] = "ambiguous"
    candidates: List[str] = Field(default_factory=list, description="Кандидати (ранжовані сервісом)")
    follow_ups: List[str] = Field(default_factory=list, description="Симптоми для уточнення")

    @property
    def is_terminal(self) -> bool:
        return False

    @property
    def top_candidate(self) -> Optional[str]:
        return self.candidates[0] if self.candidates else None

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "kind": "ambiguous",
                "candidates": ["Flu", "Cold"],
                "follow_ups": ["chills"],
            }
        }


class Escalated(BaseModel):
    """Сервіс просить зупинити уточнення і передати користувача іншому каналу"""
    kind: Literal["escalated"] = "escalated"
    reason: str = Field(..., description="Повідомлення сервісу")
    fallback_diagnosis: Optional[str] = Field(default=None, description="Частковий діагноз")

    @property
    def is_terminal(self) -> bool:
        return True

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "kind": "escalated",
                "reason": "insufficient data",
                "fallback_diagnosis": None,
            }
        }


Outcome = Annotated[Union[Resolved, Ambiguous, Escalated], Field(discriminator="kind")]
