"""
DDx Refine — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- outcome.py: OutcomeKind, Resolved, Ambiguous, Escalated, Outcome
- symptom.py: SymptomInfo, RoundRecord

Приклад використання:
    from ddx_refine.schemas import Ambiguous, Resolved

    outcome = Ambiguous(candidates=["Flu", "Cold"], follow_ups=["chills"])
    json_data = outcome.model_dump_json()
"""

from .outcome import (
    OutcomeKind,
    Resolved,
    Ambiguous,
    Escalated,
    Outcome,
)
from .symptom import (
    SymptomInfo,
    RoundRecord,
    label_from_id,
)


__all__ = [
    # Outcome
    "OutcomeKind",
    "Resolved",
    "Ambiguous",
    "Escalated",
    "Outcome",

    # Symptom
    "SymptomInfo",
    "RoundRecord",
    "label_from_id",
]
