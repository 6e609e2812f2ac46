"""
DDx Refine — Протокол уточнення діагнозу

Компоненти:
- classify: сира відповідь сервісу → Resolved / Ambiguous / Escalated
- EvidenceSet: впорядкований набір симптомів без дублікатів
- TerminationPolicy: обмеження кількості раундів та примусовий діагноз
- RefinementSession: стан одного діагностичного діалогу

Приклад використання:
    from ddx_refine.prediction import HttpPredictionClient
    from ddx_refine.refinement import RefinementSession
    from ddx_refine.schemas import Ambiguous

    async with HttpPredictionClient() as client:
        session = RefinementSession(client, max_rounds=3)

        outcome = await session.start(["fever", "cough"])

        while isinstance(outcome, Ambiguous):
            symptom = outcome.follow_ups[0]
            answer = input(f"Do you have {symptom}? (y/n): ").lower() == "y"
            outcome = await session.confirm_symptom(symptom, answer)

        print(outcome)
"""

from .classifier import classify
from .evidence import EvidenceSet
from .policy import StopReason, StopDecision, TerminationPolicy
from .session import RefinementSession, SessionStatus


__all__ = [
    "classify",
    "EvidenceSet",
    "StopReason",
    "StopDecision",
    "TerminationPolicy",
    "RefinementSession",
    "SessionStatus",
]
