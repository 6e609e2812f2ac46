"""
DDx Refine — Критерії зупинки уточнення

Причини:
- RESOLVED: сервіс дав один діагноз
- ESCALATED: сервіс попросив ескалацію
- BUDGET_EXHAUSTED: вичерпано бюджет раундів → примусовий діагноз
- NO_FOLLOW_UPS: немає питань для розрізнення → примусовий діагноз
- CONTINUE: продовжуємо уточнення
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ddx_refine.config import FALLBACK_DIAGNOSIS
from ddx_refine.schemas import Ambiguous, Escalated, Outcome, Resolved


class StopReason(Enum):
    """Причина зупинки уточнення"""
    CONTINUE = "continue"
    RESOLVED = "resolved"
    ESCALATED = "escalated"
    BUDGET_EXHAUSTED = "budget_exhausted"
    NO_FOLLOW_UPS = "no_follow_ups"


@dataclass
class StopDecision:
    """Результат перевірки критеріїв зупинки"""
    reason: StopReason
    should_stop: bool
    message: str = ""

    @property
    def should_continue(self) -> bool:
        return not self.should_stop

    @property
    def is_forced(self) -> bool:
        """Чи потрібно примусово звести Ambiguous до Resolved"""
        return self.reason in (StopReason.BUDGET_EXHAUSTED, StopReason.NO_FOLLOW_UPS)


class TerminationPolicy:
    """
    Обмеження кількості раундів уточнення.

    Приклад:
        policy = TerminationPolicy(max_rounds=3)

        outcome, decision = policy.apply(classified, round=3)
        if decision.is_forced:
            print(f"Примусовий діагноз: {outcome.diagnosis}")
    """

    def __init__(self, max_rounds: int = 3, fallback_diagnosis: str = FALLBACK_DIAGNOSIS):
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {max_rounds}")
        self.max_rounds = max_rounds
        self.fallback_diagnosis = fallback_diagnosis

    def decide(self, outcome: Outcome, round: int) -> StopDecision:
        """
        Перевірити критерії зупинки.

        Args:
            outcome: Класифікований результат
            round: Номер раунду після якого отримано результат

        Returns:
            StopDecision
        """
        if isinstance(outcome, Resolved):
            return StopDecision(
                reason=StopReason.RESOLVED,
                should_stop=True,
                message=f"Resolved: {outcome.diagnosis}"
            )

        if isinstance(outcome, Escalated):
            return StopDecision(
                reason=StopReason.ESCALATED,
                should_stop=True,
                message=outcome.reason
            )

        # Ambiguous: бюджет має найвищий пріоритет
        if round >= self.max_rounds:
            return StopDecision(
                reason=StopReason.BUDGET_EXHAUSTED,
                should_stop=True,
                message=f"Refinement budget of {self.max_rounds} rounds exhausted"
            )

        if not outcome.follow_ups:
            return StopDecision(
                reason=StopReason.NO_FOLLOW_UPS,
                should_stop=True,
                message="No more discriminating questions available"
            )

        return StopDecision(
            reason=StopReason.CONTINUE,
            should_stop=False,
            message=f"Round {round}/{self.max_rounds}: {len(outcome.follow_ups)} follow-up(s)"
        )

    def apply(self, outcome: Outcome, round: int) -> Tuple[Outcome, StopDecision]:
        """Перевірити критерії та за потреби звести Ambiguous до Resolved"""
        decision = self.decide(outcome, round)
        if decision.is_forced:
            outcome = self.downgrade(outcome)
        return outcome, decision

    def downgrade(self, outcome: Ambiguous) -> Resolved:
        """Перший кандидат сервісу, або fallback якщо кандидатів немає"""
        diagnosis: Optional[str] = outcome.top_candidate
        return Resolved(
            diagnosis=diagnosis or self.fallback_diagnosis,
            forced=True,
            candidates=list(outcome.candidates),
        )

    def remaining_rounds(self, round: int) -> int:
        return max(self.max_rounds - round, 0)
