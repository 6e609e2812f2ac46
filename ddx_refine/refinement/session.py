"""
DDx Refine — Сесія уточнення

RefinementSession зберігає стан одного діагностичного діалогу:
- Набір доказів (початкові + підтверджені симптоми)
- Лічильник раундів уточнення
- Поточний Outcome
- Історію відповідей

Кожна операція (start, confirm_symptom) робить рівно один запит до
сервісу прогнозу. Стан змінюється лише після успішної класифікації.
"""

import logging
import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from ddx_refine.config import FALLBACK_DIAGNOSIS
from ddx_refine.errors import SessionBusy, StaleResponseError, ValidationError
from ddx_refine.schemas import Ambiguous, Escalated, Outcome, Resolved, RoundRecord

from .classifier import classify
from .evidence import EvidenceSet
from .policy import StopDecision, TerminationPolicy

if TYPE_CHECKING:
    from ddx_refine.prediction import PredictionClient

log = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Статус сесії"""
    UNINITIALIZED = "uninitialized"
    AMBIGUOUS = "ambiguous"
    RESOLVED = "resolved"
    ESCALATED = "escalated"


class RefinementSession:
    """
    Сесія протоколу уточнення.

    Приклад:
        session = RefinementSession(client)

        outcome = await session.start(["fever"])
        while isinstance(outcome, Ambiguous):
            symptom = outcome.follow_ups[0]
            outcome = await session.confirm_symptom(symptom, confirmed=ask_user(symptom))

        print(outcome)
    """

    def __init__(
        self,
        client: "PredictionClient",
        max_rounds: int = 3,
        fallback_diagnosis: str = FALLBACK_DIAGNOSIS,
        session_id: Optional[str] = None,
    ):
        self.client = client
        self.policy = TerminationPolicy(max_rounds, fallback_diagnosis)
        self.session_id = session_id or str(uuid.uuid4())[:8]

        self.evidence = EvidenceSet()
        self.round = 0
        self.outcome: Optional[Outcome] = None
        self.last_decision: Optional[StopDecision] = None
        self.history: List[RoundRecord] = []

        # Покоління: збільшується при кожному reset/start
        self._generation = 0
        # Покоління запиту, що зараз у дорозі (None = вільна)
        self._inflight: Optional[int] = None

        self.created_at = datetime.now()
        self.updated_at = datetime.now()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def start(self, selection: Iterable[str]) -> Outcome:
        """
        Почати (або перезапустити з новим вибором) уточнення.

        Args:
            selection: Початкові симптоми користувача

        Returns:
            Outcome першого прогнозу
        """
        evidence = EvidenceSet(selection)
        if not evidence:
            raise ValidationError("Please select at least one symptom.")

        self._check_not_busy()

        log.debug("[%s] start evidence=%s", self.session_id, evidence.to_list())

        outcome = await self._predict(evidence)
        outcome, decision = self.policy.apply(outcome, 0)

        # новий вибір = нова сесія
        self._generation += 1
        self._commit(evidence, 0, outcome, decision)
        self.history = []
        return outcome

    async def confirm_symptom(self, symptom: str, confirmed: bool) -> Outcome:
        """
        Відповісти на уточнююче питання.

        Args:
            symptom: Симптом зі списку follow_ups
            confirmed: True = так, False = ні

        Returns:
            Новий Outcome (термінальний, якщо бюджет вичерпано)
        """
        self._check_not_busy()

        if self.outcome is None:
            raise ValidationError("Session has not been started")
        if not isinstance(self.outcome, Ambiguous):
            raise ValidationError(
                f"Session is already {self.status.value}; reset it to start over"
            )
        if symptom not in self.outcome.follow_ups:
            raise ValidationError(f"Symptom '{symptom}' is not among the current follow-up questions")
        if self.round >= self.policy.max_rounds:
            raise ValidationError("Refinement budget exhausted")

        evidence = self.evidence.copy()
        if confirmed:
            evidence.add(symptom)
        next_round = self.round + 1

        log.debug(
            "[%s] round %d/%d: %s=%s",
            self.session_id, next_round, self.policy.max_rounds, symptom, confirmed
        )

        outcome = await self._predict(evidence)
        outcome, decision = self.policy.apply(outcome, next_round)

        self._commit(evidence, next_round, outcome, decision)
        self.history.append(RoundRecord(round=next_round, symptom=symptom, confirmed=confirmed))
        return outcome

    def reset(self) -> None:
        """Повернути сесію в початковий стан. Запит у дорозі буде відкинуто."""
        self._generation += 1
        self._inflight = None

        self.evidence = EvidenceSet()
        self.round = 0
        self.outcome = None
        self.last_decision = None
        self.history = []
        self.updated_at = datetime.now()

        log.debug("[%s] reset (generation %d)", self.session_id, self._generation)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_not_busy(self) -> None:
        if self.is_busy:
            raise SessionBusy("Another request for this session is still in progress")

    async def _predict(self, evidence: EvidenceSet) -> Outcome:
        """Єдина точка очікування: запит до сервісу + класифікація"""
        generation = self._generation
        self._inflight = generation
        try:
            raw = await self.client.predict(evidence.to_list())
        finally:
            if self._inflight == generation:
                self._inflight = None

        if generation != self._generation:
            log.warning("[%s] discarding stale prediction response", self.session_id)
            raise StaleResponseError("Session was reset while the prediction request was in flight")

        return classify(raw)

    def _commit(
        self,
        evidence: EvidenceSet,
        round: int,
        outcome: Outcome,
        decision: StopDecision,
    ) -> None:
        self.evidence = evidence
        self.round = round
        self.outcome = outcome
        self.last_decision = decision
        self.updated_at = datetime.now()

        if decision.should_stop:
            log.info(
                "[%s] terminal outcome after %d round(s): %s (%s)",
                self.session_id, round, self.status.value, decision.reason.value
            )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def max_rounds(self) -> int:
        return self.policy.max_rounds

    @property
    def status(self) -> SessionStatus:
        if self.outcome is None:
            return SessionStatus.UNINITIALIZED
        return SessionStatus(self.outcome.kind)

    @property
    def is_busy(self) -> bool:
        return self._inflight is not None

    @property
    def is_terminal(self) -> bool:
        return isinstance(self.outcome, (Resolved, Escalated))

    @property
    def accepts_confirmation(self) -> bool:
        """Чи можна зараз відповідати на питання (для UI)"""
        return (
            isinstance(self.outcome, Ambiguous)
            and not self.is_busy
            and self.round < self.max_rounds
            and bool(self.outcome.follow_ups)
        )

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def confirmed_symptoms(self) -> List[str]:
        """Симптоми, підтверджені під час уточнення"""
        return [r.symptom for r in self.history if r.confirmed]

    @property
    def denied_symptoms(self) -> List[str]:
        return [r.symptom for r in self.history if not r.confirmed]

    def get_summary(self) -> Dict[str, Any]:
        """Отримати підсумок сесії"""
        return {
            "session_id": self.session_id,
            "status": self.status.value,
            "round": self.round,
            "max_rounds": self.max_rounds,
            "evidence": self.evidence.to_list(),
            "confirmed_symptoms": self.confirmed_symptoms,
            "denied_symptoms": self.denied_symptoms,
            "outcome": self.outcome.model_dump() if self.outcome is not None else None,
            "stop_reason": self.last_decision.reason.value if self.last_decision else None,
            "duration_seconds": (self.updated_at - self.created_at).total_seconds(),
        }

    def __repr__(self) -> str:
        return (
            f"RefinementSession("
            f"id={self.session_id}, "
            f"status={self.status.value}, "
            f"round={self.round}/{self.max_rounds}, "
            f"evidence={len(self.evidence)}"
            f")"
        )
