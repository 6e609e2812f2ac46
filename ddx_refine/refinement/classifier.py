"""
DDx Refine — Класифікатор відповідей сервісу прогнозу

Перетворює сиру відповідь сервісу в один з трьох варіантів Outcome.
Чиста функція: без стану, без побічних ефектів.

Пріоритет (перший збіг виграє):
1. diagnosis (непорожній рядок)          → Resolved
2. escalate == true                      → Escalated
3. candidates (непорожній список рядків) → Ambiguous
4. інакше                                → ProtocolError

Приймаються також поля старого бекенду:
disease, possible_diseases, ask_more_symptoms.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from ddx_refine.errors import ProtocolError
from ddx_refine.schemas import Ambiguous, Escalated, Outcome, Resolved


DIAGNOSIS_KEYS = ("diagnosis", "disease")
ESCALATE_KEYS = ("escalate",)
MESSAGE_KEYS = ("message", "reason")
FALLBACK_KEYS = ("fallbackDiagnosis", "fallback_diagnosis")
CANDIDATE_KEYS = ("candidates", "possible_diseases")
FOLLOW_UP_KEYS = ("followUpSymptoms", "follow_up_symptoms", "ask_more_symptoms")

DEFAULT_ESCALATION_REASON = "Escalation requested by prediction service"


def classify(raw: Any) -> Outcome:
    """
    Класифікувати відповідь сервісу.

    Args:
        raw: Декодований JSON відповіді

    Returns:
        Resolved | Ambiguous | Escalated

    Raises:
        ProtocolError: відповідь не відповідає жодній формі
    """
    if not isinstance(raw, Mapping):
        raise ProtocolError(
            f"Unexpected response from server: expected an object, got {type(raw).__name__}"
        )

    # 1. Один діагноз
    diagnosis = _non_empty_str(_first(raw, DIAGNOSIS_KEYS))
    if diagnosis is not None:
        return Resolved(diagnosis=diagnosis)

    # 2. Ескалація
    if _first(raw, ESCALATE_KEYS) is True:
        reason = _non_empty_str(_first(raw, MESSAGE_KEYS)) or DEFAULT_ESCALATION_REASON
        fallback = _non_empty_str(_first(raw, FALLBACK_KEYS))
        return Escalated(reason=reason, fallback_diagnosis=fallback)

    # 3. Кандидати
    candidates = _str_list(_first(raw, CANDIDATE_KEYS))
    if candidates:
        follow_ups_raw = _first(raw, FOLLOW_UP_KEYS)
        if follow_ups_raw is None:
            follow_ups: List[str] = []
        else:
            follow_ups = _str_list(follow_ups_raw)
            if follow_ups is None:
                raise ProtocolError(
                    "Unexpected response from server: follow-up symptoms must be a list of strings"
                )
        return Ambiguous(candidates=candidates, follow_ups=follow_ups)

    raise ProtocolError(
        f"Unexpected response from server: unrecognised shape (keys: {sorted(map(str, raw.keys()))})"
    )


def _first(raw: Mapping, keys: Sequence[str]) -> Any:
    """Значення першого присутнього ключа"""
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _non_empty_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _str_list(value: Any) -> Optional[List[str]]:
    """Непорожні рядки без змін, як їх надіслав сервіс; None якщо форма інша"""
    if not isinstance(value, (list, tuple)):
        return None
    if not all(isinstance(item, str) and item.strip() for item in value):
        return None
    return list(value)
