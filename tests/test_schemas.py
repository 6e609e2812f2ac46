"""
Тести для модуля schemas

Запуск: pytest tests/test_schemas.py -v
"""

import pytest
from pydantic import ValidationError


def test_resolved():
    """Тест моделі Resolved"""
    from ddx_refine.schemas import OutcomeKind, Resolved

    outcome = Resolved(diagnosis="Flu")

    assert outcome.kind == OutcomeKind.RESOLVED.value
    assert outcome.is_terminal
    assert outcome.forced is False
    assert outcome.candidates == []

    with pytest.raises(ValidationError):
        Resolved(diagnosis="")

    print(f"✓ Resolved: {outcome.diagnosis}")


def test_ambiguous():
    """Тест моделі Ambiguous"""
    from ddx_refine.schemas import Ambiguous

    outcome = Ambiguous(candidates=["Flu", "Cold"], follow_ups=["chills"])

    assert not outcome.is_terminal
    assert outcome.top_candidate == "Flu"
    assert Ambiguous().top_candidate is None

    print(f"✓ Ambiguous: {outcome.candidates}, follow-ups={outcome.follow_ups}")


def test_escalated():
    """Тест моделі Escalated"""
    from ddx_refine.schemas import Escalated

    outcome = Escalated(reason="Seek urgent care", fallback_diagnosis="Migraine")

    assert outcome.is_terminal
    assert outcome.fallback_diagnosis == "Migraine"
    assert Escalated(reason="x").fallback_diagnosis is None


def test_outcomes_are_frozen():
    """Тест: Outcome незмінний"""
    from ddx_refine.schemas import Resolved

    outcome = Resolved(diagnosis="Flu")

    with pytest.raises(ValidationError):
        outcome.diagnosis = "Cold"


def test_outcome_discriminator():
    """Тест розбору Outcome за полем kind"""
    from pydantic import TypeAdapter
    from ddx_refine.schemas import Ambiguous, Escalated, Outcome, Resolved

    adapter = TypeAdapter(Outcome)

    assert isinstance(adapter.validate_python({"kind": "resolved", "diagnosis": "Flu"}), Resolved)
    assert isinstance(adapter.validate_python({"kind": "ambiguous", "candidates": ["A"]}), Ambiguous)
    assert isinstance(adapter.validate_python({"kind": "escalated", "reason": "r"}), Escalated)

    print("✓ Outcome discriminated by kind")


def test_symptom_info():
    """Тест моделі SymptomInfo"""
    from ddx_refine.schemas import SymptomInfo

    symptom = SymptomInfo(id="  skin_rash ")

    assert symptom.id == "skin_rash"
    assert symptom.label == "Skin rash"
    assert SymptomInfo(id="fever", label="High fever").label == "High fever"

    with pytest.raises(ValidationError):
        SymptomInfo(id="   ")

    print(f"✓ SymptomInfo: {symptom.id} → {symptom.label}")


def test_label_from_id():
    """Тест побудови назви з ідентифікатора"""
    from ddx_refine.schemas import label_from_id

    assert label_from_id("skin_rash") == "Skin rash"
    assert label_from_id("loss__of_smell") == "Loss of smell"
    assert label_from_id("Fever") == "Fever"


def test_round_record():
    """Тест моделі RoundRecord"""
    from ddx_refine.schemas import RoundRecord

    record = RoundRecord(round=1, symptom="chills", confirmed=True)

    assert record.timestamp is not None

    with pytest.raises(ValidationError):
        RoundRecord(round=0, symptom="chills", confirmed=False)
