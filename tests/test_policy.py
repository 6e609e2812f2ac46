"""
Тести для критеріїв зупинки уточнення

Запуск: pytest tests/test_policy.py -v
"""

import pytest


def test_resolved_and_escalated_stop():
    """Тест: термінальні результати зупиняють уточнення"""
    from ddx_refine.refinement import StopReason, TerminationPolicy
    from ddx_refine.schemas import Escalated, Resolved

    policy = TerminationPolicy(max_rounds=3)

    resolved = policy.decide(Resolved(diagnosis="Flu"), 1)
    escalated = policy.decide(Escalated(reason="urgent"), 0)

    assert resolved.reason == StopReason.RESOLVED
    assert resolved.should_stop and not resolved.is_forced
    assert escalated.reason == StopReason.ESCALATED
    assert escalated.should_stop and not escalated.is_forced


def test_continue_within_budget():
    """Тест: Ambiguous з питаннями в межах бюджету"""
    from ddx_refine.refinement import StopReason, TerminationPolicy
    from ddx_refine.schemas import Ambiguous

    policy = TerminationPolicy(max_rounds=3)
    outcome = Ambiguous(candidates=["Flu", "Cold"], follow_ups=["chills"])

    for round in range(3):
        decision = policy.decide(outcome, round)
        assert decision.reason == StopReason.CONTINUE
        assert decision.should_continue

    print(f"✓ Continue: {decision.message}")


def test_budget_exhausted_downgrades():
    """Тест: вичерпаний бюджет → перший кандидат"""
    from ddx_refine.refinement import StopReason, TerminationPolicy
    from ddx_refine.schemas import Ambiguous, Resolved

    policy = TerminationPolicy(max_rounds=3)
    outcome, decision = policy.apply(
        Ambiguous(candidates=["COVID-19", "Flu"], follow_ups=["fatigue"]), 3
    )

    assert decision.reason == StopReason.BUDGET_EXHAUSTED
    assert isinstance(outcome, Resolved)
    assert outcome.diagnosis == "COVID-19"
    assert outcome.forced is True
    assert outcome.candidates == ["COVID-19", "Flu"]

    print(f"✓ Forced diagnosis: {outcome.diagnosis}")


def test_no_follow_ups_downgrades():
    """Тест: немає питань → примусовий діагноз"""
    from ddx_refine.refinement import StopReason, TerminationPolicy
    from ddx_refine.schemas import Ambiguous

    policy = TerminationPolicy(max_rounds=3)
    outcome, decision = policy.apply(Ambiguous(candidates=["Flu", "Cold"]), 0)

    assert decision.reason == StopReason.NO_FOLLOW_UPS
    assert outcome.diagnosis == "Flu"


def test_budget_has_priority_over_no_follow_ups():
    """Тест: бюджет перевіряється раніше за порожні питання"""
    from ddx_refine.refinement import StopReason, TerminationPolicy
    from ddx_refine.schemas import Ambiguous

    policy = TerminationPolicy(max_rounds=2)
    decision = policy.decide(Ambiguous(candidates=["Flu"]), 2)

    assert decision.reason == StopReason.BUDGET_EXHAUSTED


def test_downgrade_without_candidates():
    """Тест: без кандидатів → текст fallback"""
    from ddx_refine.config import FALLBACK_DIAGNOSIS
    from ddx_refine.refinement import TerminationPolicy
    from ddx_refine.schemas import Ambiguous

    assert TerminationPolicy().downgrade(Ambiguous()).diagnosis == FALLBACK_DIAGNOSIS
    assert TerminationPolicy(fallback_diagnosis="Unknown").downgrade(Ambiguous()).diagnosis == "Unknown"


def test_terminal_outcomes_pass_through():
    """Тест: apply не змінює Resolved/Escalated"""
    from ddx_refine.refinement import TerminationPolicy
    from ddx_refine.schemas import Escalated

    escalated = Escalated(reason="urgent")
    outcome, _ = TerminationPolicy(max_rounds=1).apply(escalated, 5)

    assert outcome is escalated


def test_remaining_rounds():
    """Тест залишку бюджету"""
    from ddx_refine.refinement import TerminationPolicy

    policy = TerminationPolicy(max_rounds=3)

    assert policy.remaining_rounds(0) == 3
    assert policy.remaining_rounds(3) == 0
    assert policy.remaining_rounds(5) == 0


def test_invalid_budget():
    """Тест: max_rounds < 1"""
    from ddx_refine.refinement import TerminationPolicy

    with pytest.raises(ValueError):
        TerminationPolicy(max_rounds=0)
