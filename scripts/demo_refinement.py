#!/usr/bin/env python3
"""
DDx Refine — Демо протоколу уточнення в консолі

Запуск:
    python scripts/demo_refinement.py                       # сценарій без сервера
    python scripts/demo_refinement.py --service-url http://localhost:5000 fever cough
"""

import argparse
import asyncio
import logging

from ddx_refine.config import PredictionServiceConfig
from ddx_refine.prediction import HttpPredictionClient, StaticPredictionClient
from ddx_refine.refinement import RefinementSession
from ddx_refine.schemas import Ambiguous, Escalated, Resolved

# Сценарій: три раунди без збіжності → примусовий діагноз
DEMO_SCRIPT = [
    {"candidates": ["Flu", "Cold", "COVID-19"], "followUpSymptoms": ["chills"]},
    {"candidates": ["Flu", "COVID-19"], "followUpSymptoms": ["loss_of_smell"]},
    {"candidates": ["Flu", "COVID-19"], "followUpSymptoms": ["body_ache"]},
    {"candidates": ["Flu", "COVID-19"], "followUpSymptoms": ["fatigue"]},
]


def print_outcome(session: RefinementSession) -> None:
    outcome = session.outcome
    print(f"\n[round {session.round}/{session.max_rounds}] evidence: {', '.join(session.evidence)}")

    if isinstance(outcome, Resolved):
        suffix = " (best remaining candidate)" if outcome.forced else ""
        print(f"✅ Predicted Disease: {outcome.diagnosis}{suffix}")
    elif isinstance(outcome, Escalated):
        print(f"⚠️ Escalated: {outcome.reason}")
        if outcome.fallback_diagnosis:
            print(f"   Fallback diagnosis: {outcome.fallback_diagnosis}")
    elif isinstance(outcome, Ambiguous):
        print("Possible Diseases:")
        for i, disease in enumerate(outcome.candidates, 1):
            print(f"  {i}. {disease}")


def ask(symptom: str, session: RefinementSession, auto: bool) -> bool:
    prompt = f"Do you have this symptom? ({session.round + 1}/{session.max_rounds}) {symptom} [y/n]: "
    if auto:
        print(prompt + "n")
        return False
    return input(prompt).strip().lower().startswith("y")


async def run(args) -> None:
    if args.service_url:
        client = HttpPredictionClient(PredictionServiceConfig(base_url=args.service_url))
    else:
        client = StaticPredictionClient(DEMO_SCRIPT)

    session = RefinementSession(client, max_rounds=args.max_rounds)

    try:
        await session.start(args.symptoms)
        print_outcome(session)

        while session.accepts_confirmation:
            symptom = session.outcome.follow_ups[0]
            answer = ask(symptom, session, args.auto)
            await session.confirm_symptom(symptom, answer)
            print_outcome(session)
    finally:
        if isinstance(client, HttpPredictionClient):
            await client.aclose()

    print("\n" + "=" * 60)
    for key, value in session.get_summary().items():
        print(f"  {key}: {value}")


def main():
    parser = argparse.ArgumentParser(description="DDx Refine console demo")
    parser.add_argument("symptoms", nargs="*", default=["fever", "cough"], help="Initial symptoms")
    parser.add_argument("--service-url", default=None, help="Prediction service base URL")
    parser.add_argument("--max-rounds", type=int, default=3)
    parser.add_argument("--auto", action="store_true", help="Answer 'no' to every question")
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    asyncio.run(run(args))


if __name__ == "__main__":
    main()
