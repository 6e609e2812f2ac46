"""
DDx Refine — Sessions Routes

Endpoints для сесій уточнення:
- Створення сесії (start)
- Зміна вибору симптомів
- Відповідь на уточнююче питання (confirm)
- Скидання та видалення сесії
"""

from fastapi import APIRouter, Depends, HTTPException

from ddx_refine.errors import RefinementError
from ddx_refine.refinement import RefinementSession

from ..dependencies import (
    get_services, get_sessions,
    ServicesManager, SessionManager
)
from ..models import (
    StartSessionRequest,
    ConfirmRequest,
    ConfirmResponse,
    SessionState,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def session_to_response(session: RefinementSession) -> SessionState:
    """Конвертувати сесію в Pydantic модель"""
    decision = session.last_decision

    return SessionState(
        session_id=session.session_id,
        status=session.status,
        outcome=session.outcome,
        evidence=session.evidence.to_list(),
        confirmed_symptoms=session.confirmed_symptoms,
        denied_symptoms=session.denied_symptoms,
        round=session.round,
        max_rounds=session.max_rounds,
        remaining_rounds=session.policy.remaining_rounds(session.round),
        is_terminal=session.is_terminal,
        is_busy=session.is_busy,
        accepts_confirmation=session.accepts_confirmation,
        stop_reason=decision.reason.value if decision and decision.should_stop else None,
        history=list(session.history),
        created_at=session.created_at,
        updated_at=session.updated_at,
    )


def _get_or_404(sessions: SessionManager, session_id: str) -> RefinementSession:
    session = sessions.get_session(session_id)

    if not session:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    return session


@router.post("", response_model=SessionState)
async def create_session(
    request: StartSessionRequest,
    services: ServicesManager = Depends(get_services),
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """
    Створити нову сесію та зробити перший прогноз.

    Приклад:
    ```json
    {
        "symptoms": ["fever", "cough"]
    }
    ```
    """
    session = sessions.create_session(services)

    try:
        await session.start(request.symptoms)
    except RefinementError:
        # Сесія без прогнозу клієнту не потрібна
        sessions.delete_session(session.session_id)
        raise

    return session_to_response(session)


@router.get("/{session_id}", response_model=SessionState)
async def get_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """
    Отримати поточний стан сесії.

    Повертає:
    - Поточний Outcome
    - Набір доказів
    - Лічильник раундів та бюджет
    - Чи можна відповідати на питання
    """
    return session_to_response(_get_or_404(sessions, session_id))


@router.put("/{session_id}/selection", response_model=SessionState)
async def change_selection(
    session_id: str,
    request: StartSessionRequest,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """
    Змінити початковий вибір симптомів.

    Попередній стан відкидається, уточнення починається з раунду 0.
    """
    session = _get_or_404(sessions, session_id)
    await session.start(request.symptoms)
    return session_to_response(session)


@router.post("/{session_id}/confirm", response_model=ConfirmResponse)
async def confirm_symptom(
    session_id: str,
    request: ConfirmRequest,
    sessions: SessionManager = Depends(get_sessions)
) -> ConfirmResponse:
    """
    Відповісти на уточнююче питання.

    - **symptom**: симптом з outcome.follow_ups
    - **confirmed**: true = так, false = ні

    Приклад:
    ```json
    {
        "symptom": "chills",
        "confirmed": true
    }
    ```
    """
    session = _get_or_404(sessions, session_id)
    await session.confirm_symptom(request.symptom, request.confirmed)

    return ConfirmResponse(
        accepted=True,
        session_state=session_to_response(session)
    )


@router.post("/{session_id}/reset", response_model=SessionState)
async def reset_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Скинути сесію в початковий стан (завжди дозволено)"""
    session = _get_or_404(sessions, session_id)
    session.reset()
    return session_to_response(session)


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> dict:
    """
    Закрити та видалити сесію.
    """
    session = sessions.get_session(session_id)
    if session:
        session.reset()

    success = sessions.delete_session(session_id)

    if not success:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    return {"deleted": True, "session_id": session_id}


@router.get("")
async def list_sessions(
    sessions: SessionManager = Depends(get_sessions)
) -> dict:
    """
    Отримати список активних сесій (для адміністрування).
    """
    return {
        "active_sessions": sessions.get_active_count(),
        "session_ids": sessions.list_ids()
    }
