"""
DDx Refine — API Error Handlers

Відображення помилок протоколу на HTTP статуси.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ddx_refine.errors import (
    ProtocolError,
    RefinementError,
    SessionBusy,
    StaleResponseError,
    TransportError,
    ValidationError,
)

from .models import ErrorResponse


ERROR_STATUS = {
    ValidationError: 400,
    SessionBusy: 409,
    StaleResponseError: 409,
    ProtocolError: 502,
    TransportError: 503,
}


def status_for(exc: RefinementError) -> int:
    for error_type, status in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status
    return 500


def register_error_handlers(app: FastAPI, debug: bool = False) -> None:
    """Підключити обробники помилок до додатку"""

    @app.exception_handler(RefinementError)
    async def refinement_error_handler(request: Request, exc: RefinementError):
        return JSONResponse(
            status_code=status_for(exc),
            content=ErrorResponse(error=type(exc).__name__, detail=str(exc)).model_dump(),
        )

    # Глобальний обробник помилок
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        print(f"❌ Error: {exc}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                detail=str(exc) if debug else None,
            ).model_dump(),
        )
