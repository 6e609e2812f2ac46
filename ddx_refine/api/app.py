"""
DDx Refine — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn ddx_refine.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import time

from ddx_refine import __version__

from .config import config
from .dependencies import services_manager
from .errors import register_error_handlers
from .routes import (
    health_router,
    symptoms_router,
    sessions_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager — клієнт прогнозу та каталог симптомів при старті.
    """
    print("=" * 60)
    print("🏥 DDx Refine API Starting...")
    print("=" * 60)

    if not services_manager.is_loaded:
        services_manager.load()

    if services_manager.catalog.is_available:
        print(f"✅ API ready! Catalog: {len(services_manager.catalog.symptoms)} symptoms")
    else:
        print(f"⚠️ API starting without symptom catalog: {services_manager.catalog.error}")

    print(f"📍 Prediction service: {services_manager.prediction_service_url}")
    print(f"📍 Refinement budget: {services_manager.max_rounds} rounds")
    print(f"📍 Swagger UI: http://{config.host}:{config.port}/docs")
    print("=" * 60)

    yield

    # Cleanup при зупинці
    print("🛑 DDx Refine API Stopping...")
    await services_manager.close()


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        print(f"📨 {request.method} {request.url.path} → {response.status_code} ({process_time*1000:.1f}ms)")

    return response


register_error_handlers(app, debug=config.debug)

# Підключаємо роутери
app.include_router(health_router)
app.include_router(symptoms_router, prefix=config.api_prefix)
app.include_router(sessions_router, prefix=config.api_prefix)
