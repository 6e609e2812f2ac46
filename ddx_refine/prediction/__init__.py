"""
DDx Refine — Клієнт сервісу прогнозу

Компоненти:
- PredictionClient: контракт (Protocol)
- HttpPredictionClient: HTTP клієнт на httpx
- StaticPredictionClient: сценарій відповідей для демо та тестів
"""

from .client import (
    PredictionClient,
    HttpPredictionClient,
    StaticPredictionClient,
)

__all__ = [
    "PredictionClient",
    "HttpPredictionClient",
    "StaticPredictionClient",
]
