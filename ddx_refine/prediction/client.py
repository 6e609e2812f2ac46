"""
DDx Refine — Клієнт сервісу прогнозу

Запит: список ідентифікаторів симптомів.
Відповідь: сирий JSON, який класифікує refinement.classifier.

Помилки:
- мережа / HTTP статус → TransportError (без повторів)
- таймаут / не-JSON відповідь → ProtocolError
"""

import logging
from collections import deque
from typing import Any, Iterable, List, Optional, Protocol, Sequence

import httpx

from ddx_refine.config import PredictionServiceConfig
from ddx_refine.errors import ProtocolError, TransportError, ValidationError

log = logging.getLogger(__name__)


class PredictionClient(Protocol):
    """Контракт сервісу прогнозу"""

    async def predict(self, symptoms: Sequence[str]) -> Any:
        ...


def _validate_request(symptoms: Sequence[str]) -> List[str]:
    symptoms = list(symptoms)
    if not symptoms:
        raise ValidationError("Prediction request needs at least one symptom")
    return symptoms


class HttpPredictionClient:
    """
    HTTP клієнт сервісу прогнозу.

    Приклад:
        async with HttpPredictionClient(PredictionServiceConfig(base_url="http://localhost:5000")) as client:
            raw = await client.predict(["fever", "cough"])
    """

    def __init__(
        self,
        config: Optional[PredictionServiceConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or PredictionServiceConfig()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=self.config.timeout_seconds)

    async def predict(self, symptoms: Sequence[str]) -> Any:
        """
        Надіслати запит прогнозу.

        Args:
            symptoms: Симптоми (непорожній список)

        Returns:
            Декодований JSON відповіді
        """
        payload = {"symptoms": _validate_request(symptoms)}
        url = self.config.predict_url

        log.debug("POST %s symptoms=%s", url, payload["symptoms"])

        try:
            response = await self.client.post(url, json=payload)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ProtocolError(f"Prediction request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Prediction service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Prediction service unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError("Prediction service returned a non-JSON body") from e

        log.debug("Prediction response: %s", data)
        return data

    async def aclose(self) -> None:
        """Закрити HTTP клієнт (якщо створений тут)"""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HttpPredictionClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"HttpPredictionClient(url={self.config.predict_url})"


class StaticPredictionClient:
    """
    Клієнт зі сценарієм відповідей (для демо та тестів).

    Кожен виклик predict() повертає наступну відповідь зі списку;
    якщо елемент є винятком, він піднімається.

    Приклад:
        client = StaticPredictionClient([
            {"candidates": ["Flu", "Cold"], "followUpSymptoms": ["chills"]},
            {"diagnosis": "Flu"},
        ])
    """

    def __init__(self, responses: Iterable[Any] = ()):
        self._responses = deque(responses)
        self.requests: List[List[str]] = []

    def queue(self, *responses: Any) -> None:
        """Додати відповіді в кінець сценарію"""
        self._responses.extend(responses)

    @property
    def remaining(self) -> int:
        return len(self._responses)

    async def predict(self, symptoms: Sequence[str]) -> Any:
        symptoms = _validate_request(symptoms)
        self.requests.append(symptoms)

        if not self._responses:
            raise TransportError("No scripted prediction response left")

        response = self._responses.popleft()
        if isinstance(response, BaseException):
            raise response
        return response
