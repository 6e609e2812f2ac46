"""
Тести для клієнта сервісу прогнозу

Запуск: pytest tests/test_prediction_client.py -v
"""

import asyncio
import json

import httpx
import pytest


def _predict(handler, symptoms):
    from ddx_refine.config import PredictionServiceConfig
    from ddx_refine.prediction import HttpPredictionClient

    async def call():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            client = HttpPredictionClient(PredictionServiceConfig(base_url="http://svc"), client=http)
            return await client.predict(symptoms)

    return asyncio.run(call())


def test_predict_posts_symptoms():
    """Тест: POST /predict з тілом {"symptoms": [...]}"""
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"diagnosis": "Flu"})

    data = _predict(handler, ["fever", "cough"])

    assert data == {"diagnosis": "Flu"}
    assert seen["method"] == "POST"
    assert seen["url"] == "http://svc/predict"
    assert seen["body"] == {"symptoms": ["fever", "cough"]}

    print(f"✓ POST {seen['url']} → {data}")


def test_http_error_status():
    """Тест: HTTP 500 → TransportError"""
    from ddx_refine.errors import TransportError

    def handler(request):
        return httpx.Response(500, text="boom")

    with pytest.raises(TransportError) as exc_info:
        _predict(handler, ["fever"])

    assert "500" in str(exc_info.value)


def test_connection_error():
    """Тест: сервіс недоступний → TransportError"""
    from ddx_refine.errors import TransportError

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError):
        _predict(handler, ["fever"])


def test_timeout_is_protocol_error():
    """Тест: таймаут → ProtocolError"""
    from ddx_refine.errors import ProtocolError

    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ProtocolError):
        _predict(handler, ["fever"])


def test_non_json_body():
    """Тест: не-JSON відповідь → ProtocolError"""
    from ddx_refine.errors import ProtocolError

    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(ProtocolError):
        _predict(handler, ["fever"])


def test_empty_request_rejected():
    """Тест: порожній список симптомів не надсилається"""
    from ddx_refine.errors import ValidationError

    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"diagnosis": "Flu"})

    with pytest.raises(ValidationError):
        _predict(handler, [])

    assert calls == []


def test_static_client_script():
    """Тест сценарного клієнта"""
    from ddx_refine.errors import TransportError
    from ddx_refine.prediction import StaticPredictionClient

    client = StaticPredictionClient([{"diagnosis": "Flu"}, TransportError("down")])

    async def scenario():
        first = await client.predict(["fever"])
        with pytest.raises(TransportError):
            await client.predict(["fever", "chills"])
        with pytest.raises(TransportError):
            await client.predict(["fever"])
        return first

    assert asyncio.run(scenario()) == {"diagnosis": "Flu"}
    assert client.requests == [["fever"], ["fever", "chills"], ["fever"]]
    assert client.remaining == 0

    client.queue({"diagnosis": "Cold"})
    assert client.remaining == 1

    print(f"✓ Static client: {len(client.requests)} requests recorded")
