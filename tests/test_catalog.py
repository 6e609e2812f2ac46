"""
Тести для каталогу симптомів

Запуск: pytest tests/test_catalog.py -v
"""

import json

import httpx
import pytest


def test_parse_plain_list():
    """Тест: список рядків"""
    from ddx_refine.catalog import parse_catalog

    symptoms = parse_catalog(["fever", "skin_rash", "fever"])

    assert [s.id for s in symptoms] == ["fever", "skin_rash"]
    assert symptoms[1].label == "Skin rash"


def test_parse_entries():
    """Тест: список {id/value, label}"""
    from ddx_refine.catalog import parse_catalog

    symptoms = parse_catalog({"symptoms": [
        {"id": "fever", "label": "High fever"},
        {"value": "cough"},
    ]})

    assert [(s.id, s.label) for s in symptoms] == [("fever", "High fever"), ("cough", "Cough")]


def test_parse_disease_database():
    """Тест: база хвороб → відсортовані унікальні симптоми"""
    from ddx_refine.catalog import parse_catalog

    symptoms = parse_catalog({
        "Flu": {"symptoms": ["fever", "cough"]},
        "Cold": {"symptoms": ["cough", "sneezing"]},
    })

    assert [s.id for s in symptoms] == ["cough", "fever", "sneezing"]


@pytest.mark.parametrize("data", [
    "fever",
    [1, 2],
    [{"label": "No id"}],
    ["  "],
    {"Flu": {"symptoms": ["fever", 1]}},
    {"Flu": {"symptoms": 5}},
    {"Flu": {"symptoms": [["fever"]]}},
])
def test_parse_invalid(data):
    """Тест: неправильний формат → CatalogUnavailableError"""
    from ddx_refine.catalog import parse_catalog
    from ddx_refine.errors import CatalogUnavailableError

    with pytest.raises(CatalogUnavailableError):
        parse_catalog(data)


def test_json_file_catalog(tmp_path):
    """Тест завантаження з JSON файлу"""
    from ddx_refine.catalog import JsonFileSymptomCatalog, load_catalog

    path = tmp_path / "symptoms.json"
    path.write_text(json.dumps([{"id": "fever", "label": "Fever"}, "cough"]), encoding="utf-8")

    snapshot = load_catalog(JsonFileSymptomCatalog(path))

    assert snapshot.is_available
    assert snapshot.ids == ["fever", "cough"]

    print(f"✓ Catalog loaded: {snapshot.ids}")


def test_missing_catalog_is_not_fatal(tmp_path):
    """Тест: відсутній файл → порожній каталог з помилкою"""
    from ddx_refine.catalog import CATALOG_UNAVAILABLE_MESSAGE, JsonFileSymptomCatalog, load_catalog

    snapshot = load_catalog(JsonFileSymptomCatalog(tmp_path / "missing.json"))

    assert not snapshot.is_available
    assert snapshot.symptoms == []
    assert snapshot.error == CATALOG_UNAVAILABLE_MESSAGE


def test_broken_json_is_not_fatal(tmp_path):
    """Тест: зламаний JSON"""
    from ddx_refine.catalog import JsonFileSymptomCatalog, load_catalog

    path = tmp_path / "symptoms.json"
    path.write_text("{not json", encoding="utf-8")

    assert not load_catalog(JsonFileSymptomCatalog(path)).is_available


def test_http_catalog():
    """Тест: каталог з сервісу прогнозу"""
    from ddx_refine.catalog import HttpSymptomCatalog, load_catalog
    from ddx_refine.config import PredictionServiceConfig

    def handler(request):
        assert str(request.url) == "http://svc/symptoms"
        return httpx.Response(200, json=["fever", "cough"])

    catalog = HttpSymptomCatalog(
        PredictionServiceConfig(base_url="http://svc"),
        transport=httpx.MockTransport(handler),
    )
    snapshot = load_catalog(catalog)

    assert snapshot.ids == ["fever", "cough"]


def test_http_catalog_unavailable():
    """Тест: сервіс каталогу повертає помилку"""
    from ddx_refine.catalog import HttpSymptomCatalog, load_catalog

    def handler(request):
        return httpx.Response(503)

    snapshot = load_catalog(HttpSymptomCatalog(transport=httpx.MockTransport(handler)))

    assert not snapshot.is_available


def test_search():
    """Тест пошуку симптомів"""
    from ddx_refine.catalog import CatalogSnapshot, parse_catalog

    snapshot = CatalogSnapshot(parse_catalog(["fever", "skin_rash", "rash_on_face", "cough"]))

    assert [s.id for s in snapshot.search("RASH")] == ["skin_rash", "rash_on_face"]
    assert [s.id for s in snapshot.search("rash", limit=1)] == ["skin_rash"]
    assert snapshot.search("nausea") == []


@pytest.mark.parametrize("database", [
    {"Flu": {"symptoms": ["fever", 1]}},
    {"Flu": {"symptoms": 5}},
])
def test_malformed_database_is_not_fatal(tmp_path, database):
    """Тест: зламана база хвороб → порожній каталог з помилкою"""
    from ddx_refine.catalog import CATALOG_UNAVAILABLE_MESSAGE, JsonFileSymptomCatalog, load_catalog

    path = tmp_path / "diseases.json"
    path.write_text(json.dumps(database), encoding="utf-8")

    snapshot = load_catalog(JsonFileSymptomCatalog(path))

    assert not snapshot.is_available
    assert snapshot.error == CATALOG_UNAVAILABLE_MESSAGE
    assert snapshot.symptoms == []


def test_http_catalog_async():
    """Тест: асинхронне завантаження каталогу"""
    import asyncio
    from ddx_refine.catalog import HttpSymptomCatalog
    from ddx_refine.config import PredictionServiceConfig

    def handler(request):
        assert str(request.url) == "http://svc/symptoms"
        return httpx.Response(200, json={"symptoms": [{"id": "fever"}, "skin_rash"]})

    catalog = HttpSymptomCatalog(PredictionServiceConfig(base_url="http://svc"))

    async def fetch():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await catalog.alist_symptoms(client)

    symptoms = asyncio.run(fetch())

    assert [(s.id, s.label) for s in symptoms] == [("fever", "Fever"), ("skin_rash", "Skin rash")]

    print(f"✓ Async catalog: {[s.id for s in symptoms]}")


def test_http_catalog_async_unavailable():
    """Тест: асинхронний запит з помилкою HTTP"""
    import asyncio
    from ddx_refine.catalog import HttpSymptomCatalog
    from ddx_refine.errors import CatalogUnavailableError

    def handler(request):
        return httpx.Response(500)

    async def fetch():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await HttpSymptomCatalog().alist_symptoms(client)

    with pytest.raises(CatalogUnavailableError):
        asyncio.run(fetch())
