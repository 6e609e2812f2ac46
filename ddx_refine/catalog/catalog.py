"""
DDx Refine — Каталог симптомів

Джерела:
- JsonFileSymptomCatalog: JSON файл (список, {id,label} або база хвороб)
- HttpSymptomCatalog: GET до сервісу прогнозу

Недоступність каталогу не фатальна: load_catalog() повертає
порожній список та повідомлення про помилку.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Union

import httpx
from pydantic import ValidationError as SchemaError

from ddx_refine.config import PredictionServiceConfig
from ddx_refine.errors import CatalogUnavailableError
from ddx_refine.schemas import SymptomInfo

log = logging.getLogger(__name__)

CATALOG_UNAVAILABLE_MESSAGE = "Failed to load symptoms."


def parse_catalog(data: Any) -> List[SymptomInfo]:
    """
    Розібрати JSON каталогу.

    Підтримувані формати:
        ["fever", "cough"]
        [{"id": "fever", "label": "Fever"}, {"value": "cough", "label": "Cough"}]
        {"symptoms": [...]}
        {"Flu": {"symptoms": ["fever", "cough"]}, ...}   # база хвороб
    """
    if isinstance(data, dict) and "symptoms" in data and isinstance(data["symptoms"], list):
        data = data["symptoms"]

    symptoms: List[SymptomInfo] = []

    if isinstance(data, list):
        for item in data:
            if isinstance(item, str):
                symptoms.append(_entry(item))
            elif isinstance(item, dict):
                symptom_id = item.get("id", item.get("value"))
                if not isinstance(symptom_id, str):
                    raise CatalogUnavailableError(f"Catalog entry without id: {item!r}")
                symptoms.append(_entry(symptom_id, item.get("label") or ""))
            else:
                raise CatalogUnavailableError(f"Unsupported catalog entry: {item!r}")

    elif isinstance(data, dict):
        # Збираємо симптоми з бази хвороб
        all_symptoms = {}
        for disease, disease_data in data.items():
            if not isinstance(disease_data, dict):
                continue
            disease_symptoms = disease_data.get("symptoms", [])
            if not isinstance(disease_symptoms, list) or not all(
                isinstance(s, str) for s in disease_symptoms
            ):
                raise CatalogUnavailableError(
                    f"Symptoms of {disease!r} must be a list of strings"
                )
            for s in disease_symptoms:
                entry = _entry(s)
                all_symptoms[entry.id] = entry
        symptoms = [all_symptoms[key] for key in sorted(all_symptoms)]

    else:
        raise CatalogUnavailableError(f"Unsupported catalog format: {type(data).__name__}")

    # Без дублікатів, порядок зберігається
    unique = {}
    for symptom in symptoms:
        unique.setdefault(symptom.id, symptom)
    return list(unique.values())


def _entry(symptom_id: str, label: str = "") -> SymptomInfo:
    try:
        return SymptomInfo(id=symptom_id, label=label)
    except SchemaError as e:
        raise CatalogUnavailableError(f"Invalid catalog entry {symptom_id!r}: {e}") from e


class JsonFileSymptomCatalog:
    """Каталог симптомів з JSON файлу"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def list_symptoms(self) -> List[SymptomInfo]:
        if not self.path.exists():
            raise CatalogUnavailableError(f"Symptom catalog not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogUnavailableError(f"Cannot read symptom catalog {self.path}: {e}") from e

        return parse_catalog(data)

    def __repr__(self) -> str:
        return f"JsonFileSymptomCatalog(path={self.path})"


class HttpSymptomCatalog:
    """Каталог симптомів з сервісу прогнозу (GET /symptoms)"""

    def __init__(
        self,
        config: Optional[PredictionServiceConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or PredictionServiceConfig()
        self.transport = transport

    def list_symptoms(self) -> List[SymptomInfo]:
        url = self.config.symptoms_url
        try:
            with httpx.Client(timeout=self.config.timeout_seconds, transport=self.transport) as client:
                response = client.get(url)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogUnavailableError(f"Cannot fetch symptom catalog from {url}: {e}") from e

        return parse_catalog(data)

    async def alist_symptoms(self, client: Optional[httpx.AsyncClient] = None) -> List[SymptomInfo]:
        """
        Асинхронна версія list_symptoms.

        Args:
            client: Готовий AsyncClient (не закривається тут)
        """
        url = self.config.symptoms_url
        owns_client = client is None
        if owns_client:
            client = httpx.AsyncClient(timeout=self.config.timeout_seconds)

        try:
            response = await client.get(url)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogUnavailableError(f"Cannot fetch symptom catalog from {url}: {e}") from e
        finally:
            if owns_client:
                await client.aclose()

        return parse_catalog(data)

    def __repr__(self) -> str:
        return f"HttpSymptomCatalog(url={self.config.symptoms_url})"


@dataclass
class CatalogSnapshot:
    """Знімок каталогу на момент старту"""
    symptoms: List[SymptomInfo] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_available(self) -> bool:
        return self.error is None

    @property
    def ids(self) -> List[str]:
        return [s.id for s in self.symptoms]

    def search(self, query: str, limit: int = 20) -> List[SymptomInfo]:
        """Пошук за підрядком в id або label"""
        query = query.strip().lower()
        results = []
        for symptom in self.symptoms:
            if query in symptom.id.lower() or query in symptom.label.lower():
                results.append(symptom)
                if len(results) >= limit:
                    break
        return results


def load_catalog(catalog) -> CatalogSnapshot:
    """
    Завантажити каталог, не падаючи при помилці.

    Args:
        catalog: Об'єкт з методом list_symptoms()

    Returns:
        CatalogSnapshot (порожній з error, якщо каталог недоступний)
    """
    try:
        symptoms = catalog.list_symptoms()
    except CatalogUnavailableError as e:
        log.warning("Symptom catalog unavailable: %s", e)
        return CatalogSnapshot(symptoms=[], error=CATALOG_UNAVAILABLE_MESSAGE)

    log.info("Symptom catalog loaded: %d symptoms", len(symptoms))
    return CatalogSnapshot(symptoms=symptoms)
