"""
DDx Refine — Каталог симптомів

Компоненти:
- JsonFileSymptomCatalog, HttpSymptomCatalog: джерела каталогу
- CatalogSnapshot: знімок каталогу (symptoms + error)
- load_catalog: завантаження без фатальних помилок
"""

from .catalog import (
    CATALOG_UNAVAILABLE_MESSAGE,
    CatalogSnapshot,
    HttpSymptomCatalog,
    JsonFileSymptomCatalog,
    load_catalog,
    parse_catalog,
)

__all__ = [
    "CATALOG_UNAVAILABLE_MESSAGE",
    "CatalogSnapshot",
    "HttpSymptomCatalog",
    "JsonFileSymptomCatalog",
    "load_catalog",
    "parse_catalog",
]
