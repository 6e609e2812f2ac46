"""
DDx Refine — Інтерактивна диференціальна діагностика

Архітектура: віддалений сервіс прогнозу + протокол уточнення симптомів

Модулі:
- config: Конфігурація системи
- schemas: Моделі даних (Outcome, симптоми)
- refinement: Протокол уточнення (класифікатор, сесія, критерії зупинки)
- prediction: Клієнт сервісу прогнозу
- catalog: Каталог симптомів
- api: Backend API
- web_ui: Веб-інтерфейс
"""

__version__ = "0.1.0"

from .config import DDxRefineConfig, get_default_config
