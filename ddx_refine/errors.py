"""
DDx Refine — Помилки протоколу уточнення

Жодна з цих помилок не залишає сесію частково оновленою:
стан змінюється лише після успішної класифікації відповіді.
"""


class RefinementError(Exception):
    """Базова помилка протоколу"""


class ValidationError(RefinementError):
    """Неправильне використання з боку клієнта (порожній вибір, чужий симптом, термінальна сесія)"""


class TransportError(RefinementError):
    """Мережева помилка або помилка сервісу прогнозу"""


class ProtocolError(RefinementError):
    """Відповідь сервісу не відповідає жодній відомій формі"""


class SessionBusy(RefinementError):
    """Операцію викликано, поки попередня ще чекає на відповідь сервісу"""


class StaleResponseError(RefinementError):
    """Сесію скинуто, поки запит був у дорозі; відповідь відкинуто"""


class CatalogUnavailableError(RefinementError):
    """Каталог симптомів недоступний"""
