"""
DDx Refine — Набір доказів (EvidenceSet)

Впорядкована послідовність симптомів без дублікатів:
спочатку початковий вибір користувача, потім підтверджені симптоми
в порядку підтвердження.
"""

from typing import Iterable, Iterator, List


class EvidenceSet:
    """
    Впорядкований набір симптомів.

    Приклад:
        evidence = EvidenceSet(["fever", "cough"])
        evidence.add("chills")
        evidence.add("fever")      # вже є, ігнорується
        print(list(evidence))      # ['fever', 'cough', 'chills']
    """

    def __init__(self, symptoms: Iterable[str] = ()):
        # dict зберігає порядок вставки і дає O(1) перевірку входження
        self._items = dict.fromkeys(symptoms)

    def add(self, symptom: str) -> bool:
        """
        Додати симптом.

        Returns:
            True якщо симптом новий, False якщо вже був
        """
        if symptom in self._items:
            return False
        self._items[symptom] = None
        return True

    def copy(self) -> "EvidenceSet":
        return EvidenceSet(self._items)

    def to_list(self) -> List[str]:
        return list(self._items)

    def __contains__(self, symptom: object) -> bool:
        return symptom in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EvidenceSet):
            return self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"EvidenceSet({self.to_list()!r})"
