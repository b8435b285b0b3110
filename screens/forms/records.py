# screens/forms/records.py
from __future__ import annotations
import dataclasses
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

R = TypeVar("R")


class RecordList(Generic[R]):
    """
    Ordered, editable list of same-shaped records (faculty rows, reviews)
    that never drops below ``minimum`` entries.
    """

    def __init__(self, factory: Callable[[], R], records: Optional[List[R]] = None, minimum: int = 1):
        self._factory = factory
        self.minimum = minimum
        self._records: List[R] = list(records or [])
        while len(self._records) < minimum:
            self._records.append(factory())

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self._records)

    def __getitem__(self, index: int) -> R:
        return self._records[index]

    def add(self) -> R:
        record = self._factory()
        self._records.append(record)
        return record

    def remove(self, index: int) -> bool:
        if len(self._records) <= self.minimum or not 0 <= index < len(self._records):
            return False
        del self._records[index]
        return True

    def update(self, index: int, field: str, value) -> None:
        self._records[index] = dataclasses.replace(self._records[index], **{field: value})

    def to_list(self) -> List[R]:
        return list(self._records)
