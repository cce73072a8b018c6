"""Test utilities and fixtures for vtuple tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

import pytest


@dataclass(slots=True)
class Reading:
    """Test utility: a user-defined element type with its own operators.

    Ordering compares ``count`` first, then ``level``. ``<=``, ``>`` and ``>=``
    are derived from ``<``. Only ``+=`` has an in-place method; ``-=`` falls back
    to ``-``.
    """

    count: int
    level: float

    def __lt__(self, other: Reading) -> bool:
        if self.count < other.count:
            return True
        if other.count < self.count:
            return False
        return self.level < other.level

    def __le__(self, other: Reading) -> bool:
        return not other < self

    def __gt__(self, other: Reading) -> bool:
        return other < self

    def __ge__(self, other: Reading) -> bool:
        return not self < other

    def __add__(self, other: Reading) -> Reading:
        return Reading(self.count + other.count, self.level + other.level)

    def __sub__(self, other: Reading) -> Reading:
        return Reading(self.count - other.count, self.level - other.level)

    def __iadd__(self, other: Reading) -> Self:
        self.count += other.count
        self.level += other.level
        return self


@pytest.fixture
def low_reading() -> Reading:
    return Reading(1, 1.1)


@pytest.fixture
def high_reading() -> Reading:
    return Reading(2, 2.2)


@pytest.fixture
def reading_type() -> type[Reading]:
    return Reading
