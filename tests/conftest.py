"""
Shared fixtures for the lifesim test suite.

Provides a neutral vector and a scripted random source so individual test
modules can focus on behavior rather than setup.
"""

from __future__ import annotations

from typing import Iterable

import pytest

from lifesim.emotion.types import EmotionVector


# ---------------------------------------------------------------------------
# Randomness
# ---------------------------------------------------------------------------

class ScriptedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        self.calls += 1
        return self._values.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture()
def scripted():
    """Factory: ``scripted(0.1, 0.5)`` returns a ScriptedRandom."""
    return lambda *values: ScriptedRandom(values)


# ---------------------------------------------------------------------------
# Vectors
# ---------------------------------------------------------------------------

@pytest.fixture()
def neutral() -> EmotionVector:
    return EmotionVector()
