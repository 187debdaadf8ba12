from typing import Iterable, List

import pytest


class ScriptedRng:
    """Stand-in for ``numpy.random.Generator`` that replays fixed draws."""

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        self.calls: List[tuple] = []

    def integers(self, low, high=None, size=None, endpoint=False):
        assert size is None
        self.calls.append((low, high, endpoint))
        if not self.values:
            raise AssertionError("scripted rng exhausted")
        value = self.values.pop(0)
        upper = high if endpoint else high - 1
        assert low <= value <= upper
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng
