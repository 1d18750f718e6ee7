"""Shared fixtures for fruitsalad tests."""

from collections.abc import Callable, Iterable

import pytest


class ScriptedRandom:
    """Random source that replays fixed answers and records each requested range."""

    def __init__(self, answers: Iterable[int]) -> None:
        self._answers = list(answers)
        self.stops: list[int] = []

    def randrange(self, stop: int) -> int:
        self.stops.append(stop)
        if not self._answers:
            raise AssertionError("ScriptedRandom ran out of answers")
        answer = self._answers.pop(0)
        assert 0 <= answer < stop, f"scripted answer {answer} outside [0, {stop})"
        return answer


@pytest.fixture
def scripted() -> Callable[..., ScriptedRandom]:
    """Factory for ScriptedRandom instances."""

    def make(*answers: int) -> ScriptedRandom:
        return ScriptedRandom(answers)

    return make
