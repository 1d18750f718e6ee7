"""Type definitions for fruitsalad."""

from typing import Literal, Protocol, TypeAlias

# Which container backs an OrderedStringSequence
Backend: TypeAlias = Literal["linked", "deque"]

BACKENDS: tuple[Backend, ...] = ("linked", "deque")


class RandomSource(Protocol):
    """Anything that yields uniform integers in ``[0, stop)``; ``random.Random`` qualifies."""

    def randrange(self, stop: int) -> int: ...
