"""fruitsalad - Positional ordered string sequences behind an interactive fruit salad menu."""

from fruitsalad.config import DEFAULT_FRUITS, SessionConfig
from fruitsalad.errors import EmptyCollectionError, FruitSaladError, InvalidInputError
from fruitsalad.sequence import (
    DequeStringSequence,
    LinkedStringSequence,
    OrderedStringSequence,
    create_sequence,
)
from fruitsalad.session import SaladSession
from fruitsalad.types import Backend, RandomSource

__version__ = "0.0.1"

__all__ = [
    "OrderedStringSequence",
    "LinkedStringSequence",
    "DequeStringSequence",
    "create_sequence",
    "SaladSession",
    "SessionConfig",
    "DEFAULT_FRUITS",
    "FruitSaladError",
    "EmptyCollectionError",
    "InvalidInputError",
    "Backend",
    "RandomSource",
]
