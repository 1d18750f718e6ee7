"""Exception classes for fruitsalad."""


class FruitSaladError(Exception):
    """Base exception for all fruitsalad errors."""


class EmptyCollectionError(FruitSaladError):
    """Raised when removing or picking from a sequence with no elements."""


class InvalidInputError(FruitSaladError, ValueError):
    """Raised when menu input cannot be parsed into the expected value."""
