"""Tests for SessionConfig."""

import dataclasses

import pytest

from fruitsalad import DEFAULT_FRUITS, SessionConfig


def test_defaults() -> None:
    """Test default configuration."""
    config = SessionConfig()
    assert config.backend == "linked"
    assert config.seed is None
    assert config.initial_fruits == DEFAULT_FRUITS
    assert config.ends_only is False
    assert config.prepare is True


def test_ends_only_follows_backend() -> None:
    """Test that the deque backend defaults to the ends-only menu."""
    assert SessionConfig(backend="deque").ends_only is True
    assert SessionConfig(backend="deque", ends_only=False).ends_only is False
    assert SessionConfig(backend="linked", ends_only=True).ends_only is True


def test_unknown_backend() -> None:
    """Test that an unknown backend is rejected."""
    with pytest.raises(ValueError, match="Unknown backend"):
        SessionConfig(backend="array")  # type: ignore[arg-type]


def test_frozen() -> None:
    """Test that configuration cannot be changed after creation."""
    config = SessionConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.seed = 3  # type: ignore[misc]


def test_seeded_rng_is_reproducible() -> None:
    """Test that equal seeds give equal random streams."""
    first = SessionConfig(seed=11).make_rng()
    second = SessionConfig(seed=11).make_rng()
    assert [first.randrange(100) for _ in range(5)] == [second.randrange(100) for _ in range(5)]
