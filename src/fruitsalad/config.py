"""Session configuration."""

import random
from dataclasses import dataclass

from fruitsalad.types import BACKENDS, Backend

DEFAULT_FRUITS: tuple[str, ...] = ("Arbutus", "Loquat", "Strawberry Tree Berry")


@dataclass(frozen=True)
class SessionConfig:
    """Immutable settings for one interactive salad session."""

    backend: Backend = "linked"
    seed: int | None = None  # None = unseeded
    initial_fruits: tuple[str, ...] = DEFAULT_FRUITS
    ends_only: bool | None = None  # None = follow the backend
    prepare: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate backend and normalize ends_only."""
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}; expected one of {list(BACKENDS)}")
        if self.ends_only is None:
            object.__setattr__(self, "ends_only", self.backend == "deque")

    def make_rng(self) -> random.Random:
        """Create the random source for this session."""
        return random.Random(self.seed)
