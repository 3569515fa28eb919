from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class RandomProvider:
    """
    Thin wrapper around random.Random to make RNG deterministic and injectable
    for tests while avoiding global state.
    """

    seed: Optional[int] = None

    def __post_init__(self):
        self._rng = random.Random(self.seed)

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)
