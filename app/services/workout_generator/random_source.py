import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Источник случайности для выбора упражнений. В тестах подменяется заглушкой."""

    def pick(self, candidates: Sequence[T]) -> T:
        ...


class SystemRandomSource:
    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def pick(self, candidates: Sequence[T]) -> T:
        if not candidates:
            raise ValueError("Cannot pick from an empty sequence")
        return self._random.choice(candidates)


default_random_source = SystemRandomSource()
