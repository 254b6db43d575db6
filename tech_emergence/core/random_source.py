import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar('T')

class RandomSource(Protocol):
    """The slice of random.Random the systems draw from."""

    def random(self) -> float:
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...

def make_random_source(seed: Optional[int] = None) -> RandomSource:
    return random.Random(seed)
