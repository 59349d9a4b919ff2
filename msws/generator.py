"""Middle Square Weyl Sequence generator shared by every tool in this repo."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF
UINT32_SCALE = float(UINT32_MAX) + 1.0


def rotl64(x: int, r: int) -> int:
    """Rotate a 64-bit word left by ``r`` bits."""
    r %= 64
    x &= UINT64_MAX
    return ((x << r) & UINT64_MAX) | (x >> (64 - r))


class InvalidSeedError(ValueError):
    """Raised when a seed cannot drive a Weyl sequence."""

    def __init__(self, seed: int, reason: str) -> None:
        super().__init__(f"invalid seed {seed:#x}: {reason}")
        self.seed = seed
        self.reason = reason


def check_seed(seed: int) -> None:
    """Raise InvalidSeedError unless ``seed`` is an odd 64-bit word above 1."""
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"seed must be an int, got {type(seed).__name__}")
    if seed < 0 or seed > UINT64_MAX:
        raise InvalidSeedError(seed, "seed must fit in 64 bits")
    if seed & 1 == 0:
        raise InvalidSeedError(seed, "seed must be odd")
    if seed == 1:
        raise InvalidSeedError(seed, "seed must be greater than 1")


@dataclass
class GeneratorState:
    """MSWS generator: squares ``x``, adds the Weyl term ``w`` and swaps halves.

    ``s`` is the odd Weyl increment and never changes after construction.
    Each instance is one independent stream; share it between threads only
    behind your own lock.
    """

    s: int
    x: int = field(default=0, init=False)
    w: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        check_seed(self.s)

    @classmethod
    def new(cls, seed: int) -> GeneratorState:
        return cls(seed)

    @classmethod
    def try_new(cls, seed: int) -> SeedResult:
        """Build a generator, reporting a bad seed as a value instead of raising."""
        try:
            return SeedResult(state=cls(seed))
        except InvalidSeedError as exc:
            return SeedResult(error=exc)

    @property
    def state(self) -> Tuple[int, int, int]:
        return self.x, self.w, self.s

    def next(self) -> int:
        """Advance the sequence and return the low 32 bits of the new ``x``."""
        x = (self.x * self.x) & UINT64_MAX
        self.w = (self.w + self.s) & UINT64_MAX
        x = (x + self.w) & UINT64_MAX
        # Swapping halves moves the middle of the square into the low word.
        self.x = rotl64(x, 32)
        return self.x & UINT32_MAX

    def take(self, count: int) -> List[int]:
        """Return the next ``count`` outputs."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.next() for _ in range(count)]

    def random(self) -> float:
        """Return a float in [0, 1) built from one 32-bit output."""
        return self.next() / UINT32_SCALE

    def randint(self, n: int) -> int:
        """Return a random integer in [0, n)."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return int(self.random() * n)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()


@dataclass(frozen=True)
class SeedResult:
    """Outcome of GeneratorState.try_new: either a state or the seed error."""

    state: Optional[GeneratorState] = None
    error: Optional[InvalidSeedError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> GeneratorState:
        """Return the state, re-raising the stored error for a rejected seed."""
        if self.error is not None:
            raise self.error
        assert self.state is not None
        return self.state
