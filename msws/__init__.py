"""Middle Square Weyl Sequence pseudorandom number generator."""

from .generator import GeneratorState, InvalidSeedError, SeedResult, rotl64
from .seeding import SEED_TABLE, derive_seed

__all__ = [
    "GeneratorState",
    "InvalidSeedError",
    "SeedResult",
    "rotl64",
    "SEED_TABLE",
    "derive_seed",
]
