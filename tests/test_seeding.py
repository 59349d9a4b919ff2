from __future__ import annotations

import pytest

from msws import SEED_TABLE, GeneratorState, derive_seed
from msws.generator import UINT64_MAX
from msws.seeding import BLOCK_SIZE, distinct_nibbles

DERIVED_SEEDS = [
    0x8B5AD4CEB9C1FE73,
    0x64D098B5C4F26D37,
    0x45973ACB0AD43B97,
    0x6E9C5DB170D261C9,
    0x4FA75198BC653EFB,
    0x3D4C562EA9451FED,
    0xD8B57104D2850B1B,
    0x2BDFE60A326FDAB1,
    0x86CED140FE30D875,
    0x7C981FA6257D863D,
]


@pytest.mark.parametrize("n, expected", list(enumerate(DERIVED_SEEDS)))
def test_derived_seed_fixtures(n: int, expected: int) -> None:
    assert derive_seed(n) == expected


@pytest.mark.parametrize(
    "n",
    [
        0,
        1,
        2,
        BLOCK_SIZE - 1,
        BLOCK_SIZE,
        BLOCK_SIZE * 30,
        BLOCK_SIZE * 31 + 7,
        0xB5AD4ECEDA1CE2A9,
        UINT64_MAX - 1,
        UINT64_MAX,
    ],
)
def test_derived_seed_is_always_valid(n: int) -> None:
    seed = derive_seed(n)
    assert seed & 1 == 1
    assert seed not in (0, 1)
    assert 0 <= seed <= UINT64_MAX
    assert GeneratorState(seed).s == seed


def test_derived_seed_is_deterministic() -> None:
    assert [derive_seed(n) for n in range(50)] == [derive_seed(n) for n in range(50)]


def test_consecutive_counters_give_distinct_seeds() -> None:
    seeds = [derive_seed(n) for n in range(1_000)]
    assert len(set(seeds)) == len(seeds)


def test_wide_inputs_are_truncated_to_64_bits() -> None:
    assert derive_seed((1 << 64) + 5) == derive_seed(5)
    assert derive_seed(-1) == derive_seed(UINT64_MAX)


def test_derived_seed_halves_use_distinct_digits() -> None:
    for n in range(20):
        seed = derive_seed(n)
        hi = seed >> 32
        # The low word can lose a digit to the forced odd bit; the high word cannot.
        assert len(set(f"{hi:08x}")) == 8


def test_distinct_nibbles_packs_first_unseen_digits() -> None:
    state = GeneratorState(SEED_TABLE[0])
    # First output is the high word of the increment, whose digits are unique.
    assert distinct_nibbles(state) == SEED_TABLE[0] >> 32


def test_seed_table_entries_are_valid_seeds() -> None:
    assert len(SEED_TABLE) == 30
    for s in SEED_TABLE:
        assert s & 1 == 1
        GeneratorState(s)
