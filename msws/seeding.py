"""Counter-to-seed mapping so streams can be keyed by small integers."""

from __future__ import annotations

from typing import Tuple

from msws.generator import UINT64_MAX, GeneratorState


# Weyl increments for the seed helper; each one covers 100 million inputs.
SEED_TABLE: Tuple[int, ...] = (
    0x8B5AD4CE914ECDF7,
    0xDBC8915F4B1CD961,
    0x3A16E0C51FA593D9,
    0x1794DA529EC6D70B,
    0x8FC49B2A752F643B,
    0xDE07A518FBA03571,
    0xB1D2E4762D58906B,
    0x478F6219DA719B05,
    0x41857DC34A2FDC05,
    0xB9425ED8E351A06F,
    0x9235EB64C35EAB7D,
    0x91F0E7B8E0536AF7,
    0x4F0581ABB194F75B,
    0xDAB4E53C95408D1F,
    0xF23BA0C5410CEB3B,
    0x912A0B4CE102A36D,
    0x92A73B40B46A2E71,
    0x46CA273B5FDE168D,
    0xF9B8AD61743910B5,
    0x490CEB3D865E4BC9,
    0xA12E0DCFBF6471CF,
    0xA54C91DB6DC0FE37,
    0x08C3564A5C031727,
    0xE3296D17C14795BD,
    0x5387014DB793F24F,
    0x6D47AF052931FE47,
    0xD138C9EF735C0E8F,
    0xA790FBC8EBF02D3B,
    0x4A1B027867C953FB,
    0x49A180DE9567182D,
)

BLOCK_SIZE = 100_000_000
FALLBACK_SEED = 0xB5AD4ECEDA1CE2A9


def _helper_state(n: int) -> GeneratorState:
    """Position a generator inside the table block that owns ``n``."""
    r, t = divmod(n, BLOCK_SIZE)
    s = SEED_TABLE[r % len(SEED_TABLE)]
    r //= len(SEED_TABLE)
    w = (t * s + r * s * BLOCK_SIZE) & UINT64_MAX
    state = GeneratorState(s)
    state.x = w
    state.w = w
    return state


def distinct_nibbles(state: GeneratorState) -> int:
    """Pack 8 distinct hex digits drawn from the stream into a 32-bit word.

    Digits are read from each output least significant nibble first; a
    digit already used is skipped. The first digit found lands in the low
    nibble of the result.
    """
    packed = 0
    seen = 0
    shift = 0
    while shift < 32:
        value = state.next()
        for i in range(0, 32, 4):
            digit = (value >> i) & 0xF
            if seen & (1 << digit):
                continue
            seen |= 1 << digit
            packed |= digit << shift
            shift += 4
            if shift >= 32:
                break
    return packed


def derive_seed(n: int) -> int:
    """Return a valid generator seed for any 64-bit integer ``n``.

    The result is always odd and never 1, so ``GeneratorState(derive_seed(n))``
    cannot fail. Inputs wider than 64 bits are truncated.
    """
    state = _helper_state(n & UINT64_MAX)
    hi = distinct_nibbles(state)
    lo = distinct_nibbles(state)
    seed = (hi << 32) | lo | 1
    if seed == 1:
        return FALLBACK_SEED
    return seed
