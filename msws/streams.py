from __future__ import annotations

"""Option handling shared by the command-line scripts."""

import argparse
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from msws.generator import GeneratorState, UINT64_MAX
from msws.seeding import derive_seed


@dataclass
class StreamConfig:
    seed: Optional[int] = None
    index: Optional[int] = None
    count: int = 10

    def resolve_seed(self) -> int:
        """Return the explicit seed, or derive one from the stream index."""
        if self.seed is not None:
            return self.seed
        return derive_seed(self.index or 0)


def parse_word(text: str) -> int:
    """Parse a decimal or 0x-prefixed 64-bit integer."""
    value = int(text, 0)
    if value < 0 or value > UINT64_MAX:
        raise ValueError(f"{text} does not fit in 64 bits")
    return value


def add_stream_arguments(parser: argparse.ArgumentParser, count: int = 10) -> None:
    """Register the --seed/--index/--count options on ``parser``."""
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--seed", type=parse_word, help="Odd 64-bit seed (decimal or 0x hex).")
    group.add_argument("--index", type=parse_word, help="Derive the seed from this counter value.")
    parser.add_argument("--count", type=int, default=count, help="Number of outputs to draw.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for diagnostics.")


def config_from_args(args: argparse.Namespace) -> StreamConfig:
    return StreamConfig(seed=args.seed, index=args.index, count=args.count)


def build_generator(config: StreamConfig) -> GeneratorState:
    """Construct the generator for ``config``; raises InvalidSeedError for a bad seed."""
    return GeneratorState(config.resolve_seed())


def stream_record(config: StreamConfig, outputs: List[int]) -> Dict[str, Any]:
    """Serialise a drawn stream into the JSON layout the scripts exchange."""
    return {
        "seed": f"{config.resolve_seed():#018x}",
        "index": config.index,
        "count": len(outputs),
        "outputs": outputs,
    }
