#!/usr/bin/env python3
from __future__ import annotations

"""Plotting utility for eyeballing the distribution of a generator stream."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from msws.generator import InvalidSeedError, UINT32_SCALE
from msws.streams import add_stream_arguments, build_generator, config_from_args

logger = logging.getLogger("msws.plot")


def normalise(outputs: List[int]) -> List[float]:
    """Map 32-bit outputs onto [0, 1)."""
    return [value / UINT32_SCALE for value in outputs]


def plot_stream(values: List[float], bins: int, output_path: Path, title: str) -> None:
    """Save a histogram and a lag-1 scatter of ``values`` to ``output_path``."""
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))

    ax0 = axes[0]
    ax0.hist(values, bins=bins, color="#2563eb", edgecolor="#1e3a8a", linewidth=0.4)
    expected = len(values) / bins
    ax0.axhline(expected, color="#a855f7", linestyle="--", linewidth=1.0, label="Uniform expectation")
    ax0.set_xlabel("Output / 2^32")
    ax0.set_ylabel("Count")
    ax0.set_title("Output Distribution")
    ax0.legend()

    ax1 = axes[1]
    ax1.scatter(values[:-1], values[1:], s=2, color="#2563eb", alpha=0.5)
    ax1.set_xlabel("x[i]")
    ax1.set_ylabel("x[i + 1]")
    ax1.set_title("Lag-1 Successive Outputs")

    fig.suptitle(title)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Plot the output distribution of a generator stream.")
    add_stream_arguments(parser, count=10_000)
    parser.add_argument("--bins", type=int, default=64)
    parser.add_argument("--output", required=True, help="Path to save the figure (PNG/SVG).")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    config = config_from_args(args)
    if config.count < 2:
        parser.error("--count must be at least 2")
    if args.bins <= 0:
        parser.error("--bins must be positive")
    try:
        rng = build_generator(config)
    except InvalidSeedError as exc:
        parser.error(str(exc))

    values = normalise(rng.take(config.count))
    logger.info("plotting %d values into %d bins", len(values), args.bins)
    output_path = Path(args.output)
    plot_stream(values, args.bins, output_path, f"MSWS seed {rng.s:#018x}")
    print(f"Saved stream plot to {output_path}")


if __name__ == "__main__":
    main()
