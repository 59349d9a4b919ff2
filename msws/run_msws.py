#!/usr/bin/env python3
from __future__ import annotations

"""CLI entry point that prints a generator stream for a seed or counter."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from msws.generator import InvalidSeedError
from msws.streams import add_stream_arguments, build_generator, config_from_args, stream_record

logger = logging.getLogger("msws.run")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print outputs of the Middle Square Weyl Sequence generator.")
    add_stream_arguments(parser)
    parser.add_argument("--format", choices=("json", "lines"), default="json")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    config = config_from_args(args)
    if config.count < 0:
        parser.error("--count must be non-negative")
    try:
        rng = build_generator(config)
    except InvalidSeedError as exc:
        parser.error(str(exc))

    logger.info("drawing %d outputs from seed %#018x", config.count, rng.s)
    outputs = rng.take(config.count)

    if args.format == "lines":
        for i, value in enumerate(outputs):
            print(f"{i}: {value}")
        return
    print(json.dumps(stream_record(config, outputs), indent=2))


if __name__ == "__main__":
    main()
