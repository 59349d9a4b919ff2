#!/usr/bin/env python3
from __future__ import annotations

"""Check two JSON stream dumps from run_msws.py against each other."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger("msws.compare")


def load_json(path: Path) -> Dict[str, Any]:
    """Read a JSON file and return the parsed dictionary."""
    with path.open() as f:
        return json.load(f)


def compare_outputs(lhs: List[int], rhs: List[int]) -> None:
    """Raise at the first position where the two output lists disagree."""
    for i, (lv, rv) in enumerate(zip(lhs, rhs)):
        if lv != rv:
            raise AssertionError(f"outputs[{i}] mismatch: {lv:#010x} vs {rv:#010x}")
    if len(lhs) != len(rhs):
        raise AssertionError(f"outputs length mismatch: {len(lhs)} vs {len(rhs)}")


def compare_records(lhs: Dict[str, Any], rhs: Dict[str, Any]) -> None:
    for field in ("seed", "count"):
        if lhs.get(field) != rhs.get(field):
            raise AssertionError(f"{field} mismatch: {lhs.get(field)} vs {rhs.get(field)}")
    compare_outputs(lhs.get("outputs", []), rhs.get("outputs", []))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two generator stream dumps.")
    parser.add_argument("--lhs", required=True, help="Path to the first JSON output.")
    parser.add_argument("--rhs", required=True, help="Path to the second JSON output.")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    lhs_data = load_json(Path(args.lhs))
    rhs_data = load_json(Path(args.rhs))
    logger.debug("comparing %s against %s", args.lhs, args.rhs)
    compare_records(lhs_data, rhs_data)

    print(f"Streams match for all {lhs_data.get('count')} outputs.")


if __name__ == "__main__":
    main()
