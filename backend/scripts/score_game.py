#!/usr/bin/env python3
"""Score a single bowling game from the command line.

Pass the pins knocked down by each roll, in order::

    python backend/scripts/score_game.py 10 10 1 1

The script prints a JSON document with the rolls per frame, the per-frame
and running scores, and the total.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from bowling_score.scoring import bowling
from bowling_score.scoring.game import InvalidRollError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the score of a ten-pin bowling game from its rolls.",
    )
    parser.add_argument(
        "rolls",
        metavar="PINS",
        type=int,
        nargs="*",
        help="Pins knocked down by each roll, in order.",
    )
    parser.add_argument(
        "--no-overflow-check",
        action="store_true",
        help="Accept rolls that push a frame's pinfall past 10.",
    )
    parser.add_argument(
        "--legacy-tenth",
        action="store_true",
        help="Close the tenth frame after two opening strikes.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log ignored and rejected rolls.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = {}
    if args.no_overflow_check:
        config["enforceFrameOverflow"] = False
    if args.legacy_tenth:
        config["tenthFrameAlwaysThreeRolls"] = False

    try:
        summary = bowling.score_rolls(args.rolls, config)
    except InvalidRollError as exc:
        print(f"Invalid roll #{exc.index + 1}: {exc.detail}", file=sys.stderr)
        return 2

    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
