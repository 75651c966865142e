"""Command line entry point.

Example::

    dungen --width 30 --height 20 --randomness 0.3 --sparseness 0.2 --seed 7
    dungen --config dungeon.json --output dungeon.png --cell-size 6
"""

import argparse
import logging
import sys
from typing import List, Optional

from dungen.config import DEFAULT_CONFIGURATION, DungeonConfiguration, load_configuration
from dungen.generator import DungeonGenerator
from dungen.log_utils import setup_logging
from dungen.render import render_ascii, render_image


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dungen", description="Generate a dungeon maze layout."
    )
    parser.add_argument("--config", help="JSON file with configuration values.")
    parser.add_argument("--width", type=int, help="Grid width in cells.")
    parser.add_argument("--height", type=int, help="Grid height in cells.")
    parser.add_argument(
        "--randomness", type=float, help="Chance of turning instead of going straight [0-1]."
    )
    parser.add_argument(
        "--sparseness", type=float, help="Fraction of closed walls to open after carving [0-1]."
    )
    parser.add_argument(
        "--deadends",
        dest="chance_to_remove_deadends",
        type=float,
        help="Chance of removing each dead end [0-1].",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output.")
    parser.add_argument("--output", help="Write a PNG image here instead of printing ASCII.")
    parser.add_argument("--cell-size", type=int, default=8, help="Pixels per block in PNG output.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    parser.add_argument("--debug-topics", help="Comma separated topics to log at DEBUG ('all').")
    parser.add_argument("--color-logs", action="store_true", help="Colour console logs.")
    return parser


def configuration_from_args(args: argparse.Namespace) -> DungeonConfiguration:
    """Merge defaults, the optional config file and explicit flags (highest precedence)."""
    base = load_configuration(args.config) if args.config else DEFAULT_CONFIGURATION
    values = base.to_dict()
    for name in (
        "width",
        "height",
        "randomness",
        "sparseness",
        "chance_to_remove_deadends",
        "seed",
    ):
        value = getattr(args, name)
        if value is not None:
            values[name] = value
    return DungeonConfiguration.from_dict(values)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        args.log_level,
        color_logs=args.color_logs,
        debug_topics=args.debug_topics.split(",") if args.debug_topics else None,
    )

    try:
        configuration = configuration_from_args(args)
    except (OSError, ValueError) as e:
        print(f"dungen: invalid configuration: {e}", file=sys.stderr)
        return 2

    logger.info("Generating with %s", configuration)
    grid = DungeonGenerator().generate(configuration)

    if args.output:
        render_image(grid, cell_size=args.cell_size).save(args.output)
        logger.info("Wrote %s", args.output)
    else:
        print(render_ascii(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())
