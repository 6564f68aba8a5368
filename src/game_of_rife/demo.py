"""Command-line demonstration: evolve a classic pattern and print both ends."""

import argparse
import logging
import sys
from typing import List, Optional

from .core.world import World
from .patterns.library import PATTERNS, get_pattern

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 1000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Conway's Game of Life on an unbounded lattice")
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS, help="Evolution steps")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default="glider", help="Initial pattern")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def print_world(label: str, world: World) -> None:
    print(f"{label}: {world!r}")
    print(world.render(pad=1))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        world0 = World(get_pattern(args.pattern))
        logger.info(f"Running {args.pattern} for {args.steps} steps")
        print_world("Generation 0", world0)

        world1 = world0.forward(args.steps)
        print_world(f"Generation {args.steps}", world1)
        logger.info(f"Live cells: {world0.live_count} -> {world1.live_count}")
    except Exception as e:
        logger.error(f"Demonstration failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
