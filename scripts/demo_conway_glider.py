#!/usr/bin/env python3
"""
Conway Glider Demonstration Script

Runs a glider on the unbounded lattice and checks that it behaves like one:
five live cells every generation, the same shape every four ticks, and a
diagonal drift of one cell per period.
"""

import sys
import json
import logging
from itertools import islice
from pathlib import Path

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from game_of_rife import World
from game_of_rife.core.live_set import translate
from game_of_rife.patterns import GLIDER, find_cycle, normalize

GLIDER_PERIOD = 4


def run_glider_demo(steps=40, start_x=0, start_y=0):
    """Run glider demonstration and return metrics."""
    if steps < 0:
        raise ValueError(f"Steps must be non-negative, got {steps}")

    logger.info("=== CONWAY GLIDER DEMONSTRATION ===")
    logger.info(f"Evolution steps: {steps}")
    logger.info(f"Initial glider position: ({start_x}, {start_y})")

    world = World(translate(GLIDER, start_x, start_y))
    initial_shape, _ = normalize(world.cells)

    com_positions = []
    live_counts = []

    for step, generation in enumerate(islice(world.generations(), steps + 1)):
        com_positions.append(generation.center_of_mass())
        live_counts.append(generation.live_count)

        if step % GLIDER_PERIOD == 0:
            shape, origin = normalize(generation.cells)
            assert shape == initial_shape, f"Glider shape changed at step {step}"
            logger.info(f"Step {step}: origin={origin}, COM=({com_positions[-1][0]:.1f}, {com_positions[-1][1]:.1f})")

    initial_com, final_com = com_positions[0], com_positions[-1]
    delta_x = final_com[0] - initial_com[0]
    delta_y = final_com[1] - initial_com[1]
    cycle = find_cycle(world, max_steps=GLIDER_PERIOD)

    logger.info("=== FINAL METRICS ===")
    logger.info(f"Displacement X: {delta_x:.2f}")
    logger.info(f"Displacement Y: {delta_y:.2f}")
    logger.info(f"Final live cells: {live_counts[-1]}")

    results = {
        "steps": steps,
        "initial_position": [start_x, start_y],
        "initial_com": initial_com,
        "final_com": final_com,
        "displacement_x": delta_x,
        "displacement_y": delta_y,
        "period": cycle.period if cycle else None,
        "velocity": [cycle.dx, cycle.dy] if cycle else None,
        "live_count_history": live_counts,
        "mass_conserved": all(count == 5 for count in live_counts),
    }

    assert results["mass_conserved"], "Glider mass not conserved"
    assert results["period"] == GLIDER_PERIOD, f"Unexpected period {results['period']}"

    logger.info("DEMONSTRATION PASSED: glider kept its shape and drifted diagonally")
    return results


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Conway Glider Demonstration")
    parser.add_argument("--steps", type=int, default=40, help="Evolution steps")
    parser.add_argument("--start-x", type=int, default=0, help="Glider start X position")
    parser.add_argument("--start-y", type=int, default=0, help="Glider start Y position")
    parser.add_argument("--output", type=Path, help="Write metrics as JSON to this file")

    args = parser.parse_args()

    try:
        results = run_glider_demo(steps=args.steps, start_x=args.start_x, start_y=args.start_y)

        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(json.dumps(results, indent=2))
            logger.info(f"Metrics saved to: {args.output}")

        print(f"Glider moved ({results['displacement_x']:.1f}, {results['displacement_y']:.1f}) in {args.steps} steps")

    except Exception as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
