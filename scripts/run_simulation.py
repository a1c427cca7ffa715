#!/usr/bin/env python3
"""Run the Game of Life in the console."""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from game_of_life import Universe


def main():
    """Run the simulation and print every generation."""
    # Simulation parameters
    WIDTH = 32
    HEIGHT = 16
    STEPS = 50
    PATTERN = "random"
    SEED = 7

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("--- CREATING UNIVERSE ---")
    with Universe(width=WIDTH, height=HEIGHT, pattern=PATTERN, seed=SEED) as universe:
        print(universe)

        for i in range(STEPS):
            universe.tick()
            print(f"\n--- GENERATION {i + 1} ({universe.population()} alive) ---")
            print(universe)

            if universe.population() == 0:
                print("\nEvery cell has died.")
                break


if __name__ == "__main__":
    main()
