#!/usr/bin/env python3
"""
Example usage of the congol package.
"""

import time

from congol import Game


def main():
    """Seed an R-pentomino by hand and watch it grow for 25 generations."""
    game = Game(25, 25)

    game.universe.set(12, 12, True)
    game.universe.set(12, 13, True)
    game.universe.set(12, 14, True)
    game.universe.set(13, 14, True)
    game.universe.set(11, 13, True)

    for generation in range(25):
        print(f"generation: {generation}")
        print(game)
        time.sleep(0.1)

        game.next_generation()


if __name__ == "__main__":
    main()
