"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Optional

from ..core.game import Game
from ..core.patterns import PatternLibrary


class CLIGame:
    """Command-line runner that prints a game generation by generation."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def seed_game(
        self,
        game: Game,
        pattern: Optional[str] = None,
        pattern_x: Optional[int] = None,
        pattern_y: Optional[int] = None,
        population_rate: Optional[float] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Establish the first generation of a game.

        Args:
            game: Game to seed
            pattern: Pattern name to place
            pattern_x: X offset for the pattern (centered when None)
            pattern_y: Y offset for the pattern (centered when None)
            population_rate: Random population rate, used instead of a pattern when set
            seed: Random seed for reproducible population

        Raises:
            ValueError: If the pattern is unknown
        """
        universe = game.universe

        if population_rate is not None:
            universe.randomize(population_rate, seed=seed)
            return

        loaded_pattern = self.pattern_library.get_pattern(pattern)
        if loaded_pattern is None:
            raise ValueError(f"Pattern '{pattern}' not found")

        pattern_width, pattern_height = loaded_pattern.get_size()
        if pattern_x is None:
            pattern_x = max(0, (universe.width - pattern_width) // 2)
        if pattern_y is None:
            pattern_y = max(0, (universe.height - pattern_height) // 2)

        loaded_pattern.apply_to_universe(universe, pattern_x, pattern_y)

    def run(
        self,
        width: int,
        height: int,
        generations: int,
        delay: float = 0.0,
        pattern: Optional[str] = "Glider",
        pattern_x: Optional[int] = None,
        pattern_y: Optional[int] = None,
        population_rate: Optional[float] = None,
        seed: Optional[int] = None,
        quiet: bool = False,
    ) -> Game:
        """Seed a game and run it for a number of generations.

        Each generation is printed before it is advanced. In quiet mode only
        the board left after the last generation is printed.

        Returns:
            The game after the final generation
        """
        game = Game(width, height)
        self.seed_game(game, pattern, pattern_x, pattern_y, population_rate, seed)

        for generation in range(generations):
            if not quiet:
                print(f"generation: {generation}")
                print(game)
                if delay > 0:
                    time.sleep(delay)

            game.next_generation()

        if quiet:
            print(f"generation: {generations}")
            print(game)

        return game

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, names in categories.items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                size = pattern.get_size()
                print(f"  {name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a glider on a 25x25 grid for 25 generations
  congol-cli

  # Run the R-pentomino for 200 generations without delay
  congol-cli -W 40 -H 30 --pattern R-pentomino -g 200 -d 0

  # Random 10% population, reproducible, only print the final board
  congol-cli --population 0.1 --seed 42 -g 100 --quiet
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=25, help="Grid width (default: 25)")

    parser.add_argument("-H", "--height", type=int, default=25, help="Grid height (default: 25)")

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=25,
        help="Number of generations to run (default: 25)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.1,
        help="Seconds to wait between generations (default: 0.1)",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        default="Glider",
        help="Pattern to seed the first generation with (default: Glider)",
    )

    parser.add_argument("--pattern-x", type=int, help="X offset for pattern placement (default: centered)")

    parser.add_argument("--pattern-y", type=int, help="Y offset for pattern placement (default: centered)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        help="Seed with a random population at this rate 0.0-1.0 instead of a pattern",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible populations")

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print the board after the last generation",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.population is not None and not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.pattern_x is not None and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y is not None and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    cli = CLIGame()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.population is None and cli.pattern_library.get_pattern(args.pattern) is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1

    try:
        cli.run(
            width=args.width,
            height=args.height,
            generations=args.generations,
            delay=args.delay,
            pattern=args.pattern,
            pattern_x=args.pattern_x,
            pattern_y=args.pattern_y,
            population_rate=args.population,
            seed=args.seed,
            quiet=args.quiet,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
