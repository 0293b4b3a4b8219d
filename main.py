"""
Flood Solver - Entry Point

Loads a board (the built-in reference board or a random one), runs the
selected strategy and prints every improving solution as it is found.

Example:
    python main.py
    python main.py --random --seed 7 --width 8 --height 8
    python main.py --strategy greedy --image debug/board.png
"""

import sys
import logging
import argparse
from typing import List, Optional

from src.solver import (
    Board,
    SolutionContext,
    SolutionReport,
    create_strategy,
    get_strategy_names,
    random_board,
    BOARD_SIZE,
    NUM_COLOURS,
)
from src.render import (
    SYMBOLS,
    format_report,
    render_board,
    render_legend,
    save_board_image,
)
from src.settings import load_settings


logger = logging.getLogger(__name__)


# 12x12 reference instance, row-major
REFERENCE_BOARD = [
    0, 0, 1, 1, 1, 0, 2, 5, 0, 2, 2, 4, 1, 5, 1, 1, 4, 1, 1, 5, 5, 5, 5, 5, 5, 3, 3, 1, 0,
    3, 0, 1, 4, 5, 1, 0, 2, 1, 1, 0, 2, 2, 5, 0, 0, 4, 4, 4, 1, 0, 3, 5, 4, 4, 1, 3, 0, 4,
    2, 1, 5, 0, 1, 2, 3, 2, 3, 2, 2, 3, 2, 3, 5, 2, 4, 0, 4, 4, 2, 1, 4, 0, 4, 1, 5, 5, 0,
    4, 3, 5, 5, 0, 5, 5, 2, 0, 0, 2, 4, 5, 0, 5, 5, 4, 4, 3, 3, 5, 0, 5, 4, 0, 4, 3, 4, 2,
    3, 0, 4, 2, 2, 5, 5, 1, 4, 2, 4, 1, 0, 1, 0, 4, 2, 1, 1, 2, 0, 1, 4, 5, 1, 0, 4, 2,
]


def configure_logging(debug: bool) -> None:
    """Log to both console and solver.log."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, using saved settings as defaults."""
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Flood Solver - Shortest move sequence for the flood-fill puzzle"
    )
    parser.add_argument(
        "--strategy", "-s",
        default=settings["strategy_name"],
        choices=get_strategy_names(),
        help="Solving strategy (default: %(default)s)"
    )
    parser.add_argument(
        "--random", "-r",
        action="store_true",
        help="Solve a random board instead of the reference board"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument("--width", type=int, default=BOARD_SIZE, help="Columns for --random")
    parser.add_argument("--height", type=int, default=BOARD_SIZE, help="Rows for --random")
    parser.add_argument("--colours", type=int, default=NUM_COLOURS, help="Palette size for --random")
    parser.add_argument(
        "--max-moves",
        type=int,
        default=settings["max_moves"],
        help="Longest solution to accept (default: %(default)s)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings["timeout_sec"],
        help="Stop searching after this many seconds (default: %(default)s)"
    )
    parser.add_argument(
        "--max-states",
        type=int,
        default=settings["max_states"],
        help="Stop searching after this many states"
    )
    parser.add_argument("--image", default=None, help="Also save the board as a PNG")
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        default=settings["debug_enabled"],
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    # Defaults from config.json bypass argparse's own checks
    if args.strategy not in get_strategy_names():
        parser.error(
            f"unknown strategy '{args.strategy}' "
            f"(choose from {', '.join(get_strategy_names())})"
        )
    if args.max_moves is None or args.max_moves < 1:
        parser.error(f"--max-moves must be at least 1, got {args.max_moves}")
    if args.width < 1 or args.height < 1:
        parser.error(f"board must be at least 1x1, got {args.width}x{args.height}")
    if not 1 <= args.colours <= len(SYMBOLS):
        parser.error(f"--colours must be between 1 and {len(SYMBOLS)}, got {args.colours}")
    return args


def load_board(args: argparse.Namespace) -> Board:
    """Build the board selected by the command line."""
    if args.random:
        return random_board(args.width, args.height, args.colours, seed=args.seed)
    return Board.from_cells(REFERENCE_BOARD)


def run(args: argparse.Namespace) -> int:
    """
    Solve one board and print each improvement.

    Returns:
        Exit code
    """
    board = load_board(args)
    print(render_legend(board.num_colours))
    print(list(board.cells))
    print(render_board(board))

    if args.image:
        path = save_board_image(board, args.image)
        logger.info(f"Board image saved: {path}")

    def on_solution(report: SolutionReport) -> None:
        print(format_report(report), flush=True)

    strategy = create_strategy(args.strategy, max_moves=args.max_moves)
    context = SolutionContext(
        board=board,
        timeout_sec=args.timeout,
        max_states=args.max_states,
        solution_callback=on_solution,
    )

    logger.info(f"Solving {board.width}x{board.height} board with {strategy.name}")
    solution = strategy.solve(context)

    if not solution.found:
        print(f"No solution found within {solution.max_moves} moves")
    return 0


def main():
    """Initialize and run the Flood Solver."""
    args = parse_args()
    configure_logging(args.debug)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
