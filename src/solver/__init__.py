"""
Solver Package - Search framework for the flood-fill board puzzle.

Starting from the top-left cell, each move recolours the connected
flood region, absorbing neighbours of the new colour. This package finds
the shortest move sequence that floods the whole board.

Public API:
    - Board: Immutable colour grid
    - CoverageMask: Bitset of the current flood region
    - expand_coverage(): Incremental flood fill
    - MoveSequence: Bounded, value-copied list of moves
    - Solution / SolutionReport / SolutionMetrics: Search results
    - SolutionContext: Shared context for strategies
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - random_board(): Random playable board

Usage:
    from src.solver import Board, SolutionContext, create_strategy

    board = Board.from_rows([[0, 0], [1, 1]], num_colours=2)
    context = SolutionContext(board=board, solution_callback=print)

    strategy = create_strategy("branch_and_bound")
    solution = strategy.solve(context)

    print(solution.move_count, solution.moves, solution.is_optimal)
"""

# Core data structures
from .board import Board, BoardConfigError, BOARD_SIZE, NUM_COLOURS
from .coverage import CoverageMask, expand_coverage, candidate_moves
from .move import MoveSequence, MoveCapacityError, MAX_MOVES
from .solution import Solution, SolutionMetrics, SolutionReport
from .context import SolutionContext
from .generator import random_board

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Board",
    "BoardConfigError",
    "BOARD_SIZE",
    "NUM_COLOURS",
    "CoverageMask",
    "expand_coverage",
    "candidate_moves",
    "MoveSequence",
    "MoveCapacityError",
    "MAX_MOVES",
    "Solution",
    "SolutionMetrics",
    "SolutionReport",
    "SolutionContext",
    "random_board",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_default_strategy_name",
    "register_strategy",
]
