"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from .board import Board
from .context import SolutionContext
from .coverage import CoverageMask, expand_coverage
from .move import MAX_MOVES, MoveSequence
from .solution import Solution


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
        timeout_sec: Default timeout for this strategy
    """
    name: str = "base"
    description: str = "Base strategy"
    timeout_sec: float = 60.0

    def __init__(self, max_moves: int = MAX_MOVES):
        """
        Args:
            max_moves: Longest solution the strategy may report
        """
        if max_moves < 1:
            raise ValueError(f"max_moves must be at least 1, got {max_moves}")
        self.max_moves = max_moves

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute solution(s) for the board in the context.

        Must periodically check context.is_cancelled() and return the
        best solution found so far if True.

        Args:
            context: Solution context with board, cancellation, reporting

        Returns:
            Solution with every improving report and metrics
        """
        pass

    def root_state(self, board: Board) -> Tuple[MoveSequence, CoverageMask]:
        """
        Build the starting point shared by all strategies.

        The first move is implicit: the origin's own colour, flooded
        once so the root mask already holds the origin's region.

        Returns:
            (moves, mask) for the root
        """
        colour = board.origin_colour
        mask = expand_coverage(board, CoverageMask.origin(board.cell_count), colour)
        return MoveSequence.start(colour, capacity=self.max_moves), mask

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()
