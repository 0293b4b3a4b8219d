"""
Solution Module - Result of strategy computation and the improvement report stream.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .move import MoveSequence


@dataclass(frozen=True)
class SolutionReport:
    """
    One improving complete solution, as emitted during search.

    Attributes:
        length: Number of moves, including the implicit first move
        moves: Colours in move order
        queue_size: States still pending in the queue at discovery time
    """
    length: int
    moves: Tuple[int, ...]
    queue_size: int = 0

    @classmethod
    def from_sequence(cls, sequence: MoveSequence, queue_size: int) -> 'SolutionReport':
        return cls(length=len(sequence), moves=tuple(sequence), queue_size=queue_size)


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of states popped from the queue
        states_generated: Number of child states pushed
        pruned_branches: Number of states discarded by the bound
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_generated: int = 0
    pruned_branches: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        reports: Every improving solution in discovery order
        is_optimal: True if the search space was exhausted, which proves
                    the last report shortest
        was_cancelled: True if stopped early by timeout, cancel flag or
                       state budget
        max_moves: Move cap the search ran under
        metrics: Performance statistics
    """
    reports: List[SolutionReport] = field(default_factory=list)
    is_optimal: bool = False
    was_cancelled: bool = False
    max_moves: int = 0
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def found(self) -> bool:
        """True if at least one complete solution was reported."""
        return len(self.reports) > 0

    @property
    def best(self) -> Optional[SolutionReport]:
        """Shortest reported solution, or None."""
        return self.reports[-1] if self.reports else None

    @property
    def moves(self) -> List[int]:
        """Colours of the best solution (empty if none found)."""
        return list(self.best.moves) if self.best else []

    @property
    def move_count(self) -> int:
        """Length of the best solution, 0 if none found."""
        return self.best.length if self.best else 0
