"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board
from .solution import SolutionReport


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the board,
    cancellation and reporting hooks.

    Attributes:
        board: Board to solve
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unbounded)
        max_states: Maximum states to pop before stopping (None = unbounded)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
        solution_callback: Optional callback receiving each improving solution
    """
    board: Board
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    max_states: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None
    solution_callback: Optional[Callable[[SolutionReport], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def budget_exhausted(self, states_explored: int) -> bool:
        """True once the state budget has been used up."""
        return self.max_states is not None and states_explored >= self.max_states

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def report_solution(self, report: SolutionReport) -> None:
        """Hand an improving solution to the caller."""
        if self.solution_callback:
            self.solution_callback(report)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time
