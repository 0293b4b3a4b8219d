"""
Greedy Strategy - Always picks the colour covering the most cells.
"""

import time
import logging
from typing import List

from ..base import SolverStrategy
from ..context import SolutionContext
from ..coverage import candidate_moves
from ..solution import Solution, SolutionMetrics, SolutionReport
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class GreedyStrategy(SolverStrategy):
    """
    Greedy strategy that always floods with the colour covering the most cells.

    This is the fastest strategy - one expansion per colour per move.
    It doesn't look ahead, so its answer is an upper bound on the optimum,
    never a proof of it. Ties go to the lower colour id.
    """
    name = "greedy"
    description = "Greedy (instant) - Always picks colour covering most cells"
    timeout_sec = 1.0  # Effectively instant

    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute greedy solution - always pick the colour with most coverage.

        Args:
            context: Solution context with board and cancellation

        Returns:
            Solution with at most one report
        """
        start_time = time.perf_counter()
        board = context.board
        metrics = SolutionMetrics(strategy_name=self.name)
        reports: List[SolutionReport] = []

        moves, mask = self.root_state(board)
        was_cancelled = False

        while not mask.is_full() and len(moves) < self.max_moves:
            if self._check_cancelled(context):
                was_cancelled = True
                break

            options = list(candidate_moves(board, mask, moves.last))
            metrics.states_explored += 1
            metrics.states_generated += len(options)

            if not options:
                break

            # Pick colour with most coverage
            colour, mask = max(options, key=lambda option: option[1].count())
            moves = moves.push(colour)

            context.report_progress(
                min(0.99, mask.count() / board.cell_count),
                f"{len(moves)} moves, {mask.count()} cells covered"
            )

        if mask.is_full():
            report = SolutionReport.from_sequence(moves, queue_size=0)
            reports.append(report)
            context.report_solution(report)
            logger.info(f"[Greedy] Solution complete: {report.length} moves")
        else:
            logger.info(
                f"[Greedy] Gave up at {len(moves)} moves with "
                f"{mask.count()}/{board.cell_count} cells covered"
            )

        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        return Solution(
            reports=reports,
            is_optimal=False,
            was_cancelled=was_cancelled,
            max_moves=self.max_moves,
            metrics=metrics,
        )
