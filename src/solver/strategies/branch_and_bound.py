"""
Branch and Bound Strategy - Best-first search for the shortest flood sequence.

Explores move sequences from a priority queue ordered by covered-cell
count, so states closest to a full board are expanded first. Each popped
state is pruned when its length plus the number of colours still on the
uncovered part of the board cannot beat the best solution found so far.
Every improving solution is reported as soon as it is found; when the
queue runs dry the last report is optimal.
"""

import heapq
import time
import logging
from dataclasses import dataclass
from typing import List

from ..base import SolverStrategy
from ..context import SolutionContext
from ..coverage import CoverageMask, candidate_moves
from ..move import MoveSequence
from ..solution import Solution, SolutionMetrics, SolutionReport
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@dataclass
class SearchState:
    """
    Candidate partial solution waiting in the queue.

    Attributes:
        covered: Covered-cell count of mask (priority key)
        moves: Colours chosen so far
        mask: Flood region after those moves
    """
    covered: int
    moves: MoveSequence
    mask: CoverageMask

    @classmethod
    def create(cls, moves: MoveSequence, mask: CoverageMask) -> 'SearchState':
        return cls(covered=mask.count(), moves=moves, mask=mask)

    def __lt__(self, other: "SearchState") -> bool:
        """Max-heap ordering: more coverage = higher priority."""
        return self.covered > other.covered


@register_strategy
class BranchAndBoundStrategy(SolverStrategy):
    """
    Anytime best-first branch and bound over colour sequences.

    Algorithm:
        1. Root = origin flooded with its own colour, moves = [origin colour]
        2. Pop the state with the most coverage
        3. Prune if len(moves) + remaining_colours(mask) >= best length
        4. For each colour that grows the mask (never the last one used):
           - full board: record, report, stop expanding this state
           - otherwise push the child state
        5. Stop when the queue is empty, or on cancel/timeout/state budget

    The remaining-colour count never overestimates the moves left, so
    exhausting the queue proves the last reported solution optimal.
    """
    name = "branch_and_bound"
    description = "Branch and Bound (optimal) - Best-first search, reports each improvement"
    timeout_sec = 60.0

    # States between progress updates
    PROGRESS_INTERVAL = 10_000

    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for the shortest sequence that floods the whole board.

        Args:
            context: Solution context with board, cancellation and reporting

        Returns:
            Solution holding every improving report in discovery order
        """
        start_time = time.perf_counter()
        board = context.board
        metrics = SolutionMetrics(strategy_name=self.name)
        reports: List[SolutionReport] = []

        moves, mask = self.root_state(board)
        logger.debug(
            f"[BranchAndBound] Root covers {mask.count()}/{board.cell_count} cells "
            f"with colour {moves.last}"
        )

        if mask.is_full():
            self._report(context, reports, moves, queue_size=0)
            return self._build_solution(reports, metrics, start_time, was_cancelled=False)

        # Accept solutions up to and including max_moves
        best_length = self.max_moves + 1
        todo: List[SearchState] = [SearchState.create(moves, mask)]
        was_cancelled = False

        while todo:
            if self._check_cancelled(context) or context.budget_exhausted(metrics.states_explored):
                was_cancelled = True
                logger.info(
                    f"[BranchAndBound] Stopped early after {metrics.states_explored} states, "
                    f"{len(todo)} still queued"
                )
                break

            state = heapq.heappop(todo)
            metrics.states_explored += 1

            if metrics.states_explored % self.PROGRESS_INTERVAL == 0:
                self._log_progress(context, state, len(todo), best_length, metrics)

            if len(state.moves) + board.remaining_colours(state.mask) >= best_length:
                metrics.pruned_branches += 1
                continue

            for colour, child_mask in candidate_moves(board, state.mask, state.moves.last):
                child_moves = state.moves.push(colour)

                if child_mask.is_full():
                    best_length = len(child_moves)
                    self._report(context, reports, child_moves, queue_size=len(todo))
                    break

                heapq.heappush(todo, SearchState.create(child_moves, child_mask))
                metrics.states_generated += 1

        return self._build_solution(reports, metrics, start_time, was_cancelled)

    def _report(
        self,
        context: SolutionContext,
        reports: List[SolutionReport],
        moves: MoveSequence,
        queue_size: int
    ) -> None:
        """Record an improving solution and hand it to the caller."""
        report = SolutionReport.from_sequence(moves, queue_size)
        reports.append(report)
        logger.info(
            f"[BranchAndBound] Found {report.length}-move solution "
            f"({queue_size} states queued)"
        )
        context.report_solution(report)

    def _log_progress(
        self,
        context: SolutionContext,
        state: SearchState,
        queued: int,
        best_length: int,
        metrics: SolutionMetrics
    ) -> None:
        coverage = state.covered / state.mask.size
        context.report_progress(
            min(0.99, coverage),
            f"{metrics.states_explored} states, {queued} queued"
        )
        logger.debug(
            f"[BranchAndBound] {metrics.states_explored} explored, {queued} queued, "
            f"{metrics.pruned_branches} pruned, best length bound {best_length}"
        )

    def _build_solution(
        self,
        reports: List[SolutionReport],
        metrics: SolutionMetrics,
        start_time: float,
        was_cancelled: bool
    ) -> Solution:
        """Build Solution object from computation results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        is_optimal = not was_cancelled and len(reports) > 0

        if not reports:
            logger.info(
                f"[BranchAndBound] No solution within {self.max_moves} moves "
                f"({metrics.states_explored} states explored)"
            )
        else:
            logger.info(
                f"[BranchAndBound] Best {reports[-1].length} moves "
                f"({'optimal' if is_optimal else 'not proven optimal'}), "
                f"{metrics.states_explored} explored, {metrics.pruned_branches} pruned, "
                f"{metrics.computation_time_ms:.1f}ms"
            )

        return Solution(
            reports=reports,
            is_optimal=is_optimal,
            was_cancelled=was_cancelled,
            max_moves=self.max_moves,
            metrics=metrics,
        )
