"""
Tests for the search strategies and strategy framework.
"""

import time

import pytest

from src.solver import (
    Board,
    SolutionContext,
    SolutionReport,
    create_strategy,
    get_default_strategy_name,
    get_strategy_names,
    random_board,
)
from src.solver.strategies import SearchState
from src.solver.coverage import CoverageMask
from src.solver.move import MoveSequence
from tests.helpers import moves_to_finish, optimal_length, reachable_masks, replay


TRACE_BOARD = Board.from_rows([
    [0, 1, 2],
    [1, 1, 2],
    [2, 2, 2],
], num_colours=3)


def solve(board, strategy="branch_and_bound", **kwargs):
    context_kwargs = {
        key: kwargs.pop(key) for key in ("max_states", "timeout_sec") if key in kwargs
    }
    context = SolutionContext(board=board, **context_kwargs)
    return create_strategy(strategy, **kwargs).solve(context)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def test_two_by_two_two_rows():
    board = Board.from_rows([[0, 0], [1, 1]], num_colours=2)
    solution = solve(board)
    assert solution.reports == [SolutionReport(length=2, moves=(0, 1), queue_size=0)]
    assert solution.is_optimal
    assert not solution.was_cancelled


def test_single_colour_board_is_trivial():
    board = Board.from_rows([[2, 2], [2, 2]], num_colours=3)
    solution = solve(board)
    assert solution.reports == [SolutionReport(length=1, moves=(2,), queue_size=0)]
    assert solution.move_count == 1
    assert solution.is_optimal


def test_hand_traced_three_by_three():
    solution = solve(TRACE_BOARD)
    assert solution.moves == [0, 1, 2]
    assert solution.reports == [SolutionReport(length=3, moves=(0, 1, 2), queue_size=0)]
    assert solution.metrics.states_explored == 2
    assert solution.metrics.states_generated == 1
    assert solution.metrics.pruned_branches == 0


def test_forced_chain_explores_few_states():
    board = Board.from_rows([[0, 1, 2, 3]], num_colours=4)
    solution = solve(board)
    assert solution.moves == [0, 1, 2, 3]
    assert solution.metrics.states_explored == 3
    assert solution.metrics.states_generated == 2


def test_explored_state_count_is_deterministic():
    board = random_board(5, 5, 4, seed=11)
    first = solve(board)
    second = solve(board)
    assert first.reports == second.reports
    assert first.metrics.states_explored == second.metrics.states_explored
    assert first.metrics.pruned_branches == second.metrics.pruned_branches


# ---------------------------------------------------------------------------
# Search properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("seed", range(8))
def test_reports_strictly_improve(seed):
    board = random_board(5, 5, 4, seed=seed)
    solution = solve(board)
    lengths = [report.length for report in solution.reports]
    assert lengths, "expected at least one solution"
    assert all(later < earlier for earlier, later in zip(lengths, lengths[1:]))
    assert replay(board, solution.moves).is_full()


@pytest.mark.parametrize("seed", range(20))
def test_matches_brute_force_on_small_boards(seed):
    board = random_board(3, 3, 3, seed=seed)
    solution = solve(board)
    assert solution.is_optimal
    assert solution.move_count == optimal_length(board)


@pytest.mark.parametrize("seed", range(5))
def test_matches_brute_force_on_four_by_four(seed):
    board = random_board(4, 4, 4, seed=100 + seed)
    solution = solve(board)
    assert solution.move_count == optimal_length(board)


@pytest.mark.parametrize("seed", range(10))
def test_bound_is_admissible(seed):
    board = random_board(3, 3, 3, seed=seed)
    for mask in reachable_masks(board):
        assert board.remaining_colours(mask) <= moves_to_finish(board, mask)


def test_every_report_floods_board():
    board = random_board(4, 4, 5, seed=4)
    reports = []
    context = SolutionContext(board=board, solution_callback=reports.append)
    solution = create_strategy("branch_and_bound").solve(context)
    assert reports == solution.reports
    for report in reports:
        assert replay(board, report.moves).is_full()
        assert report.moves[0] == board.origin_colour


# ---------------------------------------------------------------------------
# Bounded search
# ---------------------------------------------------------------------------

def test_cap_too_small_reports_no_solution():
    solution = solve(TRACE_BOARD, max_moves=2)
    assert not solution.found
    assert solution.best is None
    assert solution.moves == []
    assert not solution.was_cancelled
    assert not solution.is_optimal


def test_cap_exactly_optimal_is_accepted():
    solution = solve(TRACE_BOARD, max_moves=3)
    assert solution.move_count == 3


def test_cancel_flag_stops_search():
    context = SolutionContext(board=TRACE_BOARD)
    context.cancel_flag.set()
    solution = create_strategy("branch_and_bound").solve(context)
    assert solution.was_cancelled
    assert not solution.found
    assert solution.metrics.states_explored == 0


def test_state_budget_stops_search():
    solution = solve(TRACE_BOARD, max_states=1)
    assert solution.was_cancelled
    assert not solution.is_optimal
    assert solution.metrics.states_explored == 1


def test_reports_before_cutoff_remain_valid():
    board = random_board(6, 6, 5, seed=2)
    solution = solve(board, max_states=200)
    for report in solution.reports:
        assert replay(board, report.moves).is_full()


def test_invalid_cap_rejected():
    with pytest.raises(ValueError):
        create_strategy("branch_and_bound", max_moves=0)


# ---------------------------------------------------------------------------
# Search state ordering
# ---------------------------------------------------------------------------

def test_search_state_orders_by_coverage():
    moves = MoveSequence.start(0)
    small = SearchState.create(moves, CoverageMask.origin(4))
    large = SearchState.create(moves, CoverageMask.origin(4).with_cell(1))
    assert large.covered == 2
    assert large < small
    assert not small < large


# ---------------------------------------------------------------------------
# Greedy
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("seed", range(6))
def test_greedy_never_beats_branch_and_bound(seed):
    board = random_board(4, 4, 4, seed=seed)
    greedy = solve(board, "greedy")
    optimal = solve(board)
    assert greedy.found
    assert not greedy.is_optimal
    assert greedy.move_count >= optimal.move_count
    assert replay(board, greedy.moves).is_full()


def test_greedy_on_trace_board():
    solution = solve(TRACE_BOARD, "greedy")
    assert solution.moves == [0, 1, 2]


def test_greedy_respects_cap():
    solution = solve(TRACE_BOARD, "greedy", max_moves=2)
    assert not solution.found


def test_greedy_on_reference_board():
    from main import REFERENCE_BOARD

    board = Board.from_cells(REFERENCE_BOARD)
    solution = solve(board, "greedy", max_moves=board.cell_count)
    assert solution.found
    assert replay(board, solution.moves).is_full()


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def test_registered_strategies():
    names = get_strategy_names()
    assert "branch_and_bound" in names
    assert "greedy" in names
    assert get_default_strategy_name() == "branch_and_bound"
    assert create_strategy("greedy").description


def test_unknown_strategy():
    with pytest.raises(ValueError, match="Unknown strategy"):
        create_strategy("beam")


def test_timeout_stops_search():
    board = random_board(6, 6, 5, seed=2)
    context = SolutionContext(board=board, timeout_sec=1.0, start_time=time.time() - 5.0)
    assert context.elapsed_time() >= 5.0
    assert context.is_cancelled()
    solution = create_strategy("branch_and_bound").solve(context)
    assert solution.was_cancelled
    assert solution.metrics.states_explored == 0
