"""Brute-force references for checking the search on tiny boards."""

from collections import deque
from typing import Dict, List, Optional, Sequence

from src.solver import Board, CoverageMask, candidate_moves, expand_coverage


def root_mask(board: Board) -> CoverageMask:
    """Origin flooded with its own colour."""
    return expand_coverage(board, CoverageMask.origin(board.cell_count), board.origin_colour)


def replay(board: Board, moves: Sequence[int]) -> CoverageMask:
    """Apply a full move sequence (first move is the origin colour)."""
    mask = root_mask(board)
    for colour in moves[1:]:
        mask = expand_coverage(board, mask, colour)
    return mask


def moves_to_finish(board: Board, mask: CoverageMask) -> Optional[int]:
    """Fewest extra moves that flood the board from mask, by breadth-first search."""
    if mask.is_full():
        return 0
    seen = {mask.bits}
    frontier = deque([(mask, 0)])
    while frontier:
        current, depth = frontier.popleft()
        for _, child in candidate_moves(board, current, -1):
            if child.is_full():
                return depth + 1
            if child.bits not in seen:
                seen.add(child.bits)
                frontier.append((child, depth + 1))
    return None


def optimal_length(board: Board) -> int:
    """Shortest solution length, counting the implicit first move."""
    return 1 + moves_to_finish(board, root_mask(board))


def reachable_masks(board: Board) -> List[CoverageMask]:
    """Every flood region reachable from the root."""
    start = root_mask(board)
    found: Dict[int, CoverageMask] = {start.bits: start}
    frontier = deque([start])
    while frontier:
        current = frontier.popleft()
        for _, child in candidate_moves(board, current, -1):
            if child.bits not in found:
                found[child.bits] = child
                frontier.append(child)
    return list(found.values())
