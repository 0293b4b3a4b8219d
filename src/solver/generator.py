"""
Board Generator Module - Random playable boards.
"""

import logging
from typing import Optional

import numpy as np

from .board import Board, BoardConfigError, BOARD_SIZE, NUM_COLOURS

logger = logging.getLogger(__name__)


def random_board(
    width: int = BOARD_SIZE,
    height: int = BOARD_SIZE,
    num_colours: int = NUM_COLOURS,
    seed: Optional[int] = None
) -> Board:
    """
    Fill a board with uniformly random colours.

    One neighbour of the origin, (1, 0) or (0, 1) picked at random, is
    then forced to the origin's colour so the first flood always grows
    the region. On a 1-cell-wide board the only neighbour is used.

    Args:
        width: Number of columns
        height: Number of rows
        num_colours: Palette size
        seed: Optional RNG seed for reproducible boards

    Returns:
        New Board

    Raises:
        BoardConfigError: If a dimension or the palette size is not positive
    """
    if width <= 0 or height <= 0:
        raise BoardConfigError(f"Board dimensions must be positive, got {width}x{height}")
    if num_colours <= 0:
        raise BoardConfigError(f"Need at least one colour, got {num_colours}")

    rng = np.random.default_rng(seed)
    grid = rng.integers(0, num_colours, size=(height, width))

    start = grid[0, 0]
    neighbours = []
    if width > 1:
        neighbours.append((0, 1))
    if height > 1:
        neighbours.append((1, 0))
    if neighbours:
        row, col = neighbours[rng.integers(len(neighbours))]
        grid[row, col] = start

    logger.debug(f"Generated {width}x{height} board, {num_colours} colours, seed={seed}")
    return Board.from_cells(grid.ravel().tolist(), width=width, height=height,
                            num_colours=num_colours)
