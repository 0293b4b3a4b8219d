"""
Coverage Module - Flood region bitset and incremental region expansion.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from .board import Board


ORIGIN = 0


@dataclass(frozen=True)
class CoverageMask:
    """
    Immutable bitset recording which cells belong to the flood region.

    Bit `pos` of `bits` is set when cell `pos` is covered. Masks are
    values: every "mutation" returns a new mask, so a parent state's
    mask is never disturbed by its children.

    Attributes:
        size: Number of cells on the paired board
        bits: Packed membership bits
    """
    size: int
    bits: int = 0

    @classmethod
    def origin(cls, size: int) -> 'CoverageMask':
        """Mask with only the origin cell covered."""
        return cls(size=size, bits=1 << ORIGIN)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self.size:
            raise IndexError(f"Cell {pos} outside mask of {self.size} cells")

    def get(self, pos: int) -> bool:
        """True if cell pos is covered."""
        self._check(pos)
        return bool(self.bits >> pos & 1)

    def with_cell(self, pos: int) -> 'CoverageMask':
        """Copy of this mask with cell pos covered."""
        self._check(pos)
        return CoverageMask(size=self.size, bits=self.bits | (1 << pos))

    def count(self) -> int:
        """Number of covered cells."""
        return self.bits.bit_count()

    def is_full(self) -> bool:
        """True if every cell is covered."""
        return self.bits == (1 << self.size) - 1

    def covered_cells(self) -> List[int]:
        """Sorted list of covered positions."""
        return [pos for pos in range(self.size) if self.bits >> pos & 1]

    def to_array(self, width: int) -> np.ndarray:
        """
        Boolean grid view of the mask for renderers.

        Args:
            width: Board width (size must be a multiple of it)

        Returns:
            Array of shape (size // width, width)
        """
        if width <= 0 or self.size % width:
            raise ValueError(f"Width {width} does not divide mask size {self.size}")
        flat = np.array(
            [bool(self.bits >> pos & 1) for pos in range(self.size)], dtype=bool
        )
        return flat.reshape(self.size // width, width)


def expand_coverage(board: Board, coverage: CoverageMask, colour: int) -> CoverageMask:
    """
    Flood the covered region into neighbouring cells of one colour.

    Only cells adjacent to the current region are examined, and each
    eligible cell is visited once. If nothing of that colour touches
    the region, the input mask is returned unchanged.

    Args:
        board: Board the mask belongs to
        coverage: Current flood region
        colour: Colour the region is recoloured to

    Returns:
        New mask covering the region plus every cell reachable through
        cells of the given colour
    """
    bits = coverage.bits
    cells = board.cells
    neighbours = board.neighbours

    todo = set()
    for pos in range(board.cell_count):
        if not bits >> pos & 1:
            continue
        for adjacent in neighbours[pos]:
            if not bits >> adjacent & 1 and cells[adjacent] == colour:
                todo.add(adjacent)

    if not todo:
        return coverage

    work = sorted(todo)
    while work:
        pos = work.pop()
        if bits >> pos & 1:
            continue
        bits |= 1 << pos
        for adjacent in neighbours[pos]:
            if not bits >> adjacent & 1 and cells[adjacent] == colour:
                work.append(adjacent)

    return CoverageMask(size=coverage.size, bits=bits)


def candidate_moves(
    board: Board,
    mask: CoverageMask,
    skip_colour: int
) -> Iterator[Tuple[int, CoverageMask]]:
    """
    Yield every productive next move from a flood region.

    Args:
        board: Board being solved
        mask: Current flood region
        skip_colour: Colour of the most recent move (never repeated)

    Yields:
        (colour, expanded_mask) for each colour that grows the region,
        in ascending colour order
    """
    for colour in range(board.num_colours):
        if colour == skip_colour:
            continue
        expanded = expand_coverage(board, mask, colour)
        if expanded != mask:
            yield colour, expanded
