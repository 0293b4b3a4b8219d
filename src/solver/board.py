"""
Board Module - Immutable colour grid for the flood-fill puzzle.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .coverage import CoverageMask


# Reference instance dimensions
BOARD_SIZE = 12
NUM_COLOURS = 6


class BoardConfigError(ValueError):
    """Raised when a board layout is malformed."""


@dataclass(frozen=True)
class Board:
    """
    Immutable flood-fill board.

    Cells are stored row-major as a flat tuple of colour ids, so cell
    (x, y) lives at position x + width * y. The origin cell is (0, 0).

    Attributes:
        cells: Flat tuple of colour ids (0 <= id < num_colours)
        width: Number of columns
        height: Number of rows
        num_colours: Size of the colour palette
    """
    cells: Tuple[int, ...]
    width: int = BOARD_SIZE
    height: int = BOARD_SIZE
    num_colours: int = NUM_COLOURS
    neighbours: Tuple[Tuple[int, ...], ...] = field(
        init=False, repr=False, compare=False
    )
    colour_masks: Tuple[int, ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        cells = tuple(self.cells)

        if self.width <= 0 or self.height <= 0:
            raise BoardConfigError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.num_colours <= 0:
            raise BoardConfigError(f"Need at least one colour, got {self.num_colours}")
        if len(cells) != self.width * self.height:
            raise BoardConfigError(
                f"Expected {self.width * self.height} cells for a "
                f"{self.width}x{self.height} board, got {len(cells)}"
            )
        for pos, colour in enumerate(cells):
            if isinstance(colour, bool) or not isinstance(colour, (int, np.integer)):
                raise BoardConfigError(f"Cell {pos} is not an integer colour: {colour!r}")
            if not 0 <= colour < self.num_colours:
                raise BoardConfigError(
                    f"Cell {pos} has colour {colour}, valid range is 0..{self.num_colours - 1}"
                )

        # numpy ints would leak into move sequences otherwise
        cells = tuple(int(c) for c in cells)
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "neighbours", self._build_neighbours())
        object.__setattr__(self, "colour_masks", self._build_colour_masks())

    @classmethod
    def from_cells(cls, cells: Sequence[int], width: int = BOARD_SIZE,
                   height: int = BOARD_SIZE,
                   num_colours: int = NUM_COLOURS) -> 'Board':
        """
        Create a Board from a flat row-major sequence.

        Args:
            cells: Colour ids, length width * height
            width: Number of columns
            height: Number of rows
            num_colours: Palette size

        Returns:
            Board instance

        Raises:
            BoardConfigError: If the layout is malformed
        """
        return cls(cells=tuple(cells), width=width, height=height,
                   num_colours=num_colours)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]],
                  num_colours: int = NUM_COLOURS) -> 'Board':
        """
        Create a Board from a 2D list (one inner list per row).

        Raises:
            BoardConfigError: If rows are empty or ragged
        """
        if not rows or not rows[0]:
            raise BoardConfigError("Board needs at least one row and one column")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise BoardConfigError(
                    f"Row {y} has {len(row)} cells, expected {width}"
                )
        cells = [colour for row in rows for colour in row]
        return cls.from_cells(cells, width=width, height=len(rows),
                              num_colours=num_colours)

    def _build_neighbours(self) -> Tuple[Tuple[int, ...], ...]:
        table = []
        for pos in range(self.cell_count):
            x = pos % self.width
            y = pos // self.width
            adjacent = []
            if x > 0:
                adjacent.append(pos - 1)
            if y > 0:
                adjacent.append(pos - self.width)
            if x < self.width - 1:
                adjacent.append(pos + 1)
            if y < self.height - 1:
                adjacent.append(pos + self.width)
            table.append(tuple(adjacent))
        return tuple(table)

    def _build_colour_masks(self) -> Tuple[int, ...]:
        masks = [0] * self.num_colours
        for pos, colour in enumerate(self.cells):
            masks[colour] |= 1 << pos
        return tuple(masks)

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    @property
    def origin_colour(self) -> int:
        """Colour of the flood start cell."""
        return self.cells[0]

    def coord(self, x: int, y: int) -> int:
        """Convert (x, y) to a flat cell position."""
        return x + self.width * y

    def get(self, x: int, y: int) -> int:
        """Colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} board")
        return self.cells[self.coord(x, y)]

    def get_raw(self, pos: int) -> int:
        """Colour at flat position pos."""
        return self.cells[pos]

    def colours_present(self) -> List[int]:
        """Sorted list of colour ids that appear on the board."""
        return [colour for colour, bits in enumerate(self.colour_masks) if bits]

    def remaining_colours(self, mask: 'CoverageMask') -> int:
        """
        Count distinct colours among uncovered cells.

        Every such colour needs at least one more move, so this is an
        admissible lower bound on the moves left to finish.

        Args:
            mask: Current coverage

        Returns:
            Number of colours still present outside the mask
        """
        uncovered = ~mask.bits
        return sum(1 for bits in self.colour_masks if bits & uncovered)

    def to_array(self) -> np.ndarray:
        """Board as a (height, width) integer array."""
        return np.array(self.cells, dtype=np.int8).reshape(self.height, self.width)

    def to_list(self) -> List[List[int]]:
        """Board as a 2D list, one inner list per row."""
        return [
            list(self.cells[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]
