"""
Move Module - Bounded sequence of colour moves.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple


# Safety cap on solution length for the reference board size
MAX_MOVES = 23


class MoveCapacityError(RuntimeError):
    """Raised when a move sequence would grow past its capacity."""


@dataclass(frozen=True)
class MoveSequence:
    """
    Ordered colours chosen so far, capped at a fixed length.

    The first element is the origin cell's own colour. Sequences are
    immutable; push() returns a new sequence so sibling branches never
    share a list.

    Attributes:
        colours: Colours in move order
        capacity: Maximum number of moves
    """
    colours: Tuple[int, ...] = ()
    capacity: int = MAX_MOVES

    def __post_init__(self):
        if len(self.colours) > self.capacity:
            raise MoveCapacityError(
                f"{len(self.colours)} moves exceed capacity {self.capacity}"
            )

    @classmethod
    def start(cls, colour: int, capacity: int = MAX_MOVES) -> 'MoveSequence':
        """Sequence holding only the implicit first move."""
        return cls(colours=(colour,), capacity=capacity)

    def push(self, colour: int) -> 'MoveSequence':
        """
        Copy of this sequence with one more move appended.

        Raises:
            MoveCapacityError: If the sequence is already full
        """
        if len(self.colours) >= self.capacity:
            raise MoveCapacityError(
                f"Cannot add move {len(self.colours) + 1}, capacity is {self.capacity}"
            )
        return MoveSequence(colours=self.colours + (colour,), capacity=self.capacity)

    @property
    def last(self) -> int:
        """Most recent colour."""
        if not self.colours:
            raise IndexError("Empty move sequence has no last move")
        return self.colours[-1]

    def to_list(self) -> List[int]:
        return list(self.colours)

    def __len__(self) -> int:
        return len(self.colours)

    def __iter__(self) -> Iterator[int]:
        return iter(self.colours)

    def __getitem__(self, index: int) -> int:
        return self.colours[index]
