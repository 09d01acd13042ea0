"""Cell value object.

Immutable 1-based grid coordinate. Cells are the identities stored in every
neighbor set of the maze, so equality and hashing depend only on
``(row, column)``.
"""

from dataclasses import dataclass
from typing import Tuple

from grid_maze.types import Coord


@dataclass(frozen=True)
class Cell:
    """Grid coordinate.

    Attributes:
        row: Row index (1 at the bottom).
        column: Column index (1 at the left).
    """

    row: int
    column: int

    def top(self) -> "Cell":
        return Cell(self.row + 1, self.column)

    def bottom(self) -> "Cell":
        return Cell(self.row - 1, self.column)

    def right(self) -> "Cell":
        return Cell(self.row, self.column + 1)

    def left(self) -> "Cell":
        return Cell(self.row, self.column - 1)

    def adjacent(self) -> Tuple["Cell", "Cell", "Cell", "Cell"]:
        """Computed orthogonal positions (top, bottom, right, left).

        These are positions, not graph edges; they may fall outside a maze.
        """
        return (self.top(), self.bottom(), self.right(), self.left())

    def is_adjacent_to(self, other: "Cell") -> bool:
        """True if ``other`` is exactly one step away horizontally or vertically."""
        return abs(self.row - other.row) + abs(self.column - other.column) == 1

    @property
    def coord(self) -> Coord:
        return (self.row, self.column)

    def __str__(self) -> str:
        return f"Cell({self.row}, {self.column})"
