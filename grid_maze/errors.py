"""Exception taxonomy.

Every error raised for a structural contract violation derives from
:class:`MazeError` and from the built-in exception a caller would naturally
catch for the same condition (``ValueError`` for bad arguments, ``IndexError``
for out-of-bounds coordinates).

Blocking by a frozen cell is *not* an error: ``connect_cells`` and
``disconnect_cells`` report it with a ``False`` return value.
"""

from typing import Any


class MazeError(Exception):
    """Base class for all maze errors."""


class InvalidDimensionError(MazeError, ValueError):
    """Rows or columns are not positive integers."""

    def __init__(self, name: str, value: Any) -> None:
        super().__init__(f"{name} must be a positive integer, got {value!r}")
        self.name = name
        self.value = value


class OutOfRangeError(MazeError, IndexError):
    """A coordinate lies outside the maze bounds."""

    def __init__(self, row: int, column: int, rows: int, columns: int) -> None:
        super().__init__(
            f"Out of bounds: ({row}, {column}) for maze {rows}x{columns} "
            f"(rows 1..{rows}, columns 1..{columns})"
        )
        self.row = row
        self.column = column


class NotAdjacentError(MazeError, ValueError):
    """Two cells are not orthogonal neighbors (Manhattan distance != 1)."""

    def __init__(self, first: Any, second: Any) -> None:
        super().__init__(f"Cells must be adjacent (not diagonal): {first} and {second}")


class UnsupportedAlgorithmError(MazeError, ValueError):
    """The dispatcher received an unknown algorithm selector."""

    def __init__(self, algorithm: Any) -> None:
        super().__init__(f"Unsupported maze algorithm: {algorithm!r}")
        self.algorithm = algorithm


class NullTemplateError(MazeError, ValueError):
    """The dispatcher received no template maze."""

    def __init__(self) -> None:
        super().__init__("Template maze must not be None")
