"""Grid enumeration helpers.

Shared building blocks for the generation algorithms. Every helper walks the
maze in a fixed order (row-major, row 1 first; adjacency in the order of
:meth:`~grid_maze.maze.Maze.get_adjacent_cells`) so the algorithms that use
them stay deterministic for a given seed.
"""

from typing import List, Tuple

from grid_maze.maze import Maze
from grid_maze.models import Cell

Edge = Tuple[Cell, Cell]


def non_frozen_cells(maze: Maze) -> List[Cell]:
    """All non-frozen cells in row-major order."""
    return [node.cell for node in maze.cells() if not node.is_frozen]


def non_frozen_adjacent(maze: Maze, cell: Cell) -> List[Cell]:
    """In-bounds orthogonal cells of ``cell`` that are not frozen."""
    return [
        node.cell
        for node in maze.get_adjacent_cells(cell.row, cell.column)
        if not node.is_frozen
    ]


def free_edges(maze: Maze, downward: bool = False) -> List[Edge]:
    """Potential edges between two non-frozen cells.

    Row-major; for each cell its right edge comes before its vertical edge,
    which points up (``row + 1``) by default or down with ``downward=True``.
    """
    edges: List[Edge] = []
    for node in maze.cells():
        if node.is_frozen:
            continue
        cell = node.cell
        vertical = cell.bottom() if downward else cell.top()
        for other in (cell.right(), vertical):
            if maze.in_bounds(other.row, other.column) and not maze.is_cell_frozen(
                other.row, other.column
            ):
                edges.append((cell, other))
    return edges


def connect(maze: Maze, first: Cell, second: Cell) -> bool:
    return maze.connect_cells(first.row, first.column, second.row, second.column)


def disconnect(maze: Maze, first: Cell, second: Cell) -> bool:
    return maze.disconnect_cells(first.row, first.column, second.row, second.column)
