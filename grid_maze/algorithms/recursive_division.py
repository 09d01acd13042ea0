"""Recursive-division maze generation.

1. Fully connect every pair of adjacent non-frozen cells.
2. Split the current rectangle along its longer side (ties split
   horizontally) with a wall on a random line, leaving one random passage
   open, then do the same to both halves until a rectangle is less than two
   cells high or wide.

Walls are "drawn" by disconnecting edges; any edge touching a frozen cell is
skipped, so frozen regions stay exactly as authored. The division runs on an
explicit work stack instead of recursion.
"""

import random
from typing import List, NamedTuple

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.grid import connect, disconnect, free_edges


class Rect(NamedTuple):
    """Inclusive 1-based row and column bounds of a chamber."""

    row_start: int
    row_end: int
    column_start: int
    column_end: int


def recursive_division_algorithm(template: Maze, seed: int) -> Maze:
    maze = template.clone()
    rng = random.Random(seed)

    for first, second in free_edges(maze):
        connect(maze, first, second)

    stack: List[Rect] = [Rect(1, maze.rows, 1, maze.columns)]
    while stack:
        rect = stack.pop()
        # Halves are pushed in reverse so the lower/left one is divided first.
        stack.extend(reversed(_divide(maze, rect, rng)))

    return maze


def _divide(maze: Maze, rect: Rect, rng: random.Random) -> List[Rect]:
    height = rect.row_end - rect.row_start + 1
    width = rect.column_end - rect.column_start + 1
    if height < 2 or width < 2:
        return []

    if height >= width:
        wall_row = rng.randrange(rect.row_start, rect.row_end)
        passage = rng.randint(rect.column_start, rect.column_end)
        for column in range(rect.column_start, rect.column_end + 1):
            if column != passage:
                _wall(maze, Cell(wall_row, column), Cell(wall_row + 1, column))
        return [
            Rect(rect.row_start, wall_row, rect.column_start, rect.column_end),
            Rect(wall_row + 1, rect.row_end, rect.column_start, rect.column_end),
        ]

    wall_column = rng.randrange(rect.column_start, rect.column_end)
    passage = rng.randint(rect.row_start, rect.row_end)
    for row in range(rect.row_start, rect.row_end + 1):
        if row != passage:
            _wall(maze, Cell(row, wall_column), Cell(row, wall_column + 1))
    return [
        Rect(rect.row_start, rect.row_end, rect.column_start, wall_column),
        Rect(rect.row_start, rect.row_end, wall_column + 1, rect.column_end),
    ]


def _wall(maze: Maze, first: Cell, second: Cell) -> None:
    if maze.is_cell_frozen(first.row, first.column) or maze.is_cell_frozen(
        second.row, second.column
    ):
        return
    disconnect(maze, first, second)
