"""Binary-tree maze generation.

For each non-frozen cell in row-major order, carve a passage either up
(``row + 1``) or right (``column + 1``), choosing uniformly among the
candidates that are in bounds and not frozen. Fast, O(V), with the usual
diagonal bias of the binary-tree policy.
"""

import random
from typing import List

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.grid import connect


def binary_tree_algorithm(template: Maze, seed: int) -> Maze:
    maze = template.clone()
    rng = random.Random(seed)

    for node in maze.cells():
        if node.is_frozen:
            continue
        cell = node.cell
        candidates: List[Cell] = [
            other
            for other in (cell.top(), cell.right())
            if maze.in_bounds(other.row, other.column)
            and not maze.is_cell_frozen(other.row, other.column)
        ]
        if not candidates:
            continue
        connect(maze, cell, rng.choice(candidates))

    return maze
