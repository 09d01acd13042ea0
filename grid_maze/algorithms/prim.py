"""Randomized Prim's algorithm.

Grows one spanning tree per connected region of non-frozen cells. Frozen
regions are never entered, so each region they cut off gets its own start
cell (the first unvisited cell in row-major order).
"""

import random
from typing import List, Set, Tuple

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.grid import connect, non_frozen_adjacent, non_frozen_cells

FrontierEdge = Tuple[Cell, Cell]


def prim_algorithm(template: Maze, seed: int) -> Maze:
    maze = template.clone()
    rng = random.Random(seed)

    visited: Set[Cell] = set()
    frontier: List[FrontierEdge] = []

    for start in non_frozen_cells(maze):
        if start in visited:
            continue
        visited.add(start)
        _add_frontier_edges(maze, start, visited, frontier)

        while frontier:
            # Swap-remove a uniformly random frontier edge
            idx = rng.randrange(len(frontier))
            frontier[idx], frontier[-1] = frontier[-1], frontier[idx]
            source, target = frontier.pop()
            if target in visited:
                continue
            connect(maze, source, target)
            visited.add(target)
            _add_frontier_edges(maze, target, visited, frontier)

    return maze


def _add_frontier_edges(
    maze: Maze, cell: Cell, visited: Set[Cell], frontier: List[FrontierEdge]
) -> None:
    for neighbor in non_frozen_adjacent(maze, cell):
        if neighbor not in visited:
            frontier.append((cell, neighbor))
