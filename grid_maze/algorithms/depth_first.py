"""Depth-first search (recursive backtracker) maze generation.

Iterative, stack based: from the top of the stack carve into a uniformly
random unvisited non-frozen neighbor, or backtrack when there is none. Every
region of non-frozen cells gets its own walk, started from its first cell in
row-major order.
"""

import random
from typing import List, Set

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.grid import connect, non_frozen_adjacent, non_frozen_cells


def depth_first_algorithm(template: Maze, seed: int) -> Maze:
    maze = template.clone()
    rng = random.Random(seed)

    visited: Set[Cell] = set()
    for start in non_frozen_cells(maze):
        if start in visited:
            continue
        visited.add(start)
        stack: List[Cell] = [start]

        while stack:
            current = stack[-1]
            candidates = [
                cell for cell in non_frozen_adjacent(maze, current) if cell not in visited
            ]
            if not candidates:
                stack.pop()
                continue
            chosen = rng.choice(candidates)
            connect(maze, current, chosen)
            visited.add(chosen)
            stack.append(chosen)

    return maze
