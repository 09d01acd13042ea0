"""Breadth-first tree maze generation.

Expands level by level from a seed cell: each dequeued cell is connected to
all of its unvisited non-frozen neighbors, which are then enqueued. The
neighbors are gathered in the fixed adjacency order and shuffled with the
seeded generator, so the seed decides which sibling is expanded first. The
result is a spanning tree of short, bushy corridors radiating from the seed.
"""

import random
from collections import deque
from typing import Set

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.grid import connect, non_frozen_adjacent, non_frozen_cells


def breadth_first_algorithm(template: Maze, seed: int) -> Maze:
    maze = template.clone()
    rng = random.Random(seed)

    visited: Set[Cell] = set()
    for start in non_frozen_cells(maze):
        if start in visited:
            continue
        visited.add(start)
        queue: deque[Cell] = deque([start])

        while queue:
            current = queue.popleft()
            candidates = [
                cell for cell in non_frozen_adjacent(maze, current) if cell not in visited
            ]
            rng.shuffle(candidates)
            for cell in candidates:
                connect(maze, current, cell)
                visited.add(cell)
                queue.append(cell)

    return maze
