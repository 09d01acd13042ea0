"""Random maze with a guaranteed valid path.

Walks every potential edge between two non-frozen cells in shuffled order.
An edge is always added when its endpoints are not yet reachable from each
other through the edges present so far (template edges included), and added
with probability :data:`REDUNDANT_EDGE_PROBABILITY` otherwise. The result is
a near-tree: every region is connected, with a few sparse loops.

Each reachability check is a BFS over the current graph, so generation is
``O(E * (V + E))``.
"""

import random
from collections import deque
from typing import Set

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.grid import connect, free_edges

REDUNDANT_EDGE_PROBABILITY = 0.1
"""Chance of adding an edge whose endpoints are already connected."""


def random_with_valid_path_algorithm(template: Maze, seed: int) -> Maze:
    maze = template.clone()
    rng = random.Random(seed)

    edges = free_edges(maze, downward=True)
    rng.shuffle(edges)

    for first, second in edges:
        if not _has_path(maze, first, second):
            connect(maze, first, second)
        elif rng.random() < REDUNDANT_EDGE_PROBABILITY:
            connect(maze, first, second)

    return maze


def _has_path(maze: Maze, start: Cell, target: Cell) -> bool:
    if start == target:
        return True
    visited: Set[Cell] = {start}
    queue: deque[Cell] = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in maze.get_neighbors(current.row, current.column):
            if neighbor == target:
                return True
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return False
