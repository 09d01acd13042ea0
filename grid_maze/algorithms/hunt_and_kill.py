"""Hunt-and-kill maze generation.

Kill phase: random walk from the current cell through unvisited non-frozen
neighbors, carving every step, until stuck. Hunt phase: scan row-major for
the first unvisited non-frozen cell with at least one visited non-frozen
neighbor, attach it to a uniformly random one and resume the walk from it.
Generation ends when a hunt finds nothing.

The walk starts from a seeded random non-frozen cell. Regions that frozen
cells cut off from that start are never reached by a hunt and stay as in the
template.
"""

import random
from typing import Optional, Set

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.grid import connect, non_frozen_adjacent, non_frozen_cells


def hunt_and_kill_algorithm(template: Maze, seed: int) -> Maze:
    maze = template.clone()
    rng = random.Random(seed)

    cells = non_frozen_cells(maze)
    if not cells:
        return maze

    current: Optional[Cell] = rng.choice(cells)
    visited: Set[Cell] = {current}

    while current is not None:
        _kill(maze, current, visited, rng)
        current = _hunt(maze, visited, rng)

    return maze


def _kill(maze: Maze, current: Cell, visited: Set[Cell], rng: random.Random) -> None:
    while True:
        candidates = [
            cell for cell in non_frozen_adjacent(maze, current) if cell not in visited
        ]
        if not candidates:
            return
        chosen = rng.choice(candidates)
        connect(maze, current, chosen)
        visited.add(chosen)
        current = chosen


def _hunt(maze: Maze, visited: Set[Cell], rng: random.Random) -> Optional[Cell]:
    for node in maze.cells():
        if node.is_frozen or node.cell in visited:
            continue
        visited_neighbors = [
            cell for cell in non_frozen_adjacent(maze, node.cell) if cell in visited
        ]
        if visited_neighbors:
            connect(maze, node.cell, rng.choice(visited_neighbors))
            visited.add(node.cell)
            return node.cell
    return None
