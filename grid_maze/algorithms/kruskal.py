"""Randomized Kruskal's algorithm.

Builds a random spanning forest with a disjoint-set over every cell. The
disjoint-set is seeded with the edges already present in the template
(frozen regions included), so existing structure is respected and never
closed into a loop. Candidate edges between non-frozen cells are shuffled
with a seeded Fisher-Yates shuffle and committed when they join two
different sets.
"""

import random

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.disjoint_set import DisjointSet
from grid_maze.utils.grid import connect, free_edges


def kruskal_algorithm(template: Maze, seed: int) -> Maze:
    maze = template.clone()
    rng = random.Random(seed)

    def index(cell: Cell) -> int:
        return (cell.row - 1) * maze.columns + (cell.column - 1)

    dsu = DisjointSet(maze.rows * maze.columns)
    for node in maze.cells():
        for neighbor in node.neighbors:
            dsu.union(index(node.cell), index(neighbor))

    edges = free_edges(maze)
    rng.shuffle(edges)

    for first, second in edges:
        if dsu.connected(index(first), index(second)):
            continue
        if connect(maze, first, second):
            dsu.union(index(first), index(second))

    return maze
