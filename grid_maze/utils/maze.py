"""Graph queries and conversions over a generated maze.

Everything here uses only the read-only surface of :class:`~grid_maze.maze.Maze`
(bounds, frozen flags, neighbor sets), the same surface a renderer consumes.
"""

from collections import deque
from typing import Dict, Iterator, List, Set, Tuple

import numpy as np
import numpy.typing as npt

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.types import Coord
from grid_maze.utils.grid import Edge

# Type aliases for clarity
WallCoord = Tuple[int, int]
MazeGrid = Dict[WallCoord, bool]  # (x, y) -> True is open/floor; False is wall
BoolArray = npt.NDArray[np.bool_]


def iter_edges(maze: Maze) -> Iterator[Edge]:
    """Yield each edge once, as ``(lower, higher)`` in row-major order."""
    for node in maze.cells():
        for neighbor in sorted(node.neighbors, key=lambda c: (c.row, c.column)):
            if (node.row, node.column) < (neighbor.row, neighbor.column):
                yield (node.cell, neighbor)


def edge_set(maze: Maze) -> Set[Tuple[Coord, Coord]]:
    """All edges as coordinate pairs; handy for comparing two mazes."""
    return {(first.coord, second.coord) for first, second in iter_edges(maze)}


def reachable_from(maze: Maze, row: int, column: int) -> Set[Cell]:
    """Cells reachable from ``(row, column)`` through existing edges (BFS)."""
    start = maze.get_cell(row, column).cell
    visited: Set[Cell] = {start}
    queue: deque[Cell] = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in maze.get_neighbors(current.row, current.column):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


def bfs_path(maze: Maze, start: Coord, goal: Coord) -> List[Cell]:
    """Finds the shortest path from start to goal through existing edges.

    Returns the path as a list of cells (including both start and goal), or []
    if unreachable.
    """
    source = maze.get_cell(*start).cell
    target = maze.get_cell(*goal).cell
    if source == target:
        return [source]
    prev: Dict[Cell, Cell] = {}
    visited: Set[Cell] = {source}
    queue: deque[Cell] = deque([source])
    while queue:
        current = queue.popleft()
        if current == target:
            break
        for neighbor in sorted(
            maze.get_neighbors(current.row, current.column),
            key=lambda c: (c.row, c.column),
        ):
            if neighbor not in visited:
                visited.add(neighbor)
                prev[neighbor] = current
                queue.append(neighbor)

    if target not in visited:
        return []
    path: List[Cell] = [target]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return path


def connected_components(maze: Maze, include_frozen: bool = True) -> List[Set[Cell]]:
    """Connected components of the maze graph, ordered by their first cell.

    With ``include_frozen=False`` frozen cells and every edge touching them
    are ignored (the non-frozen induced subgraph).
    """
    seen: Set[Cell] = set()
    components: List[Set[Cell]] = []
    for node in maze.cells():
        if node.cell in seen or (node.is_frozen and not include_frozen):
            continue
        component: Set[Cell] = {node.cell}
        queue: deque[Cell] = deque([node.cell])
        while queue:
            current = queue.popleft()
            for neighbor in maze.get_neighbors(current.row, current.column):
                if neighbor in component:
                    continue
                if not include_frozen and maze.is_cell_frozen(neighbor.row, neighbor.column):
                    continue
                component.add(neighbor)
                queue.append(neighbor)
        seen |= component
        components.append(component)
    return components


def is_perfect(maze: Maze) -> bool:
    """True if the non-frozen induced subgraph has no cycles.

    A forest satisfies ``edges == vertices - components``; every cycle adds
    one edge on top of that.
    """
    vertices = 0
    edges = 0
    for node in maze.cells():
        if node.is_frozen:
            continue
        vertices += 1
        edges += sum(
            1
            for neighbor in node.neighbors
            if not maze.is_cell_frozen(neighbor.row, neighbor.column)
        )
    components = len(connected_components(maze, include_frozen=False))
    return edges // 2 == vertices - components


def to_wall_grid(maze: Maze) -> MazeGrid:
    """Convert to a ``(2 * columns + 1) x (2 * rows + 1)`` wall grid.

    Uses the ``(x, y) -> open`` convention with ``y = 0`` at the top, so the
    highest maze row is drawn first. Cells are always open; the tile between
    two cells is open only if they are connected.
    """
    width, height = 2 * maze.columns + 1, 2 * maze.rows + 1
    grid: MazeGrid = {(x, y): False for x in range(width) for y in range(height)}

    def to_xy(cell: Cell) -> WallCoord:
        return 2 * (cell.column - 1) + 1, 2 * (maze.rows - cell.row) + 1

    for node in maze.cells():
        grid[to_xy(node.cell)] = True
    for first, second in iter_edges(maze):
        (x1, y1), (x2, y2) = to_xy(first), to_xy(second)
        grid[((x1 + x2) // 2, (y1 + y2) // 2)] = True
    return grid


def to_wall_array(maze: Maze) -> BoolArray:
    """Same layout as :func:`to_wall_grid` as a ``(height, width)`` bool array."""
    grid = to_wall_grid(maze)
    array: BoolArray = np.zeros((2 * maze.rows + 1, 2 * maze.columns + 1), dtype=np.bool_)
    for (x, y), is_open in grid.items():
        array[y, x] = is_open
    return array


