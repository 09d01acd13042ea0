"""Common type aliases and enumerations.

``GenerateFn`` is the single extension point of the package: every maze
generation algorithm is a plain function with this signature, registered by
name in :data:`grid_maze.generator.ALGORITHM_REGISTRY`.
"""

from enum import StrEnum, auto
from typing import Callable, Tuple, TYPE_CHECKING


# Forward declaration for GenerateFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_maze.maze import Maze

# 1-based (row, column) pair
Coord = Tuple[int, int]

GenerateFn = Callable[["Maze", int], "Maze"]


class MazeAlgorithm(StrEnum):
    """Closed set of algorithm selectors understood by the dispatcher."""

    BINARY_TREE = auto()
    PRIM = auto()
    KRUSKAL = auto()
    DEPTH_FIRST = auto()
    BREADTH_FIRST = auto()
    HUNT_AND_KILL = auto()
    RECURSIVE_DIVISION = auto()
    RANDOM_WITH_VALID_PATH = auto()
