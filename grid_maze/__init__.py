"""grid_maze
=========

Rectangular maze graphs with frozen regions and pluggable, seeded
generation algorithms.

Typical use::

    from grid_maze import Maze, MazeAlgorithm, MazeGenerator

    template = Maze(16, 16)
    template.freeze_and_connect_cells([(8, 8), (8, 9), (9, 8), (9, 9)])
    maze = MazeGenerator(MazeAlgorithm.PRIM, seed=7).generate(template)

The template is never modified; every algorithm works on a clone.
"""

from .errors import (
    InvalidDimensionError,
    MazeError,
    NotAdjacentError,
    NullTemplateError,
    OutOfRangeError,
    UnsupportedAlgorithmError,
)
from .generator import ALGORITHM_REGISTRY, MazeGenerator, generate_maze
from .maze import Maze
from .models import Cell, MazeCell
from .types import Coord, GenerateFn, MazeAlgorithm

__all__ = [
    "ALGORITHM_REGISTRY",
    "Cell",
    "Coord",
    "GenerateFn",
    "InvalidDimensionError",
    "Maze",
    "MazeAlgorithm",
    "MazeCell",
    "MazeError",
    "MazeGenerator",
    "NotAdjacentError",
    "NullTemplateError",
    "OutOfRangeError",
    "UnsupportedAlgorithmError",
    "generate_maze",
]
