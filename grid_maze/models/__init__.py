"""Cell models.

Re-exports the coordinate value object :class:`Cell` and the mutable grid
node :class:`MazeCell` that the maze container owns. ``Cell`` instances are
the identities stored in neighbor sets; ``MazeCell`` carries the connection
and frozen state for one coordinate.
"""

from .cell import Cell
from .maze_cell import MazeCell

__all__ = [
    "Cell",
    "MazeCell",
]
