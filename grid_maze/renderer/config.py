"""Render configuration shared by the raster and vector renderers.

Both renderers place cell ``(1, 1)`` at the bottom left and use the same
geometry, so a PNG and an SVG of one maze share one coordinate layout.
"""

from dataclasses import dataclass
from typing import Tuple

from grid_maze.maze import Maze

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class RenderConfig:
    """Rendering options.

    Attributes:
        cell_size: Side of a cell square in pixels.
        padding: Blank margin around the grid in pixels.
        show_labels: Draw ``(row,col)`` in each cell.
        background: Canvas color.
        cell_fill: Fill of non-frozen cells.
        frozen_fill: Fill of frozen cells.
        border: Outline of non-frozen cells.
        frozen_border: Outline of frozen cells.
        frozen_border_width: Outline width of frozen cells.
        path: Color of the lines joining connected cells.
        path_width: Width of those lines.
        label: Text color.
    """

    cell_size: int = 50
    padding: int = 20
    show_labels: bool = True
    background: RGB = (255, 255, 255)
    cell_fill: RGB = (173, 216, 230)
    frozen_fill: RGB = (255, 0, 0)
    border: RGB = (0, 0, 0)
    frozen_border: RGB = (139, 0, 0)
    frozen_border_width: int = 3
    path: RGB = (0, 128, 0)
    path_width: int = 3
    label: RGB = (0, 0, 0)

    def canvas_size(self, maze: Maze) -> Tuple[int, int]:
        """``(width, height)`` of the drawing in pixels."""
        return (
            maze.columns * self.cell_size + 2 * self.padding,
            maze.rows * self.cell_size + 2 * self.padding,
        )

    def cell_origin(self, maze: Maze, row: int, column: int) -> Tuple[int, int]:
        """Top-left corner of a cell. Screen y grows downward; row 1 is the bottom row."""
        return (
            self.padding + (column - 1) * self.cell_size,
            self.padding + (maze.rows - row) * self.cell_size,
        )

    def cell_center(self, maze: Maze, row: int, column: int) -> Tuple[int, int]:
        x, y = self.cell_origin(maze, row, column)
        return x + self.cell_size // 2, y + self.cell_size // 2


DEFAULT_RENDER_CONFIG = RenderConfig()
