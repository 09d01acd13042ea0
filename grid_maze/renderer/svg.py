"""SVG renderer for mazes.

Draws the same picture as :func:`grid_maze.renderer.image.render_maze`
(cells, frozen markers, optional labels, passages between centers) as vector
shapes with ``drawsvg``.
"""

from typing import Optional

import drawsvg as draw

from grid_maze.maze import Maze
from grid_maze.renderer.config import DEFAULT_RENDER_CONFIG, RGB, RenderConfig


def _color(rgb: RGB) -> str:
    return "rgb({},{},{})".format(*rgb)


def render_svg(maze: Maze, config: Optional[RenderConfig] = None) -> draw.Drawing:
    """Build a ``drawsvg.Drawing`` of ``maze``; call ``save_svg`` to write it."""
    config = config or DEFAULT_RENDER_CONFIG
    size = config.cell_size
    width, height = config.canvas_size(maze)

    drawing = draw.Drawing(width, height)
    drawing.append(draw.Rectangle(0, 0, width, height, fill=_color(config.background)))

    for row in range(1, maze.rows + 1):
        for column in range(1, maze.columns + 1):
            x, y = config.cell_origin(maze, row, column)
            if maze.is_cell_frozen(row, column):
                fill, stroke, stroke_width = (
                    config.frozen_fill,
                    config.frozen_border,
                    config.frozen_border_width,
                )
            else:
                fill, stroke, stroke_width = config.cell_fill, config.border, 1
            drawing.append(
                draw.Rectangle(
                    x,
                    y,
                    size,
                    size,
                    fill=_color(fill),
                    stroke=_color(stroke),
                    stroke_width=stroke_width,
                )
            )
            if config.show_labels:
                cx, cy = config.cell_center(maze, row, column)
                drawing.append(
                    draw.Text(
                        f"({row},{column})",
                        12,
                        cx,
                        cy,
                        fill=_color(config.label),
                        text_anchor="middle",
                        dominant_baseline="central",
                    )
                )

    for row in range(1, maze.rows + 1):
        for column in range(1, maze.columns + 1):
            for neighbor in maze.get_neighbors(row, column):
                if (row, column) < (neighbor.row, neighbor.column):
                    x1, y1 = config.cell_center(maze, row, column)
                    x2, y2 = config.cell_center(maze, neighbor.row, neighbor.column)
                    drawing.append(
                        draw.Line(
                            x1,
                            y1,
                            x2,
                            y2,
                            stroke=_color(config.path),
                            stroke_width=config.path_width,
                            fill="none",
                        )
                    )

    return drawing
