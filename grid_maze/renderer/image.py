"""Pillow renderer for mazes.

Consumes only the read-only surface of :class:`~grid_maze.maze.Maze`:
``rows``, ``columns``, ``get_cell``, ``is_cell_frozen`` and ``get_neighbors``.

Two views are available:

* :func:`render_maze` draws the graph: one colored square per cell (frozen
  cells highlighted), optional ``(row,col)`` labels and a line between the
  centers of every connected pair. Cell ``(1, 1)`` is at the bottom left.
* :func:`render_wall_grid` draws the classic block maze from
  :func:`grid_maze.utils.maze.to_wall_array` (white floor, black walls).

:func:`save_maze` writes the graph drawing to disk, delegating
``.svg`` paths to :func:`grid_maze.renderer.svg.render_svg`.
"""

import logging
import os
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw

from grid_maze.maze import Maze
from grid_maze.renderer.config import DEFAULT_RENDER_CONFIG, RenderConfig
from grid_maze.renderer.svg import render_svg
from grid_maze.utils.maze import to_wall_array

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".svg")


def render_maze(maze: Maze, config: Optional[RenderConfig] = None) -> Image.Image:
    """Draw cells, frozen markers, labels and passages of ``maze``."""
    config = config or DEFAULT_RENDER_CONFIG
    size = config.cell_size

    image = Image.new("RGB", config.canvas_size(maze), config.background)
    draw = ImageDraw.Draw(image)

    for row in range(1, maze.rows + 1):
        for column in range(1, maze.columns + 1):
            x, y = config.cell_origin(maze, row, column)
            box = (x, y, x + size, y + size)
            if maze.is_cell_frozen(row, column):
                draw.rectangle(
                    box,
                    fill=config.frozen_fill,
                    outline=config.frozen_border,
                    width=config.frozen_border_width,
                )
            else:
                draw.rectangle(box, fill=config.cell_fill, outline=config.border, width=1)
            if config.show_labels:
                text = f"({row},{column})"
                left, top, right, bottom = draw.textbbox((0, 0), text)
                cx, cy = config.cell_center(maze, row, column)
                draw.text(
                    (cx - (right - left) // 2, cy - (bottom - top) // 2),
                    text,
                    fill=config.label,
                )

    # Passages go on top of the cells; each edge is drawn once, from its
    # lower endpoint.
    for row in range(1, maze.rows + 1):
        for column in range(1, maze.columns + 1):
            for neighbor in maze.get_neighbors(row, column):
                if (row, column) < (neighbor.row, neighbor.column):
                    draw.line(
                        [
                            config.cell_center(maze, row, column),
                            config.cell_center(maze, neighbor.row, neighbor.column),
                        ],
                        fill=config.path,
                        width=config.path_width,
                    )

    return image


def render_wall_grid(maze: Maze, tile_size: int = 8) -> Image.Image:
    """Block rendering: floor and open passages white, walls black."""
    if tile_size < 1:
        raise ValueError(f"tile_size must be positive, got {tile_size}")
    tiles = np.where(to_wall_array(maze), 255, 0).astype(np.uint8)
    pixels = np.kron(tiles, np.ones((tile_size, tile_size), dtype=np.uint8))
    return Image.fromarray(pixels).convert("RGB")


def save_maze(
    maze: Maze, output_path: str, config: Optional[RenderConfig] = None
) -> str:
    """Render ``maze`` and write it to ``output_path``.

    The format follows the extension (case-insensitive): ``.png`` writes PNG,
    ``.jpg``/``.jpeg`` JPEG and ``.svg`` SVG. Missing parent directories are
    created.

    Returns:
        str: The path written.

    Raises:
        ValueError: If the path is empty or its extension is not supported.
    """
    if not output_path:
        raise ValueError("Output path cannot be empty")
    extension = os.path.splitext(output_path)[1].lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unsupported image extension {extension!r} for {output_path}; "
            f"expected one of {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if extension == ".svg":
        render_svg(maze, config).save_svg(output_path)
    elif extension == ".png":
        render_maze(maze, config).save(output_path, format="PNG")
    else:
        render_maze(maze, config).save(output_path, format="JPEG", quality=90)
    logger.debug("Saved %dx%d maze to %s", maze.rows, maze.columns, output_path)
    return output_path
