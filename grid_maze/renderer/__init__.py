"""Rendering subpackage.

Turns a finished (or template) maze into a Pillow image or an SVG drawing.
The renderers only read the maze: bounds, frozen flags and neighbor sets.
See :mod:`grid_maze.renderer.image` for the raster routines and
:func:`save_maze`, :mod:`grid_maze.renderer.svg` for the vector one and
:class:`RenderConfig` for colors and sizes.
"""

from .config import DEFAULT_RENDER_CONFIG, RenderConfig
from .image import SUPPORTED_EXTENSIONS, render_maze, render_wall_grid, save_maze
from .svg import render_svg

__all__ = [
    "DEFAULT_RENDER_CONFIG",
    "RenderConfig",
    "SUPPORTED_EXTENSIONS",
    "render_maze",
    "render_svg",
    "render_wall_grid",
    "save_maze",
]
