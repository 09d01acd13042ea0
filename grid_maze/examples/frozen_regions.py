"""Frozen-region showcase.

Builds a 16x16 template with a few hand-made passages and two frozen regions
(a 2x2 block in the middle and an L-shaped corridor in the bottom-left
corner), then runs every algorithm on that same template and saves one image
per algorithm.

Run with ``python -m grid_maze.examples.frozen_regions [output_dir] [seed]``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, List, Optional

from grid_maze.generator import MazeGenerator
from grid_maze.maze import Maze
from grid_maze.renderer import RenderConfig, save_maze
from grid_maze.types import Coord, MazeAlgorithm

logger = logging.getLogger(__name__)

DEFAULT_SEED = 54871
DEFAULT_OUTPUT_DIR = os.path.join("bin", "mazes")

CENTER_BLOCK: List[Coord] = [(8, 8), (8, 9), (9, 8), (9, 9)]
CORNER_CORRIDOR: List[Coord] = [(1, 1), (3, 1), (2, 1), (2, 2), (2, 3), (1, 2)]


def build_template(rows: int = 16, columns: int = 16) -> Maze:
    """Template with loose passages and two frozen regions."""
    maze = Maze(rows, columns)
    maze.connect_cells(11, 11, 10, 11)
    maze.connect_cells(3, 1, 4, 1)
    # (9, 9) is part of the center block; this passage freezes along with it.
    maze.connect_cells(9, 9, 9, 10)

    maze.freeze_and_connect_cells(CENTER_BLOCK)
    maze.freeze_and_connect_cells(CORNER_CORRIDOR)
    return maze


def render_all(
    output_dir: str = DEFAULT_OUTPUT_DIR,
    seed: int = DEFAULT_SEED,
    template: Optional[Maze] = None,
    config: Optional[RenderConfig] = None,
) -> Dict[MazeAlgorithm, str]:
    """Generate one maze per algorithm from the same template and save each.

    Returns:
        Dict[MazeAlgorithm, str]: Image path written for every algorithm.
    """
    template = template or build_template()
    written: Dict[MazeAlgorithm, str] = {}
    for algorithm in MazeAlgorithm:
        logger.info("Generating maze with algorithm: %s", algorithm)
        maze = MazeGenerator(algorithm, seed).generate(template)
        path = os.path.join(output_dir, f"{algorithm}.png")
        written[algorithm] = save_maze(maze, path, config)
        logger.info("Saved: %s", path)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    output_dir = args[0] if args else DEFAULT_OUTPUT_DIR
    seed = int(args[1]) if len(args) > 1 else DEFAULT_SEED
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    render_all(output_dir, seed)
    logger.info("Done. All maze visualizations saved in %s", output_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
