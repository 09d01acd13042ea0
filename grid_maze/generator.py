"""Algorithm dispatcher.

Maps a :class:`~grid_maze.types.MazeAlgorithm` selector to its generation
function through :data:`ALGORITHM_REGISTRY` and forwards ``generate`` to it
with a fixed seed.

Example:

    >>> from grid_maze import Maze, MazeAlgorithm, MazeGenerator
    >>> template = Maze(5, 5)
    >>> maze = MazeGenerator(MazeAlgorithm.BINARY_TREE, seed=1).generate(template)
    >>> maze.edge_count()
    24
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from grid_maze.algorithms import (
    binary_tree_algorithm,
    breadth_first_algorithm,
    depth_first_algorithm,
    hunt_and_kill_algorithm,
    kruskal_algorithm,
    prim_algorithm,
    random_with_valid_path_algorithm,
    recursive_division_algorithm,
)
from grid_maze.errors import NullTemplateError, UnsupportedAlgorithmError
from grid_maze.maze import Maze
from grid_maze.types import GenerateFn, MazeAlgorithm

logger = logging.getLogger(__name__)


ALGORITHM_REGISTRY: Dict[MazeAlgorithm, GenerateFn] = {
    MazeAlgorithm.BINARY_TREE: binary_tree_algorithm,
    MazeAlgorithm.PRIM: prim_algorithm,
    MazeAlgorithm.KRUSKAL: kruskal_algorithm,
    MazeAlgorithm.DEPTH_FIRST: depth_first_algorithm,
    MazeAlgorithm.BREADTH_FIRST: breadth_first_algorithm,
    MazeAlgorithm.HUNT_AND_KILL: hunt_and_kill_algorithm,
    MazeAlgorithm.RECURSIVE_DIVISION: recursive_division_algorithm,
    MazeAlgorithm.RANDOM_WITH_VALID_PATH: random_with_valid_path_algorithm,
}
"""Selector -> generation function. One entry per :class:`MazeAlgorithm`."""


def resolve_algorithm(algorithm: Union[MazeAlgorithm, str]) -> MazeAlgorithm:
    """Normalize a selector, accepting the enum or its string value.

    Raises:
        UnsupportedAlgorithmError: If the selector is unknown or has no
            registered implementation.
    """
    try:
        selector = MazeAlgorithm(algorithm)
    except (TypeError, ValueError) as exc:
        raise UnsupportedAlgorithmError(algorithm) from exc
    if selector not in ALGORITHM_REGISTRY:
        raise UnsupportedAlgorithmError(algorithm)
    return selector


@dataclass(frozen=True)
class MazeGenerator:
    """Generation configuration: which algorithm, with which seed.

    Attributes:
        algorithm: Selector of the algorithm to run.
        seed: Seed handed to the algorithm on every ``generate`` call.
    """

    algorithm: MazeAlgorithm
    seed: int

    def __post_init__(self) -> None:
        # Frozen dataclass; bypass __setattr__ to store the normalized selector.
        object.__setattr__(self, "algorithm", resolve_algorithm(self.algorithm))

    def generate(self, template: Optional[Maze]) -> Maze:
        """Run the configured algorithm on ``template`` and return a new maze.

        Raises:
            NullTemplateError: If ``template`` is None.
        """
        if template is None:
            raise NullTemplateError()
        logger.debug(
            "Generating %dx%d maze with %s (seed=%d)",
            template.rows,
            template.columns,
            self.algorithm,
            self.seed,
        )
        maze = ALGORITHM_REGISTRY[self.algorithm](template, self.seed)
        logger.debug("%s produced %d edges", self.algorithm, maze.edge_count())
        return maze


def generate_maze(
    template: Optional[Maze], algorithm: Union[MazeAlgorithm, str], seed: int
) -> Maze:
    """One-shot helper: ``MazeGenerator(algorithm, seed).generate(template)``."""
    return MazeGenerator(resolve_algorithm(algorithm), seed).generate(
        template
    )
