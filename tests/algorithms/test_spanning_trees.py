# tests/algorithms/test_spanning_trees.py

import pytest

from grid_maze.generator import ALGORITHM_REGISTRY
from grid_maze.maze import Maze
from grid_maze.types import MazeAlgorithm
from grid_maze.utils.maze import connected_components, is_perfect
from tests.test_utils import (
    FROZEN_AWARE_TREE_ALGORITHMS,
    REGION_TREE_ALGORITHMS,
    TREE_ALGORITHMS,
    free_cell_count,
    free_edge_count,
    make_template,
)


@pytest.mark.parametrize("algorithm", TREE_ALGORITHMS)
@pytest.mark.parametrize("rows, columns", [(1, 1), (1, 7), (7, 1), (5, 5), (6, 9), (12, 4)])
@pytest.mark.parametrize("seed", [0, 1, 2024])
def test_open_grid_becomes_spanning_tree(
    algorithm: MazeAlgorithm, rows: int, columns: int, seed: int
) -> None:
    maze = ALGORITHM_REGISTRY[algorithm](Maze(rows, columns), seed)
    assert maze.edge_count() == rows * columns - 1
    assert len(connected_components(maze)) == 1
    assert is_perfect(maze)


@pytest.mark.parametrize("algorithm", FROZEN_AWARE_TREE_ALGORITHMS)
@pytest.mark.parametrize("seed", [0, 17])
def test_spanning_tree_around_frozen_block(algorithm: MazeAlgorithm, seed: int) -> None:
    # A frozen, unwired 2x2 block in the middle leaves one ring-shaped region.
    template = make_template(6, 6, frozen=[(3, 3), (3, 4), (4, 3), (4, 4)])
    maze = ALGORITHM_REGISTRY[algorithm](template, seed)

    assert free_edge_count(maze) == free_cell_count(maze) - 1
    assert len(connected_components(maze, include_frozen=False)) == 1
    assert maze.edge_count() == free_edge_count(maze)


@pytest.mark.parametrize("algorithm", REGION_TREE_ALGORITHMS)
def test_every_region_gets_its_own_tree(algorithm: MazeAlgorithm) -> None:
    # A frozen column splits the grid into a left and a right region.
    template = make_template(3, 5, frozen=[(1, 3), (2, 3), (3, 3)])
    maze = ALGORITHM_REGISTRY[algorithm](template, 9)

    regions = connected_components(maze, include_frozen=False)
    assert len(regions) == 2
    assert sorted(len(region) for region in regions) == [6, 6]
    assert free_edge_count(maze) == 10
    assert is_perfect(maze)
