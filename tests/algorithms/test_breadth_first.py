# tests/algorithms/test_breadth_first.py

import pytest

from grid_maze.algorithms import breadth_first_algorithm
from grid_maze.maze import Maze
from grid_maze.utils.maze import bfs_path


@pytest.mark.parametrize("seed", [0, 4, 31])
def test_tree_paths_from_seed_are_shortest(seed: int) -> None:
    # Expanding level by level from (1, 1) on an open grid means every cell is
    # reached along a shortest grid path.
    maze = breadth_first_algorithm(Maze(6, 5), seed)
    for node in maze.cells():
        path = bfs_path(maze, (1, 1), (node.row, node.column))
        assert len(path) - 1 == (node.row - 1) + (node.column - 1)


def test_seed_cell_is_fully_expanded() -> None:
    maze = breadth_first_algorithm(Maze(3, 3), 2)
    # The seed connects to all of its unvisited neighbors in one step.
    assert maze.are_connected(1, 1, 2, 1)
    assert maze.are_connected(1, 1, 1, 2)
