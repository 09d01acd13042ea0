# tests/utils/test_grid_utils.py

import pytest

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.grid import free_edges, non_frozen_adjacent, non_frozen_cells
from tests.test_utils import make_template


def test_free_edges_point_up_by_default() -> None:
    maze = make_template(2, 2, frozen=[(1, 2)])
    assert free_edges(maze) == [
        (Cell(1, 1), Cell(2, 1)),
        (Cell(2, 1), Cell(2, 2)),
    ]


def test_free_edges_downward() -> None:
    maze = make_template(2, 2, frozen=[(1, 2)])
    assert free_edges(maze, downward=True) == [
        (Cell(2, 1), Cell(2, 2)),
        (Cell(2, 1), Cell(1, 1)),
    ]


@pytest.mark.parametrize("downward", [False, True])
def test_free_edges_cover_every_potential_edge_once(downward: bool) -> None:
    maze = Maze(3, 4)
    edges = free_edges(maze, downward=downward)
    undirected = {frozenset(edge) for edge in edges}
    assert len(edges) == len(undirected) == 3 * 3 + 2 * 4
    assert undirected == {frozenset(edge) for edge in free_edges(maze, not downward)}


def test_non_frozen_helpers() -> None:
    maze = make_template(2, 2, frozen=[(2, 1)])
    assert non_frozen_cells(maze) == [Cell(1, 1), Cell(1, 2), Cell(2, 2)]
    assert non_frozen_adjacent(maze, Cell(1, 1)) == [Cell(1, 2)]
