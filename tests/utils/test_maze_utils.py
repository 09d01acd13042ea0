# tests/utils/test_maze_utils.py

import numpy as np

from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.maze import (
    bfs_path,
    connected_components,
    edge_set,
    is_perfect,
    iter_edges,
    reachable_from,
    to_wall_array,
    to_wall_grid,
)
from tests.test_utils import make_template


def test_iter_edges_yields_each_edge_once_in_row_major_order() -> None:
    maze = make_template(2, 2, edges=[((2, 1), (2, 2)), ((1, 1), (2, 1)), ((1, 1), (1, 2))])
    assert list(iter_edges(maze)) == [
        (Cell(1, 1), Cell(1, 2)),
        (Cell(1, 1), Cell(2, 1)),
        (Cell(2, 1), Cell(2, 2)),
    ]
    assert edge_set(maze) == {((1, 1), (1, 2)), ((1, 1), (2, 1)), ((2, 1), (2, 2))}


def test_reachable_from() -> None:
    maze = make_template(3, 3, edges=[((1, 1), (1, 2)), ((1, 2), (2, 2))])
    assert reachable_from(maze, 1, 1) == {Cell(1, 1), Cell(1, 2), Cell(2, 2)}
    assert reachable_from(maze, 3, 3) == {Cell(3, 3)}


def test_bfs_path() -> None:
    maze = make_template(
        2, 3, edges=[((1, 1), (2, 1)), ((2, 1), (2, 2)), ((2, 2), (2, 3)), ((2, 3), (1, 3))]
    )
    path = bfs_path(maze, (1, 1), (1, 3))
    assert path == [Cell(1, 1), Cell(2, 1), Cell(2, 2), Cell(2, 3), Cell(1, 3)]
    assert bfs_path(maze, (1, 1), (1, 1)) == [Cell(1, 1)]


def test_bfs_path_unreachable() -> None:
    maze = make_template(2, 2, edges=[((1, 1), (1, 2))])
    assert bfs_path(maze, (1, 1), (2, 2)) == []


def test_connected_components_with_and_without_frozen() -> None:
    maze = make_template(
        1, 4, edges=[((1, 1), (1, 2)), ((1, 2), (1, 3))], frozen=[(1, 2)]
    )
    assert connected_components(maze) == [{Cell(1, 1), Cell(1, 2), Cell(1, 3)}, {Cell(1, 4)}]
    assert connected_components(maze, include_frozen=False) == [
        {Cell(1, 1)},
        {Cell(1, 3)},
        {Cell(1, 4)},
    ]


def test_is_perfect() -> None:
    tree = make_template(2, 2, edges=[((1, 1), (1, 2)), ((1, 1), (2, 1))])
    assert is_perfect(tree)
    tree.connect_cells(1, 2, 2, 2)
    tree.connect_cells(2, 1, 2, 2)
    assert not is_perfect(tree)


def test_is_perfect_ignores_frozen_loops() -> None:
    maze = Maze(3, 3)
    maze.freeze_and_connect_cells([(1, 1), (1, 2), (2, 1), (2, 2)])
    assert is_perfect(maze)


def test_wall_grid_layout() -> None:
    # Two rows, one column: row 2 is drawn above row 1.
    maze = make_template(2, 1, edges=[((1, 1), (2, 1))])
    grid = to_wall_grid(maze)
    assert len(grid) == 3 * 5
    assert grid[(1, 1)]  # cell (2, 1)
    assert grid[(1, 3)]  # cell (1, 1)
    assert grid[(1, 2)]  # passage between them
    assert not grid[(0, 0)]
    assert not grid[(2, 2)]


def test_wall_grid_closed_without_edge() -> None:
    grid = to_wall_grid(Maze(1, 2))
    assert grid[(1, 1)] and grid[(3, 1)]
    assert not grid[(2, 1)]


def test_wall_array_matches_wall_grid() -> None:
    maze = make_template(2, 3, edges=[((1, 1), (1, 2)), ((1, 2), (2, 2))])
    array = to_wall_array(maze)
    assert array.shape == (5, 7)
    assert array.dtype == np.bool_
    for (x, y), is_open in to_wall_grid(maze).items():
        assert array[y, x] == is_open
    assert int(array.sum()) == 6 + 2
