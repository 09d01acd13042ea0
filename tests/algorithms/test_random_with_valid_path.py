# tests/algorithms/test_random_with_valid_path.py

import pytest

from grid_maze.algorithms import random_with_valid_path
from grid_maze.algorithms.random_with_valid_path import random_with_valid_path_algorithm
from grid_maze.maze import Maze
from grid_maze.models import Cell
from grid_maze.utils.maze import connected_components, edge_set, is_perfect
from tests.test_utils import (
    free_cell_count,
    free_edge_count,
    make_showcase_template,
    make_template,
)


def test_redundancy_probability_is_ten_percent() -> None:
    assert random_with_valid_path.REDUNDANT_EDGE_PROBABILITY == 0.1


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_open_grid_is_connected(seed: int) -> None:
    maze = random_with_valid_path_algorithm(Maze(7, 7), seed)
    assert len(connected_components(maze)) == 1
    assert maze.edge_count() >= 48


def test_reachability_never_decreases() -> None:
    template = make_template(
        5,
        5,
        edges=[((1, 1), (1, 2)), ((1, 2), (2, 2)), ((2, 2), (2, 1)), ((2, 1), (1, 1))],
        frozen=[(4, 4)],
    )
    maze = random_with_valid_path_algorithm(template, 8)

    components_after = connected_components(maze)
    for before in connected_components(template):
        assert any(before <= after for after in components_after)
    assert edge_set(template) <= edge_set(maze)


def test_frozen_cells_stay_out() -> None:
    maze = random_with_valid_path_algorithm(make_showcase_template(), 2)
    # Every free cell ends up in one region; frozen cells gain nothing.
    assert len(connected_components(maze, include_frozen=False)) == 1
    assert maze.get_neighbors(4, 4) == frozenset({Cell(4, 5), Cell(5, 4)})


def test_without_redundant_edges_result_is_a_tree(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(random_with_valid_path, "REDUNDANT_EDGE_PROBABILITY", 0.0)
    maze = random_with_valid_path_algorithm(Maze(6, 6), 5)
    assert maze.edge_count() == 35
    assert is_perfect(maze)


def test_always_redundant_connects_every_free_edge(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(random_with_valid_path, "REDUNDANT_EDGE_PROBABILITY", 1.0)
    template = make_template(4, 5, frozen=[(2, 2)])
    maze = random_with_valid_path_algorithm(template, 5)
    # 4x5 has 4*4 + 5*3 = 31 potential edges; (2, 2) touches 4 of them.
    assert free_edge_count(maze) == 27
    assert maze.get_neighbors(2, 2) == frozenset()
    assert free_cell_count(maze) == 19
