# tests/algorithms/test_kruskal.py

from grid_maze.algorithms import kruskal_algorithm
from grid_maze.utils.maze import connected_components, edge_set, is_perfect
from tests.test_utils import make_template


def test_existing_edges_are_kept_and_not_closed_into_loops() -> None:
    template = make_template(
        4, 4, edges=[((1, 1), (1, 2)), ((1, 2), (2, 2)), ((3, 3), (3, 4))]
    )
    maze = kruskal_algorithm(template, 21)
    assert edge_set(template) <= edge_set(maze)
    assert maze.edge_count() == 15
    assert is_perfect(maze)


def test_frozen_region_counts_as_one_set() -> None:
    # The frozen pair is wired internally and to nothing else; free cells
    # around it still form a single tree.
    template = make_template(3, 3, edges=[((2, 2), (2, 3))], frozen=[(2, 2), (2, 3)])
    maze = kruskal_algorithm(template, 4)
    regions = connected_components(maze, include_frozen=False)
    assert len(regions) == 1
    assert maze.edge_count() == 1 + (7 - 1)
