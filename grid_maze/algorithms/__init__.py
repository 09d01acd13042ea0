"""Maze generation algorithms.

Every algorithm is a plain :data:`~grid_maze.types.GenerateFn`: it receives a
template maze and an integer seed and returns a *new* maze. The contract all
of them share:

* The template is never mutated; each algorithm clones it first.
* The same ``(template, seed)`` always produces the same edge set. Cells and
  edges are enumerated in a fixed order; only choices between alternatives
  come from ``random.Random(seed)``.
* No edge touching a frozen cell is ever added or removed. Generation works on
  the non-frozen induced subgraph and leaves frozen regions as authored.

Pick one by name through :mod:`grid_maze.generator`.
"""

from .binary_tree import binary_tree_algorithm
from .breadth_first import breadth_first_algorithm
from .depth_first import depth_first_algorithm
from .hunt_and_kill import hunt_and_kill_algorithm
from .kruskal import kruskal_algorithm
from .prim import prim_algorithm
from .random_with_valid_path import (
    REDUNDANT_EDGE_PROBABILITY,
    random_with_valid_path_algorithm,
)
from .recursive_division import recursive_division_algorithm

__all__ = [
    "REDUNDANT_EDGE_PROBABILITY",
    "binary_tree_algorithm",
    "breadth_first_algorithm",
    "depth_first_algorithm",
    "hunt_and_kill_algorithm",
    "kruskal_algorithm",
    "prim_algorithm",
    "random_with_valid_path_algorithm",
    "recursive_division_algorithm",
]
