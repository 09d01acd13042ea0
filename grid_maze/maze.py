"""Maze grid-graph container.

:class:`Maze` owns a fixed ``rows x columns`` arena of
:class:`~grid_maze.models.MazeCell` nodes and exposes bounds-checked
operations to connect, disconnect and freeze them. It is the only thing the
generation algorithms mutate, and they only ever mutate a clone.

Design notes:

* Coordinates are **1-based** in every public method. Row 1 is the bottom
  row, column 1 the left column; "up" means ``row + 1``.
* The arena is a flat list indexed by ``(row - 1) * columns + (column - 1)``.
  Neighbor sets hold :class:`~grid_maze.models.Cell` identities, never node
  references.
* Every edge is bidirectional at every observable point. ``connect_cells`` and
  ``disconnect_cells`` are all-or-nothing: if only one side of an edge could
  be changed the change is rolled back and ``False`` is returned.
* Only orthogonally adjacent pairs may be connected. Asking for anything else
  is a contract violation (:class:`~grid_maze.errors.NotAdjacentError`), while
  being blocked by a frozen cell is an ordinary ``False`` result.
"""

import operator
from numbers import Integral
from typing import FrozenSet, Iterable, Iterator, List, Tuple

from grid_maze.errors import InvalidDimensionError, NotAdjacentError, OutOfRangeError
from grid_maze.models import Cell, MazeCell
from grid_maze.types import Coord


class Maze:
    """Rectangular maze graph.

    Arguments:
        rows: Number of rows, at least 1.
        columns: Number of columns, at least 1.

    Raises:
        InvalidDimensionError: If either dimension is not a positive integer.
    """

    def __init__(self, rows: int, columns: int) -> None:
        for name, value in (("rows", rows), ("columns", columns)):
            if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
                raise InvalidDimensionError(name, value)
        self._rows = operator.index(rows)
        self._columns = operator.index(columns)
        self._cells: List[MazeCell] = [
            MazeCell(row, column)
            for row in range(1, self._rows + 1)
            for column in range(1, self._columns + 1)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    # -------- Queries --------

    def get_cell(self, row: int, column: int) -> MazeCell:
        """Return the node at ``(row, column)``."""
        return self._cells[self._index(row, column)]

    def cells(self) -> Iterator[MazeCell]:
        """Iterate over every node in row-major order (row 1 first)."""
        return iter(self._cells)

    def is_cell_frozen(self, row: int, column: int) -> bool:
        return self.get_cell(row, column).is_frozen

    def are_connected(self, row1: int, column1: int, row2: int, column2: int) -> bool:
        first = self.get_cell(row1, column1)
        self._check_bounds(row2, column2)
        return first.has_neighbor(Cell(row2, column2))

    def get_neighbors(self, row: int, column: int) -> FrozenSet[Cell]:
        """Cells currently connected to ``(row, column)``."""
        return self.get_cell(row, column).neighbors

    def get_adjacent_cells(self, row: int, column: int) -> List[MazeCell]:
        """Every in-bounds orthogonal node, whether connected or not.

        Order is fixed: top (``row + 1``), bottom, right (``column + 1``), left.
        This is the potential-edge enumeration algorithms build on.
        """
        self._check_bounds(row, column)
        adjacent: List[MazeCell] = []
        for cell in Cell(row, column).adjacent():
            if self.in_bounds(cell.row, cell.column):
                adjacent.append(self._cells[self._index(cell.row, cell.column)])
        return adjacent

    def in_bounds(self, row: int, column: int) -> bool:
        return 1 <= row <= self._rows and 1 <= column <= self._columns

    def edge_count(self) -> int:
        """Number of (undirected) edges in the maze."""
        return sum(len(node.neighbors) for node in self._cells) // 2

    # -------- Mutation --------

    def connect_cells(self, row1: int, column1: int, row2: int, column2: int) -> bool:
        """Create an edge between two adjacent cells.

        Returns:
            bool: True if the edge was created; False if either endpoint is
            frozen or the edge already existed.

        Raises:
            OutOfRangeError: If either coordinate is outside the maze.
            NotAdjacentError: If the cells are not orthogonal neighbors.
        """
        first, second = self._edge_endpoints(row1, column1, row2, column2)
        if first.is_frozen or second.is_frozen:
            return False
        added_first = first.add_neighbor(second.cell)
        added_second = second.add_neighbor(first.cell)
        if added_first != added_second:
            if added_first:
                first.remove_neighbor(second.cell)
            if added_second:
                second.remove_neighbor(first.cell)
            return False
        return added_first

    def disconnect_cells(
        self, row1: int, column1: int, row2: int, column2: int
    ) -> bool:
        """Remove the edge between two adjacent cells.

        Returns:
            bool: True if an edge was removed; False if either endpoint is
            frozen or there was no edge.

        Raises:
            OutOfRangeError: If either coordinate is outside the maze.
            NotAdjacentError: If the cells are not orthogonal neighbors.
        """
        first, second = self._edge_endpoints(row1, column1, row2, column2)
        if first.is_frozen or second.is_frozen:
            return False
        removed_first = first.remove_neighbor(second.cell)
        removed_second = second.remove_neighbor(first.cell)
        if removed_first != removed_second:
            if removed_first:
                first.add_neighbor(second.cell)
            if removed_second:
                second.add_neighbor(first.cell)
            return False
        return removed_first

    def freeze_cell(self, row: int, column: int) -> None:
        """Permanently fix the connections of a cell. Idempotent."""
        self.get_cell(row, column).freeze()

    def freeze_and_connect_cells(
        self, positions: Iterable[Coord], connect_path: bool = True
    ) -> int:
        """Freeze a region, optionally wiring it up first.

        When ``connect_path`` is true every pair of listed cells that are
        orthogonal neighbors gets connected before anything is frozen.

        Arguments:
            positions: ``(row, column)`` pairs describing the region.
            connect_path: Connect mutually adjacent cells of the region.

        Returns:
            int: Number of cells that were newly frozen.

        Raises:
            ValueError: If ``positions`` is empty.
            OutOfRangeError: If any position is outside the maze.
        """
        coords: List[Coord] = [(row, column) for row, column in positions]
        if not coords:
            raise ValueError("Cell positions must not be empty")
        for row, column in coords:
            self._check_bounds(row, column)

        if connect_path and len(coords) > 1:
            region = set(coords)
            for row, column in coords:
                for adjacent in self.get_adjacent_cells(row, column):
                    if (adjacent.row, adjacent.column) not in region:
                        continue
                    if not self.are_connected(row, column, adjacent.row, adjacent.column):
                        self.connect_cells(row, column, adjacent.row, adjacent.column)

        newly_frozen = 0
        for row, column in coords:
            node = self.get_cell(row, column)
            if not node.is_frozen:
                node.freeze()
                newly_frozen += 1
        return newly_frozen

    # -------- Copy --------

    def clone(self) -> "Maze":
        """Deep copy with identical dimensions, edges and frozen flags.

        Edges are copied while every new node is still unfrozen; frozen flags
        are applied only afterwards, otherwise frozen nodes would refuse the
        edge copies.
        """
        copy = Maze(self._rows, self._columns)
        # Arenas share the same index layout, so node i maps to node i.
        for index, node in enumerate(self._cells):
            target = copy._cells[index]
            for neighbor in node.neighbors:
                other = copy._cells[copy._index(neighbor.row, neighbor.column)]
                if not target.has_neighbor(other.cell):
                    target.add_neighbor(other.cell)
                    other.add_neighbor(target.cell)
        for index, node in enumerate(self._cells):
            if node.is_frozen:
                copy._cells[index].freeze()
        return copy

    # -------- Internal helpers --------

    def _edge_endpoints(
        self, row1: int, column1: int, row2: int, column2: int
    ) -> Tuple[MazeCell, MazeCell]:
        first = self.get_cell(row1, column1)
        second = self.get_cell(row2, column2)
        if not first.cell.is_adjacent_to(second.cell):
            raise NotAdjacentError(first.cell, second.cell)
        return first, second

    def _index(self, row: int, column: int) -> int:
        self._check_bounds(row, column)
        return (row - 1) * self._columns + (column - 1)

    def _check_bounds(self, row: int, column: int) -> None:
        if not self.in_bounds(row, column):
            raise OutOfRangeError(row, column, self._rows, self._columns)

    def __repr__(self) -> str:
        frozen = sum(1 for node in self._cells if node.is_frozen)
        return (
            f"Maze(rows={self._rows}, columns={self._columns}, "
            f"edges={self.edge_count()}, frozen={frozen})"
        )
