"""Maze cell (grid node).

A :class:`MazeCell` pairs a :class:`~grid_maze.models.cell.Cell` identity with
the mutable set of neighbor identities it is connected to and a frozen flag.
Neighbors are stored as ``Cell`` values rather than node references, so the
maze owns every node and no reference cycles exist between them.

Once frozen, the live neighbor set never changes again and a persistent
snapshot (``pyrsistent.PSet``) of it is kept for later inspection.
"""

from typing import FrozenSet, Optional, Set

from pyrsistent import PSet, pset

from grid_maze.models.cell import Cell


class MazeCell:
    """Grid node owned by a :class:`~grid_maze.maze.Maze`.

    Attributes:
        cell: Coordinate identity of the node.
    """

    __slots__ = ("cell", "_neighbors", "_frozen_neighbors")

    def __init__(self, row: int, column: int) -> None:
        self.cell = Cell(row, column)
        self._neighbors: Set[Cell] = set()
        self._frozen_neighbors: Optional[PSet[Cell]] = None

    @property
    def row(self) -> int:
        return self.cell.row

    @property
    def column(self) -> int:
        return self.cell.column

    @property
    def is_frozen(self) -> bool:
        return self._frozen_neighbors is not None

    @property
    def neighbors(self) -> FrozenSet[Cell]:
        """Read-only view of the currently connected neighbor identities."""
        return frozenset(self._neighbors)

    @property
    def frozen_neighbors(self) -> PSet[Cell]:
        """Neighbors captured at freeze time, or the live set if not frozen."""
        if self._frozen_neighbors is None:
            return pset(self._neighbors)
        return self._frozen_neighbors

    def has_neighbor(self, other: Cell) -> bool:
        return other in self._neighbors

    def freeze(self) -> None:
        """Freeze the node; repeated calls keep the first snapshot."""
        if self._frozen_neighbors is None:
            self._frozen_neighbors = pset(self._neighbors)

    def add_neighbor(self, other: Cell) -> bool:
        """Add ``other`` to the neighbor set.

        Returns False if the node is frozen or ``other`` is already present.
        """
        if self.is_frozen or other in self._neighbors:
            return False
        self._neighbors.add(other)
        return True

    def remove_neighbor(self, other: Cell) -> bool:
        """Remove ``other`` from the neighbor set.

        Returns False if the node is frozen or ``other`` is not present.
        """
        if self.is_frozen or other not in self._neighbors:
            return False
        self._neighbors.remove(other)
        return True

    def __repr__(self) -> str:
        flag = ", frozen" if self.is_frozen else ""
        return f"MazeCell({self.row}, {self.column}, neighbors={len(self._neighbors)}{flag})"
