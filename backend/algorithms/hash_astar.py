"""Hash-based storage for :class:`AStar`: open/closed sets and route table keyed by cell."""
from __future__ import annotations

from typing import Dict, Optional, Set

from backend.algorithms.grid_astar import AStar, Cell


class HashNodeSet:
    def __init__(self):
        self._cells: Set[Cell] = set()

    def insert(self, cell: Cell) -> bool:
        if cell in self._cells:
            return False
        self._cells.add(cell)
        return True

    def remove(self, cell: Cell) -> bool:
        if cell in self._cells:
            self._cells.remove(cell)
            return True
        return False

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)


class HashRouteMap:
    def __init__(self):
        self._parents: Dict[Cell, Cell] = {}

    def __setitem__(self, cell: Cell, parent: Cell):
        self._parents[cell] = parent

    def get(self, cell: Cell) -> Optional[Cell]:
        return self._parents.get(cell)


class HashAStar(AStar):
    """Memory grows with the number of cells the search touches."""

    name = "hash"

    def _new_node_set(self) -> HashNodeSet:
        return HashNodeSet()

    def _new_route_map(self) -> HashRouteMap:
        return HashRouteMap()
