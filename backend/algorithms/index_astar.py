"""Index-based storage for :class:`AStar`.

Open/closed membership and parent pointers live in dense arrays of length
``width * height`` addressed by ``idx(x, y) = width * y + x``.  The arrays are
allocated in full at the start of every search; cells are never rebuilt from a
bare index, the score tables keep the :class:`Cell` values.
"""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from backend.algorithms.grid_astar import AStar, Cell, Size, cell_index


class IndexNodeSet:
    def __init__(self, size: Size):
        self._w = size.w
        self._flags = np.zeros(size.area, dtype=bool)
        self._count = 0

    def _idx(self, cell: Cell) -> int:
        return cell_index(self._w, cell)

    def insert(self, cell: Cell) -> bool:
        i = self._idx(cell)
        if self._flags[i]:
            return False
        self._flags[i] = True
        self._count += 1
        return True

    def remove(self, cell: Cell) -> bool:
        i = self._idx(cell)
        if not self._flags[i]:
            return False
        self._flags[i] = False
        self._count -= 1
        return True

    def __contains__(self, cell: Cell) -> bool:
        return bool(self._flags[self._idx(cell)])

    def __len__(self) -> int:
        return self._count


class IndexRouteMap:
    def __init__(self, size: Size):
        self._w = size.w
        self._parents: List[Optional[Cell]] = [None] * size.area

    def _idx(self, cell: Cell) -> int:
        return cell_index(self._w, cell)

    def __setitem__(self, cell: Cell, parent: Cell):
        self._parents[self._idx(cell)] = parent

    def get(self, cell: Cell) -> Optional[Cell]:
        return self._parents[self._idx(cell)]


class IndexAStar(AStar):
    """Memory is always proportional to the full grid area."""

    name = "index"

    def _new_node_set(self) -> IndexNodeSet:
        return IndexNodeSet(self.size)

    def _new_route_map(self) -> IndexRouteMap:
        return IndexRouteMap(self.size)
