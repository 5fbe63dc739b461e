"""A* search on a 2-D grid with random per-cell terrain costs (8-neighbour connectivity).

The search loop lives in :class:`AStar` and is shared by every storage strategy.
A strategy only decides how the open/closed sets and the route (parent) table are
stored; the score tables are always :class:`ScoreTable` instances.

Cost model
----------
* Terrain costs are integers in ``[0, 100)``, one per cell, sampled once per engine.
* ``tentative = g(neighbour) * 10 + int(10 * euclid(current, neighbour))`` where the
  g-score lookup defaults to 0 for cells without an entry.
* ``h(a, b) = |dx| + |dy| + terrain(a) + terrain(b)``.  This overestimates, so the
  search is a greedy best-first search rather than optimal A*.

Returned paths run from the goal back to the start (inclusive).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

_logger = logging.getLogger(__name__)

MAX_TERRAIN_COST = 100


class Cell(NamedTuple):
    x: int
    y: int

    def dist(self, other: "Cell") -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


@dataclass(frozen=True)
class Size:
    w: int
    h: int

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"grid size must be positive, got {self.w}x{self.h}")

    @property
    def area(self) -> int:
        return self.w * self.h


def cell_index(width: int, cell: Cell) -> int:
    """Row-major linear index of ``cell`` on a grid ``width`` cells wide."""
    return width * cell.y + cell.x


# ---------------------------------------------------------------------------
# Score table: list of (cell, score) kept in stable ascending order
# ---------------------------------------------------------------------------

class ScoreTable:
    """Ordered list of ``(cell, score)`` pairs.

    Insertion goes before the first entry with a strictly greater score, so equal
    scores keep their insertion order.  Entries are never deduplicated: lookups and
    removals act on the first entry for a cell, which is also its lowest score.
    All three operations are linear scans.
    """

    def __init__(self):
        self._entries: List[Tuple[Cell, int]] = []

    def insert_score(self, cell: Cell, score: int) -> None:
        for i, (_, existing) in enumerate(self._entries):
            if score < existing:
                self._entries.insert(i, (cell, score))
                return
        self._entries.append((cell, score))

    def remove_score(self, cell: Cell) -> bool:
        for i, (c, _) in enumerate(self._entries):
            if c == cell:
                del self._entries[i]
                return True
        return False

    def get_score(self, cell: Cell) -> Optional[int]:
        for c, score in self._entries:
            if c == cell:
                return score
        return None

    def first(self) -> Cell:
        return self._entries[0][0]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class AStar:
    """Grid model plus the search loop.

    Subclasses provide storage through :meth:`_new_node_set` and
    :meth:`_new_route_map`.  Node sets must support ``insert`` (returning True when
    the cell was not yet a member), ``remove``, ``in`` and ``len``; route maps
    support item assignment and ``get``.
    """

    name = "astar"

    def __init__(
        self,
        size: Size,
        start: Cell,
        end: Cell,
        costs: Optional[Sequence[int]] = None,
        seed: Optional[int] = None,
    ):
        self.size = size
        self.start = Cell(*start)
        self.end = Cell(*end)
        if costs is None:
            rng = np.random.default_rng(seed)
            self._grid = rng.integers(0, MAX_TERRAIN_COST, size=size.area).tolist()
        else:
            self._grid = []
            for c in costs:
                if int(c) != c:
                    raise ValueError(f"terrain cost {c!r} is not an integer")
                self._grid.append(int(c))
            if len(self._grid) != size.area:
                raise ValueError(f"expected {size.area} terrain costs, got {len(self._grid)}")
            if any(c < 0 for c in self._grid):
                raise ValueError("terrain costs must be non-negative")

    @property
    def costs(self) -> Tuple[int, ...]:
        return tuple(self._grid)

    # --------------------------------------------------
    def _new_node_set(self):
        raise NotImplementedError

    def _new_route_map(self):
        raise NotImplementedError

    # --------------------------------------------------
    def node_idx(self, cell: Cell) -> int:
        return cell_index(self.size.w, cell)

    def terrain(self, cell: Cell) -> int:
        return self._grid[self.node_idx(cell)]

    def estimate_cost(self, a: Cell, b: Cell) -> int:
        return abs(a.x - b.x) + abs(a.y - b.y) + self.terrain(a) + self.terrain(b)

    def neighbors(self, cell: Cell) -> List[Cell]:
        out = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                x, y = cell.x + dx, cell.y + dy
                if 0 <= x < self.size.w and 0 <= y < self.size.h:
                    out.append(Cell(x, y))
        return out

    # --------------------------------------------------
    def calc(self) -> Optional[List[Cell]]:
        """Run the search. Returns the path goal-first, or None when no path exists."""
        set_open = self._new_node_set()
        set_closed = self._new_node_set()
        route = self._new_route_map()
        gscore = ScoreTable()
        fscore = ScoreTable()

        set_open.insert(self.start)
        gscore.insert_score(self.start, 0)
        fscore.insert_score(self.start, self.estimate_cost(self.start, self.end))

        while len(set_open) != 0:
            current = self._lowest(set_open, fscore)
            if current == self.end:
                path = self._reconstruct(route, current)
                _logger.debug("%s: path of %d cells from %s to %s", self.name, len(path), self.start, self.end)
                return path

            set_open.remove(current)
            gscore.remove_score(current)
            fscore.remove_score(current)
            set_closed.insert(current)

            for neighbor in self.neighbors(current):
                if neighbor in set_closed:
                    continue
                prior = gscore.get_score(neighbor) or 0
                tentative = prior * 10 + int(current.dist(neighbor) * 10)
                if not set_open.insert(neighbor):
                    if tentative >= (gscore.get_score(neighbor) or 0):
                        continue
                route[neighbor] = current
                gscore.insert_score(neighbor, tentative)
                fscore.insert_score(neighbor, tentative + self.estimate_cost(neighbor, self.end))

        _logger.debug("%s: no path from %s to %s", self.name, self.start, self.end)
        return None

    @staticmethod
    def _lowest(set_open, fscore: ScoreTable) -> Cell:
        # falls back to the head of the table when no entry is still open
        for cell, _ in fscore:
            if cell in set_open:
                return cell
        return fscore.first()

    @staticmethod
    def _reconstruct(route, cell: Cell) -> List[Cell]:
        path = [cell]
        parent = route.get(cell)
        while parent is not None:
            path.append(parent)
            parent = route.get(parent)
        return path
