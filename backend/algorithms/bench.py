"""Timing harness comparing the hash- and index-based A* engines.

Every iteration builds a fresh engine (so terrain sampling is part of the measured
work, as in a search-per-request setting) and runs one ``calc``.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Type

import numpy as np

from backend.algorithms.grid_astar import AStar, Cell, Size
from backend.algorithms.hash_astar import HashAStar
from backend.algorithms.index_astar import IndexAStar

_logger = logging.getLogger(__name__)

STRATEGIES: Dict[str, Type[AStar]] = {
    HashAStar.name: HashAStar,
    IndexAStar.name: IndexAStar,
}


@dataclass
class BenchResult:
    strategy: str
    nsize: int
    iterations: int
    mean_s: float
    std_s: float
    min_s: float
    max_s: float
    found: int  # iterations that returned a path

    def as_dict(self) -> dict:
        return {
            "strategy": self.strategy,
            "nsize": self.nsize,
            "iterations": self.iterations,
            "mean_s": self.mean_s,
            "std_s": self.std_s,
            "min_s": self.min_s,
            "max_s": self.max_s,
            "found": self.found,
        }


@dataclass
class AStarBench:
    nsize: int = 64
    iterations: int = 10
    seed: Optional[int] = None

    def __post_init__(self):
        if self.nsize <= 0:
            raise ValueError("nsize must be positive")
        if self.iterations <= 0:
            raise ValueError("iterations must be positive")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0):
            raise ValueError(f"seed must be a non-negative integer, got {self.seed!r}")

    def run_strategy(self, name: str) -> BenchResult:
        try:
            engine_cls = STRATEGIES[name]
        except KeyError:
            raise ValueError(f"unknown strategy {name!r}") from None

        size = Size(self.nsize, self.nsize)
        start, end = Cell(0, 0), Cell(self.nsize - 1, self.nsize - 1)
        # one seed sequence per run so both strategies see the same terrains
        seeds = np.random.SeedSequence(self.seed).spawn(self.iterations) if self.seed is not None else [None] * self.iterations

        timings: List[float] = []
        found = 0
        for s in seeds:
            t0 = time.perf_counter()
            engine = engine_cls(size, start, end, seed=s)
            path = engine.calc()
            timings.append(time.perf_counter() - t0)
            if path is not None:
                found += 1

        arr = np.asarray(timings)
        result = BenchResult(
            strategy=name,
            nsize=self.nsize,
            iterations=self.iterations,
            mean_s=float(arr.mean()),
            std_s=float(arr.std()),
            min_s=float(arr.min()),
            max_s=float(arr.max()),
            found=found,
        )
        _logger.info("%s %dx%d: mean %.6fs over %d runs", name, self.nsize, self.nsize, result.mean_s, self.iterations)
        return result

    def run(self) -> List[BenchResult]:
        return [self.run_strategy(name) for name in STRATEGIES]
