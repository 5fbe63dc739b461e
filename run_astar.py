"""Run one search with each storage strategy and print the paths.

Usage:
    python run_astar.py [--size 16] [--seed N]

Both engines search a size x size grid (default NSIZE) from the top-left to the bottom-right
corner. A missing path is treated as a failure since the grid is fully connected.
"""

import argparse
import sys

from backend.algorithms.grid_astar import Cell, Size
from backend.algorithms.hash_astar import HashAStar
from backend.algorithms.index_astar import IndexAStar

NSIZE = 16


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--size", type=int, default=NSIZE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.size <= 0:
        parser.error(f"--size must be positive, got {args.size}")
    if args.seed is not None and args.seed < 0:
        parser.error(f"--seed must be non-negative, got {args.seed}")
    size = Size(args.size, args.size)
    start, end = Cell(0, 0), Cell(args.size - 1, args.size - 1)
    for engine_cls in (IndexAStar, HashAStar):
        engine = engine_cls(size, start, end, seed=args.seed)
        path = engine.calc()
        if path is None:
            sys.exit(f"{engine.name}: no path from {start} to {end}")
        print(f"{engine.name}:", [tuple(c) for c in path])


if __name__ == "__main__":
    main()
