"""Generation of random square matrix pairs for benchmarking."""

import argparse
import random
import time
from os import PathLike

from .matrix_io import Matrix, write_matrix

DEFAULT_OUTPUT = "pair_rand_5000.txt"
DEFAULT_SIZE = 5000
DEFAULT_COUNT = 1
MIN_VALUE = 0
MAX_VALUE = 10


def generate_matrix(rows: int, cols: int, rng: random.Random | None = None) -> Matrix:
    """Return a ``rows`` x ``cols`` matrix of random integers in [0, 10]."""
    if rows < 0 or cols < 0:
        raise ValueError(f"matrix dimensions must not be negative: {rows} x {cols}")
    rng = rng or random.Random()
    return [[rng.randint(MIN_VALUE, MAX_VALUE) for _ in range(cols)] for _ in range(rows)]


def write_pair_file(
    path: str | PathLike,
    count: int = DEFAULT_COUNT,
    size: int = DEFAULT_SIZE,
    rng: random.Random | None = None,
) -> None:
    """Write ``count`` pairs of random ``size`` x ``size`` matrices to ``path``."""
    if count < 0:
        raise ValueError(f"pair count must not be negative, got {count}")
    if size < 1:
        raise ValueError(f"matrix size must be at least 1, got {size}")
    rng = rng or random.Random()
    with open(path, "w", encoding="utf-8") as out:
        out.write(f"{count}\n")
        for _ in range(count):
            write_matrix(out, generate_matrix(size, size, rng))
            write_matrix(out, generate_matrix(size, size, rng))


def main(argv: list[str] | None = None) -> int:
    """Generate a file of random matrix pairs."""
    parser = argparse.ArgumentParser(description="Generate random square matrix pairs.")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="file to write")
    parser.add_argument("-n", "--count", type=int, default=DEFAULT_COUNT, help="number of pairs")
    parser.add_argument("-s", "--size", type=int, default=DEFAULT_SIZE, help="matrix side length")
    parser.add_argument("--seed", type=int, default=None, help="random seed (default: current time)")
    args = parser.parse_args(argv)

    seed = args.seed if args.seed is not None else int(time.time())
    try:
        write_pair_file(args.output, args.count, args.size, random.Random(seed))
    except (OSError, ValueError) as exc:
        parser.exit(1, f"error: {exc}\n")
    print("Matrix pairs saved to file")
    return 0