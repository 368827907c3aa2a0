"""Command-line driver that multiplies every pair in a set of files."""

import argparse
import os
import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
from os import PathLike

from .matrix_io import Matrix, MatrixFormatError, iter_tokens, read_count, read_matrix, write_matrix
from .multiply import DimensionMismatchError, multiply_matrices
from .parallel import parallel_multiply

Multiply = Callable[[Matrix, Matrix], Matrix]
DEFAULT_LOG = "log.txt"


@dataclass(frozen=True)
class FileTiming:
    """How long one input file took to process."""

    input_path: str
    output_path: str
    pairs: int
    elapsed_ms: int


def process_file(
    input_path: str | PathLike,
    output_path: str | PathLike,
    multiply: Multiply = multiply_matrices,
) -> FileTiming:
    """Multiply every pair in ``input_path`` and write the products to ``output_path``."""
    with open(input_path, encoding="utf-8") as source, \
            open(output_path, "w", encoding="utf-8") as target:
        tokens = iter_tokens(source)
        count = read_count(tokens)
        print(f"Processing: {input_path} ({count} pairs)")
        start = time.perf_counter()
        for _ in range(count):
            a = read_matrix(tokens)
            b = read_matrix(tokens)
            write_matrix(target, multiply(a, b))
        elapsed_ms = int((time.perf_counter() - start) * 1000)
    return FileTiming(str(input_path), str(output_path), count, elapsed_ms)


def run(
    paths: Iterable[tuple[str | PathLike, str | PathLike]],
    log_path: str | PathLike = DEFAULT_LOG,
    multiply: Multiply = multiply_matrices,
) -> list[FileTiming]:
    """Process each ``(input, output)`` pair, logging per-file and total times.

    Files that cannot be opened are reported and skipped.
    """
    timings = []
    with open(log_path, "w", encoding="utf-8") as log:
        for input_path, output_path in paths:
            try:
                timing = process_file(input_path, output_path, multiply)
            except OSError as exc:
                print(f"Cannot open file: {exc.filename}", file=sys.stderr)
                continue
            log.write(f"{timing.input_path} -> {timing.output_path}: {timing.elapsed_ms} ms\n")
            print(f"Finished: {timing.input_path} => Time: {timing.elapsed_ms} ms")
            timings.append(timing)
        total = sum(timing.elapsed_ms for timing in timings)
        log.write(f"Total: {total} ms\n")
    print(f"All files processed. Total time: {total} ms")
    return timings


def _build_parser(prog: str | None, parallel: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Multiply matrix pairs from input files into output files.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="input and output files, given in pairs")
    parser.add_argument("--log", default=DEFAULT_LOG, help="timing log file")
    if parallel:
        parser.add_argument("-w", "--workers", type=int, default=None,
                            help="number of worker processes (default: CPU count)")
    return parser


def _execute(parser: argparse.ArgumentParser, args: argparse.Namespace, multiply: Multiply) -> int:
    files = args.files
    if len(files) < 2 or len(files) % 2:
        parser.print_usage(sys.stderr)
        print("error: files must be given as input/output pairs", file=sys.stderr)
        return 1
    pairs = list(zip(files[0::2], files[1::2]))
    try:
        run(pairs, args.log, multiply)
    except OSError as exc:
        print(f"Could not open {exc.filename} for writing.", file=sys.stderr)
        return 1
    except (MatrixFormatError, DimensionMismatchError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Multiply matrix pairs serially."""
    parser = _build_parser(None, parallel=False)
    args = parser.parse_args(argv)
    return _execute(parser, args, multiply_matrices)


def parallel_main(argv: list[str] | None = None) -> int:
    """Multiply matrix pairs, splitting rows among worker processes."""
    parser = _build_parser(None, parallel=True)
    args = parser.parse_args(argv)
    workers = args.workers if args.workers is not None else (os.cpu_count() or 1)
    if workers < 1:
        print(f"error: number of workers must be at least 1, got {workers}", file=sys.stderr)
        return 1
    return _execute(parser, args, partial(parallel_multiply, workers=workers))