"""Row-partitioned matrix multiplication across worker processes."""

import os
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat

from .matrix_io import Matrix
from .multiply import DimensionMismatchError, multiply_local, row_partition, transpose


def parallel_multiply(a: Matrix, b: Matrix, workers: int | None = None) -> Matrix:
    """Multiply two matrices, splitting the rows of ``a`` among worker processes.

    Each worker receives a contiguous block of rows of ``a`` and the whole of
    ``b`` in transposed form; the blocks of the result are joined in order.
    """
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"number of workers must be at least 1, got {workers}")
    common = len(a[0]) if a else 0
    if common != len(b):
        raise DimensionMismatchError(common, len(b))

    b_t = transpose(b)
    chunks = [
        a[offset:offset + count]
        for offset, count in row_partition(len(a), workers)
        if count
    ]
    if len(chunks) <= 1:
        return multiply_local(a, b_t)

    with ProcessPoolExecutor(max_workers=len(chunks)) as pool:
        parts = pool.map(multiply_local, chunks, repeat(b_t))
        return [row for part in parts for row in part]