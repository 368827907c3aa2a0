"""Serial matrix multiplication and row partitioning."""

from .matrix_io import Matrix


class DimensionMismatchError(ValueError):
    """Raised when the inner dimensions of two matrices differ."""

    def __init__(self, a_cols: int, b_rows: int) -> None:
        super().__init__(f"Matrix dimensions mismatch: A cols ({a_cols}) != B rows ({b_rows})")
        self.a_cols = a_cols
        self.b_rows = b_rows


def transpose(matrix: Matrix) -> Matrix:
    """Return the transpose of a matrix."""
    return [list(column) for column in zip(*matrix)]


def multiply_local(a_part: Matrix, b_t: Matrix) -> Matrix:
    """Multiply a block of rows by a matrix given in transposed form."""
    if a_part and b_t and len(a_part[0]) != len(b_t[0]):
        raise DimensionMismatchError(len(a_part[0]), len(b_t[0]))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in b_t]
        for row in a_part
    ]


def multiply_matrices(a: Matrix, b: Matrix) -> Matrix:
    """Return the product of two matrices."""
    common = len(a[0]) if a else 0
    if common != len(b):
        raise DimensionMismatchError(common, len(b))
    return multiply_local(a, transpose(b))


def row_partition(rows: int, parts: int) -> list[tuple[int, int]]:
    """Split ``rows`` into ``parts`` contiguous ``(offset, count)`` blocks.

    The first ``rows % parts`` blocks get one extra row.
    """
    if parts < 1:
        raise ValueError(f"number of parts must be at least 1, got {parts}")
    if rows < 0:
        raise ValueError(f"number of rows must not be negative, got {rows}")
    base, remainder = divmod(rows, parts)
    blocks = []
    offset = 0
    for part in range(parts):
        count = base + (1 if part < remainder else 0)
        blocks.append((offset, count))
        offset += count
    return blocks