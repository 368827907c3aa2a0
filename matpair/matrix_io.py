"""Reading and writing matrices in the whitespace-separated text format.

A matrix is written as a header line ``rows cols`` followed by one line per
row, each value followed by a single space. A pair file starts with the
number of pairs, followed by the two matrices of every pair.
"""

from collections.abc import Iterable, Iterator
from typing import TextIO

Matrix = list[list[int]]


class MatrixFormatError(ValueError):
    """Raised when matrix text is truncated or malformed."""


def iter_tokens(stream: Iterable[str]) -> Iterator[str]:
    """Yield the whitespace-separated tokens of a text stream, lazily."""
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str], what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise MatrixFormatError(f"unexpected end of input while reading {what}") from None
    try:
        return int(token)
    except ValueError:
        raise MatrixFormatError(f"invalid integer {token!r} for {what}") from None


def read_count(tokens: Iterator[str]) -> int:
    """Read the non-negative pair count from a token iterator."""
    count = _next_int(tokens, "pair count")
    if count < 0:
        raise MatrixFormatError(f"negative pair count: {count}")
    return count


def read_matrix(tokens: Iterator[str]) -> Matrix:
    """Read one matrix (header and values) from a token iterator."""
    rows = _next_int(tokens, "row count")
    cols = _next_int(tokens, "column count")
    if rows < 0 or cols < 0:
        raise MatrixFormatError(f"negative matrix dimensions: {rows} x {cols}")
    return [[_next_int(tokens, "matrix element") for _ in range(cols)] for _ in range(rows)]


def format_matrix(matrix: Matrix) -> str:
    """Return the text form of a matrix, header line included."""
    rows = len(matrix)
    cols = len(matrix[0]) if matrix else 0
    lines = [f"{rows} {cols}"]
    lines.extend("".join(f"{value} " for value in row) for row in matrix)
    return "\n".join(lines) + "\n"


def write_matrix(stream: TextIO, matrix: Matrix) -> None:
    """Write the text form of a matrix to a stream."""
    stream.write(format_matrix(matrix))