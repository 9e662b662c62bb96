"""Read a square matrix of integers and print it back row by row."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path


def read_square_matrix(tokens: Iterable[str]) -> list[list[int]]:
    """Build a matrix from whitespace tokens: a size ``n`` then ``n * n`` integers.

    Tokens after the matrix are ignored.
    """
    stream = iter(tokens)
    try:
        size = int(next(stream))
    except StopIteration:
        raise ValueError("missing matrix size") from None
    if size < 0:
        raise ValueError("matrix size must not be negative")
    rows: list[list[int]] = []
    for _ in range(size):
        row = []
        for _ in range(size):
            try:
                row.append(int(next(stream)))
            except StopIteration:
                raise ValueError(
                    f"expected {size * size} matrix elements, input ended early"
                ) from None
        rows.append(row)
    return rows


def format_matrix(rows: Iterable[Sequence[int]]) -> str:
    """Render each row on its own line, elements separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in rows)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a matrix from a file or standard input and print it."""
    parser = argparse.ArgumentParser(
        prog="dsakit-matrix",
        description="Read a square matrix (size, then elements) and print it.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="file to read; standard input when omitted",
    )
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()
    try:
        matrix = read_square_matrix(text.split())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if matrix:
        print(format_matrix(matrix))
    return 0