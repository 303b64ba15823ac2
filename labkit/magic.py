"""Read a square of integers and check whether it is a magic square."""

from __future__ import annotations

import re
import sys
from typing import Iterable, List, Optional, Sequence

DEFAULT_SIZE = 5

Matrix = List[List[int]]

_INTEGER = re.compile(r"[+-]?\d+")


class MagicInputError(ValueError):
    """The input does not describe a complete square of integers."""


class NotIntegerError(MagicInputError):
    """A token in the input is not an integer."""

    def __init__(self, token: str = "") -> None:
        super().__init__("expected an integer.")
        self.token = token


class TooManyError(MagicInputError):
    """More numbers were given than the square holds."""

    def __init__(self) -> None:
        super().__init__("too many numbers in input.")


class TooFewError(MagicInputError):
    """The input ended before the square was full."""

    def __init__(self) -> None:
        super().__init__("not enough numbers (early EOF).")


def _parse_int(token: str) -> int:
    match = _INTEGER.match(token)
    if match is None:
        raise NotIntegerError(token)
    return int(match.group())


def read_matrix(source: Iterable[str], size: int = DEFAULT_SIZE) -> Matrix:
    """Read ``size * size`` integers from lines of text into a square matrix.

    Lines are read until the square is full; numbers left over on the line
    that completes it are an error, later lines are not read.
    """
    if size <= 0:
        raise ValueError(f"matrix size must be positive, got {size}")
    total = size * size
    values: List[int] = []
    for line in source:
        for token in line.split():
            value = _parse_int(token)
            if len(values) == total:
                raise TooManyError()
            values.append(value)
        if len(values) == total:
            break
    if len(values) < total:
        raise TooFewError()
    return [values[start:start + size] for start in range(0, total, size)]


def is_magic(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if all rows, columns and both diagonals share one sum."""
    size = len(matrix)
    target = sum(matrix[0]) if size else 0
    diagonal = sum(matrix[i][i] for i in range(size))
    anti_diagonal = sum(matrix[i][size - i - 1] for i in range(size))
    if target != diagonal or anti_diagonal != diagonal:
        return False
    row_sums = (sum(row) for row in matrix)
    col_sums = (sum(column) for column in zip(*matrix))
    return all(s == target for s in row_sums) and all(s == target for s in col_sums)


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render the matrix with each value right-aligned in four columns."""
    return "".join(
        "".join(f"{value:4d} " for value in row) + "\n" for row in matrix
    )


def _run(source: Iterable[str], size: int) -> int:
    print("Welcome to the magic square analyzer\n")
    print(f"The magic square consists of {size} rows and columns.")
    print(
        f"Please input a total of {size * size} numbers "
        "(space-separated in one line or multiple lines)."
    )
    try:
        matrix = read_matrix(source, size)
    except MagicInputError as exc:
        print(f"Input error: {exc}")
        return 1
    if is_magic(matrix):
        print("The matrix is a magic square.")
    else:
        print("The matrix is not a magic square.")
    print(format_matrix(matrix), end="")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Analyse a square from the file named in ``argv`` or from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1:
        try:
            with open(args[0], encoding="utf-8") as source:
                return _run(source, DEFAULT_SIZE)
        except OSError as exc:
            print(f"Cannot open {args[0]}: {exc.strerror}", file=sys.stderr)
            return 1
    return _run(sys.stdin, DEFAULT_SIZE)


if __name__ == "__main__":
    sys.exit(main())