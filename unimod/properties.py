"""Structural queries on matrices and views.

Column-wise helpers are implemented by running the row-wise helper on a
read-only transposed view, so every routine exists in one orientation only.
"""

import copy
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from unimod.views import MatrixView, read_only, transposed


def matrix_equals(first: MatrixView, second: MatrixView) -> bool:
    """Exact equality of shape and entries for any two matrices or views."""
    if first.nrows != second.nrows:
        return False
    if first.ncols != second.ncols:
        return False
    for r in range(first.nrows):
        for c in range(first.ncols):
            if first.at(r, c) != second.at(r, c):
                return False
    return True


def row_is_zero(matrix: MatrixView, row: int, column_first: int, column_beyond: int) -> bool:
    for c in range(column_first, column_beyond):
        if matrix.at(row, c) != 0:
            return False
    return True


def column_is_zero(matrix: MatrixView, column: int, row_first: int, row_beyond: int) -> bool:
    return row_is_zero(transposed(read_only(matrix)), column, row_first, row_beyond)


def find_smallest_nonzero_entry(
    matrix: MatrixView,
    row_first: int,
    row_beyond: int,
    column_first: int,
    column_beyond: int,
) -> Optional[Tuple[int, int]]:
    """Locate the entry of smallest absolute value that is not zero.

    The region is scanned row by row; among equal magnitudes the first one
    found wins.

    Returns:
        ``(row, column)`` of the entry, or ``None`` if the region is zero.
    """
    result = None
    current_value = 0
    for r in range(row_first, row_beyond):
        for c in range(column_first, column_beyond):
            value = abs(matrix.at(r, c))
            if value == 0:
                continue
            if result is None or value < current_value:
                result = (r, c)
                current_value = value
    return result


class PropertyCheck(ABC):
    """Accumulates entries and reports whether a property still holds.

    ``count_property_row_series`` feeds every entry of a row and then asks
    ``holds``. State is kept across rows, so a check sees the whole prefix
    it has been fed. The counting functions work on a copy, so the object
    passed in is left untouched and can be reused.
    """

    @abstractmethod
    def feed(self, value: int) -> None:
        ...

    @abstractmethod
    def holds(self) -> bool:
        ...


class ZeroCheck(PropertyCheck):
    """All entries fed so far are zero."""

    def __init__(self):
        self._ok = True

    def feed(self, value: int) -> None:
        if value != 0:
            self._ok = False

    def holds(self) -> bool:
        return self._ok


class TernaryCheck(PropertyCheck):
    """All entries fed so far lie in {-1, 0, 1}."""

    def __init__(self):
        self._ok = True

    def feed(self, value: int) -> None:
        if value not in (-1, 0, 1):
            self._ok = False

    def holds(self) -> bool:
        return self._ok


def count_property_row_series(
    matrix: MatrixView,
    row_first: int,
    row_beyond: int,
    column_first: int,
    column_beyond: int,
    check: PropertyCheck,
) -> int:
    """Count the leading rows of ``[row_first, row_beyond)`` with a property.

    Each row contributes its entries in ``[column_first, column_beyond)``.
    Counting stops at the first row after which ``check.holds()`` is false.
    """
    check = copy.deepcopy(check)
    for row in range(row_first, row_beyond):
        for column in range(column_first, column_beyond):
            check.feed(matrix.at(row, column))
        if not check.holds():
            return row - row_first
    return row_beyond - row_first


def count_property_column_series(
    matrix: MatrixView,
    row_first: int,
    row_beyond: int,
    column_first: int,
    column_beyond: int,
    check: PropertyCheck,
) -> int:
    """Column counterpart of ``count_property_row_series``.

    Counts leading columns of ``[column_first, column_beyond)``, each
    contributing its entries in ``[row_first, row_beyond)``.
    """
    return count_property_row_series(
        transposed(read_only(matrix)), column_first, column_beyond, row_first, row_beyond, check
    )


def is_binary(matrix: MatrixView) -> bool:
    return all(
        matrix.at(r, c) in (0, 1) for r in range(matrix.nrows) for c in range(matrix.ncols)
    )


def is_ternary(matrix: MatrixView) -> bool:
    check = TernaryCheck()
    return count_property_row_series(matrix, 0, matrix.nrows, 0, matrix.ncols, check) == matrix.nrows


def format_matrix(matrix: MatrixView) -> str:
    """Render rows as entries right-aligned in width 2, one space apart."""
    return "\n".join(
        "".join(f" {matrix.at(r, c):>2}" for c in range(matrix.ncols))
        for r in range(matrix.nrows)
    )
