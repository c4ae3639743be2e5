"""Binary and ternary pivoting through the view contract.

Both operators take a ``MutableMatrixView`` and a pivot cell ``(i, j)``. For
every row ``r != i`` with a nonzero entry in column ``j`` and every column
``c != j`` with a nonzero entry in row ``i`` the cell ``(r, c)`` is updated:

* ``binary_pivot`` complements the cell, ``value := 1 - value``, which is the
  GF(2) pivot on 0/1 matrices (graphic / cographic matroid pivoting).
* ``ternary_pivot`` computes ``value - first * second / base`` with
  ``first = (r, j)``, ``second = (i, c)``, ``base = (i, j)`` and folds the
  result back into {-1, 0, 1} by adding or subtracting 3.

Pivoting on a zero entry is the only failure. It is reported through the
returned ``PivotResult``; the view is checked before the first write, so a
failed pivot never modifies anything. Call ``raise_for_error`` to turn a
failed result into a ``ZeroPivotError``.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from unimod.views import MutableMatrixView

logger = logging.getLogger(__name__)


class ZeroPivotError(ValueError):
    """Raised for a pivot on a zero entry."""

    def __init__(self, row: int, column: int):
        super().__init__("Cannot pivot on a zero entry!")
        self.row = row
        self.column = column


@dataclass(frozen=True)
class PivotResult:
    row: int
    column: int
    error: Optional[ZeroPivotError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> "PivotResult":
        if self.error is not None:
            raise self.error
        return self


def _pivot(
    matrix: MutableMatrixView,
    i: int,
    j: int,
    update: Callable[[int, int, int, int], int],
) -> PivotResult:
    assert 0 <= i < matrix.nrows and 0 <= j < matrix.ncols, (
        f"pivot ({i}, {j}) out of range for shape {matrix.shape}"
    )
    base_value = matrix.at(i, j)
    if base_value == 0:
        return PivotResult(i, j, ZeroPivotError(i, j))

    # Row i and column j are never written, so they can be read up front.
    pivot_row = [
        (column, matrix.at(i, column))
        for column in range(matrix.ncols)
        if column != j and matrix.at(i, column) != 0
    ]

    for row in range(matrix.nrows):
        if row == i:
            continue
        first = matrix.at(row, j)
        if first == 0:
            continue
        for column, second in pivot_row:
            matrix.set(row, column, update(matrix.at(row, column), first, second, base_value))

    return PivotResult(i, j)


def _binary_update(value: int, first: int, second: int, base: int) -> int:
    return 1 - value


def _ternary_update(value: int, first: int, second: int, base: int) -> int:
    value = value - first * second // base
    while value > 1:
        value -= 3
    while value < -1:
        value += 3
    return value


def binary_pivot(matrix: MutableMatrixView, i: int, j: int) -> PivotResult:
    """Binary pivot on the cell ``(i, j)``.

    Args:
        matrix: Matrix or view with 0/1 entries.
        i: Pivot row index.
        j: Pivot column index.

    Returns:
        A ``PivotResult``; its ``error`` is set if ``matrix(i, j)`` is zero.
    """
    result = _pivot(matrix, i, j, _binary_update)
    if result.ok:
        logger.debug("binary pivot at (%d, %d)", i, j)
    return result


def ternary_pivot(matrix: MutableMatrixView, i: int, j: int) -> PivotResult:
    """Ternary pivot on the cell ``(i, j)``.

    Args:
        matrix: Matrix or view with entries in {-1, 0, 1}.
        i: Pivot row index.
        j: Pivot column index.

    Returns:
        A ``PivotResult``; its ``error`` is set if ``matrix(i, j)`` is zero.
    """
    result = _pivot(matrix, i, j, _ternary_update)
    if result.ok:
        logger.debug("ternary pivot at (%d, %d)", i, j)
    return result
