"""Zero-copy views over integer matrices.

Pivot and scan routines are written once against the two contracts below and
then run unchanged on a raw matrix, its transpose, a permutation of it, or any
stack of those:

* ``MatrixView`` is the read-only contract: ``nrows``, ``ncols`` and ``at``.
  It has no way to write or to permute, so a read-only view cannot be
  misused as a writable one.
* ``MutableMatrixView`` adds ``set``, ``swap_rows`` and ``swap_cols``.

Views never own storage. They hold a reference to the wrapped view and
translate every index on the way through. A transposed view exchanges the
row and column arguments, and its ``swap_rows`` becomes ``swap_cols`` of the
wrapped view. A permuted view keeps its own row and column maps and
permutes by updating them instead of moving entries.

The factories ``transposed``, ``permuted`` and ``read_only`` choose the
mutable variant exactly when the wrapped view is mutable.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple


class MatrixView(ABC):
    """Read-only access to ``nrows x ncols`` integer cells."""

    @property
    @abstractmethod
    def nrows(self) -> int:
        ...

    @property
    @abstractmethod
    def ncols(self) -> int:
        ...

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows, self.ncols

    @abstractmethod
    def at(self, row: int, column: int) -> int:
        ...

    def __getitem__(self, index: Tuple[int, int]) -> int:
        row, column = index
        return self.at(row, column)

    def tolist(self) -> List[List[int]]:
        return [[self.at(r, c) for c in range(self.ncols)] for r in range(self.nrows)]


class MutableMatrixView(MatrixView):
    """A view that can write cells and exchange rows or columns."""

    @abstractmethod
    def set(self, row: int, column: int, value: int) -> None:
        ...

    @abstractmethod
    def swap_rows(self, index1: int, index2: int) -> None:
        ...

    @abstractmethod
    def swap_cols(self, index1: int, index2: int) -> None:
        ...

    def __setitem__(self, index: Tuple[int, int], value: int) -> None:
        row, column = index
        self.set(row, column, value)


class _Wrapper:
    def __init__(self, base: MatrixView):
        self._base = base

    def _check(self, row: int, column: int) -> None:
        assert 0 <= row < self.nrows, f"row {row} out of range [0, {self.nrows})"
        assert 0 <= column < self.ncols, f"column {column} out of range [0, {self.ncols})"

    def _check_index(self, index: int, size: int) -> None:
        assert 0 <= index < size, f"index {index} out of range [0, {size})"


class ReadOnlyView(_Wrapper, MatrixView):
    """Identity view that only exposes reading."""

    @property
    def nrows(self) -> int:
        return self._base.nrows

    @property
    def ncols(self) -> int:
        return self._base.ncols

    def at(self, row: int, column: int) -> int:
        self._check(row, column)
        return self._base.at(row, column)


class IdentityView(_Wrapper, MutableMatrixView):
    """Writable pass-through: ``cell(r, c) = base(r, c)``."""

    def __init__(self, base: MutableMatrixView):
        super().__init__(base)

    @property
    def nrows(self) -> int:
        return self._base.nrows

    @property
    def ncols(self) -> int:
        return self._base.ncols

    def at(self, row: int, column: int) -> int:
        self._check(row, column)
        return self._base.at(row, column)

    def set(self, row: int, column: int, value: int) -> None:
        self._check(row, column)
        self._base.set(row, column, value)

    def swap_rows(self, index1: int, index2: int) -> None:
        self._base.swap_rows(index1, index2)

    def swap_cols(self, index1: int, index2: int) -> None:
        self._base.swap_cols(index1, index2)


class TransposedView(_Wrapper, MatrixView):
    """Read-only transpose: ``cell(r, c) = base(c, r)``."""

    @property
    def nrows(self) -> int:
        return self._base.ncols

    @property
    def ncols(self) -> int:
        return self._base.nrows

    def at(self, row: int, column: int) -> int:
        self._check(row, column)
        return self._base.at(column, row)


class MutableTransposedView(TransposedView, MutableMatrixView):
    """Writable transpose. Row operations become column operations below."""

    def __init__(self, base: MutableMatrixView):
        super().__init__(base)

    def set(self, row: int, column: int, value: int) -> None:
        self._check(row, column)
        self._base.set(column, row, value)

    def swap_rows(self, index1: int, index2: int) -> None:
        self._base.swap_cols(index1, index2)

    def swap_cols(self, index1: int, index2: int) -> None:
        self._base.swap_rows(index1, index2)


class PermutedView(_Wrapper, MatrixView):
    """Read-only view through a row and a column permutation.

    ``cell(r, c) = base(row_perm[r], col_perm[c])``. Both maps start as the
    identity unless given.
    """

    def __init__(
        self,
        base: MatrixView,
        row_permutation: Optional[Sequence[int]] = None,
        column_permutation: Optional[Sequence[int]] = None,
    ):
        super().__init__(base)
        self._row_perm = _checked_permutation(row_permutation, base.nrows, "row")
        self._col_perm = _checked_permutation(column_permutation, base.ncols, "column")

    @property
    def nrows(self) -> int:
        return len(self._row_perm)

    @property
    def ncols(self) -> int:
        return len(self._col_perm)

    @property
    def row_permutation(self) -> List[int]:
        return list(self._row_perm)

    @property
    def column_permutation(self) -> List[int]:
        return list(self._col_perm)

    def at(self, row: int, column: int) -> int:
        self._check(row, column)
        return self._base.at(self._row_perm[row], self._col_perm[column])


class MutablePermutedView(PermutedView, MutableMatrixView):
    """Writable permuted view. Swaps only touch the permutation maps."""

    def set(self, row: int, column: int, value: int) -> None:
        self._check(row, column)
        self._base.set(self._row_perm[row], self._col_perm[column], value)

    def swap_rows(self, index1: int, index2: int) -> None:
        self._check_index(index1, self.nrows)
        self._check_index(index2, self.nrows)
        perm = self._row_perm
        perm[index1], perm[index2] = perm[index2], perm[index1]

    def swap_cols(self, index1: int, index2: int) -> None:
        self._check_index(index1, self.ncols)
        self._check_index(index2, self.ncols)
        perm = self._col_perm
        perm[index1], perm[index2] = perm[index2], perm[index1]


def _checked_permutation(perm: Optional[Sequence[int]], size: int, kind: str) -> List[int]:
    if perm is None:
        return list(range(size))
    perm = list(perm)
    if sorted(perm) != list(range(size)):
        raise ValueError(f"Invalid {kind} permutation {perm} for size {size}")
    return perm


def read_only(view: MatrixView) -> ReadOnlyView:
    return ReadOnlyView(view)


def transposed(view: MatrixView) -> TransposedView:
    if isinstance(view, MutableMatrixView):
        return MutableTransposedView(view)
    return TransposedView(view)


def permuted(
    view: MatrixView,
    row_permutation: Optional[Sequence[int]] = None,
    column_permutation: Optional[Sequence[int]] = None,
) -> PermutedView:
    if isinstance(view, MutableMatrixView):
        return MutablePermutedView(view, row_permutation, column_permutation)
    return PermutedView(view, row_permutation, column_permutation)
