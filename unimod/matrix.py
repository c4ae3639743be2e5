from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from unimod.views import MutableMatrixView


@dataclass(eq=False)
class IntMatrix(MutableMatrixView):
    """Dense integer matrix owning its storage.

    The matrix doubles as the identity view of itself, so every algorithm
    written against ``MutableMatrixView`` runs on it directly.
    """

    data: np.ndarray

    def __post_init__(self):
        data = np.asarray(self.data)
        if data.ndim != 2:
            raise ValueError(f"Expected a 2-D matrix, got {data.ndim} dimension(s)")
        self.data = data.astype(np.int64, copy=True)

    @property
    def nrows(self) -> int:
        return self.data.shape[0]

    @property
    def ncols(self) -> int:
        return self.data.shape[1]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "IntMatrix":
        if not rows:
            return cls.zeros(0, 0)
        ncols = len(rows[0])
        for row in rows:
            if len(row) != ncols:
                raise ValueError("All rows must have the same length")
        return cls(np.array(rows, dtype=np.int64).reshape(len(rows), ncols))

    @classmethod
    def zeros(cls, nrows: int, ncols: int) -> "IntMatrix":
        return cls(np.zeros((nrows, ncols), dtype=np.int64))

    @classmethod
    def identity(cls, n: int) -> "IntMatrix":
        return cls(np.eye(n, dtype=np.int64))

    def _check(self, row: int, column: int) -> None:
        assert 0 <= row < self.nrows, f"row {row} out of range [0, {self.nrows})"
        assert 0 <= column < self.ncols, f"column {column} out of range [0, {self.ncols})"

    def at(self, row: int, column: int) -> int:
        self._check(row, column)
        return int(self.data[row, column])

    def set(self, row: int, column: int, value: int) -> None:
        self._check(row, column)
        self.data[row, column] = value

    def swap_rows(self, index1: int, index2: int) -> None:
        assert 0 <= index1 < self.nrows and 0 <= index2 < self.nrows, (
            f"rows {index1}, {index2} out of range [0, {self.nrows})"
        )
        self.data[[index1, index2], :] = self.data[[index2, index1], :]

    def swap_cols(self, index1: int, index2: int) -> None:
        assert 0 <= index1 < self.ncols and 0 <= index2 < self.ncols, (
            f"columns {index1}, {index2} out of range [0, {self.ncols})"
        )
        self.data[:, [index1, index2]] = self.data[:, [index2, index1]]

    def copy(self) -> "IntMatrix":
        return IntMatrix(self.data.copy())

    def transpose(self) -> "IntMatrix":
        """Owned transposed copy. Use ``views.transposed`` for a zero-copy view."""
        return IntMatrix(self.data.T.copy())

    def tolist(self) -> List[List[int]]:
        return self.data.tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    def __str__(self) -> str:
        from unimod.properties import format_matrix
        return format_matrix(self)

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(self.tolist())

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())
