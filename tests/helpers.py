from itertools import combinations

import sympy as sp

from unimod.matrix import IntMatrix
from unimod.views import MatrixView


def cycle_violator_rows(n: int) -> list[list[int]]:
    """Plant-phase matrix of the cycle-violator generator, built independently."""
    rows = []
    for r in range(n):
        row = [0] * n
        row[r] = 1
        # cyclic adjacency: (c + 1) % n == r
        row[(r - 1) % n] = 1
        if r < 2:
            for c in range(2, n - 1):
                row[c] = 1
        rows.append(row)
    return rows


def subdeterminants(M: MatrixView, max_size: int) -> set[int]:
    """
    All determinants of square submatrices up to ``max_size``, via sympy.
    Only for small matrices in tests.
    """
    rows = M.tolist()
    dets = set()
    for k in range(1, max_size + 1):
        for rs in combinations(range(M.nrows), k):
            for cs in combinations(range(M.ncols), k):
                sub = sp.Matrix([[rows[r][c] for c in cs] for r in rs])
                dets.add(int(sub.det()))
    return dets


def is_totally_unimodular(M: MatrixView) -> bool:
    return subdeterminants(M, min(M.nrows, M.ncols)) <= {-1, 0, 1}


def random_nonzero_cell(M: IntMatrix, rng) -> tuple[int, int]:
    cells = [
        (r, c)
        for r in range(M.nrows)
        for c in range(M.ncols)
        if M.at(r, c) != 0
    ]
    return rng.choice(cells)


def make_random_matrix(rng, nrows: int, ncols: int, alphabet=(0, 1)) -> IntMatrix:
    """Generate a random matrix with entries drawn from ``alphabet``."""
    data = [
        [rng.choice(alphabet) for _ in range(ncols)]
        for _ in range(nrows)
    ]
    return IntMatrix.from_rows(data)
