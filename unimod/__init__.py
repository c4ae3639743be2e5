from .config import LogLevel
from .generators import CycleViolatorGenerator, MatrixGenerator
from .matrix import IntMatrix
from .matroid_graph import MatroidGraph
from .pivot import PivotResult, ZeroPivotError, binary_pivot, ternary_pivot
from .views import MatrixView, MutableMatrixView, permuted, read_only, transposed

__all__ = [
    "CycleViolatorGenerator",
    "IntMatrix",
    "LogLevel",
    "MatrixGenerator",
    "MatrixView",
    "MatroidGraph",
    "MutableMatrixView",
    "PivotResult",
    "ZeroPivotError",
    "binary_pivot",
    "permuted",
    "read_only",
    "ternary_pivot",
    "transposed",
]
