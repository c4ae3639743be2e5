"""Test-matrix generators.

A generator owns one ``IntMatrix`` of a fixed shape and fills it in
``generate``. Progress text goes to the ``unimod.generators`` logger unless
the generator was created with ``LogLevel.QUIET``.

``CycleViolatorGenerator`` plants a cycle violator, a minimal matrix that is
not totally unimodular, and then hides it with a run of binary pivots. Binary
pivoting preserves the TU classification, so the result still contains a
violator but not one that is visible by inspection.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from unimod.config import CYCLE_VIOLATOR_NAME, MIN_VIOLATOR_SIZE, LogLevel
from unimod.matrix import IntMatrix
from unimod.pivot import binary_pivot
from unimod.properties import format_matrix

logger = logging.getLogger(__name__)


class MatrixGenerator(ABC):
    def __init__(
        self,
        name: str,
        height: int,
        width: int,
        level: LogLevel = LogLevel.NORMAL,
        rng: Optional[random.Random] = None,
    ):
        self.name = name
        self.height = height
        self.width = width
        self.level = level
        self.rng = rng if rng is not None else random.Random()
        self.matrix = IntMatrix.zeros(height, width)

    @abstractmethod
    def generate(self) -> IntMatrix:
        """Fill ``self.matrix`` completely and return it."""

    def log(self, message: str, *args) -> None:
        if self.level != LogLevel.QUIET:
            logger.info(message, *args)

    def log_generate_start(self) -> None:
        self.log("Generating %d x %d %s matrix...", self.height, self.width, self.name)

    def log_generate_end(self) -> None:
        self.log("... done.")
        if self.level >= LogLevel.VERBOSE:
            logger.info("%s", format_matrix(self.matrix))


class CycleViolatorGenerator(MatrixGenerator):
    """Square matrix with a hidden cycle violator.

    Args:
        size: Number of rows and columns, at least 3.
        violator_size: Size ``k`` of the violator left after hiding. ``0``
            draws ``k`` uniformly from ``[3, size]`` on each ``generate``.
        level: Verbosity of the progress output.
        rng: Random source for the violator size.
    """

    def __init__(
        self,
        size: int,
        violator_size: int = 0,
        level: LogLevel = LogLevel.NORMAL,
        rng: Optional[random.Random] = None,
    ):
        assert size >= MIN_VIOLATOR_SIZE, f"size must be at least {MIN_VIOLATOR_SIZE}"
        assert violator_size == 0 or MIN_VIOLATOR_SIZE <= violator_size <= size, (
            f"violator size must be 0 or in [{MIN_VIOLATOR_SIZE}, {size}]"
        )
        super().__init__(CYCLE_VIOLATOR_NAME, size, size, level, rng)
        self.violator_size = violator_size
        self.effective_violator_size = violator_size
        self.pivots_applied = 0

    def plant(self) -> None:
        height, width = self.height, self.width
        for row in range(height):
            for column in range(width):
                planted = (
                    row == column
                    or row == (column + 1) % height
                    or (row < 2 and 2 <= column < width - 1)
                )
                self.matrix.set(row, column, 1 if planted else 0)

    def hide(self) -> None:
        self.log("Hiding the violator...")

        k = self.violator_size
        if k == 0:
            k = self.rng.randint(MIN_VIOLATOR_SIZE, self.height)
        self.effective_violator_size = k

        self.pivots_applied = 0
        for i in range(self.height - k):
            binary_pivot(self.matrix, 2 + i, 2 + i).raise_for_error()
            self.pivots_applied += 1

        self.log("... done. (size is %d x %d)", k, k)

    def generate(self) -> IntMatrix:
        self.log_generate_start()
        self.plant()
        self.log_generate_end()
        self.hide()
        return self.matrix
