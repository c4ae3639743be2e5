"""
Generator configuration
=======================
Central place for the verbosity levels and the constants shared by the
matrix generators.

Exports:
    LogLevel: Verbosity of generator diagnostics.
    MIN_VIOLATOR_SIZE (int): Smallest cycle violator that can be planted.
    CYCLE_VIOLATOR_NAME (str): Name reported by the cycle-violator generator.
"""
from enum import IntEnum


class LogLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2


MIN_VIOLATOR_SIZE: int = 3
CYCLE_VIOLATOR_NAME: str = "cycle-violator"
