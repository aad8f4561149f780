"""
Shared numeric infrastructure for PyEchelon.

Submodules:
    tolerances: The single zero/equality tolerance policy
    timing: Execution timing utilities
"""

from pyechelon.core.compute.tolerances import (
    EPSILON,
    DEFAULT,
    COFACTOR_WARN_DIMENSION,
    ToleranceTier,
    is_zero,
)
from pyechelon.core.compute.timing import Timer, timed

__all__ = [
    # Tolerances
    "EPSILON",
    "DEFAULT",
    "COFACTOR_WARN_DIMENSION",
    "ToleranceTier",
    "is_zero",
    # Timing
    "Timer",
    "timed",
]
