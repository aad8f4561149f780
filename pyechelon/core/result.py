"""
Generic result container for PyEchelon computations.

The Result class is the envelope that multi-step analyses return. It
carries the payload alongside metadata, timing and non-fatal warnings so
callers can inspect what happened without parsing printed output.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (rank, pivot columns, shape)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The payload type

    Attributes:
        params: Computed quantities (reduced forms, determinant, inverse)
        info: Structured metadata (shape, rank, pivot columns)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the algorithm family that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=AnalysisParams(echelon=e, rref=r),
        ...     info={'rank': 2, 'pivot_columns': (1, 2)},
        ...     timing={'total_seconds': 0.001},
        ...     method='gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
