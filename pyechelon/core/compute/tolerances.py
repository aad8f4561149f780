"""
Tolerance policy for numerical comparison.

PyEchelon uses one absolute tolerance everywhere: a value whose magnitude
is at most EPSILON is treated as zero when choosing pivots, detecting zero
rows, comparing matrices, checking invertibility and printing.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str

    def is_zero(self, value: float) -> bool:
        """True if |value| is within atol of zero."""
        return abs(value) <= self.atol

    def is_close(self, a: float, b: float) -> bool:
        """True if a and b differ by at most atol (elementwise for arrays)."""
        return abs(a - b) <= self.atol


EPSILON = 1e-8

DEFAULT = ToleranceTier(
    atol=EPSILON,
    name='default',
    description='Absolute tolerance used for pivots, zero rows and equality',
)

# Cofactor expansion is O(n!). Above this dimension determinant() warns.
COFACTOR_WARN_DIMENSION = 8


def is_zero(value: float) -> bool:
    """Check a scalar against the default tolerance."""
    return DEFAULT.is_zero(value)
