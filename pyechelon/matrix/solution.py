"""
Matrix analysis solution types.

Contains the parameter payload and user-facing solution wrapper returned
by analyze().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pyechelon.core.result import Result

if TYPE_CHECKING:
    from pyechelon.matrix.matrix import Matrix
    from pyechelon.matrix.square import SquareMatrix


@dataclass(frozen=True)
class AnalysisParams:
    """
    Parameter payload for a full matrix analysis.

    determinant and inverse are None when the matrix is not square;
    inverse is also None when the matrix is singular.
    """
    echelon: 'Matrix'
    rref: 'Matrix'
    determinant: float | None = None
    inverse: 'SquareMatrix | None' = None


@dataclass
class MatrixAnalysis:
    """
    User-facing analysis results.

    Wraps Result[AnalysisParams] and provides convenient accessors.
    """
    _result: Result[AnalysisParams]
    _matrix: 'Matrix'

    @property
    def matrix(self) -> 'Matrix':
        """The analyzed matrix (a private copy)."""
        return self._matrix

    @property
    def echelon(self) -> 'Matrix':
        return self._result.params.echelon

    @property
    def rref(self) -> 'Matrix':
        return self._result.params.rref

    @property
    def determinant(self) -> float | None:
        return self._result.params.determinant

    @property
    def inverse(self) -> 'SquareMatrix | None':
        return self._result.params.inverse

    @property
    def rank(self) -> int:
        """Number of non-zero rows in the RREF."""
        return self._result.info['rank']

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        """1-based pivot columns of the RREF."""
        return self._result.info['pivot_columns']

    @property
    def is_invertible(self) -> bool:
        return self.inverse is not None

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def method(self) -> str:
        return self._result.method

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text report of every computed quantity."""
        rows, cols = self._matrix.shape
        lines = [f"Matrix ({rows}x{cols})", str(self._matrix)]
        lines.append("Echelon form")
        lines.append(str(self.echelon))
        lines.append("Reduced row-echelon form")
        lines.append(str(self.rref))

        pivots = ", ".join(str(c) for c in self.pivot_columns) or "none"
        lines.append(f"Rank: {self.rank}    Pivot columns: {pivots}")

        if self.determinant is not None:
            lines.append(f"Determinant: {self.determinant:.6g}")
        if self.inverse is not None:
            lines.append("Inverse")
            lines.append(str(self.inverse))

        for message in self.warnings:
            lines.append(f"Warning: {message}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self._matrix.shape
        return f"MatrixAnalysis(shape={rows}x{cols}, rank={self.rank})"
