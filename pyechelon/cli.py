"""
Command-Line Interface for PyEchelon.

Reads a matrix from the user and then applies named operations to it
until the user exits.

Usage:
    pyechelon [OPTIONS]
    python -m pyechelon [OPTIONS]

Options:
    --log-level LEVEL   DEBUG, INFO, WARNING or ERROR (default WARNING)
    --log-file PATH     Also write log records to PATH

Operations:
    DISPLAY, ECHELON, RREF, INVERSE, DETERMINANT, ANALYZE, NEW, EXIT
"""

import argparse
import logging
import math
import sys
from typing import Iterator, List, Optional, TextIO

from pyechelon.core.compute.timing import timed
from pyechelon.core.exceptions import (
    DimensionError,
    PyEchelonError,
    SingularMatrixError,
)
from pyechelon.logging_config import setup_logging
from pyechelon.matrix import Matrix, SquareMatrix, analyze, echelon_form, rref

logger = logging.getLogger(__name__)

OPERATIONS = ("DISPLAY", "ECHELON", "RREF", "INVERSE", "DETERMINANT", "ANALYZE", "NEW", "EXIT")


class _Tokens:
    """Whitespace-separated tokens pulled lazily from a text stream."""

    def __init__(self, stream: TextIO):
        self._iter = self._generate(stream)

    @staticmethod
    def _generate(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def next(self) -> Optional[str]:
        """Next token, or None at end of input."""
        return next(self._iter, None)


class MatrixSession:
    """
    One interactive session holding the current matrix.

    Input and output streams are injectable so the session can be driven
    from tests or scripts as well as from a terminal.
    """

    def __init__(self, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout):
        self._tokens = _Tokens(stdin)
        self._out = stdout
        self.matrix: Optional[Matrix] = None

    def _print(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)
        self._out.flush()

    # --- Data collection ---

    def collect_dimension(self, field: str) -> Optional[int]:
        """Prompt until a positive integer is entered; None at end of input."""
        while True:
            self._print(f"Enter the number of {field} for your matrix: ", end="")
            token = self._tokens.next()
            if token is None:
                return None
            try:
                value = int(token)
            except ValueError:
                value = 0
            if value >= 1:
                return value
            self._print(f"The number of {field} must be an integer greater than or equal to 1")

    def collect_matrix(self, rows: int, cols: int) -> Optional[Matrix]:
        """Read rows*cols numbers row by row; None at end of input."""
        matrix = SquareMatrix(rows) if rows == cols else Matrix(rows, cols)
        self._print("Enter your matrix: ")
        for r in range(1, rows + 1):
            for c in range(1, cols + 1):
                value = self._read_number()
                if value is None:
                    return None
                matrix.set_element(r, c, value)
        return matrix

    def _read_number(self) -> Optional[float]:
        while True:
            token = self._tokens.next()
            if token is None:
                return None
            try:
                value = float(token)
            except ValueError:
                value = math.nan
            if math.isfinite(value):
                return value
            self._print(f"'{token}' is not a finite number, enter it again")

    def new_matrix(self) -> bool:
        """Replace the current matrix with one read from input."""
        rows = self.collect_dimension("rows")
        if rows is None:
            return False
        cols = self.collect_dimension("columns")
        if cols is None:
            return False
        matrix = self.collect_matrix(rows, cols)
        if matrix is None:
            return False
        self.matrix = matrix
        logger.info("New %dx%d matrix entered", rows, cols)
        return True

    # --- Dispatch ---

    def perform(self, operation: str) -> bool:
        """
        Apply one named operation to the current matrix.

        Returns False when the session should end.
        """
        operation = operation.upper()
        logger.debug("Dispatching %s", operation)

        if operation == "EXIT":
            return False
        if operation == "NEW":
            self._print("\n\n", end="")
            return self.new_matrix()
        if operation not in OPERATIONS:
            self._print("Invalid operation")
            return True

        try:
            with timed() as timer:
                self._run(operation)
        except PyEchelonError as e:
            logger.warning("%s failed: %s", operation, e)
            self._print(f"Error: {e}")
        else:
            logger.debug("%s took %.6fs", operation, timer.result()["total_seconds"])
        return True

    def _run(self, operation: str) -> None:
        matrix = self.matrix
        if operation == "DISPLAY":
            self._print(str(matrix))
        elif operation == "ECHELON":
            self._print(str(echelon_form(matrix)))
        elif operation == "RREF":
            self._print(str(rref(matrix)))
        elif operation == "INVERSE":
            try:
                self._print(str(matrix.as_square().inverse()))
            except DimensionError:
                self._print("Cannot create an inverse of a non-square matrix")
            except SingularMatrixError as e:
                logger.info("Singular matrix, determinant %s", e.determinant)
                self._print("No inverse exists for this matrix")
        elif operation == "DETERMINANT":
            try:
                det = matrix.as_square().determinant()
            except DimensionError:
                self._print("Cannot calculate the determinant of a non-square matrix")
            else:
                self._print(f"{det:.10g}")
        elif operation == "ANALYZE":
            self._print(analyze(matrix).summary())

    def run(self) -> int:
        """Collect a matrix, then loop over operations until EXIT or end of input."""
        if not self.new_matrix():
            return 0
        prompt = f"Enter your function ({', '.join(OPERATIONS)}): "
        while True:
            self._print()
            self._print(prompt, end="")
            token = self._tokens.next()
            if token is None or not self.perform(token):
                break
        self._print()
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyechelon",
        description="Interactive row reduction, determinants and inverses.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional file to write log records to",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    try:
        return MatrixSession(sys.stdin, sys.stdout).run()
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
