"""
Tests for the tolerance policy and timing utilities.
"""

import pytest

from pyechelon.core.compute import (
    COFACTOR_WARN_DIMENSION,
    DEFAULT,
    EPSILON,
    Timer,
    is_zero,
    timed,
)


# ═══════════════════════════════════════════════════════════════════════
# Tolerances
# ═══════════════════════════════════════════════════════════════════════


class TestTolerance:

    def test_epsilon_value(self):
        assert EPSILON == 1e-8
        assert DEFAULT.atol == EPSILON

    def test_boundary_counts_as_zero(self):
        assert is_zero(1e-8)
        assert is_zero(-1e-8)
        assert not is_zero(1.5e-8)

    def test_is_close(self):
        assert DEFAULT.is_close(1.0, 1.0 + 5e-9)
        assert not DEFAULT.is_close(1.0, 1.0 + 1e-6)

    def test_warn_dimension_is_small(self):
        assert 3 < COFACTOR_WARN_DIMENSION < 12


# ═══════════════════════════════════════════════════════════════════════
# Timing
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("rref"):
            pass
        with timer.section("rref"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "rref"}
        assert result["rref"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(10))
        assert timer.result()["total_seconds"] >= 0.0
