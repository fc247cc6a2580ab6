"""
Tests for numerical safeguards

Checks:
1. Epsilon constants and ToleranceConfig validation
2. NaN/Inf rejection
3. Tolerant float comparison
"""

import math

import pytest

from astrocoord.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_MAGNITUDE,
    ToleranceConfig,
    all_close,
    is_close,
    is_valid_float,
    is_zero,
    validate_finite,
    validate_non_negative,
)


# =============================================================================
# TOLERANCE CONFIG
# =============================================================================


class TestToleranceConfig:
    """ToleranceConfig defaults and validation"""

    def test_defaults_match_constants(self) -> None:
        assert DEFAULT_TOLERANCE.rel_tol == EPS_FLOAT_COMPARE_REL
        assert DEFAULT_TOLERANCE.abs_tol == EPS_FLOAT_COMPARE_ABS
        assert DEFAULT_TOLERANCE.zero_tol == EPS_MAGNITUDE

    def test_custom_values(self) -> None:
        config = ToleranceConfig(rel_tol=1e-6, abs_tol=1e-6, zero_tol=0.5)
        assert config.zero_tol == 0.5

    def test_negative_tolerance_rejected(self) -> None:
        with pytest.raises(ValueError, match="zero_tol must be non-negative"):
            ToleranceConfig(zero_tol=-1.0)

    def test_nan_tolerance_rejected(self) -> None:
        with pytest.raises(ValueError, match="rel_tol must be a valid float"):
            ToleranceConfig(rel_tol=float("nan"))

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_TOLERANCE.zero_tol = 1.0  # type: ignore[misc]


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


class TestFiniteChecks:
    """is_valid_float / validate_finite / validate_non_negative"""

    def test_is_valid_float(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_validate_finite_converts_int(self) -> None:
        result = validate_finite(3, "x")
        assert result == 3.0
        assert isinstance(result, float)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_validate_finite_rejects_non_finite(self, value: float) -> None:
        with pytest.raises(ValueError, match="x must be a valid float"):
            validate_finite(value, "x")

    @pytest.mark.parametrize("value", [True, "1.0", None])
    def test_validate_finite_rejects_non_numbers(self, value: object) -> None:
        with pytest.raises(ValueError, match="x must be a real number"):
            validate_finite(value, "x")  # type: ignore[arg-type]

    def test_validate_non_negative(self) -> None:
        validate_non_negative(0.0, "tol")
        validate_non_negative(1.0, "tol")

        with pytest.raises(ValueError, match="tol must be non-negative"):
            validate_non_negative(-1e-15, "tol")


# =============================================================================
# TOLERANT COMPARISON
# =============================================================================


class TestComparisons:
    """is_close / is_zero / all_close"""

    def test_is_close_relative(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert not is_close(1.0, 1.1)
        assert is_close(1e10, 1e10 + 1.0)

    def test_is_close_absolute_near_zero(self) -> None:
        # cos(pi/2) round-off
        assert is_close(0.0, math.cos(math.pi / 2))
        assert not is_close(0.0, 1e-6)

    def test_is_zero(self) -> None:
        assert is_zero(0.0)
        assert is_zero(-1e-13)
        assert not is_zero(1e-6)
        assert is_zero(1e-6, tol=1e-5)

    def test_all_close(self) -> None:
        assert all_close((1.0, 2.0, 3.0), (1.0, 2.0 + 1e-12, 3.0))
        assert not all_close((1.0, 2.0, 3.0), (1.0, 2.1, 3.0))

    def test_all_close_length_mismatch(self) -> None:
        assert not all_close((1.0, 2.0), (1.0, 2.0, 0.0))

    def test_all_close_custom_tolerance(self) -> None:
        loose = ToleranceConfig(rel_tol=0.0, abs_tol=0.2)
        assert all_close((1.0, 2.0), (1.1, 2.1), loose)
