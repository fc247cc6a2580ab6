"""
Numerical Safeguards — tolerances and float guards for vector algebra

Shared by the geometry kernel and the representation algebra:
- Epsilon constants for float comparison and zero-magnitude detection
- ToleranceConfig for callers that need their own tolerances
- NaN/Inf checks (coordinates are never allowed to be non-finite)
- Tolerant float comparison

INVARIANTS:
1. A coordinate that is NaN/Inf never enters a Point (validate_finite)
2. Float comparisons always go through is_close / is_zero
3. A vector is "zero" iff its magnitude <= zero_tol
"""

import math
from dataclasses import dataclass
from typing import Final

# =============================================================================
# EPSILON CONSTANTS
# =============================================================================

# Magnitudes at or below this value are treated as a zero vector
# (unit_vector refuses to normalise them)
EPS_MAGNITUDE: Final[float] = 1e-12

# Relative tolerance for float comparison (is_close, representation equality)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Absolute tolerance for float comparison (matters near zero, where
# trigonometric round-off leaves values like 6.1e-17)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Validate that a value is a finite real number.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Returns:
        value converted to float

    Raises:
        ValueError: If value is NaN/Inf or not a real number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a real number, got {value!r}")

    value = float(value)
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    return value


def validate_non_negative(value: float, name: str) -> None:
    """
    Validate that a value is finite and non-negative.

    Raises:
        ValueError: If value < 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# TOLERANCE CONFIG
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances used when comparing or normalising vectors.

    rel_tol / abs_tol feed math.isclose; zero_tol is the magnitude below
    which a vector cannot be normalised.
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS
    zero_tol: float = EPS_MAGNITUDE

    def __post_init__(self) -> None:
        validate_non_negative(self.rel_tol, "rel_tol")
        validate_non_negative(self.abs_tol, "abs_tol")
        validate_non_negative(self.zero_tol, "zero_tol")


DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig()


# =============================================================================
# TOLERANT COMPARISON
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare two floats within tolerance.

    Algorithm:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 6.123233995736766e-17)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True if abs(value) <= tol."""
    return abs(value) <= tol


def all_close(
    a: tuple[float, ...],
    b: tuple[float, ...],
    tolerance: ToleranceConfig = DEFAULT_TOLERANCE,
) -> bool:
    """
    Component-wise is_close over two equally sized tuples.

    Tuples of different length are never close.
    """
    if len(a) != len(b):
        return False

    return all(
        is_close(x, y, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol)
        for x, y in zip(a, b)
    )
