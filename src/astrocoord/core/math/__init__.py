"""
Core math modules for astrocoord

Numerical guards shared by the geometry kernel and the representation algebra.
"""

from astrocoord.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_MAGNITUDE,
    # Config
    DEFAULT_TOLERANCE,
    ToleranceConfig,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    validate_non_negative,
    # Comparisons
    all_close,
    is_close,
    is_zero,
)

__all__ = [
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_MAGNITUDE",
    "DEFAULT_TOLERANCE",
    "ToleranceConfig",
    "is_valid_float",
    "validate_finite",
    "validate_non_negative",
    "all_close",
    "is_close",
    "is_zero",
]
