"""
astrocoord — coordinate representations with canonical-space vector algebra.

Representations of one vector in different coordinate systems
(cartesian, spherical, spherical-equatorial, cylindrical) combine through
a single canonical 3-D cartesian space.
"""

from astrocoord.core.geometry import AngleUnit, CoordinateSystem, Point, make_point
from astrocoord.core.math import DEFAULT_TOLERANCE, ToleranceConfig
from astrocoord.core.representation import (
    BaseRepresentation,
    Cartesian2DRepresentation,
    CartesianRepresentation,
    CylindricalRepresentation,
    RepresentationTypeError,
    SphericalEquatorialRepresentation,
    SphericalRepresentation,
    UnitSphericalEquatorialRepresentation,
    UnitSphericalRepresentation,
    ZeroMagnitudeError,
    is_representation,
)

__version__ = "0.1.0"

__all__ = [
    "AngleUnit",
    "CoordinateSystem",
    "Point",
    "make_point",
    "DEFAULT_TOLERANCE",
    "ToleranceConfig",
    "BaseRepresentation",
    "Cartesian2DRepresentation",
    "CartesianRepresentation",
    "CylindricalRepresentation",
    "RepresentationTypeError",
    "SphericalEquatorialRepresentation",
    "SphericalRepresentation",
    "UnitSphericalEquatorialRepresentation",
    "UnitSphericalRepresentation",
    "ZeroMagnitudeError",
    "is_representation",
]
