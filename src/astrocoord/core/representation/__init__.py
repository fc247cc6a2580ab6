"""
Representations: the generic base with its canonical-space algebra and the
concrete coordinate systems built on it.
"""

from astrocoord.core.representation.base import (
    ARGUMENT_TYPE_MESSAGE,
    RETURN_TYPE_MESSAGE,
    BaseRepresentation,
    RepresentationTypeError,
    ZeroMagnitudeError,
    is_representation,
    require_representation,
)
from astrocoord.core.representation.cartesian import (
    Cartesian2DRepresentation,
    CartesianRepresentation,
)
from astrocoord.core.representation.cylindrical import CylindricalRepresentation
from astrocoord.core.representation.spherical import (
    SphericalRepresentation,
    UnitSphericalRepresentation,
)
from astrocoord.core.representation.spherical_equatorial import (
    SphericalEquatorialRepresentation,
    UnitSphericalEquatorialRepresentation,
)

__all__ = [
    # Base
    "ARGUMENT_TYPE_MESSAGE",
    "RETURN_TYPE_MESSAGE",
    "BaseRepresentation",
    "RepresentationTypeError",
    "ZeroMagnitudeError",
    "is_representation",
    "require_representation",
    # Concrete representations
    "Cartesian2DRepresentation",
    "CartesianRepresentation",
    "CylindricalRepresentation",
    "SphericalEquatorialRepresentation",
    "SphericalRepresentation",
    "UnitSphericalEquatorialRepresentation",
    "UnitSphericalRepresentation",
]
