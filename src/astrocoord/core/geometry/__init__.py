"""
Geometry kernel: points, coordinate systems, transforms and 3-D products.
"""

from astrocoord.core.geometry.kernel import (
    ANGULAR_AXES,
    CANONICAL_DIMENSION,
    RADIAL_AXES,
    SUPPORTED_DIMENSIONS,
    AngleUnit,
    CoordinateSystem,
    Point,
    angle_from_radians,
    angle_to_radians,
    cross_product,
    dot_product,
    from_cartesian,
    get_coordinate,
    make_point,
    set_coordinate,
    to_cartesian,
    transform,
)

__all__ = [
    # Constants
    "ANGULAR_AXES",
    "CANONICAL_DIMENSION",
    "RADIAL_AXES",
    "SUPPORTED_DIMENSIONS",
    # Types
    "AngleUnit",
    "CoordinateSystem",
    "Point",
    # Functions
    "angle_from_radians",
    "angle_to_radians",
    "cross_product",
    "dot_product",
    "from_cartesian",
    "get_coordinate",
    "make_point",
    "set_coordinate",
    "to_cartesian",
    "transform",
]
