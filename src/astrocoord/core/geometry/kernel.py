"""
Geometry Kernel — points, coordinate systems and 3-D vector primitives

Value-in/value-out primitives the representation algebra is built on:
- Point: immutable tuple of coordinates tagged with a CoordinateSystem
- Per-axis coordinate access (get_coordinate / set_coordinate)
- Transforms between coordinate systems (always through 3-D cartesian)
- 3-D dot product and cross product

AXIS ORDER:
    CARTESIAN              (x, y[, z])
    SPHERICAL              (azimuth, polar_angle[, radius]), polar angle from +z
    SPHERICAL_EQUATORIAL   (longitude, latitude[, radius]), latitude from x-y plane
    CYLINDRICAL            (rho, phi, z)

2-D spherical variants lie on the unit sphere (radius = 1).
Angles are stored in radians; AngleUnit only applies at construction/access.

FORMULAS (to cartesian):
    spherical:   x = r sin(θ) cos(φ), y = r sin(θ) sin(φ), z = r cos(θ)
    equatorial:  x = r cos(b) cos(l), y = r cos(b) sin(l), z = r sin(b)
    cylindrical: x = ρ cos(φ),        y = ρ sin(φ),        z = z
"""

import logging
import math
from enum import Enum
from typing import Final, Iterable

from pydantic import BaseModel, Field, field_validator, model_validator

from astrocoord.core.math.numerical_safeguards import validate_finite

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class CoordinateSystem(str, Enum):
    """Coordinate system tag of a Point"""

    CARTESIAN = "cartesian"
    SPHERICAL = "spherical"
    SPHERICAL_EQUATORIAL = "spherical_equatorial"
    CYLINDRICAL = "cylindrical"


class AngleUnit(str, Enum):
    """Unit of angular coordinates passed in or read out"""

    RADIAN = "radian"
    DEGREE = "degree"


# =============================================================================
# SYSTEM TABLES
# =============================================================================

CANONICAL_DIMENSION: Final[int] = 3

# Allowed point dimensions per coordinate system
SUPPORTED_DIMENSIONS: Final[dict[CoordinateSystem, tuple[int, ...]]] = {
    CoordinateSystem.CARTESIAN: (2, 3),
    CoordinateSystem.SPHERICAL: (2, 3),
    CoordinateSystem.SPHERICAL_EQUATORIAL: (2, 3),
    CoordinateSystem.CYLINDRICAL: (3,),
}

# Axes holding angles (converted by AngleUnit)
ANGULAR_AXES: Final[dict[CoordinateSystem, tuple[int, ...]]] = {
    CoordinateSystem.CARTESIAN: (),
    CoordinateSystem.SPHERICAL: (0, 1),
    CoordinateSystem.SPHERICAL_EQUATORIAL: (0, 1),
    CoordinateSystem.CYLINDRICAL: (1,),
}

# Axes holding a radial distance (must be >= 0)
RADIAL_AXES: Final[dict[CoordinateSystem, tuple[int, ...]]] = {
    CoordinateSystem.CARTESIAN: (),
    CoordinateSystem.SPHERICAL: (2,),
    CoordinateSystem.SPHERICAL_EQUATORIAL: (2,),
    CoordinateSystem.CYLINDRICAL: (0,),
}


def angle_to_radians(value: float, unit: AngleUnit) -> float:
    """Convert an angle given in `unit` to radians."""
    if unit == AngleUnit.DEGREE:
        return math.radians(value)
    return value


def angle_from_radians(value: float, unit: AngleUnit) -> float:
    """Convert an angle in radians to `unit`."""
    if unit == AngleUnit.DEGREE:
        return math.degrees(value)
    return value


# =============================================================================
# POINT MODEL
# =============================================================================


class Point(BaseModel):
    """
    Immutable N-dimensional point tagged with its coordinate system.

    Coordinates are finite floats; angular axes are in radians.
    Radial axes (radius, rho) are non-negative.
    """

    coordinates: tuple[float, ...] = Field(..., description="Coordinates in system axis order")
    system: CoordinateSystem = Field(..., description="Coordinate system of the coordinates")

    model_config = {"frozen": True}

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates_finite(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        return tuple(validate_finite(c, f"coordinate[{i}]") for i, c in enumerate(v))

    @model_validator(mode="after")
    def validate_system_layout(self) -> "Point":
        allowed = SUPPORTED_DIMENSIONS[self.system]
        if self.dimension not in allowed:
            raise ValueError(
                f"{self.system.value} point must have dimension in {allowed}, "
                f"got {self.dimension}"
            )

        for axis in RADIAL_AXES[self.system]:
            if axis < self.dimension and self.coordinates[axis] < 0:
                raise ValueError(
                    f"{self.system.value} radial coordinate[{axis}] must be non-negative, "
                    f"got {self.coordinates[axis]}"
                )
        return self

    @property
    def dimension(self) -> int:
        return len(self.coordinates)


# =============================================================================
# CONSTRUCTION AND ACCESS
# =============================================================================


def make_point(
    coordinates: Iterable[float],
    system: CoordinateSystem = CoordinateSystem.CARTESIAN,
    unit: AngleUnit = AngleUnit.RADIAN,
) -> Point:
    """
    Construct a Point, converting angular axes from `unit` to radians.

    Args:
        coordinates: Coordinates in the axis order of `system`
        system: Coordinate system (default: CARTESIAN)
        unit: Unit of the angular coordinates (default: RADIAN)

    Returns:
        Validated Point

    Raises:
        pydantic.ValidationError: Wrong dimension, NaN/Inf or negative radius

    Examples:
        >>> make_point((1.0, 2.0, 3.0)).coordinates
        (1.0, 2.0, 3.0)
        >>> make_point((180.0, 0.0), CoordinateSystem.SPHERICAL_EQUATORIAL, AngleUnit.DEGREE).coordinates
        (3.141592653589793, 0.0)
    """
    values = list(coordinates)
    for axis in ANGULAR_AXES[system]:
        if axis < len(values):
            values[axis] = angle_to_radians(values[axis], unit)

    return Point(coordinates=tuple(values), system=system)


def _check_axis(point: Point, axis: int) -> None:
    if not 0 <= axis < point.dimension:
        raise IndexError(
            f"axis {axis} out of range for {point.dimension}-D {point.system.value} point"
        )


def get_coordinate(point: Point, axis: int) -> float:
    """
    Read one coordinate of a point.

    Raises:
        IndexError: If axis is outside the point's dimension
    """
    _check_axis(point, axis)
    return point.coordinates[axis]


def set_coordinate(point: Point, axis: int, value: float) -> Point:
    """
    Return a copy of `point` with one coordinate replaced.

    The original point is left untouched.

    Raises:
        IndexError: If axis is outside the point's dimension
        pydantic.ValidationError: If the new value makes the point invalid
    """
    _check_axis(point, axis)
    values = list(point.coordinates)
    values[axis] = value
    return Point(coordinates=tuple(values), system=point.system)


# =============================================================================
# TRANSFORMS
# =============================================================================


def to_cartesian(point: Point) -> Point:
    """
    Convert any point into canonical 3-D cartesian form.

    2-D cartesian points get z = 0; 2-D spherical variants use radius 1.

    Examples:
        >>> to_cartesian(make_point((1.0, 2.0))).coordinates
        (1.0, 2.0, 0.0)
    """
    c = point.coordinates
    system = point.system

    if system == CoordinateSystem.CARTESIAN:
        xyz = c if point.dimension == 3 else (c[0], c[1], 0.0)

    elif system == CoordinateSystem.SPHERICAL:
        azimuth, polar = c[0], c[1]
        r = c[2] if point.dimension == 3 else 1.0
        xyz = (
            r * math.sin(polar) * math.cos(azimuth),
            r * math.sin(polar) * math.sin(azimuth),
            r * math.cos(polar),
        )

    elif system == CoordinateSystem.SPHERICAL_EQUATORIAL:
        lon, lat = c[0], c[1]
        r = c[2] if point.dimension == 3 else 1.0
        xyz = (
            r * math.cos(lat) * math.cos(lon),
            r * math.cos(lat) * math.sin(lon),
            r * math.sin(lat),
        )

    elif system == CoordinateSystem.CYLINDRICAL:
        rho, phi, z = c
        xyz = (rho * math.cos(phi), rho * math.sin(phi), z)

    else:
        raise ValueError(f"Unsupported coordinate system: {system}")

    return Point(coordinates=tuple(xyz), system=CoordinateSystem.CARTESIAN)


def from_cartesian(point: Point, system: CoordinateSystem, dimension: int) -> Point:
    """
    Convert a cartesian point into `system` with `dimension` axes.

    Lossy targets:
    - 2-D cartesian drops z
    - 2-D spherical variants keep only the direction (radius is discarded)

    The zero vector maps to zero angles.

    Args:
        point: 2-D or 3-D cartesian point
        system: Target coordinate system
        dimension: Target dimension (must be supported by `system`)

    Returns:
        Point in the target system

    Raises:
        ValueError: If `point` is not cartesian or the target is unsupported
    """
    if point.system != CoordinateSystem.CARTESIAN:
        raise ValueError(f"from_cartesian expects a cartesian point, got {point.system.value}")

    allowed = SUPPORTED_DIMENSIONS[system]
    if dimension not in allowed:
        raise ValueError(
            f"{system.value} does not support dimension {dimension} (allowed: {allowed})"
        )

    x, y = point.coordinates[0], point.coordinates[1]
    z = point.coordinates[2] if point.dimension == 3 else 0.0
    rho = math.hypot(x, y)

    if dimension < CANONICAL_DIMENSION:
        logger.debug("Projecting 3-D cartesian %s onto 2-D %s", (x, y, z), system.value)

    if system == CoordinateSystem.CARTESIAN:
        coords = (x, y, z)

    elif system == CoordinateSystem.SPHERICAL:
        coords = (math.atan2(y, x), math.atan2(rho, z), math.hypot(rho, z))

    elif system == CoordinateSystem.SPHERICAL_EQUATORIAL:
        coords = (math.atan2(y, x), math.atan2(z, rho), math.hypot(rho, z))

    elif system == CoordinateSystem.CYLINDRICAL:
        coords = (rho, math.atan2(y, x), z)

    else:
        raise ValueError(f"Unsupported coordinate system: {system}")

    return Point(coordinates=coords[:dimension], system=system)


def transform(point: Point, system: CoordinateSystem, dimension: int) -> Point:
    """
    Transform a point into another coordinate system / dimension.

    Identity (a copy) when system and dimension already match; otherwise
    the point goes through canonical 3-D cartesian form.
    """
    if point.system == system and point.dimension == dimension:
        return point.model_copy()

    return from_cartesian(to_cartesian(point), system, dimension)


# =============================================================================
# 3-D VECTOR PRODUCTS
# =============================================================================


def _require_cartesian_3d(point: Point, name: str) -> tuple[float, float, float]:
    if point.system != CoordinateSystem.CARTESIAN or point.dimension != CANONICAL_DIMENSION:
        raise ValueError(
            f"{name} must be a 3-D cartesian point, got {point.dimension}-D {point.system.value}"
        )
    x, y, z = point.coordinates
    return x, y, z


def dot_product(a: Point, b: Point) -> float:
    """
    Dot product of two 3-D cartesian points.

    Raises:
        ValueError: If either point is not 3-D cartesian
    """
    ax, ay, az = _require_cartesian_3d(a, "a")
    bx, by, bz = _require_cartesian_3d(b, "b")
    return math.fsum((ax * bx, ay * by, az * bz))


def cross_product(a: Point, b: Point) -> Point:
    """
    Cross product a × b of two 3-D cartesian points.

    Raises:
        ValueError: If either point is not 3-D cartesian

    Examples:
        >>> cross_product(make_point((1.0, 0.0, 0.0)), make_point((0.0, 1.0, 0.0))).coordinates
        (0.0, 0.0, 1.0)
    """
    ax, ay, az = _require_cartesian_3d(a, "a")
    bx, by, bz = _require_cartesian_3d(b, "b")
    return Point(
        coordinates=(
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx,
        ),
        system=CoordinateSystem.CARTESIAN,
    )
