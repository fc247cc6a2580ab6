"""
Spherical representations: (azimuth, polar_angle[, radius]).

The polar angle is measured from +z (colatitude), the azimuth from +x
towards +y. UnitSphericalRepresentation is the 2-D variant on the unit
sphere: converting a vector into it keeps only the direction.
"""

from typing import ClassVar

from astrocoord.core.geometry.kernel import (
    AngleUnit,
    CoordinateSystem,
    angle_from_radians,
    get_coordinate,
    make_point,
)
from astrocoord.core.representation.base import BaseRepresentation


class SphericalRepresentation(BaseRepresentation):
    """3-D spherical vector (azimuth, polar_angle, radius)."""

    DIMENSION: ClassVar[int] = 3
    SYSTEM: ClassVar[CoordinateSystem] = CoordinateSystem.SPHERICAL

    @classmethod
    def create(
        cls,
        azimuth: float,
        polar_angle: float,
        radius: float,
        unit: AngleUnit = AngleUnit.RADIAN,
    ) -> "SphericalRepresentation":
        """
        Args:
            azimuth: Angle from +x towards +y
            polar_angle: Angle from +z
            radius: Distance from origin (>= 0)
            unit: Unit of both angles (default: RADIAN)
        """
        return cls(
            point=make_point((azimuth, polar_angle, radius), CoordinateSystem.SPHERICAL, unit)
        )

    def azimuth(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 0), unit)

    def polar_angle(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 1), unit)

    @property
    def radius(self) -> float:
        return get_coordinate(self.point, 2)


class UnitSphericalRepresentation(BaseRepresentation):
    """2-D spherical direction (azimuth, polar_angle) on the unit sphere."""

    DIMENSION: ClassVar[int] = 2
    SYSTEM: ClassVar[CoordinateSystem] = CoordinateSystem.SPHERICAL

    @classmethod
    def create(
        cls,
        azimuth: float,
        polar_angle: float,
        unit: AngleUnit = AngleUnit.RADIAN,
    ) -> "UnitSphericalRepresentation":
        return cls(point=make_point((azimuth, polar_angle), CoordinateSystem.SPHERICAL, unit))

    def azimuth(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 0), unit)

    def polar_angle(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 1), unit)
