"""
Spherical-equatorial representations: (lon, lat[, distance]).

Latitude is measured from the x-y plane (+90° at +z), longitude from +x
towards +y. This is the layout of sky coordinates such as RA/Dec.
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


class SphericalEquatorialRepresentation(BaseRepresentation):
    """3-D spherical-equatorial vector (lon, lat, distance)."""

    DIMENSION: ClassVar[int] = 3
    SYSTEM: ClassVar[CoordinateSystem] = CoordinateSystem.SPHERICAL_EQUATORIAL

    @classmethod
    def create(
        cls,
        lon: float,
        lat: float,
        distance: float,
        unit: AngleUnit = AngleUnit.RADIAN,
    ) -> "SphericalEquatorialRepresentation":
        return cls(
            point=make_point((lon, lat, distance), CoordinateSystem.SPHERICAL_EQUATORIAL, unit)
        )

    def lon(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 0), unit)

    def lat(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 1), unit)

    @property
    def distance(self) -> float:
        return get_coordinate(self.point, 2)


class UnitSphericalEquatorialRepresentation(BaseRepresentation):
    """2-D direction (lon, lat) on the unit sphere."""

    DIMENSION: ClassVar[int] = 2
    SYSTEM: ClassVar[CoordinateSystem] = CoordinateSystem.SPHERICAL_EQUATORIAL

    @classmethod
    def create(
        cls,
        lon: float,
        lat: float,
        unit: AngleUnit = AngleUnit.RADIAN,
    ) -> "UnitSphericalEquatorialRepresentation":
        return cls(point=make_point((lon, lat), CoordinateSystem.SPHERICAL_EQUATORIAL, unit))

    def lon(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 0), unit)

    def lat(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 1), unit)
