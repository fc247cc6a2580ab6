"""Cylindrical representation (rho, phi, z)."""

from typing import ClassVar

from astrocoord.core.geometry.kernel import (
    AngleUnit,
    CoordinateSystem,
    angle_from_radians,
    get_coordinate,
    make_point,
)
from astrocoord.core.representation.base import BaseRepresentation


class CylindricalRepresentation(BaseRepresentation):
    """3-D cylindrical vector: radial distance rho (>= 0), azimuth phi, height z."""

    DIMENSION: ClassVar[int] = 3
    SYSTEM: ClassVar[CoordinateSystem] = CoordinateSystem.CYLINDRICAL

    @classmethod
    def create(
        cls,
        rho: float,
        phi: float,
        z: float,
        unit: AngleUnit = AngleUnit.RADIAN,
    ) -> "CylindricalRepresentation":
        return cls(point=make_point((rho, phi, z), CoordinateSystem.CYLINDRICAL, unit))

    @property
    def rho(self) -> float:
        return get_coordinate(self.point, 0)

    def phi(self, unit: AngleUnit = AngleUnit.RADIAN) -> float:
        return angle_from_radians(get_coordinate(self.point, 1), unit)

    @property
    def z(self) -> float:
        return get_coordinate(self.point, 2)
