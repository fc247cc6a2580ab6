"""
Cartesian representations (3-D and 2-D).

CartesianRepresentation is the natural return type when a caller wants the
canonical result of an operation as is.
"""

from typing import ClassVar

from astrocoord.core.geometry.kernel import CoordinateSystem, get_coordinate, make_point
from astrocoord.core.representation.base import BaseRepresentation


class CartesianRepresentation(BaseRepresentation):
    """3-D cartesian vector (x, y, z)."""

    DIMENSION: ClassVar[int] = 3
    SYSTEM: ClassVar[CoordinateSystem] = CoordinateSystem.CARTESIAN

    @classmethod
    def create(cls, x: float, y: float, z: float) -> "CartesianRepresentation":
        return cls(point=make_point((x, y, z), CoordinateSystem.CARTESIAN))

    @property
    def x(self) -> float:
        return get_coordinate(self.point, 0)

    @property
    def y(self) -> float:
        return get_coordinate(self.point, 1)

    @property
    def z(self) -> float:
        return get_coordinate(self.point, 2)


class Cartesian2DRepresentation(BaseRepresentation):
    """
    2-D cartesian vector (x, y).

    Lives in the z = 0 plane of canonical space; converting a 3-D vector
    into it drops z.
    """

    DIMENSION: ClassVar[int] = 2
    SYSTEM: ClassVar[CoordinateSystem] = CoordinateSystem.CARTESIAN

    @classmethod
    def create(cls, x: float, y: float) -> "Cartesian2DRepresentation":
        return cls(point=make_point((x, y), CoordinateSystem.CARTESIAN))

    @property
    def x(self) -> float:
        return get_coordinate(self.point, 0)

    @property
    def y(self) -> float:
        return get_coordinate(self.point, 1)
