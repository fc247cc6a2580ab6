"""
BaseRepresentation — generic vector representation and canonical-space algebra

A representation is an immutable N-dimensional Point tagged with a
coordinate system. Concrete representations declare DIMENSION and SYSTEM;
everything else lives here.

Every pairwise operation goes through one canonical space (3-D cartesian):
    1. check argument / return types are representations
    2. transform each operand's point to canonical cartesian
    3. compute in canonical space
    4. build the requested return type from the canonical result
       (return_type.from_point performs cartesian → target conversion)

A new representation type therefore only needs kernel transforms to and
from cartesian; it interoperates with every other type for all operations.
Same-system operands are never special-cased.

ZERO VECTORS:
    magnitude() of a zero vector is 0.0
    unit_vector() of a vector with magnitude <= zero_tol → ZeroMagnitudeError
"""

import logging
import math
from typing import Callable, ClassVar, Final, TypeVar

from pydantic import BaseModel, Field, model_validator

from astrocoord.core.geometry.kernel import (
    CANONICAL_DIMENSION,
    CoordinateSystem,
    Point,
    cross_product,
    dot_product,
    get_coordinate,
    set_coordinate,
    transform,
)
from astrocoord.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    ToleranceConfig,
    all_close,
    is_zero,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="BaseRepresentation")

ARGUMENT_TYPE_MESSAGE: Final[str] = "argument type must be a representation"
RETURN_TYPE_MESSAGE: Final[str] = "return type must be a representation"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RepresentationTypeError(TypeError):
    """An algebra operation received a non-representation argument or return type."""


class ZeroMagnitudeError(ArithmeticError):
    """
    A zero vector cannot be normalised.

    Raised by unit_vector when the canonical magnitude is at or below
    ToleranceConfig.zero_tol.
    """


# =============================================================================
# CAPABILITY CHECK
# =============================================================================


def is_representation(tp: object) -> bool:
    """
    Check whether `tp` is a concrete representation type.

    Any subclass of BaseRepresentation that declares a coordinate system
    qualifies, whatever its dimension or system. Instances, plain classes
    and the abstract base itself do not.

    Examples:
        >>> is_representation(float)
        False
        >>> is_representation(BaseRepresentation)
        False
    """
    return (
        isinstance(tp, type)
        and issubclass(tp, BaseRepresentation)
        and tp.SYSTEM is not None
        and tp.DIMENSION is not None
    )


def require_representation(tp: object, message: str) -> None:
    """
    Gate for algebra operations.

    Raises:
        RepresentationTypeError: If `tp` is not a representation type
    """
    if not is_representation(tp):
        raise RepresentationTypeError(f"{message}, got {tp!r}")


def _require_operand(other: object) -> None:
    require_representation(type(other), ARGUMENT_TYPE_MESSAGE)


def _euclidean_norm(point: Point) -> float:
    return math.hypot(*point.coordinates)


def _componentwise(a: Point, b: Point, combine: Callable[[float, float], float]) -> Point:
    result = a
    for axis in range(CANONICAL_DIMENSION):
        result = set_coordinate(
            result, axis, combine(get_coordinate(a, axis), get_coordinate(b, axis))
        )
    return result


# =============================================================================
# BASE REPRESENTATION
# =============================================================================


class BaseRepresentation(BaseModel):
    """
    Abstract representation: a Point in the subclass's coordinate system.

    Subclasses set DIMENSION and SYSTEM. Instances are immutable
    (frozen=True); every operation returns a new instance.
    """

    DIMENSION: ClassVar[int | None] = None
    SYSTEM: ClassVar[CoordinateSystem | None] = None

    point: Point = Field(..., description="Native coordinates in SYSTEM")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_point_matches_system(self) -> "BaseRepresentation":
        cls = type(self)
        if cls.SYSTEM is None or cls.DIMENSION is None:
            raise ValueError(f"{cls.__name__} declares no coordinate system and cannot be built")

        if self.point.system != cls.SYSTEM or self.point.dimension != cls.DIMENSION:
            raise ValueError(
                f"{cls.__name__} expects a {cls.DIMENSION}-D {cls.SYSTEM.value} point, "
                f"got {self.point.dimension}-D {self.point.system.value}"
            )
        return self

    @classmethod
    def from_point(cls: type[R], point: Point) -> R:
        """
        Build this representation from a point in any supported system.

        The point is transformed into (SYSTEM, DIMENSION) by the kernel.

        Raises:
            RepresentationTypeError: If called on the abstract base
        """
        require_representation(cls, RETURN_TYPE_MESSAGE)
        return cls(point=transform(point, cls.SYSTEM, cls.DIMENSION))

    def get_point(self) -> Point:
        """Native coordinates (read-only; Point is immutable)."""
        return self.point

    def _canonical(self) -> Point:
        return transform(self.point, CoordinateSystem.CARTESIAN, CANONICAL_DIMENSION)

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    def cross(self, other: "BaseRepresentation", return_type: type[R]) -> R:
        """
        Cross product self × other, returned as `return_type`.

        Args:
            other: Any representation (any system, any dimension)
            return_type: Representation type of the result

        Raises:
            RepresentationTypeError: If other / return_type is not a representation
            pydantic.ValidationError: If a component overflows to infinity
        """
        _require_operand(other)
        require_representation(return_type, RETURN_TYPE_MESSAGE)

        return return_type.from_point(cross_product(self._canonical(), other._canonical()))

    def dot(self, other: "BaseRepresentation") -> float:
        """
        Dot product of self and other in canonical cartesian space.

        Raises:
            RepresentationTypeError: If other is not a representation
        """
        _require_operand(other)

        return dot_product(self._canonical(), other._canonical())

    # -------------------------------------------------------------------------
    # Norm
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        """
        Euclidean norm sqrt(x² + y² + z²) of the canonical cartesian vector.

        Computed with math.hypot (no intermediate overflow or underflow).
        Returns inf only when the norm itself exceeds the float range.

        Returns 0.0 for a zero vector.
        """
        return _euclidean_norm(self._canonical())

    def unit_vector(
        self,
        return_type: type[R],
        tolerance: ToleranceConfig = DEFAULT_TOLERANCE,
    ) -> R:
        """
        Unit vector in the direction of self, returned as `return_type`.

        Args:
            return_type: Representation type of the result
            tolerance: zero_tol decides when the vector counts as zero

        Raises:
            RepresentationTypeError: If return_type is not a representation
            ZeroMagnitudeError: If magnitude <= tolerance.zero_tol
        """
        require_representation(return_type, RETURN_TYPE_MESSAGE)

        canonical = self._canonical()

        # rescale by the largest component first so the norm cannot overflow
        scale = max(abs(c) for c in canonical.coordinates)
        scaled = [
            get_coordinate(canonical, axis) / scale if scale else 0.0
            for axis in range(CANONICAL_DIMENSION)
        ]
        scaled_mag = math.hypot(*scaled)
        mag = scale * scaled_mag
        if is_zero(mag, tolerance.zero_tol):
            logger.warning(
                "unit_vector of %s refused: magnitude %.3e <= zero_tol %.3e",
                type(self).__name__,
                mag,
                tolerance.zero_tol,
            )
            raise ZeroMagnitudeError(
                f"cannot normalise {type(self).__name__} with magnitude {mag:.3e} "
                f"(zero_tol={tolerance.zero_tol:.3e})"
            )

        unit = canonical
        for axis in range(CANONICAL_DIMENSION):
            unit = set_coordinate(unit, axis, scaled[axis] / scaled_mag)

        return return_type.from_point(unit)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_representation(self, return_type: type[R]) -> R:
        """
        Convert self into `return_type`.

        The native point is handed over as is; the target type does the
        conversion.

        Raises:
            RepresentationTypeError: If return_type is not a representation
        """
        require_representation(return_type, RETURN_TYPE_MESSAGE)

        return return_type.from_point(self.point)

    # -------------------------------------------------------------------------
    # Component-wise arithmetic
    # -------------------------------------------------------------------------

    def sum(self, other: "BaseRepresentation", return_type: type[R]) -> R:
        """
        Vector sum self + other, returned as `return_type`.

        Raises:
            RepresentationTypeError: If other / return_type is not a representation
            pydantic.ValidationError: If a component overflows to infinity
        """
        _require_operand(other)
        require_representation(return_type, RETURN_TYPE_MESSAGE)

        result = _componentwise(self._canonical(), other._canonical(), lambda a, b: a + b)
        return return_type.from_point(result)

    def mean(self, other: "BaseRepresentation", return_type: type[R]) -> R:
        """
        Mean of self and other, returned as `return_type`.

        Each operand is halved before adding, so the mean of two finite
        vectors is always finite.
        """
        _require_operand(other)
        require_representation(return_type, RETURN_TYPE_MESSAGE)

        result = _componentwise(self._canonical(), other._canonical(), lambda a, b: a / 2 + b / 2)
        return return_type.from_point(result)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equals(
        self,
        other: "BaseRepresentation",
        tolerance: ToleranceConfig = DEFAULT_TOLERANCE,
    ) -> bool:
        """
        Tolerant equality of the two vectors in canonical cartesian space.

        Representations of different systems describing the same vector
        are equal. Pydantic's == stays an exact, same-type comparison.
        """
        _require_operand(other)

        return all_close(
            self._canonical().coordinates,
            other._canonical().coordinates,
            tolerance,
        )
