"""Immutable two-dimensional vector.

Usage:
    position = Vector2(3.0, 4.0)
    position.scalar()                  # 5.0
    position.theta()                   # heading, 0 = north, clockwise
    step = position.normalized() * 0.5
    moved = position + step

Coordinate convention:
    +x = east, +y = north. Headings returned by theta() are measured from
    north and grow clockwise, normalized into [0, 2*PI).

No operation validates its inputs. NaN and infinity propagate through
ordinary float arithmetic; the only refused input is normalizing the
zero vector, which raises DegenerateVectorError.
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from robogeom.core.errors import DegenerateVectorError
from robogeom.core.types import Radians

logger = logging.getLogger(__name__)

_FULL_TURN = 2 * math.pi


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D vector with float coordinates.

    Every operation returns a new instance, so vectors can be shared freely.
    Equality is structural over (x, y) and instances are hashable.

    Attributes:
        x: East-west coordinate.
        y: North-south coordinate.
    """

    x: float
    y: float

    NULL: ClassVar[Vector2]
    """The zero vector (origin)."""

    # Accessors

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    # Arithmetic

    def add(self, v: Vector2) -> Vector2:
        """Componentwise sum of self and v."""
        return type(self)(self.x + v.x, self.y + v.y)

    def add_all(self, *vectors: Vector2) -> Vector2:
        """Add every vector in vectors to self.

        With no arguments the result equals self.
        """
        return self.add(type(self).sum(*vectors))

    @classmethod
    def sum(cls, *vectors: Vector2) -> Vector2:
        """Componentwise sum of vectors, or NULL when none are given."""
        x = 0.0
        y = 0.0
        for v in vectors:
            x += v.x
            y += v.y
        return cls(x, y)

    def multiply(self, scalar: float) -> Vector2:
        """Scale both components by scalar.

        A zero scalar yields NULL, a negative one reverses direction.
        """
        return type(self)(self.x * scalar, self.y * scalar)

    def subtract(self, v: Vector2) -> Vector2:
        """Componentwise difference self - v."""
        return type(self)(self.x - v.x, self.y - v.y)

    # Geometry

    def scalar(self) -> float:
        """Euclidean magnitude sqrt(x² + y²), never negative.

        Computed with math.hypot: it never underflows, so the result is 0 only
        for the zero vector, and it is inf only when the true magnitude exceeds
        the float range.
        """
        return math.hypot(self.x, self.y)

    def theta(self) -> Radians:
        """Heading of self in radians within [0, 2*PI).

        0 is north, PI/2 east, PI south and 3*PI/2 west. The zero vector has
        no direction; it reports 0 rather than raising.
        """
        return (math.atan2(self.x, self.y) + _FULL_TURN) % _FULL_TURN

    def rotate(self, theta: Radians) -> Vector2:
        """Rotate self by theta radians with the standard rotation matrix.

        Returns (x*cos(theta) - y*sin(theta), x*sin(theta) + y*cos(theta)).
        theta is expected within [-2*PI, 2*PI] but is not checked; other
        values give the periodic result.
        """
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return type(self)(
            self.x * cos_t - self.y * sin_t,
            self.x * sin_t + self.y * cos_t,
        )

    def arc_length(self, theta: Radians) -> float:
        """Signed arc length swept when self, taken as a radius, turns by theta."""
        return self.scalar() * theta

    def distance(self, v: Vector2) -> float:
        """Euclidean distance between self and v."""
        return self.subtract(v).scalar()

    def normalized(self) -> Vector2:
        """Unit vector with the same direction as self.

        Raises:
            DegenerateVectorError: If self has zero magnitude.
        """
        magnitude = self.scalar()
        if magnitude == 0:
            logger.debug("Refusing to normalize zero-magnitude vector %r", self)
            raise DegenerateVectorError(self, "normalize")
        if math.isinf(magnitude) or magnitude < sys.float_info.min:
            # Magnitude overflowed or is subnormal: rescale so the larger component is 1
            largest = max(abs(self.x), abs(self.y))
            if math.isfinite(largest):
                return type(self)(self.x / largest, self.y / largest).normalized()
        return type(self)(self.x / magnitude, self.y / magnitude)

    def is_contained(self, lx: float, ly: float, ux: float, uy: float) -> bool:
        """Check whether self lies inside the rectangle [lx, ux] x [ly, uy].

        Bounds are inclusive. Inverted bounds (lx > ux or ly > uy) contain
        nothing.
        """
        return lx <= self.x <= ux and ly <= self.y <= uy

    def is_close(
        self,
        other: Vector2,
        *,
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        """Componentwise math.isclose against other.

        Omitted tolerances fall back to the configured GeometrySettings.
        """
        if rel_tol is None or abs_tol is None:
            # Late import: core must not depend on config at import time
            from robogeom.config import get_settings

            settings = get_settings()
            rel_tol = settings.rel_tol if rel_tol is None else rel_tol
            abs_tol = settings.abs_tol if abs_tol is None else abs_tol
        return math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol
        )

    @classmethod
    def from_polar(cls, magnitude: float, theta: Radians) -> Vector2:
        """Create a vector from a magnitude and a north-zero clockwise heading."""
        return cls(magnitude * math.sin(theta), magnitude * math.cos(theta))

    # Operators

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: object) -> Vector2:
        if not isinstance(scalar, int | float):
            return NotImplemented
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return type(self)(-self.x, -self.y)

    def __abs__(self) -> float:
        return self.scalar()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"<{self.x:+.6f}, {self.y:+.6f}>"

    # Protocol hooks (Reducible, Interpolatable, Diffable)

    @classmethod
    def __reduce_many__(cls, items: list[Vector2]) -> Vector2:
        return cls.sum(*items)

    def __interpolate__(self, other: Vector2, t: float) -> Vector2:
        """Linear blend from self (t=0) to other (t=1); t is not clamped."""
        return type(self)(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def __diff__(self, baseline: Vector2) -> Vector2:
        return self.subtract(baseline)

    def __apply_diff__(self, diff: Vector2) -> Vector2:
        return self.add(diff)


Vector2.NULL = Vector2(0.0, 0.0)

NULL = Vector2.NULL
