"""robogeom: immutable geometry primitives for agent and robot simulation.

Usage:
    from robogeom import Vector2, DegenerateVectorError

    position = Vector2(3.0, 4.0)
    target = Vector2(0.0, 10.0)

    to_target = target - position
    heading = to_target.theta()        # 0 = north, clockwise
    try:
        position = position + to_target.normalized() * 0.5
    except DegenerateVectorError:
        pass                           # already on target
"""

__version__ = "0.1.0"

from robogeom.core import (
    NULL,
    DegenerateVectorError,
    Diffable,
    GeometryError,
    Interpolatable,
    Radians,
    Reducible,
    Vector2,
)

__all__ = [
    # Version
    "__version__",
    # Vector
    "Vector2",
    "NULL",
    "Radians",
    # Errors
    "GeometryError",
    "DegenerateVectorError",
    # Protocols
    "Reducible",
    "Interpolatable",
    "Diffable",
]
