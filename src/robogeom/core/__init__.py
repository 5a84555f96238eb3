"""Core functionalities: stateless geometry primitives and protocols.

Architecture Note:
    core/ holds pure value types with no runtime state mutation.
    Configuration lives in config/ and is imported lazily by core.
"""

from robogeom.core.errors import DegenerateVectorError, GeometryError
from robogeom.core.protocols import Diffable, Interpolatable, Reducible
from robogeom.core.types import Radians
from robogeom.core.vector import NULL, Vector2

__all__ = [
    # Types
    "Radians",
    # Errors
    "GeometryError",
    "DegenerateVectorError",
    # Protocols
    "Reducible",
    "Interpolatable",
    "Diffable",
    # Vector
    "Vector2",
    "NULL",
]
