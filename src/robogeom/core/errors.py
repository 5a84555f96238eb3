"""Error types raised by robogeom.

Usage:
    try:
        heading = velocity.normalized()
    except DegenerateVectorError:
        heading = Vector2.NULL
"""

from __future__ import annotations

from typing import Any


class GeometryError(Exception):
    """Base class for all robogeom errors."""

    pass


class DegenerateVectorError(GeometryError, ValueError):
    """Raised when a direction-dependent operation is applied to the zero vector.

    Attributes:
        vector: The offending vector.
        operation: Name of the operation that was refused.
    """

    def __init__(self, vector: Any, operation: str) -> None:
        self.vector = vector
        self.operation = operation
        super().__init__(f"Cannot {operation} degenerate vector {vector!r}: magnitude is zero")
