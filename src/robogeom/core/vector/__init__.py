"""Vector functionality: the immutable Vector2 value type."""

from robogeom.core.vector.models import NULL, Vector2

__all__ = [
    "NULL",
    "Vector2",
]
