"""Configuration module using Pydantic Settings.

Provides typed tolerance defaults with environment variable support.

Usage:
    from robogeom.config import GeometrySettings, get_settings

    settings = get_settings()
    loose = GeometrySettings(rel_tol=1e-6)
"""

from robogeom.config.settings import GeometrySettings, get_settings

__all__ = [
    "GeometrySettings",
    "get_settings",
]
