"""Configuration settings using Pydantic Settings.

Provides typed, environment-driven defaults for numeric tolerances.

Usage:
    from robogeom.config import GeometrySettings, get_settings

    # Load from environment variables (ROBOGEOM_*)
    settings = get_settings()

    # Or override with explicit values
    strict = GeometrySettings(abs_tol=0.0)
"""

from __future__ import annotations

from functools import lru_cache

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class GeometrySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for approximate vector comparison.

    Attributes:
        rel_tol: Default relative tolerance for Vector2.is_close.
        abs_tol: Default absolute tolerance for Vector2.is_close.

    Environment Variables:
        ROBOGEOM_REL_TOL
        ROBOGEOM_ABS_TOL
    """

    model_config = SettingsConfigDict(
        env_prefix="ROBOGEOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    rel_tol: float = Field(default=1e-9, ge=0.0)
    abs_tol: float = Field(default=1e-12, ge=0.0)


@lru_cache(maxsize=1)
def get_settings() -> GeometrySettings:
    """Get the process-wide settings, loading them on first use.

    Call get_settings.cache_clear() to pick up environment changes.
    """
    return GeometrySettings()
