"""Tests for environment-driven geometry settings."""

import pytest
from pydantic import ValidationError

from robogeom import Vector2
from robogeom.config import GeometrySettings, get_settings


def test_defaults(clean_settings):
    settings = GeometrySettings()
    assert settings.rel_tol == 1e-9
    assert settings.abs_tol == 1e-12


def test_environment_overrides(clean_settings):
    clean_settings.setenv("ROBOGEOM_REL_TOL", "0.001")
    clean_settings.setenv("ROBOGEOM_ABS_TOL", "0.5")

    settings = GeometrySettings()

    assert settings.rel_tol == 0.001
    assert settings.abs_tol == 0.5


def test_unrelated_environment_is_ignored(clean_settings):
    clean_settings.setenv("ROBOGEOM_UNKNOWN", "1")
    assert GeometrySettings().abs_tol == 1e-12


@pytest.mark.parametrize(
    "kwargs",
    [{"rel_tol": -1.0}, {"abs_tol": -1e-9}],
    ids=["negative-rel", "negative-abs"],
)
def test_negative_tolerance_rejected(clean_settings, kwargs):
    with pytest.raises(ValidationError):
        GeometrySettings(**kwargs)


def test_get_settings_is_cached(clean_settings):
    assert get_settings() is get_settings()


def test_is_close_uses_configured_tolerance(clean_settings):
    """is_close() without explicit tolerances reads the cached settings."""
    a = Vector2(0.0, 0.0)
    b = Vector2(0.4, 0.0)
    assert not a.is_close(b)

    clean_settings.setenv("ROBOGEOM_ABS_TOL", "0.5")
    get_settings.cache_clear()

    assert a.is_close(b)
    assert not a.is_close(b, abs_tol=0.1)
