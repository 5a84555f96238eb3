"""Tests for structural protocol support on Vector2.

Why these tests exist:
- Simulation layers detect capabilities with isinstance() checks
- Diff/apply and interpolation endpoints must agree with plain arithmetic
"""

import pytest

from robogeom import Diffable, Interpolatable, Reducible, Vector2


@pytest.mark.parametrize(
    "protocol",
    [Reducible, Interpolatable, Diffable],
    ids=["reducible", "interpolatable", "diffable"],
)
def test_vector_satisfies_protocol(protocol):
    assert isinstance(Vector2(1.0, 2.0), protocol)


def test_plain_object_does_not_satisfy_protocols():
    assert not isinstance(object(), Interpolatable)
    assert not isinstance(1.0, Diffable)


def test_reduce_many_is_sum():
    items = [Vector2(1.0, 2.0), Vector2(3.0, 4.0)]
    assert Vector2.__reduce_many__(items) == Vector2(4.0, 6.0)
    assert Vector2.__reduce_many__([]) == Vector2.NULL


@pytest.mark.parametrize(
    ("t", "expected"),
    [
        (0.0, Vector2(0.0, 0.0)),
        (0.25, Vector2(1.0, 2.0)),
        (1.0, Vector2(4.0, 8.0)),
        (2.0, Vector2(8.0, 16.0)),
    ],
    ids=["start", "quarter", "end", "extrapolate"],
)
def test_interpolate(t, expected):
    start = Vector2(0.0, 0.0)
    end = Vector2(4.0, 8.0)
    assert start.__interpolate__(end, t) == expected


def test_diff_then_apply_restores_value():
    current = Vector2(5.0, -1.0)
    baseline = Vector2(2.0, 3.0)
    diff = current.__diff__(baseline)
    assert diff == Vector2(3.0, -4.0)
    assert baseline.__apply_diff__(diff) == current
