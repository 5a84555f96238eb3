"""Optional structural protocols for geometry values.

Simulation layers total up displacements, blend rendered positions between
ticks and ship position deltas without knowing the concrete value type.
Any class that implements the dunder hooks below satisfies the matching
protocol; no registration or inheritance is needed.

Usage:
    if isinstance(position, Interpolatable):
        shown = position.__interpolate__(target, alpha)
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Reducible(Protocol):
    """Collapses many values into one, e.g. per-tick displacements into a net move."""

    @classmethod
    def __reduce_many__(cls, items: list[Self]) -> Self: ...


@runtime_checkable
class Interpolatable(Protocol):
    """Blends two values; t=0 gives self, t=1 gives other."""

    def __interpolate__(self, other: Self, t: float) -> Self: ...


@runtime_checkable
class Diffable(Protocol):
    """Delta against a baseline, and re-application of that delta.

    baseline.__apply_diff__(value.__diff__(baseline)) reproduces value.
    """

    def __diff__(self, baseline: Self) -> Self: ...
    def __apply_diff__(self, diff: Self) -> Self: ...
