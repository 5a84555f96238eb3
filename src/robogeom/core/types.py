"""Core type definitions for robogeom."""

from typing import TypeAlias

Radians: TypeAlias = float
"""Type alias for angles measured in radians.

Headings follow the navigation convention used throughout robogeom:
0 points north (+y), and angles grow clockwise, so PI/2 is east (+x),
PI is south and 3*PI/2 is west. Values returned by the library are
normalized into [0, 2*PI); values passed in are never range-checked.
"""
