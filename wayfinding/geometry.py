"""Distance and bearing helpers for waypoint positions.

Purpose:
- Compute Euclidean edge weights between 3D waypoint positions.
- Classify horizontal displacement into eight compass bearings.

Usage example:
    >>> from wayfinding.geometry import bearing, distance
    >>> distance((0, 1, -4), (0, 1, -2))
    2.0
    >>> bearing((0, 1, -4), (0, 1, -2)).value
    'north'
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

Position = tuple[float, float, float]


class Bearing(str, Enum):
    """Compass-style direction label derived from horizontal displacement."""

    EAST = "east"
    NORTHEAST = "northeast"
    NORTH = "north"
    NORTHWEST = "northwest"
    WEST = "west"
    SOUTHWEST = "southwest"
    SOUTH = "south"
    SOUTHEAST = "southeast"
    FORWARD = "forward"


# Half-open [low, high) sectors in degrees; west wraps around +/-180.
_SECTORS: list[tuple[float, float, Bearing]] = [
    (-22.5, 22.5, Bearing.EAST),
    (22.5, 67.5, Bearing.NORTHEAST),
    (67.5, 112.5, Bearing.NORTH),
    (112.5, 157.5, Bearing.NORTHWEST),
    (-157.5, -112.5, Bearing.SOUTHWEST),
    (-112.5, -67.5, Bearing.SOUTH),
    (-67.5, -22.5, Bearing.SOUTHEAST),
]


def distance(a: Position, b: Position) -> float:
    """Return the Euclidean distance between two 3D positions."""
    delta = np.asarray(b, dtype=float) - np.asarray(a, dtype=float)
    return float(np.linalg.norm(delta))


def round_length(value: float, digits: int = 1) -> float:
    """Round a length half-up (2.25 -> 2.3), unlike `round`, which rounds half to even."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def horizontal_angle(a: Position, b: Position) -> float:
    """Return the x/z-plane angle of `b - a` in degrees, range (-180, 180]."""
    dx = float(b[0]) - float(a[0])
    dz = float(b[2]) - float(a[2])
    return math.degrees(math.atan2(dz, dx))


def classify_angle(angle_deg: float) -> Bearing:
    """Map an angle in degrees to one of eight 45-degree compass sectors.

    Angles are expected in (-180, 180]. Only non-finite input falls through
    to `Bearing.FORWARD`.
    """
    for low, high, label in _SECTORS:
        if low <= angle_deg < high:
            return label
    if angle_deg >= 157.5 or angle_deg < -157.5:
        return Bearing.WEST
    return Bearing.FORWARD


def bearing(a: Position, b: Position) -> Bearing:
    """Classify the horizontal direction of travel from `a` to `b`.

    Vertical displacement is ignored; floor changes are reported separately.
    """
    return classify_angle(horizontal_angle(a, b))
