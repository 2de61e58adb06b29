"""Angle normalization and plane-angle helpers.

All bearings are degrees measured clockwise from "up" on the dial and are
normalized to the half-open interval [0, 360).
"""

from __future__ import annotations

import math
from numbers import Real

from wind_instrument.errors import InvalidBearing
from wind_instrument.geometry.models import Point


def is_finite_number(value: object) -> bool:
    """Return True if *value* is a real, finite number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def wrap360(degrees: float) -> float:
    """Normalize *degrees* into [0, 360).

    The double modulo keeps tiny negative inputs (e.g. ``-1e-20``) from
    rounding up to exactly 360.

    Examples
    --------
    >>> wrap360(-90)
    270.0
    >>> wrap360(720)
    0.0
    """
    if not is_finite_number(degrees):
        raise InvalidBearing(degrees)
    return ((float(degrees) % 360.0) + 360.0) % 360.0


def add_heading(a: float, b: float) -> float:
    """Compose bearing *a* with the relative offset *b*."""
    return wrap360(a + b)


def deg_to_rad(deg: float | None) -> float | None:
    if deg is None:
        return None
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float | None) -> float | None:
    if rad is None:
        return None
    return rad * (180.0 / math.pi)


def to_degrees(rad: float | None) -> float | None:
    """Convert radians to a normalized bearing, passing ``None`` through."""
    if rad is None:
        return None
    return wrap360(rad_to_deg(rad))


def signed_angle_between(a: Point, b: Point, c: Point) -> float:
    """Return the signed angle at vertex *b* from ray b→a to ray b→c.

    Result is in radians within (-π, π]. Positive values turn clockwise on
    screen (y grows downward). Collinear points on the same side of *b*
    give 0.
    """
    turn = math.atan2(c.y - b.y, c.x - b.x) - math.atan2(a.y - b.y, a.x - b.x)
    angle = (turn + 3.0 * math.pi) % (2.0 * math.pi) - math.pi
    if angle == -math.pi:
        return math.pi
    return angle


def point_on_circle(bearing: float, center: Point, radius: float) -> Point:
    """Project *bearing* onto the circle of *radius* around *center*.

    0° points up, bearings grow clockwise.
    """
    rad = deg_to_rad(bearing)
    return Point(
        x=center.x + radius * math.sin(rad),
        y=center.y - radius * math.cos(rad),
    )
