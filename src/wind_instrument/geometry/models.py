"""Geometry data structures for the wind dial.

Coordinates are screen units: x grows to the right, y grows downward.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 2D point on the dial."""

    x: float
    y: float


@dataclass(frozen=True)
class LinePath:
    """A straight segment from the dial center to a point on the circle."""

    start: Point
    end: Point
    bearing: float
    """Bearing of the segment in degrees [0, 360)."""

    @property
    def points(self) -> list[Point]:
        return [self.start, self.end]


@dataclass(frozen=True)
class SectorPath:
    """A closed wedge: center → start, arc to end, back to center.

    The arc metadata follows the usual elliptical-arc convention:

    ::

        center ──line── start ──arc(radius, large_arc_flag, sweep_flag)── end ──close

    ``sweep_flag == 1`` means the arc is drawn in the positive-angle
    (clockwise on screen) direction.
    """

    center: Point
    start: Point
    end: Point
    mid: Point
    """Point at the mid bearing; the arc passes on its side of the chord."""

    radius: float
    large_arc_flag: int
    sweep_flag: int

    @property
    def points(self) -> list[Point]:
        """Ordered outline points (the arc is implied between start and end)."""
        return [self.center, self.start, self.end]


@dataclass(frozen=True)
class LaylinePair:
    """Port and starboard close-hauled lines."""

    port: LinePath
    starboard: LinePath


@dataclass(frozen=True)
class WindSector:
    """Port and starboard historic wind-shift wedges."""

    port: SectorPath
    starboard: SectorPath
