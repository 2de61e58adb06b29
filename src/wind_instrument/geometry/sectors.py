"""Historic wind-shift sector geometry.

Each side of the boat gets a wedge spanning the historic minimum, mid and
maximum true wind bearings, rebased to the heading-up dial and rotated by
the layline offset.

Arc flags
---------
``large_arc_flag`` is 1 when the angle at the mid point between the min and
max points is at most 90°. For points on a circle that inscribed angle is
half the arc *not* containing mid, so a small value means the wedge must
take the long way round to pass through the mid bearing.

``sweep_flag`` is 1 when the mid point lies on the clockwise side of the
chord seen from the min point.
"""

from __future__ import annotations

import logging
import math

from wind_instrument.errors import MissingData
from wind_instrument.geometry.angles import (
    add_heading,
    is_finite_number,
    point_on_circle,
    signed_angle_between,
    wrap360,
)
from wind_instrument.geometry.models import Point, SectorPath, WindSector

_logger = logging.getLogger(__name__)


def rebase_bearing(historic: float, heading: float, side_offset: float) -> float:
    """Express an absolute *historic* bearing on the heading-up dial, then rotate."""
    return wrap360(add_heading(wrap360(historic - heading), side_offset))


def arc_flags(min_pt: Point, mid_pt: Point, max_pt: Point) -> tuple[int, int]:
    """Return ``(large_arc_flag, sweep_flag)`` for an arc min → max through mid."""
    large_arc = 1 if abs(signed_angle_between(min_pt, mid_pt, max_pt)) <= math.pi / 2 else 0
    sweep = 1 if signed_angle_between(max_pt, min_pt, mid_pt) <= 0 else 0
    return large_arc, sweep


def _sector(
    bearings: tuple[float, float, float],
    heading: float,
    side_offset: float,
    center: Point,
    radius: float,
) -> SectorPath:
    min_pt, mid_pt, max_pt = (
        point_on_circle(rebase_bearing(b, heading, side_offset), center, radius)
        for b in bearings
    )
    large_arc, sweep = arc_flags(min_pt, mid_pt, max_pt)
    return SectorPath(
        center=center,
        start=min_pt,
        end=max_pt,
        mid=mid_pt,
        radius=radius,
        large_arc_flag=large_arc,
        sweep_flag=sweep,
    )


def compute_sectors(
    min_bearing: float | None,
    mid_bearing: float | None,
    max_bearing: float | None,
    heading: float,
    layline_offset_deg: float,
    center: Point,
    radius: float,
) -> WindSector:
    """Compute the port and starboard wind-shift wedges.

    Raises:
        MissingData: If any of the historic bearings is absent or NaN.
    """
    bearings = (min_bearing, mid_bearing, max_bearing)
    if not all(is_finite_number(b) for b in bearings):
        raise MissingData(f"historic wind bearings incomplete: {bearings!r}")

    return WindSector(
        port=_sector(bearings, heading, -layline_offset_deg, center, radius),
        starboard=_sector(bearings, heading, layline_offset_deg, center, radius),
    )


class WindSectorTracker:
    """Keeps the last valid :class:`WindSector` across updates.

    A sample with missing historic data leaves :attr:`current` untouched so
    the display keeps showing stale-but-valid wedges.
    """

    def __init__(self, layline_offset_deg: float, center: Point, radius: float) -> None:
        self._offset = layline_offset_deg
        self._center = center
        self._radius = radius
        self.current: WindSector | None = None

    def update(
        self,
        min_bearing: float | None,
        mid_bearing: float | None,
        max_bearing: float | None,
        heading: float,
    ) -> bool:
        """Recompute the sector. Returns False if the previous one was retained."""
        try:
            sector = compute_sectors(
                min_bearing,
                mid_bearing,
                max_bearing,
                heading,
                self._offset,
                self._center,
                self._radius,
            )
        except MissingData as exc:
            _logger.debug("Keeping previous wind sector: %s", exc)
            return False
        self.current = sector
        return True
