"""Close-hauled layline geometry."""

from __future__ import annotations

from wind_instrument.geometry.angles import add_heading, point_on_circle
from wind_instrument.geometry.models import LaylinePair, LinePath, Point


def compute_laylines(
    true_wind_angle: float | None,
    layline_offset_deg: float,
    center: Point,
    radius: float,
) -> LaylinePair | None:
    """Return the port/starboard layline segments around *true_wind_angle*.

    Returns None when *true_wind_angle* is None: there is no wind reading
    yet, so nothing should be drawn.
    """
    if true_wind_angle is None:
        return None

    port_bearing = add_heading(true_wind_angle, -layline_offset_deg)
    stbd_bearing = add_heading(true_wind_angle, layline_offset_deg)

    return LaylinePair(
        port=LinePath(
            start=center,
            end=point_on_circle(port_bearing, center, radius),
            bearing=port_bearing,
        ),
        starboard=LinePath(
            start=center,
            end=point_on_circle(stbd_bearing, center, radius),
            bearing=stbd_bearing,
        ),
    )
