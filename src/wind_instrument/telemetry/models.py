"""Telemetry input model for the wind dial."""

from __future__ import annotations

from dataclasses import dataclass, fields

# Fields holding bearings in degrees; the rest are speeds or flags.
BEARING_FIELDS: tuple[str, ...] = (
    "heading",
    "true_wind_angle",
    "apparent_wind_angle",
    "course_over_ground_angle",
    "waypoint_angle",
)

HISTORIC_FIELDS: tuple[str, ...] = (
    "historic_wind_min",
    "historic_wind_mid",
    "historic_wind_max",
)


@dataclass
class WindSample:
    """One update from the telemetry feed.

    Every reading is optional: ``None`` means "no data", never zero.
    Angles are degrees, speeds are knots.
    """

    heading: float | None = None
    """Boat heading, degrees true."""

    true_wind_angle: float | None = None
    """True wind direction, degrees true (not relative to the bow)."""

    true_wind_speed: float | None = None
    """True wind speed in knots."""

    apparent_wind_angle: float | None = None
    """Apparent wind angle relative to the bow, degrees."""

    apparent_wind_speed: float | None = None
    """Apparent wind speed in knots."""

    course_over_ground_angle: float | None = None
    course_over_ground_enable: bool = False

    waypoint_angle: float | None = None
    """Bearing to the next waypoint, degrees true."""

    waypoint_enable: bool = False

    historic_wind_min: float | None = None
    historic_wind_mid: float | None = None
    historic_wind_max: float | None = None
    """Historic true wind extrema, degrees true. NaN is treated like None."""

    layline_enable: bool = True
    wind_sector_enable: bool = True

    def present(self) -> dict[str, float]:
        """Return the bearing readings that carry data, keyed by field name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name in BEARING_FIELDS and getattr(self, f.name) is not None
        }
