"""SampleParser — converts raw SI readings into a :class:`WindSample`.

The host hands over a flat dict keyed by SignalK paths, with angles in
radians and speeds in m/s. The dial works in degrees and knots.
"""

from __future__ import annotations

import math

from wind_instrument.geometry.angles import to_degrees
from wind_instrument.telemetry.models import WindSample

MS_TO_KNOTS = 1.94384

# sample field → raw keys tried in order (first present wins)
_ANGLE_MAP: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("heading",                  ("navigation.headingTrue", "navigation.headingMagnetic")),
    ("true_wind_angle",          ("environment.wind.directionTrue",)),
    ("apparent_wind_angle",      ("environment.wind.angleApparent",)),
    ("course_over_ground_angle", ("navigation.courseOverGroundTrue", "navigation.courseOverGroundMagnetic")),
    ("waypoint_angle",           ("navigation.courseGreatCircle.nextPoint.bearingTrue",)),
    ("historic_wind_min",        ("environment.wind.directionTrue.min",)),
    ("historic_wind_mid",        ("environment.wind.directionTrue.mid",)),
    ("historic_wind_max",        ("environment.wind.directionTrue.max",)),
)

_SPEED_MAP: tuple[tuple[str, str], ...] = (
    ("true_wind_speed",     "environment.wind.speedTrue"),
    ("apparent_wind_speed", "environment.wind.speedApparent"),
)

_FLAG_MAP: tuple[tuple[str, str], ...] = (
    ("course_over_ground_enable", "courseOverGroundEnable"),
    ("waypoint_enable",           "waypointEnable"),
    ("layline_enable",            "closeHauledLineEnable"),
    ("wind_sector_enable",        "windSectorEnable"),
)


def _reading(raw: dict, keys: tuple[str, ...]) -> float | None:
    """Return the first finite numeric reading among *keys*, else None."""
    for key in keys:
        value = raw.get(key)
        if value is None:
            continue
        try:
            value = float(value)
        except (TypeError, ValueError):
            continue
        if math.isfinite(value):
            return value
    return None


class SampleParser:
    """Parses a raw telemetry dict into a :class:`WindSample`.

    Missing, non-numeric or non-finite readings become ``None``. Enable
    flags absent from *raw* keep the :class:`WindSample` defaults.
    """

    def parse(self, raw: dict) -> WindSample:
        kwargs: dict = {}

        for field_name, keys in _ANGLE_MAP:
            kwargs[field_name] = to_degrees(_reading(raw, keys))

        for field_name, key in _SPEED_MAP:
            speed = _reading(raw, (key,))
            kwargs[field_name] = None if speed is None else speed * MS_TO_KNOTS

        for field_name, key in _FLAG_MAP:
            if key in raw:
                kwargs[field_name] = bool(raw[key])

        return WindSample(**kwargs)
