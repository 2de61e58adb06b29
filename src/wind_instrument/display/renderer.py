"""Renderer adapter — formats a :class:`DisplayFrame` for an SVG dial."""

from __future__ import annotations

from wind_instrument.display.engine import DisplayFrame
from wind_instrument.geometry.models import LinePath, Point, SectorPath
from wind_instrument.rotation.models import RotationCommand

NO_PATH = "none"


def format_number(value: float) -> str:
    """Format a coordinate with at most 3 decimals and no trailing zeros.

    Examples
    --------
    >>> format_number(231.0)
    '231'
    >>> format_number(71.43567)
    '71.436'
    """
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class WindDisplayRenderer:
    """Converts frames into JSON-ready dicts and SVG path strings.

    Pure data transformations, no side effects.
    """

    def format_point(self, point: Point) -> str:
        return f"{format_number(point.x)},{format_number(point.y)}"

    def format_line(self, line: LinePath | None) -> str:
        """Return ``'M cx,cy x,y'`` for a layline, or ``'none'``."""
        if line is None:
            return NO_PATH
        return f"M {self.format_point(line.start)} {self.format_point(line.end)}"

    def format_sector(self, path: SectorPath | None) -> str:
        """Return the closed wedge path for a sector, or ``'none'``.

        Shape: ``'M cx,cy L x1,y1 A r,r 0 large sweep x2,y2 z'``.
        """
        if path is None:
            return NO_PATH
        r = format_number(path.radius)
        return (
            f"M {self.format_point(path.center)} "
            f"L {self.format_point(path.start)} "
            f"A {r},{r} 0 {path.large_arc_flag} {path.sweep_flag} "
            f"{self.format_point(path.end)} z"
        )

    def format_command(self, command: RotationCommand) -> dict:
        return {
            "channel": command.channel.value,
            "from": command.from_deg,
            "to": command.to_deg,
            "duration_ms": command.duration_ms,
        }

    def render(self, frame: DisplayFrame) -> dict:
        """Return a display-ready dict from a :class:`DisplayFrame`.

        Returns
        -------
        dict with keys:
            ``heading``, ``true_wind_speed``, ``apparent_wind_speed`` – text values
            ``commands``   – ordered rotation commands
            ``channels``   – per-channel ``previous``/``target``/``phase``
            ``laylines``   – ``visible`` plus ``port``/``starboard`` paths
            ``wind_sector`` – ``visible`` plus ``port``/``starboard`` paths and flags
            ``course_over_ground``, ``waypoint`` – ``visible`` flags
        """
        laylines = frame.laylines
        sector = frame.wind_sector
        return {
            "heading": frame.heading_text,
            "true_wind_speed": frame.true_wind_speed_text,
            "apparent_wind_speed": frame.apparent_wind_speed_text,
            "commands": [self.format_command(c) for c in frame.commands],
            "channels": {
                channel.value: {
                    "previous": state.previous,
                    "target": state.target,
                    "phase": state.phase.value,
                }
                for channel, state in frame.states.items()
            },
            "laylines": {
                "visible": frame.laylines_visible,
                "port": self.format_line(laylines.port if laylines else None),
                "starboard": self.format_line(laylines.starboard if laylines else None),
            },
            "wind_sector": {
                "visible": frame.wind_sector_visible,
                "port": self.format_sector(sector.port if sector else None),
                "starboard": self.format_sector(sector.starboard if sector else None),
            },
            "course_over_ground": {"visible": frame.course_over_ground_visible},
            "waypoint": {"visible": frame.waypoint_visible},
        }
