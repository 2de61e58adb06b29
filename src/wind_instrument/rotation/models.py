"""Rotation channel data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RotationChannel(str, Enum):
    """One independently animated element of the dial."""

    HEADING = "heading"
    APP_WIND_ANGLE = "appWindAngle"
    APP_WIND_VALUE = "appWindValue"
    TRUE_WIND_ANGLE = "trueWindAngle"
    TRUE_WIND_VALUE = "trueWindValue"
    COURSE_OVER_GROUND = "courseOverGround"
    WAYPOINT = "waypoint"


class RotationPhase(str, Enum):
    IDLE = "idle"
    TRANSITIONING = "transitioning"


@dataclass
class RotationState:
    """Previous/target pair for one channel.

    Values are degrees. Counter-rotating channels hold negated targets, so
    they are not restricted to [0, 360).
    """

    previous: float = 0.0
    target: float = 0.0
    active: bool = False
    """True between a transition request and the renderer reporting completion."""

    @property
    def phase(self) -> RotationPhase:
        return RotationPhase.TRANSITIONING if self.active else RotationPhase.IDLE


@dataclass(frozen=True)
class RotationCommand:
    """A single animated rotation for the renderer to play."""

    channel: RotationChannel
    from_deg: float
    to_deg: float
    duration_ms: int = 500

    @property
    def sweep(self) -> float:
        """Signed rotation in degrees; positive is clockwise."""
        return self.to_deg - self.from_deg
