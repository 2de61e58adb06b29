"""Host-supplied dial constants: layline offset, dial circle, animation timing."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from wind_instrument.errors import ConfigurationError
from wind_instrument.geometry.angles import is_finite_number
from wind_instrument.geometry.models import Point

_ENV_PREFIX = "WIND_INSTRUMENT_"


@dataclass
class DisplayConfig:
    """Host-supplied constants for the dial.

    Parameters
    ----------
    layline_offset_deg:
        Close-hauled angle either side of the true wind, in degrees.
    center:
        Dial center in screen units. A ``(x, y)`` tuple is accepted.
    radius:
        Radius of the circle laylines and sectors are drawn to.
    animation_duration_ms:
        Duration stamped on every rotation command.

    Raises
    ------
    ConfigurationError
        If the radius is not positive, the center is missing or non-finite,
        the offset is non-finite or the duration is negative.
    """

    layline_offset_deg: float = 45.0
    center: Point | None = field(default_factory=lambda: Point(231.0, 231.0))
    radius: float = 160.0
    animation_duration_ms: int = 500

    def __post_init__(self) -> None:
        if self.center is None:
            raise ConfigurationError("center must be defined")
        if isinstance(self.center, tuple):
            self.center = Point(*self.center)
        if not (is_finite_number(self.center.x) and is_finite_number(self.center.y)):
            raise ConfigurationError(f"center must be finite, got {self.center!r}")
        if not is_finite_number(self.radius) or self.radius <= 0:
            raise ConfigurationError(f"radius must be > 0, got {self.radius!r}")
        if not is_finite_number(self.layline_offset_deg):
            raise ConfigurationError(
                f"layline_offset_deg must be finite, got {self.layline_offset_deg!r}"
            )
        if self.animation_duration_ms < 0:
            raise ConfigurationError(
                f"animation_duration_ms must be >= 0, got {self.animation_duration_ms!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DisplayConfig:
        """Build a config from ``WIND_INSTRUMENT_*`` variables, defaults elsewhere."""
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str, default: float) -> float:
            raw = env.get(_ENV_PREFIX + name)
            if raw is None or raw == "":
                return default
            try:
                return float(raw)
            except ValueError as exc:
                raise ConfigurationError(f"{_ENV_PREFIX}{name} is not a number: {raw!r}") from exc

        return cls(
            layline_offset_deg=_get("LAYLINE_OFFSET", defaults.layline_offset_deg),
            center=Point(
                _get("CENTER_X", defaults.center.x),
                _get("CENTER_Y", defaults.center.y),
            ),
            radius=_get("RADIUS", defaults.radius),
            animation_duration_ms=int(_get("ANIMATION_MS", defaults.animation_duration_ms)),
        )
