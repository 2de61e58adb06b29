"""WindDisplayEngine — turns telemetry samples into rotation commands and geometry."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace

from wind_instrument.display.config import DisplayConfig
from wind_instrument.errors import InvalidBearing
from wind_instrument.geometry.angles import add_heading, is_finite_number, wrap360
from wind_instrument.geometry.laylines import compute_laylines
from wind_instrument.geometry.models import LaylinePair, WindSector
from wind_instrument.geometry.sectors import WindSectorTracker
from wind_instrument.rotation.controller import SmoothRotationController
from wind_instrument.rotation.models import RotationChannel, RotationCommand, RotationState
from wind_instrument.telemetry.models import WindSample

_logger = logging.getLogger(__name__)

NO_DATA_TEXT = "--"


def whole_degrees(value: float) -> float:
    """Round a bearing to the nearest whole degree, halves up, wrapped to [0, 360)."""
    return wrap360(math.floor(wrap360(value) + 0.5))


@dataclass
class DisplayFrame:
    """Everything the renderer needs after one update."""

    commands: list[RotationCommand] = field(default_factory=list)
    """Commands emitted by this update, in emission order."""

    states: dict[RotationChannel, RotationState] = field(default_factory=dict)
    """Snapshot of every channel that has received data."""

    heading_text: str = NO_DATA_TEXT
    true_wind_speed_text: str = NO_DATA_TEXT
    apparent_wind_speed_text: str = NO_DATA_TEXT

    laylines: LaylinePair | None = None
    laylines_visible: bool = False
    wind_sector: WindSector | None = None
    wind_sector_visible: bool = False
    course_over_ground_visible: bool = False
    waypoint_visible: bool = False

    def commands_for(self, channel: RotationChannel) -> list[RotationCommand]:
        return [c for c in self.commands if c.channel == channel]


class WindDisplayEngine:
    """Processes one :class:`WindSample` at a time, synchronously.

    Parameters
    ----------
    config:
        Dial constants; defaults to :class:`DisplayConfig`.
    controller:
        Rotation controller; one is built from *config* when omitted.

    Each sample is treated as a full snapshot: a reading set to ``None``
    means "no data right now". Text values keep the last reading received.
    """

    def __init__(
        self,
        config: DisplayConfig | None = None,
        controller: SmoothRotationController | None = None,
    ) -> None:
        self._cfg = config or DisplayConfig()
        self._controller = controller or SmoothRotationController(
            duration_ms=self._cfg.animation_duration_ms
        )
        self._sectors = WindSectorTracker(
            self._cfg.layline_offset_deg, self._cfg.center, self._cfg.radius
        )
        self._heading = 0.0
        self._heading_text = NO_DATA_TEXT
        self._tws_text = NO_DATA_TEXT
        self._aws_text = NO_DATA_TEXT
        self._laylines: LaylinePair | None = None
        self._last_frame: DisplayFrame | None = None

    @property
    def config(self) -> DisplayConfig:
        return self._cfg

    @property
    def controller(self) -> SmoothRotationController:
        return self._controller

    @property
    def last_frame(self) -> DisplayFrame | None:
        return self._last_frame

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def update(self, sample: WindSample) -> DisplayFrame:
        """Apply *sample* and return the resulting :class:`DisplayFrame`.

        Raises:
            InvalidBearing: If any bearing in *sample* is non-finite. Nothing
                is changed in that case.
        """
        for name, value in sample.present().items():
            if not is_finite_number(value):
                _logger.warning("Rejected sample: %s=%r", name, value)
                raise InvalidBearing(value, name)

        commands: list[RotationCommand] = []
        request = self._controller.request_transition

        if sample.heading is not None:
            self._heading = whole_degrees(sample.heading)
            self._heading_text = f"{self._heading:.0f}"
            commands += request(RotationChannel.HEADING, self._heading)

        cog_visible = sample.course_over_ground_enable and sample.course_over_ground_angle is not None
        if cog_visible:
            commands += request(
                RotationChannel.COURSE_OVER_GROUND,
                whole_degrees(sample.course_over_ground_angle),
            )

        waypoint_visible = sample.waypoint_enable and sample.waypoint_angle is not None
        if waypoint_visible:
            commands += request(RotationChannel.WAYPOINT, whole_degrees(sample.waypoint_angle))

        if sample.apparent_wind_angle is not None:
            commands += request(
                RotationChannel.APP_WIND_ANGLE, whole_degrees(sample.apparent_wind_angle)
            )

        relative_twa: float | None = None
        if sample.true_wind_angle is not None:
            # the dial is heading-up, so the needle shows wind relative to the bow
            relative_twa = whole_degrees(add_heading(sample.true_wind_angle, -self._heading))
            commands += request(RotationChannel.TRUE_WIND_ANGLE, relative_twa)

        if is_finite_number(sample.true_wind_speed):
            self._tws_text = f"{sample.true_wind_speed:.1f}"
        if is_finite_number(sample.apparent_wind_speed):
            self._aws_text = f"{sample.apparent_wind_speed:.1f}"

        laylines = compute_laylines(
            relative_twa, self._cfg.layline_offset_deg, self._cfg.center, self._cfg.radius
        )
        if laylines is not None:
            self._laylines = laylines

        self._sectors.update(
            sample.historic_wind_min,
            sample.historic_wind_mid,
            sample.historic_wind_max,
            self._heading,
        )

        frame = DisplayFrame(
            commands=commands,
            states=self._snapshot(),
            heading_text=self._heading_text,
            true_wind_speed_text=self._tws_text,
            apparent_wind_speed_text=self._aws_text,
            laylines=self._laylines,
            laylines_visible=sample.layline_enable and laylines is not None,
            wind_sector=self._sectors.current,
            wind_sector_visible=sample.wind_sector_enable and self._sectors.current is not None,
            course_over_ground_visible=cog_visible,
            waypoint_visible=waypoint_visible,
        )
        self._last_frame = frame
        return frame

    def complete(self, channel: RotationChannel) -> None:
        """Forward an animation-finished report from the renderer."""
        self._controller.complete(channel)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _snapshot(self) -> dict[RotationChannel, RotationState]:
        snapshot: dict[RotationChannel, RotationState] = {}
        for channel in self._controller.channels():
            state = self._controller.state(channel)
            if state is not None:
                snapshot[channel] = replace(state)
        return snapshot
