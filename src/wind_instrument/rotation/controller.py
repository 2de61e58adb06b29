"""SmoothRotationController — short-way-round rotations across the 0°/360° seam.

A needle moving from 10° to 350° must turn 20° counter-clockwise, not 340°
clockwise. When the plain difference between the current and new target is
more than 180° the transition is split into two legs meeting at the seam:

::

    clockwise          350 → 359 | 0 → 10
    counter-clockwise   10 →   0 | 359 → 350

The seam bounds are 0 and 359. A difference of exactly 180° is played as a
single direct leg.
"""

from __future__ import annotations

import logging

from wind_instrument.errors import InvalidBearing
from wind_instrument.geometry.angles import is_finite_number, wrap360
from wind_instrument.rotation.models import RotationChannel, RotationCommand, RotationState

_logger = logging.getLogger(__name__)

SEAM_LOW = 0.0
SEAM_HIGH = 359.0

DEFAULT_PAIRS: dict[RotationChannel, RotationChannel] = {
    RotationChannel.APP_WIND_ANGLE: RotationChannel.APP_WIND_VALUE,
    RotationChannel.TRUE_WIND_ANGLE: RotationChannel.TRUE_WIND_VALUE,
}


def _negate(value: float) -> float:
    # 0.0 - x keeps the seam value at +0.0
    return 0.0 - value


def plan_legs(current: float, new_target: float) -> list[tuple[float, float]]:
    """Return the ordered ``(from, to)`` legs turning *current* into *new_target*."""
    diff = current - new_target
    if abs(diff) <= 180:
        return [(current, new_target)]

    if diff > 0:
        # clockwise through 359 → 0
        if current >= SEAM_HIGH:
            return [(SEAM_LOW, new_target)]
        return [(current, SEAM_HIGH), (SEAM_LOW, new_target)]

    # counter-clockwise through 0 → 359
    if current == SEAM_LOW:
        return [(SEAM_HIGH, new_target)]
    return [(current, SEAM_LOW), (SEAM_HIGH, new_target)]


class SmoothRotationController:
    """Owns one :class:`RotationState` per channel and emits rotation commands.

    Parameters
    ----------
    pairs:
        Mapping of channel → counter-rotating channel. Every command emitted
        for a channel is mirrored, negated, for its counter channel.
        Defaults to :data:`DEFAULT_PAIRS`.
    duration_ms:
        Animation duration stamped on every command.

    The controller never waits for animations. A request arriving while a
    channel is still transitioning starts from the current target, which
    supersedes whatever the renderer is playing.
    """

    def __init__(
        self,
        pairs: dict[RotationChannel, RotationChannel] | None = None,
        duration_ms: int = 500,
    ) -> None:
        self._pairs = dict(DEFAULT_PAIRS if pairs is None else pairs)
        self._duration_ms = duration_ms
        self._states: dict[RotationChannel, RotationState] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def state(self, channel: RotationChannel) -> RotationState | None:
        """Return the state for *channel*, or None if it never received data."""
        return self._states.get(channel)

    def channels(self) -> list[RotationChannel]:
        return list(self._states)

    def counter_of(self, channel: RotationChannel) -> RotationChannel | None:
        return self._pairs.get(channel)

    def request_transition(
        self, channel: RotationChannel, bearing: float
    ) -> list[RotationCommand]:
        """Move *channel* to *bearing* and return the commands to animate it.

        Returns an empty list when *bearing* equals the current target.

        Counter channels are driven by their pair and cannot be requested
        directly.

        Raises:
            InvalidBearing: If *bearing* is non-numeric or non-finite. No
                state is changed.
            ValueError: If *channel* is the counter channel of a pair.
        """
        if channel in self._pairs.values():
            raise ValueError(f"{channel.value} follows its paired channel; request that instead")
        if not is_finite_number(bearing):
            _logger.warning("Rejected bearing %r for channel %s", bearing, channel.value)
            raise InvalidBearing(bearing, channel.value)

        new_target = wrap360(bearing)
        state = self._states.setdefault(channel, RotationState())
        current = state.target
        if new_target == current:
            return []

        legs = plan_legs(current, new_target)
        if len(legs) > 1 or legs[0][0] != current:
            _logger.debug(
                "%s crosses the seam: %.1f -> %.1f via %s",
                channel.value,
                current,
                new_target,
                legs,
            )

        counter = self._pairs.get(channel)
        commands: list[RotationCommand] = []
        for start, end in legs:
            commands.append(RotationCommand(channel, start, end, self._duration_ms))
            if counter is not None:
                commands.append(
                    RotationCommand(counter, _negate(start), _negate(end), self._duration_ms)
                )

        state.previous = current
        state.target = new_target
        state.active = True

        if counter is not None:
            counter_state = self._states.setdefault(counter, RotationState())
            counter_state.previous = counter_state.target
            counter_state.target = _negate(new_target)
            counter_state.active = True

        return commands

    def complete(self, channel: RotationChannel) -> None:
        """Mark *channel* idle once the renderer finished its animation."""
        state = self._states.get(channel)
        if state is not None:
            state.active = False
