"""Tests for WindDisplayEngine."""

from __future__ import annotations

import math
from unittest.mock import MagicMock

import pytest

from wind_instrument.display.config import DisplayConfig
from wind_instrument.display.engine import NO_DATA_TEXT, WindDisplayEngine, whole_degrees
from wind_instrument.errors import InvalidBearing
from wind_instrument.rotation.models import RotationChannel, RotationPhase
from wind_instrument.telemetry.models import WindSample
from wind_instrument.telemetry.parser import SampleParser

HEADING = RotationChannel.HEADING
TRUE_WIND = RotationChannel.TRUE_WIND_ANGLE
TRUE_WIND_VALUE = RotationChannel.TRUE_WIND_VALUE


def _make_sample(**kwargs) -> WindSample:
    defaults = dict(
        heading=0.0,
        true_wind_angle=None,
        apparent_wind_angle=None,
    )
    defaults.update(kwargs)
    return WindSample(**defaults)


def _historic(min_: float = 300.0, mid: float = 340.0, max_: float = 20.0) -> dict:
    return dict(historic_wind_min=min_, historic_wind_mid=mid, historic_wind_max=max_)


# ---------------------------------------------------------------------------
# whole_degrees
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [(89.4, 89.0), (89.5, 90.0), (359.6, 0.0), (-0.4, 0.0), (-10.0, 350.0)],
)
def test_whole_degrees(value, expected):
    assert whole_degrees(value) == expected


# ---------------------------------------------------------------------------
# Heading
# ---------------------------------------------------------------------------


def test_heading_emits_command_and_text():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(heading=90.0))
    assert [(c.from_deg, c.to_deg) for c in frame.commands_for(HEADING)] == [(0.0, 90.0)]
    assert frame.heading_text == "90"
    assert frame.states[HEADING].phase is RotationPhase.TRANSITIONING


def test_heading_rounded_to_whole_degrees():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(heading=89.6))
    assert frame.heading_text == "90"
    assert frame.states[HEADING].target == 90.0


def test_heading_text_kept_without_data():
    engine = WindDisplayEngine()
    engine.update(_make_sample(heading=45.0))
    frame = engine.update(_make_sample(heading=None))
    assert frame.heading_text == "45"
    assert frame.commands_for(HEADING) == []


def test_no_heading_yet_shows_placeholder():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(heading=None))
    assert frame.heading_text == NO_DATA_TEXT


def test_heading_sequence_never_long_way_round():
    engine = WindDisplayEngine()
    for heading in (0.0, 170.0, 190.0, 359.0, 1.0):
        frame = engine.update(_make_sample(heading=heading))
        for command in frame.commands:
            assert abs(command.to_deg - command.from_deg) <= 180


# ---------------------------------------------------------------------------
# Wind
# ---------------------------------------------------------------------------


def test_true_wind_relative_to_heading():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(heading=90.0, true_wind_angle=120.0))
    assert frame.states[TRUE_WIND].target == 30.0
    assert frame.states[TRUE_WIND_VALUE].target == -30.0


def test_heading_change_retargets_true_wind():
    engine = WindDisplayEngine()
    engine.update(_make_sample(heading=0.0, true_wind_angle=40.0))
    frame = engine.update(_make_sample(heading=10.0, true_wind_angle=40.0))
    assert [(c.from_deg, c.to_deg) for c in frame.commands_for(TRUE_WIND)] == [(40.0, 30.0)]
    assert [(c.from_deg, c.to_deg) for c in frame.commands_for(TRUE_WIND_VALUE)] == [
        (-40.0, -30.0)
    ]


def test_apparent_wind_paired_commands():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(apparent_wind_angle=350.0))
    channels = [c.channel for c in frame.commands]
    assert channels == [RotationChannel.APP_WIND_ANGLE, RotationChannel.APP_WIND_VALUE]


def test_wind_speed_text():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(true_wind_speed=12.345, apparent_wind_speed=15.0))
    assert frame.true_wind_speed_text == "12.3"
    assert frame.apparent_wind_speed_text == "15.0"

    frame = engine.update(_make_sample())
    assert frame.true_wind_speed_text == "12.3"


def test_non_finite_wind_speed_keeps_previous_text():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(true_wind_speed=math.nan, apparent_wind_speed=math.inf))
    assert frame.true_wind_speed_text == NO_DATA_TEXT
    assert frame.apparent_wind_speed_text == NO_DATA_TEXT

    engine.update(_make_sample(true_wind_speed=8.0, apparent_wind_speed=9.0))
    frame = engine.update(_make_sample(true_wind_speed=math.inf, apparent_wind_speed=math.nan))
    assert frame.true_wind_speed_text == "8.0"
    assert frame.apparent_wind_speed_text == "9.0"


def test_raw_wind_dead_ahead_points_needle_up():
    raw = {
        "navigation.headingTrue": math.radians(90),
        "environment.wind.directionTrue": math.radians(90),
    }
    engine = WindDisplayEngine()
    frame = engine.update(SampleParser().parse(raw))
    assert frame.states[TRUE_WIND].target == 0.0
    assert frame.laylines.port.bearing == pytest.approx(315.0)


# ---------------------------------------------------------------------------
# Course over ground / waypoint
# ---------------------------------------------------------------------------


def test_course_over_ground_disabled():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(course_over_ground_angle=45.0))
    assert frame.course_over_ground_visible is False
    assert frame.commands_for(RotationChannel.COURSE_OVER_GROUND) == []


def test_course_over_ground_enabled():
    engine = WindDisplayEngine()
    frame = engine.update(
        _make_sample(course_over_ground_angle=45.0, course_over_ground_enable=True)
    )
    assert frame.course_over_ground_visible is True
    assert len(frame.commands_for(RotationChannel.COURSE_OVER_GROUND)) == 1


def test_waypoint_enabled_without_data_hidden():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(waypoint_enable=True))
    assert frame.waypoint_visible is False


def test_waypoint_enabled():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(waypoint_angle=200.0, waypoint_enable=True))
    assert frame.waypoint_visible is True
    assert frame.states[RotationChannel.WAYPOINT].target == 200.0


# ---------------------------------------------------------------------------
# Laylines
# ---------------------------------------------------------------------------


def test_laylines_follow_relative_true_wind():
    engine = WindDisplayEngine(DisplayConfig(layline_offset_deg=45.0))
    frame = engine.update(_make_sample(heading=10.0, true_wind_angle=10.0))
    assert frame.laylines_visible is True
    assert frame.laylines.port.bearing == pytest.approx(315.0)
    assert frame.laylines.starboard.bearing == pytest.approx(45.0)


def test_laylines_hidden_without_true_wind():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample())
    assert frame.laylines is None
    assert frame.laylines_visible is False


def test_laylines_hidden_when_disabled():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(true_wind_angle=0.0, layline_enable=False))
    assert frame.laylines is not None
    assert frame.laylines_visible is False


# ---------------------------------------------------------------------------
# Wind sectors
# ---------------------------------------------------------------------------


def test_sector_computed_from_historic():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(**_historic()))
    assert frame.wind_sector is not None
    assert frame.wind_sector_visible is True


def test_sector_retained_on_nan_min():
    engine = WindDisplayEngine()
    first = engine.update(_make_sample(**_historic()))
    second = engine.update(_make_sample(**_historic(min_=math.nan)))
    assert second.wind_sector is first.wind_sector
    assert second.wind_sector_visible is True


def test_sector_hidden_when_disabled():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(wind_sector_enable=False, **_historic()))
    assert frame.wind_sector is not None
    assert frame.wind_sector_visible is False


def test_sector_follows_heading():
    engine = WindDisplayEngine()
    first = engine.update(_make_sample(heading=0.0, **_historic()))
    second = engine.update(_make_sample(heading=30.0, **_historic()))
    assert second.wind_sector != first.wind_sector


# ---------------------------------------------------------------------------
# Invalid input
# ---------------------------------------------------------------------------


def test_invalid_heading_raises_without_mutation():
    engine = WindDisplayEngine()
    engine.update(_make_sample(heading=45.0))
    previous = engine.last_frame

    with pytest.raises(InvalidBearing):
        engine.update(_make_sample(heading=math.inf))

    assert engine.last_frame is previous
    assert engine.controller.state(HEADING).target == 45.0


def test_invalid_later_field_leaves_heading_untouched():
    engine = WindDisplayEngine()
    with pytest.raises(InvalidBearing) as exc_info:
        engine.update(_make_sample(heading=90.0, apparent_wind_angle=math.nan))
    assert exc_info.value.channel == "apparent_wind_angle"
    assert engine.controller.state(HEADING) is None
    assert engine.last_frame is None


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------


def test_engine_uses_injected_controller():
    controller = MagicMock()
    controller.request_transition.return_value = []
    controller.channels.return_value = []

    engine = WindDisplayEngine(controller=controller)
    frame = engine.update(_make_sample(heading=90.0))

    controller.request_transition.assert_called_once_with(HEADING, 90.0)
    assert frame.commands == []


def test_complete_forwards_to_controller():
    engine = WindDisplayEngine()
    engine.update(_make_sample(heading=90.0))
    engine.complete(HEADING)
    assert engine.controller.state(HEADING).phase is RotationPhase.IDLE


def test_animation_duration_from_config():
    engine = WindDisplayEngine(DisplayConfig(animation_duration_ms=300))
    frame = engine.update(_make_sample(heading=90.0))
    assert frame.commands[0].duration_ms == 300


def test_frame_states_are_snapshots():
    engine = WindDisplayEngine()
    frame = engine.update(_make_sample(heading=90.0))
    engine.complete(HEADING)
    assert frame.states[HEADING].active is True
