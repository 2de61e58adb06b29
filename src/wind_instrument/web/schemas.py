"""Pydantic request/response schemas for the dial Web API."""

from __future__ import annotations

from pydantic import BaseModel

from wind_instrument.telemetry.models import WindSample


class SampleRequest(BaseModel):
    """One telemetry update, already in degrees and knots."""

    heading: float | None = None
    true_wind_angle: float | None = None
    true_wind_speed: float | None = None
    apparent_wind_angle: float | None = None
    apparent_wind_speed: float | None = None
    course_over_ground_angle: float | None = None
    course_over_ground_enable: bool = False
    waypoint_angle: float | None = None
    waypoint_enable: bool = False
    historic_wind_min: float | None = None
    historic_wind_mid: float | None = None
    historic_wind_max: float | None = None
    layline_enable: bool = True
    wind_sector_enable: bool = True

    def to_sample(self) -> WindSample:
        return WindSample(**self.model_dump())


class HealthResponse(BaseModel):
    status: str
    version: str


class CommandRecord(BaseModel):
    channel: str
    from_deg: float
    to_deg: float
    duration_ms: int


class ChannelRecord(BaseModel):
    previous: float
    target: float
    phase: str


class FrameResponse(BaseModel):
    heading: str
    true_wind_speed: str
    apparent_wind_speed: str
    commands: list[CommandRecord]
    channels: dict[str, ChannelRecord]
    laylines: dict[str, bool | str]
    wind_sector: dict[str, bool | str]
    course_over_ground: dict[str, bool]
    waypoint: dict[str, bool]

    @classmethod
    def from_rendered(cls, rendered: dict) -> FrameResponse:
        data = dict(rendered)
        data["commands"] = [
            CommandRecord(
                channel=c["channel"],
                from_deg=c["from"],
                to_deg=c["to"],
                duration_ms=c["duration_ms"],
            )
            for c in rendered["commands"]
        ]
        return cls(**data)
