"""FastAPI adapter serving one wind dial display session."""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from wind_instrument import __version__
from wind_instrument.display.config import DisplayConfig
from wind_instrument.display.engine import WindDisplayEngine
from wind_instrument.display.renderer import WindDisplayRenderer
from wind_instrument.errors import InvalidBearing
from wind_instrument.rotation.models import RotationChannel
from wind_instrument.telemetry.parser import SampleParser
from wind_instrument.web.schemas import FrameResponse, HealthResponse, SampleRequest

load_dotenv()  # loads .env from project root; must run before DisplayConfig.from_env()

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(title="Wind Instrument", version=__version__)

app.state.engine = WindDisplayEngine(DisplayConfig.from_env())

_renderer = WindDisplayRenderer()
_parser = SampleParser()


def _engine() -> WindDisplayEngine:
    return app.state.engine


def _apply(sample) -> FrameResponse:
    try:
        frame = _engine().update(sample)
    except InvalidBearing as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return FrameResponse.from_rendered(_renderer.render(frame))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/api/frame", response_model=FrameResponse)
def current_frame() -> FrameResponse:
    """Return the frame produced by the most recent sample."""
    frame = _engine().last_frame
    if frame is None:
        raise HTTPException(status_code=404, detail="No sample received yet")
    return FrameResponse.from_rendered(_renderer.render(frame))


@app.post("/api/samples", response_model=FrameResponse)
def post_sample(req: SampleRequest) -> FrameResponse:
    """Apply one sample given in degrees and knots."""
    return _apply(req.to_sample())


@app.post("/api/samples/raw", response_model=FrameResponse)
def post_raw_sample(raw: dict) -> FrameResponse:
    """Apply one sample of SI readings keyed by SignalK paths."""
    return _apply(_parser.parse(raw))


@app.post("/api/channels/{channel}/complete")
def complete_channel(channel: RotationChannel) -> dict:
    """Record that the renderer finished animating *channel*."""
    _engine().complete(channel)
    state = _engine().controller.state(channel)
    return {"channel": channel.value, "phase": state.phase.value if state else "idle"}


@app.post("/api/reset")
def reset() -> dict:
    """Start a fresh display session with the current configuration."""
    app.state.engine = WindDisplayEngine(_engine().config)
    return {"status": "reset"}
