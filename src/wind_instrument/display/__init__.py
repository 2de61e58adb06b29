"""Display session: configuration, per-update engine and renderer adapter.

Public API
----------
DisplayConfig        - layline offset, dial circle, animation duration
WindDisplayEngine    - applies WindSample updates, emits a DisplayFrame
DisplayFrame         - commands, channel states, text, geometry, visibility
WindDisplayRenderer  - DisplayFrame → JSON-ready dict / SVG path strings
"""

from wind_instrument.display.config import DisplayConfig
from wind_instrument.display.engine import DisplayFrame, WindDisplayEngine
from wind_instrument.display.renderer import WindDisplayRenderer

__all__ = ["DisplayConfig", "DisplayFrame", "WindDisplayEngine", "WindDisplayRenderer"]
