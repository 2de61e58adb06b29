"""Telemetry input for the wind dial.

Public API
----------
WindSample    - one update of optional readings (degrees, knots)
SampleParser  - raw SI dict keyed by SignalK paths → WindSample
"""

from wind_instrument.telemetry.models import WindSample
from wind_instrument.telemetry.parser import SampleParser

__all__ = ["SampleParser", "WindSample"]
