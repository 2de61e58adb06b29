"""Dial geometry: angle math, laylines and wind-shift sectors.

Public API
----------
wrap360, add_heading, signed_angle_between, point_on_circle
compute_laylines    - port/starboard close-hauled lines
compute_sectors     - port/starboard historic wind-shift wedges
WindSectorTracker   - keeps the last valid sector across missing data
"""

from wind_instrument.geometry.angles import (
    add_heading,
    point_on_circle,
    signed_angle_between,
    wrap360,
)
from wind_instrument.geometry.laylines import compute_laylines
from wind_instrument.geometry.models import (
    LaylinePair,
    LinePath,
    Point,
    SectorPath,
    WindSector,
)
from wind_instrument.geometry.sectors import WindSectorTracker, compute_sectors

__all__ = [
    "LaylinePair",
    "LinePath",
    "Point",
    "SectorPath",
    "WindSector",
    "WindSectorTracker",
    "add_heading",
    "compute_laylines",
    "compute_sectors",
    "point_on_circle",
    "signed_angle_between",
    "wrap360",
]
