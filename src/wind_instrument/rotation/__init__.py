"""Per-channel rotation state and seam-aware rotation commands.

Public API
----------
RotationChannel           - identifies one animated dial element
RotationState             - previous/target/active record per channel
RotationCommand           - one ``from → to`` rotation for the renderer
SmoothRotationController  - emits short-way-round commands per transition
"""

from wind_instrument.rotation.controller import DEFAULT_PAIRS, SmoothRotationController
from wind_instrument.rotation.models import (
    RotationChannel,
    RotationCommand,
    RotationPhase,
    RotationState,
)

__all__ = [
    "DEFAULT_PAIRS",
    "RotationChannel",
    "RotationCommand",
    "RotationPhase",
    "RotationState",
    "SmoothRotationController",
]
