"""surf - Fixed-timestep core for a single-screen surfing arcade game."""

from surf.clock import Clock, monotonic_ms
from surf.config import SurfConfig
from surf.input import InputFrame, InputState, Key
from surf.scoring import Scorer
from surf.types import (
    ConfigError,
    PlayerState,
    SurfError,
    TickContext,
    UnknownWaveError,
    WaveId,
)

__all__ = [
    "Clock",
    "ConfigError",
    "InputFrame",
    "InputState",
    "Key",
    "PlayerState",
    "Scorer",
    "SurfConfig",
    "SurfError",
    "TickContext",
    "UnknownWaveError",
    "WaveId",
    "monotonic_ms",
]
