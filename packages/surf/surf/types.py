"""Shared type aliases, enums and errors for the surf engine."""

from __future__ import annotations

import enum
import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

WaveId = int


class PlayerState(str, enum.Enum):
    NORMAL = "normal"
    TRICK = "trick"
    GRIND = "grind"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    now_ms: float
    dt: float
    random: _random.Random
    config: SurfConfig
    input: InputFrame


class SurfError(Exception):
    """Base class for errors raised by the surf engine."""


class ConfigError(SurfError, ValueError):
    """Raised when a configuration cannot drive a simulation (bad canvas, tps, sizes)."""


class UnknownWaveError(SurfError, KeyError):
    """Raised when looking up a wave id that is no longer in the field."""

    def __init__(self, wave_id: int, message: str) -> None:
        self.wave_id = wave_id
        super().__init__(message)


if TYPE_CHECKING:
    from surf.config import SurfConfig
    from surf.input import InputFrame
    from surf_game.state import SimulationState

System = Callable[["SimulationState", TickContext], None]
