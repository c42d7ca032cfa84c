"""Clock and TickContext for the fixed-timestep surf engine."""

import random
import time

from surf.config import SurfConfig
from surf.input import InputFrame
from surf.types import TickContext


def monotonic_ms() -> float:
    """Monotonic host time in milliseconds, suitable for ``SurfEngine.tick``."""
    return time.monotonic() * 1000.0


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def dt_ms(self) -> float:
        return self._dt * 1000.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(
        self,
        now_ms: float,
        rng: random.Random,
        config: SurfConfig,
        frame: InputFrame,
    ) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            now_ms=now_ms,
            dt=self._dt,
            random=rng,
            config=config,
            input=frame,
        )

    def reset(self) -> None:
        self._tick_number = 0
