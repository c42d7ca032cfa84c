"""SurfEngine - reset, input, and the per-tick system pipeline."""

from __future__ import annotations

import logging
import math
import os
import random

from surf.clock import Clock
from surf.config import SurfConfig
from surf.input import InputState, Key
from surf.types import System
from surf_game.scene import SceneSnapshot, build_snapshot
from surf_game.state import SimulationState
from surf_physics.kinematics import (
    make_bounds_system,
    make_gravity_system,
    make_momentum_system,
    make_steering_system,
)
from surf_physics.waves import make_spawn_system, make_wave, make_wave_field_system
from surf_tricks.guards import TrickGuards, default_guards
from surf_tricks.systems import make_takeoff_system, make_trick_system

logger = logging.getLogger(__name__)


class SurfEngine:
    """Owns one game session and advances it one fixed tick at a time.

    The host feeds key changes through ``set_input`` and calls
    ``tick(now_ms)`` at the configured rate with a monotonic timestamp.
    Nothing advances until the first key press (or ``start()``).
    """

    def __init__(
        self,
        config: SurfConfig | None = None,
        seed: int | None = None,
        guards: TrickGuards | None = None,
    ) -> None:
        self._config = config or SurfConfig()
        self._clock = Clock(self._config.tps)
        self._input = InputState()
        self._guards = guards or default_guards()
        self._extra_systems: list[System] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._systems: list[System] = self._build_pipeline()
        self._state: SimulationState
        self._last_now_ms: float | None = None
        self.reset()

    @property
    def config(self) -> SurfConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def score(self) -> int:
        return self._state.score.value

    @property
    def started(self) -> bool:
        return self._state.started

    def _build_pipeline(self) -> list[System]:
        # Order matters: waves move after steering and before gravity,
        # tricks resolve after the world bounds have had their say.
        return [
            make_takeoff_system(self._guards),
            make_spawn_system(),
            make_momentum_system(),
            make_steering_system(),
            make_wave_field_system(),
            make_gravity_system(),
            make_bounds_system(),
            make_trick_system(self._guards),
        ]

    def add_system(self, system: System) -> None:
        """Append a system that runs after the built-in pipeline each tick."""
        self._extra_systems.append(system)

    # -- Lifecycle --

    def reset(
        self,
        canvas_width: float | None = None,
        canvas_height: float | None = None,
    ) -> SceneSnapshot:
        """Start a fresh session. Resetting twice in a row equals resetting once."""
        if canvas_width is not None or canvas_height is not None:
            self._config = self._config.with_canvas(
                self._config.canvas_width if canvas_width is None else canvas_width,
                self._config.canvas_height if canvas_height is None else canvas_height,
            )

        self._clock.reset()
        self._input.clear()
        self._rng.seed(self._seed)
        self._last_now_ms = None

        self._state = SimulationState.initial(self._config)
        self._state.spawn_wave(make_wave(self._rng, self._config))
        logger.info(
            "Simulation reset (%gx%g, seed=%d)",
            self._config.canvas_width,
            self._config.canvas_height,
            self._seed,
        )
        return self.snapshot()

    def start(self) -> None:
        if self._state.started:
            return
        self._state.started = True
        logger.info("Simulation started at tick %d", self._clock.tick_number)

    def set_input(self, key: Key | str, pressed: bool) -> None:
        """Record a key change. Any key press also starts the session."""
        self._input.set(key, pressed)
        if pressed:
            self.start()

    # -- Ticking --

    def tick(self, now_ms: float) -> SceneSnapshot:
        if not math.isfinite(now_ms):
            raise ValueError(f"now_ms must be finite, got {now_ms!r}")
        if self._last_now_ms is not None and now_ms < self._last_now_ms:
            raise ValueError(
                f"time went backwards: {now_ms} after {self._last_now_ms}"
            )
        self._last_now_ms = now_ms

        if not self._state.started:
            return self.snapshot()

        self._clock.advance()
        frame = self._input.consume()
        ctx = self._clock.context(now_ms, self._rng, self._config, frame)
        for system in self._systems:
            system(self._state, ctx)
        for system in self._extra_systems:
            system(self._state, ctx)
        return self.snapshot()

    def run(self, n: int, start_ms: float | None = None) -> SceneSnapshot:
        """Advance ``n`` ticks on the clock's own time base. Starts the session."""
        self.start()
        now = start_ms if start_ms is not None else (self._last_now_ms or 0.0)
        snap = self.snapshot()
        for _ in range(n):
            now += self._clock.dt_ms
            snap = self.tick(now)
        return snap

    def snapshot(self) -> SceneSnapshot:
        return build_snapshot(
            self._state,
            self._config,
            self._clock.tick_number,
            self._last_now_ms if self._last_now_ms is not None else 0.0,
        )
