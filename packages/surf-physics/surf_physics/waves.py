"""Wave generator and wave field systems."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from surf.input import Key
from surf_physics.collision import horizontally_detached, overlaps, surface_y
from surf_physics.components import Wave

if TYPE_CHECKING:
    from surf.config import SurfConfig
    from surf_game.state import SimulationState
    from surf.types import TickContext, WaveId

logger = logging.getLogger(__name__)

# (low, high) ranges for generated waves
WAVE_HEIGHT_RANGE = (40.0, 120.0)
WAVE_LENGTH_RANGE = (150.0, 450.0)
CURVE_HEIGHT_RANGE = (10.0, 30.0)
SPEED_FACTOR_RANGE = (0.8, 1.2)
# Colour channels as (base, spread)
GREEN_CHANNEL = (120, 100)
BLUE_CHANNEL = (180, 60)
WAVE_ALPHA = 0.8

SPAWN_MARGIN = 50.0
# Random spawns land in a band this far above the bottom edge.
RANDOM_BAND_TOP = 200.0
RANDOM_BAND_HEIGHT = 100.0


def _uniform(rng: random.Random, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return rng.random() * (high - low) + low


def make_wave(rng: random.Random, config: SurfConfig, y: float | None = None) -> Wave:
    """Build a wave just off the right edge. ``y`` defaults to the water line."""
    height = _uniform(rng, WAVE_HEIGHT_RANGE)
    length = _uniform(rng, WAVE_LENGTH_RANGE)
    curve_height = _uniform(rng, CURVE_HEIGHT_RANGE)
    speed = config.wave_speed * _uniform(rng, SPEED_FACTOR_RANGE)
    green = int(rng.random() * GREEN_CHANNEL[1]) + GREEN_CHANNEL[0]
    blue = int(rng.random() * BLUE_CHANNEL[1]) + BLUE_CHANNEL[0]
    return Wave(
        x=config.canvas_width + SPAWN_MARGIN,
        y=config.water_line if y is None else y,
        width=length,
        height=height,
        curve_height=curve_height,
        speed=speed,
        color=(0, green, blue, WAVE_ALPHA),
    )


def make_spawn_system(
    on_spawn: Callable[["SimulationState", "TickContext", "WaveId"], None] | None = None,
) -> Callable[["SimulationState", "TickContext"], None]:
    """Return a system with two independent spawn triggers.

    A periodic one every ``spawn_interval`` ticks at the water line, and a
    ``spawn_chance`` roll each tick that drops a wave somewhere in the
    lower band of the screen.
    """

    def _spawn(state: "SimulationState", ctx: "TickContext", wave: Wave) -> None:
        wid = state.spawn_wave(wave)
        if on_spawn is not None:
            on_spawn(state, ctx, wid)

    def spawn_system(state: "SimulationState", ctx: "TickContext") -> None:
        cfg = ctx.config
        state.spawn_timer += 1
        if state.spawn_timer >= cfg.spawn_interval:
            _spawn(state, ctx, make_wave(ctx.random, cfg))
            state.spawn_timer = 0

        if ctx.random.random() < cfg.spawn_chance:
            y = ctx.random.random() * RANDOM_BAND_HEIGHT + (cfg.canvas_height - RANDOM_BAND_TOP)
            _spawn(state, ctx, make_wave(ctx.random, cfg, y))

    return spawn_system


def make_wave_field_system(
    on_retire: Callable[["SimulationState", "TickContext", "WaveId"], None] | None = None,
) -> Callable[["SimulationState", "TickContext"], None]:
    """Move waves, retire the ones that left the screen, and drive grinding.

    Iterates over a copy of the ids, so retiring a wave never skips the
    next one. A wave with no width is retired before any surface math.
    """

    def _snap_to_crest(state: "SimulationState", ctx: "TickContext", wave: Wave) -> None:
        p = state.player
        top = surface_y(wave, p.center_x)
        p.y = top - p.height + ctx.config.grind_snap

    def _jump_off(state: "SimulationState", ctx: "TickContext") -> None:
        cfg = ctx.config
        state.end_grind()
        p = state.player
        p.vy = cfg.jump_force
        p.jumping = True
        state.momentum = min(state.momentum + cfg.grind_jump_bonus, cfg.momentum_max)
        logger.debug("Jumped off wave with momentum %.2f", state.momentum)

    def wave_field_system(state: "SimulationState", ctx: "TickContext") -> None:
        cfg = ctx.config
        p = state.player

        for wid in list(state.waves):
            wave = state.waves.get(wid)
            if wave is None:
                continue

            wave.x -= wave.speed
            if wave.width <= 0 or wave.x + wave.width < 0:
                state.despawn_wave(wid)
                if on_retire is not None:
                    on_retire(state, ctx, wid)
                continue

            if overlaps(p, wave):
                top = surface_y(wave, p.center_x)
                if p.y + p.height <= top + cfg.grind_tolerance:
                    state.begin_grind(wid)
                    _snap_to_crest(state, ctx, wave)

            if state.grind_wave == wid:
                _snap_to_crest(state, ctx, wave)
                state.score.add_grind(cfg.grind_points_per_tick)

                if horizontally_detached(p, wave):
                    state.end_grind()

                if ctx.input.was_pressed(Key.JUMP):
                    _jump_off(state, ctx)

    return wave_field_system
