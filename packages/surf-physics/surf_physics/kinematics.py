"""System factories for player kinematics.

The engine interleaves these with the wave field, so each step stays a
separate system: momentum and steering run before waves move, gravity
and world bounds after.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from surf.input import Key

if TYPE_CHECKING:
    from surf_game.state import SimulationState
    from surf.types import TickContext


def make_momentum_system() -> Callable[["SimulationState", "TickContext"], None]:
    """Momentum builds on the water, holds a floor while grinding, bleeds off in the air."""

    def momentum_system(state: "SimulationState", ctx: "TickContext") -> None:
        cfg = ctx.config
        p = state.player
        if not p.jumping and not p.grinding:
            state.momentum += cfg.momentum_gain
        elif p.grinding:
            state.momentum = max(state.momentum, cfg.grind_momentum_floor)
        else:
            state.momentum *= cfg.momentum_decay
        state.momentum = min(state.momentum, cfg.momentum_max)

    return momentum_system


def make_steering_system() -> Callable[["SimulationState", "TickContext"], None]:
    """Horizontal speed from input and momentum, vertical nudges, then move and clamp x."""

    def steering_system(state: "SimulationState", ctx: "TickContext") -> None:
        cfg = ctx.config
        inp = ctx.input
        p = state.player

        if inp.is_held(Key.MOVE_LEFT):
            p.vx = -cfg.player_speed
        elif inp.is_held(Key.MOVE_RIGHT):
            p.vx = cfg.player_speed + state.momentum
        else:
            # Passive forward drift.
            p.vx = state.momentum * 0.5

        if not p.grinding:
            if inp.is_held(Key.MOVE_UP):
                p.vy = -cfg.vertical_speed
            elif inp.is_held(Key.MOVE_DOWN):
                p.vy = cfg.vertical_speed

        p.x += p.vx
        if p.x < 0:
            p.x = 0.0
        elif p.x + p.width > cfg.canvas_width:
            p.x = cfg.canvas_width - p.width

    return steering_system


def make_gravity_system() -> Callable[["SimulationState", "TickContext"], None]:
    """Gravity (halved while steering vertically) and the constant downhill drift."""

    def gravity_system(state: "SimulationState", ctx: "TickContext") -> None:
        cfg = ctx.config
        inp = ctx.input
        p = state.player
        if p.grinding:
            return

        if inp.is_held(Key.MOVE_UP) or inp.is_held(Key.MOVE_DOWN):
            p.vy += cfg.gravity * 0.5
        else:
            p.vy += cfg.gravity
        p.y += p.vy

        if not p.jumping:
            p.y += cfg.slope_factor * p.vx * 0.1

    return gravity_system


def make_bounds_system() -> Callable[["SimulationState", "TickContext"], None]:
    """Water line below, ceiling above.

    Touching the water ends a jump. Any trick still in progress is left
    for the trick system to resolve on the same tick.
    """

    def bounds_system(state: "SimulationState", ctx: "TickContext") -> None:
        cfg = ctx.config
        p = state.player

        water = cfg.water_line
        if p.y + p.height > water:
            p.y = water - p.height
            p.vy = 0.0
            p.jumping = False

        if p.y < cfg.ceiling_y:
            p.y = cfg.ceiling_y
            p.vy = 0.0

    return bounds_system
