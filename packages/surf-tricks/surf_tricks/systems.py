"""System factories for takeoff and trick resolution."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Mapping

from surf.input import Key
from surf.types import PlayerState
from surf_tricks.components import ANIMATION_FRAMES, TRICKS, TrickDef, TrickProgress
from surf_tricks.guards import TrickGuards, default_guards

if TYPE_CHECKING:
    from surf_game.state import SimulationState
    from surf.types import TickContext

logger = logging.getLogger(__name__)


def progress(trick: TrickProgress, now_ms: float) -> float:
    """Fraction of the trick animation played, clamped to [0, 1]."""
    if not trick.in_progress:
        return 0.0
    if trick.duration_ms <= 0:
        return 1.0
    return max(0.0, min((now_ms - trick.start_ms) / trick.duration_ms, 1.0))


def animation_frame(trick: TrickProgress, now_ms: float) -> int:
    return min(math.floor(progress(trick, now_ms) * ANIMATION_FRAMES), ANIMATION_FRAMES)


def start_trick(state: SimulationState, trick: TrickDef, now_ms: float) -> None:
    t = state.trick
    t.name = trick.name
    t.start_ms = now_ms
    t.duration_ms = trick.duration_ms
    t.frame = 0
    t.in_progress = True
    t.scored = False
    state.player.state = PlayerState.TRICK
    logger.debug("Started %s at %.0fms", trick.name, now_ms)


def make_takeoff_system(
    guards: TrickGuards | None = None,
    tricks: Mapping[Key, TrickDef] = TRICKS,
) -> Callable[["SimulationState", "TickContext"], None]:
    """Return a system that turns this tick's press edges into a jump and/or a trick.

    Runs first in the tick. A jump from a wave is not handled here; the
    wave field owns grind jump-offs.
    """
    guards = guards or default_guards()

    def takeoff_system(state: "SimulationState", ctx: "TickContext") -> None:
        p = state.player
        if ctx.input.was_pressed(Key.JUMP) and guards.check("can_jump", state, ctx):
            p.vy = ctx.config.jump_force
            p.jumping = True

        if not guards.check("can_trick", state, ctx):
            return
        for key, trick in tricks.items():
            if ctx.input.was_pressed(key):
                start_trick(state, trick, ctx.now_ms)
                break

    return takeoff_system


def make_trick_system(
    guards: TrickGuards | None = None,
    on_scored: Callable[["SimulationState", "TickContext", str], None] | None = None,
) -> Callable[["SimulationState", "TickContext"], None]:
    """Return a system that animates and resolves the trick in progress.

    Runs after world bounds. A trick scores once: on timer expiry while
    still airborne, or otherwise when the player lands on water or a wave.
    Expiry alone does not leave the trick state; landing does.
    """
    guards = guards or default_guards()

    def _award(state: "SimulationState", ctx: "TickContext") -> None:
        trick = state.trick
        trick.scored = True
        state.score.add_trick(ctx.config.trick_points)
        logger.debug("Scored %s for %d points", trick.name, ctx.config.trick_points)
        if on_scored is not None:
            on_scored(state, ctx, trick.name)

    def trick_system(state: "SimulationState", ctx: "TickContext") -> None:
        trick = state.trick
        if not trick.in_progress:
            return
        p = state.player
        trick.frame = animation_frame(trick, ctx.now_ms)

        if p.jumping and not trick.scored and guards.check("expired", state, ctx):
            _award(state, ctx)

        if guards.check("landed", state, ctx):
            if p.state is PlayerState.TRICK:
                p.state = PlayerState.NORMAL
            trick.in_progress = False
            if not trick.scored:
                _award(state, ctx)

    return trick_system
