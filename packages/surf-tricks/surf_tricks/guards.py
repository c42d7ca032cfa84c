"""TrickGuards registry."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from surf_game.state import SimulationState
    from surf.types import TickContext

Guard = Callable[["SimulationState", "TickContext"], bool]


class TrickGuards:
    """Maps guard name strings to callable predicates."""

    def __init__(self) -> None:
        self._guards: dict[str, Guard] = {}

    def register(self, name: str, fn: Guard) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, state: SimulationState, ctx: TickContext) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](state, ctx)

    def has(self, name: str) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return list(self._guards)


def _can_jump(state: SimulationState, ctx: TickContext) -> bool:
    p = state.player
    return not p.jumping and not p.grinding


def _can_trick(state: SimulationState, ctx: TickContext) -> bool:
    p = state.player
    return p.jumping and not p.grinding and not state.trick.in_progress


def _expired(state: SimulationState, ctx: TickContext) -> bool:
    trick = state.trick
    return ctx.now_ms - trick.start_ms >= trick.duration_ms


def _landed(state: SimulationState, ctx: TickContext) -> bool:
    return not state.player.jumping


def default_guards() -> TrickGuards:
    """Guards used by the trick systems: can_jump, can_trick, expired, landed."""
    guards = TrickGuards()
    guards.register("can_jump", _can_jump)
    guards.register("can_trick", _can_trick)
    guards.register("expired", _expired)
    guards.register("landed", _landed)
    return guards
