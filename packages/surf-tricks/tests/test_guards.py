"""Tests for the TrickGuards registry and default guards."""
import random

import pytest
from surf.config import SurfConfig
from surf.input import InputFrame
from surf.types import TickContext
from surf_game.state import SimulationState
from surf_tricks import TrickGuards, default_guards


def _ctx(now_ms=0.0):
    return TickContext(
        tick_number=1,
        now_ms=now_ms,
        dt=1.0 / 60,
        random=random.Random(0),
        config=SurfConfig(),
        input=InputFrame(),
    )


class TestTrickGuardsRegistry:
    def test_register_and_check(self):
        guards = TrickGuards()
        guards.register("always", lambda s, c: True)
        state = SimulationState.initial(SurfConfig())
        assert guards.check("always", state, _ctx()) is True

    def test_register_overwrites(self):
        guards = TrickGuards()
        guards.register("g", lambda s, c: True)
        guards.register("g", lambda s, c: False)
        state = SimulationState.initial(SurfConfig())
        assert guards.check("g", state, _ctx()) is False

    def test_unknown_guard_raises_key_error(self):
        guards = TrickGuards()
        state = SimulationState.initial(SurfConfig())
        with pytest.raises(KeyError):
            guards.check("missing", state, _ctx())

    def test_has_and_names(self):
        guards = TrickGuards()
        assert guards.names() == []
        guards.register("a", lambda s, c: True)
        guards.register("b", lambda s, c: True)
        assert guards.has("a")
        assert not guards.has("c")
        assert guards.names() == ["a", "b"]


class TestDefaultGuards:
    def test_names(self):
        assert default_guards().names() == ["can_jump", "can_trick", "expired", "landed"]

    def test_can_jump_only_from_the_water(self):
        guards = default_guards()
        state = SimulationState.initial(SurfConfig())
        assert guards.check("can_jump", state, _ctx())
        state.player.jumping = True
        assert not guards.check("can_jump", state, _ctx())
        state.player.jumping = False
        state.player.grinding = True
        assert not guards.check("can_jump", state, _ctx())

    def test_can_trick_needs_air_and_no_trick(self):
        guards = default_guards()
        state = SimulationState.initial(SurfConfig())
        assert not guards.check("can_trick", state, _ctx())
        state.player.jumping = True
        assert guards.check("can_trick", state, _ctx())
        state.trick.in_progress = True
        assert not guards.check("can_trick", state, _ctx())

    def test_expired_at_duration(self):
        guards = default_guards()
        state = SimulationState.initial(SurfConfig())
        state.trick.start_ms = 1000.0
        state.trick.duration_ms = 800.0
        assert not guards.check("expired", state, _ctx(now_ms=1799.0))
        assert guards.check("expired", state, _ctx(now_ms=1800.0))

    def test_landed(self):
        guards = default_guards()
        state = SimulationState.initial(SurfConfig())
        assert guards.check("landed", state, _ctx())
        state.player.jumping = True
        assert not guards.check("landed", state, _ctx())
