"""Tests for takeoff and trick systems."""
import random

import pytest
from surf.config import SurfConfig
from surf.input import InputFrame, Key
from surf.types import PlayerState, TickContext
from surf_game.state import SimulationState
from surf_tricks import (
    TRICKS,
    TrickDef,
    TrickGuards,
    TrickProgress,
    animation_frame,
    default_guards,
    make_takeoff_system,
    make_trick_system,
    progress,
    start_trick,
)


def _ctx(now_ms=0.0, pressed=()):
    return TickContext(
        tick_number=1,
        now_ms=now_ms,
        dt=1.0 / 60,
        random=random.Random(0),
        config=SurfConfig(),
        input=InputFrame(pressed=frozenset(pressed)),
    )


def _airborne():
    state = SimulationState.initial(SurfConfig())
    state.player.jumping = True
    state.player.vy = -10.0
    return state


class TestCatalogue:
    def test_two_tricks(self):
        assert TRICKS[Key.TRICK_A] == TrickDef(name="360 FLIP", duration_ms=1000.0)
        assert TRICKS[Key.TRICK_B] == TrickDef(name="SURF GRAB", duration_ms=800.0)


class TestTakeoff:
    def test_jump_from_the_water(self):
        state = SimulationState.initial(SurfConfig())
        make_takeoff_system()(state, _ctx(pressed=(Key.JUMP,)))
        assert state.player.jumping is True
        assert state.player.vy == -10.0

    def test_no_double_jump(self):
        state = _airborne()
        state.player.vy = 2.0
        make_takeoff_system()(state, _ctx(pressed=(Key.JUMP,)))
        assert state.player.vy == 2.0

    def test_no_jump_while_grinding(self):
        state = SimulationState.initial(SurfConfig())
        state.player.grinding = True
        make_takeoff_system()(state, _ctx(pressed=(Key.JUMP,)))
        assert state.player.jumping is False
        assert state.player.vy == 0.0

    def test_trick_key_in_the_air_starts_trick(self):
        state = _airborne()
        make_takeoff_system()(state, _ctx(now_ms=500.0, pressed=(Key.TRICK_B,)))
        trick = state.trick
        assert trick.in_progress is True
        assert trick.name == "SURF GRAB"
        assert trick.start_ms == 500.0
        assert trick.duration_ms == 800.0
        assert trick.frame == 0
        assert trick.scored is False
        assert state.player.state is PlayerState.TRICK

    def test_trick_key_on_the_water_does_nothing(self):
        state = SimulationState.initial(SurfConfig())
        make_takeoff_system()(state, _ctx(pressed=(Key.TRICK_A,)))
        assert state.trick.in_progress is False
        assert state.player.state is PlayerState.NORMAL

    def test_jump_and_trick_on_the_same_tick(self):
        state = SimulationState.initial(SurfConfig())
        make_takeoff_system()(state, _ctx(pressed=(Key.JUMP, Key.TRICK_A)))
        assert state.player.jumping is True
        assert state.trick.name == "360 FLIP"

    def test_second_trick_ignored_while_one_is_running(self):
        state = _airborne()
        system = make_takeoff_system()
        system(state, _ctx(now_ms=0.0, pressed=(Key.TRICK_A,)))
        system(state, _ctx(now_ms=100.0, pressed=(Key.TRICK_B,)))
        assert state.trick.name == "360 FLIP"
        assert state.trick.start_ms == 0.0

    def test_custom_guard_can_forbid_tricks(self):
        guards = default_guards()
        guards.register("can_trick", lambda s, c: False)
        state = _airborne()
        make_takeoff_system(guards)(state, _ctx(pressed=(Key.TRICK_A,)))
        assert state.trick.in_progress is False


class TestTrickSystem:
    def _mid_trick(self, key=Key.TRICK_B):
        state = _airborne()
        start_trick(state, TRICKS[key], 0.0)
        return state

    def test_scores_on_expiry_but_stays_in_trick(self):
        state = self._mid_trick()
        make_trick_system()(state, _ctx(now_ms=800.0))
        assert state.score.value == 100
        assert state.trick.scored is True
        assert state.trick.in_progress is True
        assert state.player.state is PlayerState.TRICK

    def test_expiry_then_landing_scores_once(self):
        state = self._mid_trick()
        system = make_trick_system()
        system(state, _ctx(now_ms=900.0))
        system(state, _ctx(now_ms=950.0))
        state.player.jumping = False
        system(state, _ctx(now_ms=1000.0))
        assert state.score.value == 100
        assert state.score.tricks_landed == 1
        assert state.trick.in_progress is False
        assert state.player.state is PlayerState.NORMAL

    def test_landing_before_expiry_scores_once(self):
        state = self._mid_trick()
        system = make_trick_system()
        system(state, _ctx(now_ms=300.0))
        assert state.score.value == 0
        state.player.jumping = False
        system(state, _ctx(now_ms=400.0))
        system(state, _ctx(now_ms=2000.0))
        assert state.score.value == 100
        assert state.player.state is PlayerState.NORMAL

    def test_landing_on_a_wave_resolves_the_trick(self):
        state = self._mid_trick()
        state.player.jumping = False
        state.player.grinding = True
        state.player.state = PlayerState.GRIND
        make_trick_system()(state, _ctx(now_ms=200.0))
        assert state.score.value == 100
        assert state.trick.in_progress is False
        assert state.player.state is PlayerState.GRIND

    def test_frame_advances_with_time(self):
        state = self._mid_trick(Key.TRICK_A)
        system = make_trick_system()
        system(state, _ctx(now_ms=500.0))
        assert state.trick.frame == 10
        system(state, _ctx(now_ms=1500.0))
        assert state.trick.frame == 20

    def test_idle_without_trick(self):
        state = _airborne()
        make_trick_system()(state, _ctx(now_ms=5000.0))
        assert state.score.value == 0

    def test_on_scored_callback(self):
        names = []
        state = self._mid_trick()
        make_trick_system(on_scored=lambda s, c, name: names.append(name))(
            state, _ctx(now_ms=800.0)
        )
        assert names == ["SURF GRAB"]

    def test_guards_are_pluggable(self):
        guards = TrickGuards()
        guards.register("expired", lambda s, c: False)
        guards.register("landed", lambda s, c: False)
        state = self._mid_trick()
        state.player.jumping = False
        make_trick_system(guards)(state, _ctx(now_ms=5000.0))
        assert state.score.value == 0
        assert state.trick.in_progress is True


class TestProgress:
    def test_idle_trick_has_no_progress(self):
        assert progress(TrickProgress(), 1000.0) == 0.0

    @pytest.mark.parametrize(
        "now_ms, expected",
        [(0.0, 0.0), (250.0, 0.25), (1000.0, 1.0), (5000.0, 1.0), (-50.0, 0.0)],
    )
    def test_fraction_of_duration(self, now_ms, expected):
        trick = TrickProgress(name="360 FLIP", start_ms=0.0, duration_ms=1000.0, in_progress=True)
        assert progress(trick, now_ms) == expected

    def test_zero_duration_is_complete(self):
        trick = TrickProgress(duration_ms=0.0, in_progress=True)
        assert progress(trick, 0.0) == 1.0

    def test_animation_frame_is_twentieths(self):
        trick = TrickProgress(start_ms=0.0, duration_ms=800.0, in_progress=True)
        assert animation_frame(trick, 0.0) == 0
        assert animation_frame(trick, 39.0) == 0
        assert animation_frame(trick, 40.0) == 1
        assert animation_frame(trick, 799.0) == 19
        assert animation_frame(trick, 800.0) == 20
