"""Read-only scene snapshot handed to renderers after each tick."""

from __future__ import annotations

from dataclasses import dataclass

from surf.config import SurfConfig
from surf.types import PlayerState, WaveId
from surf_game.state import SimulationState
from surf_tricks.systems import progress

SLOW_BELOW = 0.3
FAST_FROM = 0.7


@dataclass(frozen=True, slots=True)
class PlayerView:
    x: float
    y: float
    width: float
    height: float
    vx: float
    vy: float
    state: PlayerState
    jumping: bool
    grinding: bool
    momentum: float
    grind_wave: WaveId | None
    trick_name: str | None
    trick_progress: float
    trick_frame: int


@dataclass(frozen=True, slots=True)
class WaveView:
    id: WaveId
    x: float
    y: float
    width: float
    height: float
    curve_height: float
    speed: float
    color: tuple[int, int, int, float]
    kind: str


@dataclass(frozen=True, slots=True)
class SpeedIndicator:
    value: float
    ratio: float
    tier: str  # "slow" | "medium" | "fast"


@dataclass(frozen=True, slots=True)
class SceneSnapshot:
    tick: int
    now_ms: float
    started: bool
    score: int
    player: PlayerView
    waves: tuple[WaveView, ...]
    speed: SpeedIndicator
    canvas_width: float
    canvas_height: float
    water_line: float

    def wave(self, wave_id: WaveId) -> WaveView | None:
        for w in self.waves:
            if w.id == wave_id:
                return w
        return None


def speed_indicator(momentum: float, vx: float, config: SurfConfig) -> SpeedIndicator:
    value = momentum + (vx / config.player_speed if vx > 0 else 0.0)
    ratio = min(value / config.speed_indicator_max, 1.0)
    if ratio < SLOW_BELOW:
        tier = "slow"
    elif ratio < FAST_FROM:
        tier = "medium"
    else:
        tier = "fast"
    return SpeedIndicator(value=value, ratio=ratio, tier=tier)


def build_snapshot(
    state: SimulationState, config: SurfConfig, tick: int, now_ms: float
) -> SceneSnapshot:
    p = state.player
    trick = state.trick
    player = PlayerView(
        x=p.x,
        y=p.y,
        width=p.width,
        height=p.height,
        vx=p.vx,
        vy=p.vy,
        state=p.state,
        jumping=p.jumping,
        grinding=p.grinding,
        momentum=state.momentum,
        grind_wave=state.grind_wave,
        trick_name=trick.name if trick.in_progress else None,
        trick_progress=progress(trick, now_ms),
        trick_frame=trick.frame if trick.in_progress else 0,
    )
    waves = tuple(
        WaveView(
            id=wid,
            x=w.x,
            y=w.y,
            width=w.width,
            height=w.height,
            curve_height=w.curve_height,
            speed=w.speed,
            color=w.color,
            kind=w.kind,
        )
        for wid, w in state.waves.items()
    )
    return SceneSnapshot(
        tick=tick,
        now_ms=now_ms,
        started=state.started,
        score=state.score.value,
        player=player,
        waves=waves,
        speed=speed_indicator(state.momentum, p.vx, config),
        canvas_width=config.canvas_width,
        canvas_height=config.canvas_height,
        water_line=config.water_line,
    )
