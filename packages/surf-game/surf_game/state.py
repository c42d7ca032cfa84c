"""SimulationState - everything one game session mutates, owned by the engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from surf.config import SurfConfig
from surf.scoring import Scorer
from surf.types import PlayerState, UnknownWaveError, WaveId
from surf_physics.components import Player, Wave
from surf_tricks.components import TrickProgress

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    player: Player
    trick: TrickProgress = field(default_factory=TrickProgress)
    waves: dict[WaveId, Wave] = field(default_factory=dict)
    score: Scorer = field(default_factory=Scorer)
    grind_wave: WaveId | None = None
    momentum: float = 0.0
    spawn_timer: int = 0
    started: bool = False
    next_wave_id: WaveId = 0

    @classmethod
    def initial(cls, config: SurfConfig) -> SimulationState:
        x, y = config.player_start
        width, height = config.player_size
        return cls(player=Player(x=x, y=y, width=width, height=height))

    # -- Waves --

    def spawn_wave(self, wave: Wave) -> WaveId:
        wid = self.next_wave_id
        self.next_wave_id += 1
        self.waves[wid] = wave
        logger.debug("Spawned wave #%d at y=%.1f (w=%.1f h=%.1f)", wid, wave.y, wave.width, wave.height)
        return wid

    def despawn_wave(self, wave_id: WaveId) -> Wave:
        try:
            wave = self.waves.pop(wave_id)
        except KeyError:
            raise UnknownWaveError(wave_id, f"Wave {wave_id} is not in the field") from None
        if self.grind_wave == wave_id:
            self.end_grind()
        logger.debug("Retired wave #%d", wave_id)
        return wave

    def get_wave(self, wave_id: WaveId) -> Wave:
        try:
            return self.waves[wave_id]
        except KeyError:
            raise UnknownWaveError(wave_id, f"Wave {wave_id} is not in the field") from None

    def has_wave(self, wave_id: WaveId) -> bool:
        return wave_id in self.waves

    # -- Grinding --

    def grinding_wave(self) -> tuple[WaveId, Wave] | None:
        if self.grind_wave is None:
            return None
        wave = self.waves.get(self.grind_wave)
        if wave is None:
            return None
        return self.grind_wave, wave

    def begin_grind(self, wave_id: WaveId) -> None:
        if wave_id not in self.waves:
            raise UnknownWaveError(wave_id, f"Cannot grind missing wave {wave_id}")
        if self.grind_wave != wave_id:
            logger.debug("Grinding wave #%d", wave_id)
        p = self.player
        p.grinding = True
        p.jumping = False
        p.state = PlayerState.GRIND
        self.grind_wave = wave_id

    def end_grind(self) -> None:
        if self.grind_wave is not None:
            logger.debug("Left wave #%d", self.grind_wave)
        p = self.player
        p.grinding = False
        if p.state is PlayerState.GRIND:
            p.state = PlayerState.NORMAL
        self.grind_wave = None
