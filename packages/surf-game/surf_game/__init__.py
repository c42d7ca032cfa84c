"""surf-game - The surf simulation engine: state, tick pipeline and scene snapshots."""

from surf_game.engine import SurfEngine
from surf_game.scene import PlayerView, SceneSnapshot, SpeedIndicator, WaveView, speed_indicator
from surf_game.state import SimulationState

__all__ = [
    "PlayerView",
    "SceneSnapshot",
    "SimulationState",
    "SpeedIndicator",
    "SurfEngine",
    "WaveView",
    "speed_indicator",
]
