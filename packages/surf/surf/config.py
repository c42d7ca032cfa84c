"""SurfConfig - every tunable constant of the simulation in one frozen record."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from surf.types import ConfigError


@dataclass(frozen=True)
class SurfConfig:
    """Simulation constants. Distances are pixels, speeds are pixels per tick.

    Validated on construction; an invalid combination raises ``ConfigError``
    so nothing downstream ever sees a NaN or an inverted world.
    """

    canvas_width: float = 800.0
    canvas_height: float = 500.0
    tps: int = 60

    # Player kinematics
    gravity: float = 0.5
    jump_force: float = -10.0
    player_speed: float = 5.0
    vertical_speed: float = 3.0
    slope_angle_deg: float = 12.0
    player_start: tuple[float, float] = (150.0, 300.0)
    player_size: tuple[float, float] = (20.0, 40.0)
    water_offset: float = 100.0
    ceiling_y: float = 50.0

    # Momentum
    momentum_gain: float = 0.05
    momentum_decay: float = 0.99
    momentum_max: float = 3.0
    grind_momentum_floor: float = 1.0
    grind_jump_bonus: float = 0.5

    # Waves
    wave_speed: float = 2.0
    spawn_interval: int = 180
    spawn_chance: float = 0.01
    grind_tolerance: float = 10.0
    grind_snap: float = 2.0

    # Scoring
    trick_points: int = 100
    grind_points_per_tick: int = 1

    # Presentation
    speed_indicator_max: float = 5.0

    def __post_init__(self) -> None:
        self.validate()

    @property
    def water_line(self) -> float:
        return self.canvas_height - self.water_offset

    @property
    def slope_factor(self) -> float:
        return math.tan(math.radians(self.slope_angle_deg))

    def with_canvas(self, width: float, height: float) -> SurfConfig:
        return dataclasses.replace(self, canvas_width=width, canvas_height=height)

    def validate(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            values = value if isinstance(value, tuple) else (value,)
            for v in values:
                if isinstance(v, bool) or not isinstance(v, (int, float)):
                    raise ConfigError(f"{f.name} must be numeric, got {v!r}")
                if not math.isfinite(v):
                    raise ConfigError(f"{f.name} must be finite, got {v!r}")

        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ConfigError(
                f"canvas must have positive size, got {self.canvas_width}x{self.canvas_height}"
            )
        if self.tps <= 0:
            raise ConfigError("tps must be positive")
        if self.spawn_interval <= 0:
            raise ConfigError("spawn_interval must be positive")
        if not 0.0 <= self.spawn_chance <= 1.0:
            raise ConfigError("spawn_chance must be within [0, 1]")
        if self.wave_speed <= 0:
            raise ConfigError("wave_speed must be positive")

        pw, ph = self.player_size
        if pw <= 0 or ph <= 0:
            raise ConfigError("player_size must be positive")
        if pw > self.canvas_width:
            raise ConfigError("player is wider than the canvas")
        if self.water_line - ph <= self.ceiling_y:
            raise ConfigError(
                f"water line {self.water_line} leaves no room below ceiling {self.ceiling_y}"
            )
        sx, sy = self.player_start
        if not 0.0 <= sx <= self.canvas_width - pw:
            raise ConfigError(
                f"player_start x {sx} is outside [0, {self.canvas_width - pw}]"
            )
        if not self.ceiling_y <= sy <= self.water_line - ph:
            raise ConfigError(
                f"player_start y {sy} is outside [{self.ceiling_y}, {self.water_line - ph}]"
            )
        if self.momentum_max < 0 or not 0.0 <= self.momentum_decay <= 1.0:
            raise ConfigError("momentum_max must be >= 0 and momentum_decay within [0, 1]")
        if self.trick_points < 0 or self.grind_points_per_tick < 0:
            raise ConfigError("points must be non-negative")
