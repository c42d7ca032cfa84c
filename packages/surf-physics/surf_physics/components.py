"""Player and Wave components."""
from __future__ import annotations

from dataclasses import dataclass

from surf.types import PlayerState


@dataclass
class Player:
    """The surfer. ``(x, y)`` is the top-left corner in screen pixels, y grows down."""

    x: float
    y: float
    width: float
    height: float
    vx: float = 0.0
    vy: float = 0.0
    jumping: bool = False
    grinding: bool = False
    state: PlayerState = PlayerState.NORMAL

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2


@dataclass
class Wave:
    """A rideable wave. ``y`` is the base line, the crest rises ``height`` above it."""

    x: float
    y: float
    width: float
    height: float
    curve_height: float
    speed: float
    color: tuple[int, int, int, float] = (0, 170, 210, 0.8)
    kind: str = "grindable"

    @property
    def right(self) -> float:
        return self.x + self.width
