"""Pure geometry between the player box and wave humps."""
from __future__ import annotations

import math

from surf_physics.components import Player, Wave


def overlaps(player: Player, wave: Wave) -> bool:
    """Broad test for grind entry.

    The wave box spans ``[y - height, y]`` when excluding from above but
    only up to ``y`` from below, so a player under the base line can
    still register. The curve test in the wave field decides the actual
    grind height.
    """
    return not (
        player.x + player.width < wave.x
        or player.x > wave.x + wave.width
        or player.y + player.height < wave.y - wave.height
        or player.y > wave.y
    )


def surface_y(wave: Wave, x: float) -> float:
    """Y of the wave crest at screen column ``x``: a single sine arch, flat at both ends."""
    if wave.width <= 0:
        raise ValueError(f"wave width must be positive, got {wave.width}")
    t = (x - wave.x) / wave.width
    t = max(0.0, min(1.0, t))
    return wave.y - wave.height * math.sin(t * math.pi)


def horizontally_detached(player: Player, wave: Wave) -> bool:
    """True once the player box no longer overlaps the wave horizontally."""
    return player.x + player.width < wave.x or player.x > wave.x + wave.width
