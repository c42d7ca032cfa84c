"""surf-physics - Player kinematics, wave generation and wave collision for the surf engine."""
from __future__ import annotations

from surf_physics.collision import horizontally_detached, overlaps, surface_y
from surf_physics.components import Player, Wave
from surf_physics.kinematics import (
    make_bounds_system,
    make_gravity_system,
    make_momentum_system,
    make_steering_system,
)
from surf_physics.waves import make_spawn_system, make_wave, make_wave_field_system

__all__ = [
    "Player",
    "Wave",
    "horizontally_detached",
    "make_bounds_system",
    "make_gravity_system",
    "make_momentum_system",
    "make_spawn_system",
    "make_steering_system",
    "make_wave",
    "make_wave_field_system",
    "overlaps",
    "surface_y",
]
