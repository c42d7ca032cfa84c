"""surf-tricks - Airborne trick state machine and trick scoring for the surf engine."""
from __future__ import annotations

from surf_tricks.components import TRICKS, TrickDef, TrickProgress
from surf_tricks.guards import TrickGuards, default_guards
from surf_tricks.systems import (
    animation_frame,
    make_takeoff_system,
    make_trick_system,
    progress,
    start_trick,
)

__all__ = [
    "TRICKS",
    "TrickDef",
    "TrickGuards",
    "TrickProgress",
    "animation_frame",
    "default_guards",
    "make_takeoff_system",
    "make_trick_system",
    "progress",
    "start_trick",
]
