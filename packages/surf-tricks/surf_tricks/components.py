"""Trick catalogue and per-player trick bookkeeping."""
from __future__ import annotations

from dataclasses import dataclass

from surf.input import Key

ANIMATION_FRAMES = 20


@dataclass(frozen=True)
class TrickDef:
    name: str
    duration_ms: float


TRICKS: dict[Key, TrickDef] = {
    Key.TRICK_A: TrickDef(name="360 FLIP", duration_ms=1000.0),
    Key.TRICK_B: TrickDef(name="SURF GRAB", duration_ms=800.0),
}


@dataclass
class TrickProgress:
    """The trick being performed, if any.

    ``scored`` flips exactly once per trick, whichever of timer expiry or
    landing comes first.
    """

    name: str = ""
    start_ms: float = 0.0
    duration_ms: float = 0.0
    frame: int = 0
    in_progress: bool = False
    scored: bool = False
