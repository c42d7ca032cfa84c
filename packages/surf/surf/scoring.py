"""Score accumulator."""

from __future__ import annotations


class Scorer:
    """Non-negative, monotonically increasing score for one session.

    Tracks where points came from so hosts can show a breakdown.
    """

    __slots__ = ("_value", "_tricks_landed", "_grind_ticks")

    def __init__(self) -> None:
        self._value = 0
        self._tricks_landed = 0
        self._grind_ticks = 0

    @property
    def value(self) -> int:
        return self._value

    @property
    def tricks_landed(self) -> int:
        return self._tricks_landed

    @property
    def grind_ticks(self) -> int:
        return self._grind_ticks

    def add_trick(self, points: int) -> int:
        self._add(points)
        self._tricks_landed += 1
        return self._value

    def add_grind(self, points: int) -> int:
        self._add(points)
        self._grind_ticks += 1
        return self._value

    def _add(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"score awards must be non-negative, got {points}")
        self._value += points

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return (
            f"Scorer(value={self._value}, tricks_landed={self._tricks_landed}, "
            f"grind_ticks={self._grind_ticks})"
        )
