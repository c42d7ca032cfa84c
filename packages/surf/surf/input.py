"""Keyboard intent with press-edge detection."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass


class Key(str, enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    JUMP = "jump"
    TRICK_A = "trick_a"
    TRICK_B = "trick_b"


@dataclass(frozen=True, slots=True)
class InputFrame:
    """Input as seen by one tick: keys held now, keys pressed since the last tick."""

    held: frozenset[Key] = frozenset()
    pressed: frozenset[Key] = frozenset()

    def is_held(self, key: Key) -> bool:
        return key in self.held

    def was_pressed(self, key: Key) -> bool:
        return key in self.pressed


class InputState:
    """Mutable key map written by the host and drained once per tick.

    A press edge is recorded only on the released -> pressed transition,
    so OS key-repeat while held never re-fires a jump or trick. An edge
    survives a release in the same frame: a tap shorter than a tick
    still counts.
    """

    def __init__(self) -> None:
        self._held: set[Key] = set()
        self._edges: set[Key] = set()
        self._lock = threading.Lock()

    def set(self, key: Key | str, pressed: bool) -> bool:
        """Record a key change. Returns True when it produced a press edge."""
        key = Key(key)
        with self._lock:
            if pressed:
                edge = key not in self._held
                self._held.add(key)
                if edge:
                    self._edges.add(key)
                return edge
            self._held.discard(key)
            return False

    def held(self, key: Key) -> bool:
        with self._lock:
            return key in self._held

    def pressed(self, key: Key) -> bool:
        with self._lock:
            return key in self._edges

    def consume(self) -> InputFrame:
        with self._lock:
            frame = InputFrame(held=frozenset(self._held), pressed=frozenset(self._edges))
            self._edges.clear()
        return frame

    def clear(self) -> None:
        with self._lock:
            self._held.clear()
            self._edges.clear()
