from __future__ import annotations

from enum import IntEnum
from typing import Tuple


class State(IntEnum):
    EMPTY = 0
    WALL = 1
    PEARL = 2
    MOVABLE = 3
    OPEN_GATE = 4
    CLOSED_GATE = 5
    PORTAL = 6
    SPIKES_UP = 7
    SPIKES_DOWN = 8
    SPIKES_LEFT = 9
    SPIKES_RIGHT = 10
    SPIKES_ALL = 11


SPIKES = frozenset(
    {State.SPIKES_UP, State.SPIKES_DOWN, State.SPIKES_LEFT, State.SPIKES_RIGHT, State.SPIKES_ALL}
)

# Only EMPTY is passable for a sliding block
_STRICT_ONLY = frozenset({State.MOVABLE, State.PEARL, State.OPEN_GATE, State.PORTAL})


def is_spikes(state: State) -> bool:
    return state in SPIKES


def is_movable(state: State) -> bool:
    return state == State.MOVABLE


def is_boundary(state: State, strict: bool) -> bool:
    """Return True if `state` stops a traversal.

    Walls, closed gates and spikes stop everything. With `strict` the
    classification is the one used for sliding blocks, which are also
    stopped by other blocks, pearls, open gates and portals.
    """
    if state in (State.WALL, State.CLOSED_GATE) or state in SPIKES:
        return True
    return strict and state in _STRICT_ONLY


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def lethal_spikes(self) -> State:
        """Spikes kind whose spiked face meets a player moving this way."""
        return _FACING[self]

    def is_lethal(self, state: State) -> bool:
        return state == State.SPIKES_ALL or state == self.lethal_spikes


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_FACING = {
    Direction.UP: State.SPIKES_DOWN,
    Direction.DOWN: State.SPIKES_UP,
    Direction.LEFT: State.SPIKES_RIGHT,
    Direction.RIGHT: State.SPIKES_LEFT,
}
