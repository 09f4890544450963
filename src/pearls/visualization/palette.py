from __future__ import annotations

from typing import Tuple

from pearls.game import State

PLAYER_COLOR = (250, 200, 40)
SPIKES_COLOR = (220, 40, 40)

_PALETTE = {
    State.EMPTY: (30, 30, 36),
    State.WALL: (90, 90, 100),
    State.PEARL: (240, 240, 250),
    State.MOVABLE: (160, 110, 60),
    State.OPEN_GATE: (60, 160, 60),
    State.CLOSED_GATE: (160, 60, 60),
    State.PORTAL: (120, 60, 200),
}


def color_for_state(v: int) -> Tuple[int, int, int]:
    return _PALETTE.get(State(v), SPIKES_COLOR)
