"""
Text grid descriptions.

One string per row, all rows the same length. Characters:

    .  empty          #  wall           @  pearl          +  movable block
    o  open gate      x  closed gate    p  player
    ^ v < >  spikes facing up/down/left/right            *  spikes on all sides
    0-9  portal; each digit appears exactly twice and links the pair

The player normally stands on an empty cell. A player standing on a portal
is written by giving the portal digit only once: the player cell is the
other end of that pair.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import MalformedGridError
from .grid import PearlGrid
from .states import State

logger = logging.getLogger(__name__)


CHAR_TO_STATE: Dict[str, State] = {
    ".": State.EMPTY,
    "#": State.WALL,
    "@": State.PEARL,
    "+": State.MOVABLE,
    "o": State.OPEN_GATE,
    "x": State.CLOSED_GATE,
    "^": State.SPIKES_UP,
    "v": State.SPIKES_DOWN,
    "<": State.SPIKES_LEFT,
    ">": State.SPIKES_RIGHT,
    "*": State.SPIKES_ALL,
}

STATE_TO_CHAR: Dict[State, str] = {state: ch for ch, state in CHAR_TO_STATE.items()}

PLAYER_CHAR = "p"


def parse_grid(description: Sequence[str]) -> PearlGrid:
    """Build a grid from its textual description."""
    rows = list(description)
    if not rows or not rows[0]:
        raise MalformedGridError("Grid description is empty")
    width = len(rows[0])
    for r, line in enumerate(rows):
        if len(line) != width:
            raise MalformedGridError(f"Row {r} has length {len(line)}, expected {width}")

    grid = PearlGrid(len(rows), width)
    portals: Dict[str, List[Tuple[int, int]]] = {}
    player: Optional[Tuple[int, int]] = None
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch == PLAYER_CHAR:
                if player is not None:
                    raise MalformedGridError(f"Second player at ({r}, {c})")
                player = (r, c)
                grid.set_player_present(r, c, True)
            elif ch.isdigit():
                portals.setdefault(ch, []).append((r, c))
            elif ch in CHAR_TO_STATE:
                grid.set_state(r, c, CHAR_TO_STATE[ch])
            else:
                raise MalformedGridError(f"Unknown cell character {ch!r} at ({r}, {c})")

    singles = [label for label, ends in portals.items() if len(ends) == 1]
    if len(singles) == 1 and player is not None:
        # Lone digit: the player stands on the other end
        portals[singles[0]].append(player)

    for label, ends in portals.items():
        if len(ends) != 2:
            raise MalformedGridError(f"Portal {label} appears {len(ends)} times, expected 2")
        (r1, c1), (r2, c2) = ends
        grid.set_portal(r1, c1, r2 - r1, c2 - c1)
        grid.set_portal(r2, c2, r1 - r2, c1 - c2)

    logger.debug(f"Parsed {grid.rows}x{grid.columns} grid with {len(portals)} portal pair(s)")
    return grid


def _portal_labels(grid: PearlGrid) -> Dict[Tuple[int, int], str]:
    labels: Dict[Tuple[int, int], str] = {}
    pairs = 0
    for r in range(grid.rows):
        for c in range(grid.columns):
            if grid.get_state(r, c) != State.PORTAL or (r, c) in labels:
                continue
            drow, dcol = grid.offset(r, c)
            label = str(pairs % 10)
            labels[(r, c)] = label
            labels[(r + drow, c + dcol)] = label
            pairs += 1
    return labels


def format_grid(grid: PearlGrid) -> List[str]:
    """Inverse of `parse_grid`. Portals are numbered in scan order.

    The player cell prints as ``p``. On a portal the pair's digit is then
    written once. A player standing on an open gate or spikes prints as
    ``p`` as well and does not round-trip.
    """
    labels = _portal_labels(grid)
    lines: List[str] = []
    for r in range(grid.rows):
        chars = []
        for c in range(grid.columns):
            cell = grid.cell(r, c)
            if cell.player_present:
                chars.append(PLAYER_CHAR)
            elif cell.state == State.PORTAL:
                chars.append(labels[(r, c)])
            else:
                chars.append(STATE_TO_CHAR[cell.state])
        lines.append("".join(chars))
    return lines


def print_grid(grid: PearlGrid) -> None:
    for line in format_grid(grid):
        print(line)
