from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import IndexOutOfRangeError, NoReachableBoundaryError
from .grid import Cell, Coordinate
from .parser import format_grid, parse_grid
from .records import MoveRecord
from .resolver import MoveResolver, create_resolver
from .states import Direction, State, is_boundary, is_spikes

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    resolver: str = "sliding"
    # Traversal gives up after factor * rows * columns steps
    traversal_limit_factor: int = 2
    max_episode_steps: int = 500
    win_bonus: float = 10.0
    loss_penalty: float = 10.0


class PearlsGame:
    """Game state for one Pearls level: the grid plus move and score counters."""

    def __init__(self, description: Sequence[str], resolver: Optional[MoveResolver] = None,
                 config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.resolver = resolver or create_resolver(self.config.resolver)
        self.description = list(description)
        self.grid = parse_grid(self.description)
        self.moves = 0
        self.score = 0
        logger.info(f"New {self.rows}x{self.columns} game using resolver '{self.resolver.name}'")

    def reset(self) -> None:
        self.grid = parse_grid(self.description)
        self.moves = 0
        self.score = 0

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def columns(self) -> int:
        return self.grid.columns

    def dimensions(self) -> Tuple[int, int]:
        return self.grid.rows, self.grid.columns

    def cell_at(self, row: int, col: int) -> Cell:
        return self.grid.cell(row, col)

    def _player_on_spikes(self) -> bool:
        for i in range(self.grid.states.size):
            if self.grid.player[i] and is_spikes(State(int(self.grid.states[i]))):
                return True
        return False

    def is_over(self) -> bool:
        """True when no pearls are left or the player sits on spikes."""
        return self.pearl_count() == 0 or self._player_on_spikes()

    def won(self) -> bool:
        if self.pearl_count() > 0 or self._player_on_spikes():
            return False
        return self.is_over()

    def player_position(self) -> Coordinate:
        # (0, 0) doubles as the answer for a grid without a player
        for i in range(self.grid.player.size):
            if self.grid.player[i]:
                return self.grid.position(i)
        return 0, 0

    def pearl_count(self) -> int:
        count = 0
        for value in self.grid.states:
            if value == State.PEARL:
                count += 1
        return count

    def next_position(self, row: int, col: int, direction: Direction,
                      portal_jump: bool = False) -> Coordinate:
        """Position reached by one step from (row, col).

        A normal step wraps around the grid edges. A portal jump adds the
        cell's stored offset instead and does not wrap.
        """
        if portal_jump:
            drow, dcol = self.grid.offset(row, col)
            return row + drow, col + dcol
        drow, dcol = direction.delta
        return (row + drow) % self.grid.rows, (col + dcol) % self.grid.columns

    def _walk(self, direction: Direction) -> List[Coordinate]:
        """Positions visited from the player to the first boundary, inclusive.

        The first portal reached sends the walk to its companion by the
        stored offset; the companion is then passed through normally.
        """
        row, col = self.player_position()
        path = [(row, col)]
        limit = self.config.traversal_limit_factor * self.grid.rows * self.grid.columns
        portal_closed = True
        while not is_boundary(self.grid.get_state(row, col), False):
            jump = False
            if self.grid.get_state(row, col) == State.PORTAL:
                if portal_closed:
                    jump = True
                    portal_closed = False
                else:
                    portal_closed = True
            row, col = self.next_position(row, col, direction, jump)
            path.append((row, col))
            if len(path) > limit:
                raise NoReachableBoundaryError(
                    f"No boundary reached moving {direction.name} within {limit} steps"
                )
        return path

    def trace_sequence(self, direction: Direction) -> List[State]:
        return [self.grid.get_state(row, col) for row, col in self._walk(direction)]

    def write_back(self, states: Sequence[State], direction: Direction, player_index: int) -> None:
        """Write resolved states along the traversal and place the player."""
        path = self._walk(direction)
        if len(states) != len(path):
            raise ValueError(f"Expected {len(path)} states, got {len(states)}")
        if not 0 <= player_index < len(path):
            raise IndexOutOfRangeError(
                f"Player index {player_index} outside sequence of length {len(path)}"
            )
        start_row, start_col = path[0]
        self.grid.set_player_present(start_row, start_col, False)
        for i, (row, col) in enumerate(path):
            self.grid.set_state(row, col, states[i])
            if i == player_index:
                self.grid.set_player_present(row, col, True)

    def move(self, direction: Direction) -> List[MoveRecord]:
        """Slide the player in `direction` and return what happened to each cell passed."""
        direction = Direction(direction)
        self.moves += 1
        sequence = self.trace_sequence(direction)
        records = [MoveRecord(state, i) for i, state in enumerate(sequence)]
        for state in sequence:
            if state == State.PEARL:
                self.score += 1
        self.resolver.resolve_blocks(sequence, records)
        player_index = self.resolver.resolve_player(sequence, records, direction)
        self.write_back(sequence, direction, player_index)
        logger.debug(
            f"Move {self.moves} {direction.name}: {[s.name for s in sequence]} "
            f"player_index={player_index} score={self.score}"
        )
        if self.is_over():
            logger.info(f"Game over after {self.moves} moves: {'won' if self.won() else 'lost'}")
        return records

    def get_state(self) -> np.ndarray:
        return self.grid.clone_state()

    def player_mask(self) -> np.ndarray:
        return self.grid.player_mask()

    def to_strings(self) -> List[str]:
        return format_grid(self.grid)

    def __str__(self) -> str:
        return "\n".join(self.to_strings())
