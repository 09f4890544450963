from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .errors import IndexOutOfRangeError, MalformedGridError
from .states import State


Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Cell:
    state: State
    player_present: bool = False
    row_offset: int = 0
    column_offset: int = 0


class PearlGrid:
    """Fixed-size grid of typed cells.

    Cells live in flat numpy buffers addressed by the row-major index
    ``row * columns + col``: one for states, one for the player flag and
    one for portal offsets. The shape never changes after construction.
    """

    def __init__(self, rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise MalformedGridError(f"Grid must be non-empty, got {rows}x{columns}")
        self.rows = int(rows)
        self.columns = int(columns)
        size = self.rows * self.columns
        self.states = np.full(size, int(State.EMPTY), dtype=np.int8)
        self.player = np.zeros(size, dtype=np.bool_)
        self.offsets = np.zeros((size, 2), dtype=np.int32)

    @classmethod
    def from_cells(cls, cells: Sequence[Sequence[Cell]]) -> "PearlGrid":
        if len(cells) == 0 or len(cells[0]) == 0:
            raise MalformedGridError("Grid must have at least one row and one column")
        width = len(cells[0])
        for r, row in enumerate(cells):
            if len(row) != width:
                raise MalformedGridError(f"Row {r} has length {len(row)}, expected {width}")
        grid = cls(len(cells), width)
        for r, row in enumerate(cells):
            for c, cell in enumerate(row):
                i = grid.index(r, c)
                grid.states[i] = int(cell.state)
                grid.player[i] = cell.player_present
                grid.offsets[i] = (cell.row_offset, cell.column_offset)
        if int(np.count_nonzero(grid.player)) > 1:
            raise MalformedGridError("Grid has more than one player")
        return grid

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def index(self, row: int, col: int) -> int:
        if not self.is_inside(row, col):
            raise IndexOutOfRangeError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.columns} grid"
            )
        return row * self.columns + col

    def position(self, index: int) -> Coordinate:
        return divmod(index, self.columns)

    def cell(self, row: int, col: int) -> Cell:
        i = self.index(row, col)
        drow, dcol = self.offsets[i]
        return Cell(
            state=State(int(self.states[i])),
            player_present=bool(self.player[i]),
            row_offset=int(drow),
            column_offset=int(dcol),
        )

    def get_state(self, row: int, col: int) -> State:
        return State(int(self.states[self.index(row, col)]))

    def set_state(self, row: int, col: int, state: State) -> None:
        self.states[self.index(row, col)] = int(state)

    def is_player_present(self, row: int, col: int) -> bool:
        return bool(self.player[self.index(row, col)])

    def set_player_present(self, row: int, col: int, present: bool) -> None:
        self.player[self.index(row, col)] = present

    def offset(self, row: int, col: int) -> Coordinate:
        drow, dcol = self.offsets[self.index(row, col)]
        return int(drow), int(dcol)

    def set_portal(self, row: int, col: int, row_offset: int, column_offset: int) -> None:
        i = self.index(row, col)
        self.states[i] = int(State.PORTAL)
        self.offsets[i] = (row_offset, column_offset)

    def count(self, state: State) -> int:
        return int(np.count_nonzero(self.states == int(state)))

    def clone_state(self) -> np.ndarray:
        return self.states.reshape(self.rows, self.columns).copy()

    def player_mask(self) -> np.ndarray:
        return self.player.reshape(self.rows, self.columns).copy()

