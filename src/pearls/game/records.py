from __future__ import annotations

from dataclasses import dataclass, field

from .states import State


@dataclass
class MoveRecord:
    """Fate of the state found at one position of a traversal sequence.

    `moved_to` is the sequence index the original occupant ends up at and
    `disappeared` tells whether it was removed from the grid (a collected
    pearl, for instance).
    """
    state: State
    index: int
    moved_to: int = field(default=-1)
    disappeared: bool = False

    def __post_init__(self) -> None:
        if self.moved_to < 0:
            self.moved_to = self.index

    @property
    def moved(self) -> bool:
        return self.moved_to != self.index

    def __str__(self) -> str:
        text = f"{self.state.name}@{self.index}"
        if self.moved:
            text += f"->{self.moved_to}"
        if self.disappeared:
            text += " (gone)"
        return text
