"""
Move resolvers - pluggable policies for how blocks and the player settle
along a traversal sequence.

The engine computes the sequence of states a move passes over and hands it
to a resolver. The resolver rewrites the sequence in place (those states are
written back into the grid), fills in the move records and returns the
index where the player ends up.

Usage:
    resolver = create_resolver("sliding")
    game = PearlsGame(level, resolver)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from .records import MoveRecord
from .states import Direction, State, is_boundary, is_movable


class MoveResolver(ABC):
    """
    Abstract base class for displacement policies.

    Attributes:
        name: Short identifier used by the registry
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base resolver"

    @abstractmethod
    def resolve_blocks(self, sequence: List[State], records: List[MoveRecord]) -> None:
        """
        Move blocks along the sequence.

        Args:
            sequence: States along the traversal, player cell first
            records: One record per sequence entry, updated in place
        """

    @abstractmethod
    def resolve_player(self, sequence: List[State], records: List[MoveRecord],
                       direction: Direction) -> int:
        """
        Move the player along the sequence after blocks have settled.

        Args:
            sequence: States along the traversal, already block-resolved
            records: One record per sequence entry, updated in place
            direction: Direction of the move

        Returns:
            Index into `sequence` where the player ends up
        """

    def _advance_player(self, sequence: List[State], records: List[MoveRecord],
                        direction: Direction) -> int:
        """
        Walk the player forward until blocked, then apply what they passed over.

        The player stops in front of a boundary or a block, except that
        spikes facing the move are entered. Pearls on the cells covered are
        collected and open gates left behind are closed.
        """
        index = 0
        last = len(sequence) - 1
        while index < last:
            ahead = sequence[index + 1]
            if direction.is_lethal(ahead):
                index += 1
                break
            if is_boundary(ahead, False) or is_movable(ahead):
                break
            index += 1

        for i in range(index + 1):
            if sequence[i] == State.PEARL:
                sequence[i] = State.EMPTY
                records[i].disappeared = True
            elif sequence[i] == State.OPEN_GATE and i < index:
                sequence[i] = State.CLOSED_GATE
        return index


# Global registry of resolvers
_RESOLVERS: Dict[str, Type[MoveResolver]] = {}


def register_resolver(cls: Type[MoveResolver]) -> Type[MoveResolver]:
    """
    Decorator to register a resolver class.

    Usage:
        @register_resolver
        class MyResolver(MoveResolver):
            name = "my_resolver"
            ...
    """
    _RESOLVERS[cls.name] = cls
    return cls


def create_resolver(name: str, **kwargs: Any) -> MoveResolver:
    """
    Create a resolver instance by name.

    Raises:
        ValueError: If resolver name not found
    """
    if name not in _RESOLVERS:
        available = ", ".join(_RESOLVERS.keys())
        raise ValueError(f"Unknown resolver: {name}. Available: {available}")
    return _RESOLVERS[name](**kwargs)


def get_resolver_names() -> List[str]:
    return list(_RESOLVERS.keys())


def get_resolver_info() -> List[Dict[str, str]]:
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _RESOLVERS.values()
    ]


@register_resolver
class SlidingResolver(MoveResolver):
    """
    Blocks slide ahead of the player until something stops them.

    Blocks are settled from the far end of the sequence back toward the
    player, so a block that has already come to rest stops the ones
    behind it.
    """
    name = "sliding"
    description = "Blocks slide to the next obstacle, player stops behind them"

    def resolve_blocks(self, sequence: List[State], records: List[MoveRecord]) -> None:
        for i in range(len(sequence) - 2, 0, -1):
            if not is_movable(sequence[i]):
                continue
            dest = i
            while dest + 1 < len(sequence) and not is_boundary(sequence[dest + 1], True):
                dest += 1
            if dest != i:
                sequence[dest] = State.MOVABLE
                sequence[i] = State.EMPTY
            records[i].moved_to = dest

    def resolve_player(self, sequence: List[State], records: List[MoveRecord],
                       direction: Direction) -> int:
        return self._advance_player(sequence, records, direction)


@register_resolver
class RigidResolver(MoveResolver):
    """Blocks never move; they stop the player like a wall."""
    name = "rigid"
    description = "Blocks are fixed obstacles"

    def resolve_blocks(self, sequence: List[State], records: List[MoveRecord]) -> None:
        for i, state in enumerate(sequence):
            if is_movable(state):
                records[i].moved_to = i

    def resolve_player(self, sequence: List[State], records: List[MoveRecord],
                       direction: Direction) -> int:
        return self._advance_player(sequence, records, direction)
