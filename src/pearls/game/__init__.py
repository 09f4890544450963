"""Game module for Pearls.

Exports the rule engine and supporting classes:
- State / Direction: Tile kinds and move directions
- PearlGrid / Cell: Grid storage and cell snapshots
- MoveRecord: Per-cell outcome of a move
- MoveResolver: Pluggable block/player displacement policy
- PearlsGame: Game state, traversal and move execution
"""

from .errors import (
    PearlsError,
    MalformedGridError,
    IndexOutOfRangeError,
    NoReachableBoundaryError,
)
from .states import State, Direction, is_boundary, is_movable, is_spikes
from .grid import Cell, PearlGrid
from .records import MoveRecord
from .parser import parse_grid, format_grid, print_grid
from .resolver import (
    MoveResolver,
    SlidingResolver,
    RigidResolver,
    create_resolver,
    get_resolver_names,
    get_resolver_info,
    register_resolver,
)
from .core import GameConfig, PearlsGame
from .levels import LEVELS, DEFAULT_LEVEL, get_level

__all__ = [
    "PearlsError",
    "MalformedGridError",
    "IndexOutOfRangeError",
    "NoReachableBoundaryError",
    "State",
    "Direction",
    "is_boundary",
    "is_movable",
    "is_spikes",
    "Cell",
    "PearlGrid",
    "MoveRecord",
    "parse_grid",
    "format_grid",
    "print_grid",
    "MoveResolver",
    "SlidingResolver",
    "RigidResolver",
    "create_resolver",
    "get_resolver_names",
    "get_resolver_info",
    "register_resolver",
    "GameConfig",
    "PearlsGame",
    "LEVELS",
    "DEFAULT_LEVEL",
    "get_level",
]
