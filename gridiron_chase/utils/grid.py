"""Grid math / occupancy helpers.

Utility predicates used by the player and defender systems. Functions here are
pure and intentionally lightweight to keep the policy's inner loop fast.
"""

from typing import List, Optional, Sequence

from gridiron_chase.components import Position
from gridiron_chase.config import GameConfig
from gridiron_chase.types import DefenderIndex


# up, down, left, right
CARDINAL_DELTAS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def is_in_bounds(config: GameConfig, pos: Position) -> bool:
    """Return True if ``pos`` lies within the field rectangle."""
    return 0 <= pos.row < config.rows and 0 <= pos.col < config.cols


def clamp_position(config: GameConfig, pos: Position) -> Position:
    """Clamp each axis of ``pos`` independently into the field."""
    return Position(
        min(max(pos.row, 0), config.rows - 1),
        min(max(pos.col, 0), config.cols - 1),
    )


def is_occupied_by_defender(
    defenders: Sequence[Position],
    pos: Position,
    exclude_index: Optional[DefenderIndex] = None,
) -> bool:
    """Return True if a defender other than ``exclude_index`` stands on ``pos``.

    Arguments:
        defenders: Current defender cells, keyed by index.
        pos: Cell to test.
        exclude_index: Index of the asking defender; its own cell never counts.
    """
    return any(
        other == pos for i, other in enumerate(defenders) if i != exclude_index
    )


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def neighbors(pos: Position) -> List[Position]:
    """Cardinal neighbors of ``pos`` (unbounded; callers filter)."""
    return [Position(pos.row + dr, pos.col + dc) for dr, dc in CARDINAL_DELTAS]
