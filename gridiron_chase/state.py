"""Core immutable session ``State`` dataclass.

This module defines the frozen :class:`State` object that represents a whole
session at one instant. Both transitions (player move, defender wake) are pure
functions that take a previous ``State`` and return a *new* ``State``; nothing
is mutated in place. The session controller is the only owner that swaps the
current snapshot.

Design notes:

* ``defenders`` is a persistent vector (``pyrsistent.PVector``). The index of a
    defender is its identity for the lifetime of a session; no defender is
    inserted or removed until reset.
* ``collision`` records the cell where a tackle happened. It is set exactly
    once, on the transition into ``GameStatus.TACKLED``.
* ``status`` short-circuits every reducer once terminal.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from gridiron_chase.components import Position
from gridiron_chase.config import GameConfig
from gridiron_chase.types import GameStatus


class Snapshot(NamedTuple):
    """Render-facing projection of a ``State``."""

    player: Position
    defenders: Tuple[Position, ...]
    status: GameStatus


@dataclass(frozen=True)
class State:
    """Immutable session state.

    Attributes:
        config (GameConfig): Parameters the session was built with.
        player (Position): Current player cell.
        defenders (PVector[Position]): Defender cells keyed by index.
        status (GameStatus): Current game status.
        collision (Position | None): Tackle cell, once tackled.
        turn (int): Number of transitions applied so far (diagnostic only).
    """

    config: GameConfig
    player: Position
    defenders: PVector[Position] = pvector()
    status: GameStatus = GameStatus.PLAYING
    collision: Optional[Position] = None
    turn: int = 0

    def snapshot(self) -> Snapshot:
        return Snapshot(self.player, tuple(self.defenders), self.status)
