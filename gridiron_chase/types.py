"""Common type aliases and enumerations.

``PolicyFn`` is the extension point used by the defender system so that the
chase heuristic can be swapped (or stubbed in tests) without touching the
scheduler or the session controller.
"""

import random
from enum import StrEnum, auto
from typing import Callable, Sequence, TYPE_CHECKING


# Forward declaration for PolicyFn typing to avoid circular imports:
if TYPE_CHECKING:
    from gridiron_chase.components import Position
    from gridiron_chase.config import GameConfig

DefenderIndex = int

PolicyFn = Callable[
    [
        "Position",
        "Position",
        Sequence["Position"],
        DefenderIndex,
        "GameConfig",
        random.Random,
    ],
    "Position",
]


class GameStatus(StrEnum):
    """Session status. ``PLAYING`` is initial, the other two are terminal."""

    PLAYING = auto()
    TOUCHDOWN = auto()
    TACKLED = auto()


TERMINAL_STATUSES = frozenset({GameStatus.TOUCHDOWN, GameStatus.TACKLED})
