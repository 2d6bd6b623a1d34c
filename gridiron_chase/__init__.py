"""Grid pursuit game simulation core.

Public entry points:

* :class:`~gridiron_chase.session.Session`: run a game on an asyncio loop.
* :func:`~gridiron_chase.step.step` / :func:`~gridiron_chase.step.defender_step`:
    the pure state machine.
* :func:`~gridiron_chase.systems.defender.defender_policy`: the chase heuristic.
"""

from gridiron_chase.actions import Action
from gridiron_chase.components import Position
from gridiron_chase.config import DEFAULT_CONFIG, GameConfig
from gridiron_chase.events import GameEvent
from gridiron_chase.session import Session
from gridiron_chase.state import Snapshot, State
from gridiron_chase.step import defender_step, step
from gridiron_chase.types import GameStatus

__all__ = [
    "Action",
    "DEFAULT_CONFIG",
    "GameConfig",
    "GameEvent",
    "GameStatus",
    "Position",
    "Session",
    "Snapshot",
    "State",
    "defender_step",
    "step",
]
