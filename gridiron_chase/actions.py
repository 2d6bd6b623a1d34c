"""Action enumerations.

``Action`` is the command vocabulary accepted at the boundary of the core.
Raw input events (keys, buttons) are mapped onto it by an external layer.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple


class Action(StrEnum):
    """String enum of player commands.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
        RESET: Start a new session; only honored once the session is terminal.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    RESET = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

# (row delta, col delta) per movement action
DIRECTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}
