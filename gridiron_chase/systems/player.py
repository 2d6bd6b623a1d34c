"""Player movement system.

Moves the player one cell in the direction of a movement ``Action``. Moving
into a wall is not an error: the destination is clamped per axis, so pressing
UP on the top row simply leaves the player where it is.

Terminal evaluation is deliberately not done here; see
:mod:`gridiron_chase.systems.terminal`.
"""

from dataclasses import replace

from gridiron_chase.actions import DIRECTION_DELTAS, Action
from gridiron_chase.components import Position
from gridiron_chase.state import State
from gridiron_chase.utils.grid import clamp_position


def player_destination(state: State, action: Action) -> Position:
    """Return the clamped cell the player would reach with ``action``."""
    dr, dc = DIRECTION_DELTAS[action]
    pos = state.player
    return clamp_position(state.config, Position(pos.row + dr, pos.col + dc))


def player_move_system(state: State, action: Action) -> State:
    """Place the player on its (clamped) destination.

    Args:
        state (State): Current state.
        action (Action): One of the movement actions.

    Returns:
        State: Same state if the clamped destination equals the current cell,
            otherwise a new state with the updated player position.
    """
    next_pos = player_destination(state, action)
    if next_pos == state.player:
        return state
    return replace(state, player=next_pos)
