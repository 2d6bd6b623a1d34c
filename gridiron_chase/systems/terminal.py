"""Terminal condition systems.

Evaluate the two ways a session ends and set ``state.status`` exactly once.
Both systems are no-ops on a state that is already terminal, which makes
repeated signals (several defenders reaching the player, a late wake)
idempotent.
"""

from dataclasses import replace

from gridiron_chase.state import State
from gridiron_chase.types import GameStatus
from gridiron_chase.utils.grid import is_occupied_by_defender
from gridiron_chase.utils.terminal import is_terminal_state


def touchdown_system(state: State) -> State:
    """Set ``TOUCHDOWN`` if the player stands in the far end zone."""
    if is_terminal_state(state):
        return state
    if state.player.col == state.config.end_zone_col:
        return replace(state, status=GameStatus.TOUCHDOWN)
    return state


def tackle_system(state: State) -> State:
    """Set ``TACKLED`` if any defender shares the player's cell.

    The tackle cell is recorded in ``state.collision`` so observers can
    highlight it; it is written only on the transition itself.
    """
    if is_terminal_state(state):
        return state
    if is_occupied_by_defender(state.defenders, state.player):
        return replace(state, status=GameStatus.TACKLED, collision=state.player)
    return state
