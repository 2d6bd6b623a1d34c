"""State reducers: the game state machine.

Two inputs drive a session forward and each has a pure reducer here:

1. :func:`step` applies a player movement ``Action``. The clamped destination
    is evaluated in a fixed order: touchdown first (the far end zone wins even
    if a defender stands there), then tackle, otherwise play continues. The
    player is placed on the destination in every branch.
2. :func:`defender_step` applies one wake of one defender (policy plus tackle
    check).

``PLAYING -> TOUCHDOWN`` and ``PLAYING -> TACKLED`` are the only transitions.
Both reducers return the input state untouched once it is terminal; leaving a
terminal state requires building a fresh one (see
:mod:`gridiron_chase.levels.spawn`).
"""

import random
from dataclasses import replace

from gridiron_chase.actions import MOVE_ACTIONS, Action
from gridiron_chase.state import State
from gridiron_chase.systems.defender import defender_policy, defender_system
from gridiron_chase.systems.player import player_move_system
from gridiron_chase.systems.terminal import tackle_system, touchdown_system
from gridiron_chase.types import DefenderIndex, PolicyFn
from gridiron_chase.utils.terminal import is_terminal_state, is_valid_defender


def step(state: State, action: Action) -> State:
    """Advance the session by one player command.

    Args:
        state (State): Previous immutable state.
        action (Action): Movement action to apply.

    Returns:
        State: Next state. A terminal input state is returned unchanged (the
            move is rejected).

    Raises:
        ValueError: If ``action`` is not a movement action. ``RESET`` is the
            session controller's concern, not a state transition.
    """
    if action not in MOVE_ACTIONS:
        raise ValueError(f"Action is not a move: {action!r}")

    if is_terminal_state(state):
        return state

    state = player_move_system(state, action)
    state = touchdown_system(state)
    state = tackle_system(state)
    return replace(state, turn=state.turn + 1)


def defender_step(
    state: State,
    index: DefenderIndex,
    rng: random.Random,
    policy: PolicyFn = defender_policy,
) -> State:
    """Advance defender ``index`` by one wake.

    A terminal state or an unknown index is returned unchanged.
    """
    if is_terminal_state(state) or not is_valid_defender(state, index):
        return state

    state = defender_system(state, index, rng, policy)
    return replace(state, turn=state.turn + 1)
