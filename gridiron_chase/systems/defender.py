"""Defender chase policy and system.

Each defender independently decides, on every wake, where to step next. The
decision is a biased coin:

* **Pursuit** (``config.pursuit_probability``, 0.8 by default): step toward
    the player along the axis with the larger remaining distance, falling back
    to the other axis, or stay put when both are blocked.
* **Jitter** (the remainder): step to a uniformly chosen free neighbor,
    ignoring the player.

Candidates are filtered to in-bounds cells not held by another defender. The
player's cell is never an obstacle: stepping onto it is a tackle.

The policy is a pure function of its inputs and the injected
``random.Random``. Seeding the generator makes every decision reproducible.
"""

import logging
import random
from dataclasses import replace
from typing import List, Sequence

from gridiron_chase.components import Position
from gridiron_chase.config import GameConfig
from gridiron_chase.state import State
from gridiron_chase.systems.terminal import tackle_system
from gridiron_chase.types import DefenderIndex, PolicyFn
from gridiron_chase.utils.grid import (
    is_in_bounds,
    is_occupied_by_defender,
    neighbors,
)
from gridiron_chase.utils.terminal import is_terminal_state, is_valid_defender

logger = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def pursuit_candidates(current: Position, player: Position) -> List[Position]:
    """Axis steps toward ``player``, larger-distance axis first.

    Ties prefer the column axis. An axis already aligned with the player yields
    no candidate, so a defender on the player's cell gets none at all.
    """
    row_diff = player.row - current.row
    col_diff = player.col - current.col
    row_step = Position(current.row + _sign(row_diff), current.col)
    col_step = Position(current.row, current.col + _sign(col_diff))

    if abs(row_diff) > abs(col_diff):
        ordered = [(row_diff, row_step), (col_diff, col_step)]
    else:
        ordered = [(col_diff, col_step), (row_diff, row_step)]
    return [step for diff, step in ordered if diff != 0]


def _valid_candidates(
    candidates: Sequence[Position],
    defenders: Sequence[Position],
    index: DefenderIndex,
    config: GameConfig,
) -> List[Position]:
    return [
        pos
        for pos in candidates
        if is_in_bounds(config, pos)
        and not is_occupied_by_defender(defenders, pos, exclude_index=index)
    ]


def defender_policy(
    current: Position,
    player: Position,
    defenders: Sequence[Position],
    index: DefenderIndex,
    config: GameConfig,
    rng: random.Random,
) -> Position:
    """Choose the next cell for defender ``index``.

    Args:
        current (Position): The defender's current cell.
        player (Position): The player's current cell.
        defenders (Sequence[Position]): All defender cells, keyed by index.
        index (DefenderIndex): Identity of the deciding defender.
        config (GameConfig): Field bounds and chase bias.
        rng (random.Random): Source for the mode draw and tie breaking.

    Returns:
        Position: The chosen cell, or ``current`` when no move is possible.
    """
    if rng.random() < config.pursuit_probability:
        valid = _valid_candidates(
            pursuit_candidates(current, player), defenders, index, config
        )
        if valid:
            return valid[0]

        # The axis steps are the only neighbors that close distance
        return current

    valid = _valid_candidates(neighbors(current), defenders, index, config)
    return rng.choice(valid) if valid else current


def defender_system(
    state: State,
    index: DefenderIndex,
    rng: random.Random,
    policy: PolicyFn = defender_policy,
) -> State:
    """Advance defender ``index`` by one decision and resolve a tackle.

    Returns the input state unchanged if the session is already terminal or
    the index does not name a defender of this session (e.g. a wake left over
    from a previous session).
    """
    if is_terminal_state(state) or not is_valid_defender(state, index):
        return state

    current = state.defenders[index]
    next_pos = policy(current, state.player, state.defenders, index, state.config, rng)
    logger.debug(f"Defender {index} {current} -> {next_pos}")
    if next_pos == current:
        return state

    state = replace(state, defenders=state.defenders.set(index, next_pos))
    return tackle_system(state)
