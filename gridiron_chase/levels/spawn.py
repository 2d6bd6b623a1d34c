"""Session generation.

Builds the initial :class:`~gridiron_chase.state.State` of a session: the
player on its configured start cell and ``num_defenders`` defenders scattered
by rejection sampling over the columns right of ``min_defender_col``.
"""

import random
from typing import List, Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from gridiron_chase.components import Position
from gridiron_chase.config import GameConfig
from gridiron_chase.state import State


def _spawn_capacity(config: GameConfig, player: Position) -> int:
    cells = config.rows * (config.cols - config.min_defender_col)
    if player.col >= config.min_defender_col:
        cells -= 1
    return cells


def generate_defenders(
    config: GameConfig, player: Position, rng: random.Random
) -> PVector[Position]:
    """Draw a collision-free defender set.

    Repeatedly samples a random cell with ``col >= min_defender_col`` and keeps
    it unless it is the player's cell or already taken.

    Raises:
        ValueError: If the spawn area cannot hold ``num_defenders`` defenders.
    """
    if config.num_defenders > _spawn_capacity(config, player):
        raise ValueError(
            f"Cannot place {config.num_defenders} defenders on a "
            f"{config.rows}x{config.cols} field"
        )

    defenders: List[Position] = []
    while len(defenders) < config.num_defenders:
        candidate = Position(
            rng.randint(0, config.rows - 1),
            rng.randint(config.min_defender_col, config.cols - 1),
        )
        if candidate == player or candidate in defenders:
            continue
        defenders.append(candidate)
    return pvector(defenders)


def new_state(config: GameConfig, rng: Optional[random.Random] = None) -> State:
    """Return a fresh ``PLAYING`` state for ``config``."""
    if rng is None:
        rng = random.Random()
    player = config.player_start
    return State(
        config=config,
        player=player,
        defenders=generate_defenders(config, player, rng),
    )
