"""Game configuration.

``GameConfig`` collects every tunable of a session: field size, roster size,
spawn rules, chase bias and the per-defender wake delays. Instances are
immutable and validated on construction so that the rest of the core can
assume sane values.
"""

from dataclasses import dataclass, field
from typing import Tuple

from gridiron_chase.components import Position


@dataclass(frozen=True)
class GameConfig:
    """Immutable session parameters.

    Attributes:
        rows (int): Field height in cells.
        cols (int): Field width in cells. Columns ``0`` and ``cols - 1`` are
            the end zones; reaching ``cols - 1`` scores a touchdown.
        num_defenders (int): Number of defenders spawned per session.
        player_start (Position): Player spawn cell.
        min_defender_col (int): Defenders never spawn left of this column.
        pursuit_probability (float): Chance a defender chases on a given wake
            (the remainder is random jitter).
        defender_delays (Tuple[float, ...]): Candidate wake delays in seconds;
            each defender draws one uniformly before every wake.
    """

    rows: int = 5
    cols: int = 10
    num_defenders: int = 6
    player_start: Position = field(default_factory=lambda: Position(2, 0))
    min_defender_col: int = 3
    pursuit_probability: float = 0.8
    defender_delays: Tuple[float, ...] = (1.0, 1.5)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid must be non-empty, got {self.rows}x{self.cols}")
        if self.num_defenders < 0:
            raise ValueError("num_defenders must be non-negative")
        if not (
            0 <= self.player_start.row < self.rows
            and 0 <= self.player_start.col < self.cols
        ):
            raise ValueError(f"player_start {self.player_start} is out of bounds")
        if not 0 <= self.min_defender_col < self.cols:
            raise ValueError(
                f"min_defender_col must lie in [0, {self.cols}), "
                f"got {self.min_defender_col}"
            )
        if not 0.0 <= self.pursuit_probability <= 1.0:
            raise ValueError("pursuit_probability must lie in [0, 1]")
        if not self.defender_delays or any(d <= 0 for d in self.defender_delays):
            raise ValueError("defender_delays must be a non-empty set of positive delays")

    @property
    def end_zone_col(self) -> int:
        """Column the player must reach to score."""
        return self.cols - 1


DEFAULT_CONFIG = GameConfig()
