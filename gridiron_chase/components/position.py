"""Position component.

Immutable integer grid coordinates. The player and every defender hold one
``Position``; moving an entity always produces a new instance.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at the left end zone).
    """

    row: int
    col: int
