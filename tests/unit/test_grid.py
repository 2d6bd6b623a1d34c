from gridiron_chase.components import Position
from gridiron_chase.config import GameConfig
from gridiron_chase.utils.grid import (
    clamp_position,
    is_in_bounds,
    is_occupied_by_defender,
    manhattan_distance,
    neighbors,
)


CONFIG = GameConfig(rows=5, cols=10)


def test_is_in_bounds_edges() -> None:
    assert is_in_bounds(CONFIG, Position(0, 0))
    assert is_in_bounds(CONFIG, Position(4, 9))
    assert not is_in_bounds(CONFIG, Position(-1, 0))
    assert not is_in_bounds(CONFIG, Position(0, -1))
    assert not is_in_bounds(CONFIG, Position(5, 0))
    assert not is_in_bounds(CONFIG, Position(0, 10))


def test_clamp_position_per_axis() -> None:
    assert clamp_position(CONFIG, Position(-1, 3)) == Position(0, 3)
    assert clamp_position(CONFIG, Position(2, 10)) == Position(2, 9)
    assert clamp_position(CONFIG, Position(7, -4)) == Position(4, 0)
    assert clamp_position(CONFIG, Position(2, 3)) == Position(2, 3)


def test_occupancy_ignores_own_index() -> None:
    defenders = [Position(1, 1), Position(2, 2)]
    assert is_occupied_by_defender(defenders, Position(1, 1))
    assert not is_occupied_by_defender(defenders, Position(1, 1), exclude_index=0)
    assert is_occupied_by_defender(defenders, Position(2, 2), exclude_index=0)
    assert not is_occupied_by_defender(defenders, Position(3, 3))


def test_manhattan_distance() -> None:
    assert manhattan_distance(Position(0, 0), Position(3, 4)) == 7
    assert manhattan_distance(Position(2, 2), Position(2, 2)) == 0


def test_neighbors_order() -> None:
    assert neighbors(Position(2, 2)) == [
        Position(1, 2),
        Position(3, 2),
        Position(2, 1),
        Position(2, 3),
    ]
