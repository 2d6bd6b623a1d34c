"""Terminal condition helper predicates."""

from gridiron_chase.state import State
from gridiron_chase.types import TERMINAL_STATUSES, DefenderIndex, GameStatus


def is_terminal_state(state: State) -> bool:
    """Return True once the session reached TOUCHDOWN or TACKLED."""
    return state.status in TERMINAL_STATUSES


def is_playing(state: State) -> bool:
    return state.status == GameStatus.PLAYING


def is_valid_defender(state: State, index: DefenderIndex) -> bool:
    """Return True if ``index`` names a defender of this session."""
    return 0 <= index < len(state.defenders)
