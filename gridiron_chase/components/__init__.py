"""Component value types shared by the simulation core."""

from .position import Position

__all__ = ["Position"]
