"""
Movement types for isopath pathfinding.

This module defines the kinds of step the character can take between two
blocks.
"""

from enum import Enum


class MoveType(str, Enum):
    """
    Step kinds between two connected nodes.

    The first three come from physical adjacency; OPTICAL is a connection that
    only exists because two blocks line up on screen.
    """

    WALK = "WALK"  # Level step
    CLIMB_UP = "CLIMB_UP"  # One step up onto a stair or ramp
    JUMP_DOWN = "JUMP_DOWN"  # Drop of up to two blocks
    OPTICAL = "OPTICAL"  # Illusion bridge under the current view

    @property
    def inverse(self) -> "MoveType":
        """Kind of the same step taken in the opposite direction."""
        if self is MoveType.CLIMB_UP:
            return MoveType.JUMP_DOWN
        if self is MoveType.JUMP_DOWN:
            return MoveType.CLIMB_UP
        return self
