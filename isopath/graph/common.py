"""
Common graph components for isopath level representations.

This module contains the closed enumerations shared by the level data model,
the transform resolver and the adjacency classifiers.
"""

from enum import Enum


class BlockType(str, Enum):
    """Kind of block a node represents."""

    CUBE = "CUBE"
    STAIR = "STAIR"
    RAMP = "RAMP"
    ARCH = "ARCH"
    ROUNDED = "ROUNDED"
    PORTAL = "PORTAL"
    WATER = "WATER"
    PILLAR = "PILLAR"
    ROTATOR = "ROTATOR"
    DOME = "DOME"
    SPIRE = "SPIRE"
    LATTICE = "LATTICE"
    DECOR = "DECOR"
    FLOOR = "FLOOR"
    WALL = "WALL"


class GroupType(str, Enum):
    """Rigid transform context shared by a set of nodes."""

    STATIC = "STATIC"
    ROTATOR = "ROTATOR"
    SLIDER = "SLIDER"


class Axis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"


class GameStatus(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    COMPLETED = "COMPLETED"


# Whether a block can be stepped up onto from one level below.
# Every BlockType must be listed; see the check below.
CLIMB_SUPPORT = {
    BlockType.CUBE: False,
    BlockType.STAIR: True,
    BlockType.RAMP: True,
    BlockType.ARCH: False,
    BlockType.ROUNDED: False,
    BlockType.PORTAL: False,
    BlockType.WATER: False,
    BlockType.PILLAR: False,
    BlockType.ROTATOR: False,
    BlockType.DOME: False,
    BlockType.SPIRE: False,
    BlockType.LATTICE: False,
    BlockType.DECOR: False,
    BlockType.FLOOR: False,
    BlockType.WALL: False,
}

_unclassified = set(BlockType) - set(CLIMB_SUPPORT)
if _unclassified:
    raise RuntimeError(
        "CLIMB_SUPPORT is missing block types: "
        + ", ".join(sorted(b.value for b in _unclassified))
    )


def supports_climb(block_type: BlockType) -> bool:
    """Check whether a block type can be the destination of a climb."""
    return CLIMB_SUPPORT[BlockType(block_type)]
