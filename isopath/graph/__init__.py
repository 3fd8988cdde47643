"""
Graph-based level representations for isopath.
"""

from .common import Axis, BlockType, GameStatus, GroupType
from .level_data import (
    GameNode,
    GroupState,
    LevelData,
    LevelGroup,
    TransformContext,
    select_start_node,
)
from .transform_resolver import WorldPositionTable, resolve_world_position

__all__ = [
    "Axis",
    "BlockType",
    "GameStatus",
    "GroupType",
    "GameNode",
    "GroupState",
    "LevelData",
    "LevelGroup",
    "TransformContext",
    "select_start_node",
    "WorldPositionTable",
    "resolve_world_position",
]
