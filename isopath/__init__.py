# This file makes this a Python package

from .engine_config import EngineConfig
from .game_state import GameSession
from .graph import (
    Axis,
    BlockType,
    GameNode,
    GameStatus,
    GroupState,
    GroupType,
    LevelData,
    LevelGroup,
    TransformContext,
)
from .pathfinding import MoveType, NavigationQuery, PathfindingEngine

__all__ = [
    "EngineConfig",
    "GameSession",
    "Axis",
    "BlockType",
    "GameNode",
    "GameStatus",
    "GroupState",
    "GroupType",
    "LevelData",
    "LevelGroup",
    "TransformContext",
    "MoveType",
    "NavigationQuery",
    "PathfindingEngine",
]
