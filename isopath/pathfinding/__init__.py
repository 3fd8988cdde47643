"""
Pathfinding for isopath levels.

Combines physical adjacency, the collision guard and optical bridges into a
breadth-first path and reachability engine.
"""

from .core_pathfinder import NavigationQuery, PathfindingEngine
from .movement_classifier import AdjacencyInfo, MovementClassifier
from .movement_types import MoveType
from .optical_bridge import OpticalBridgeClassifier
from .projection import normalize_view, project_to_screen

__all__ = [
    "NavigationQuery",
    "PathfindingEngine",
    "AdjacencyInfo",
    "MovementClassifier",
    "MoveType",
    "OpticalBridgeClassifier",
    "normalize_view",
    "project_to_screen",
]
