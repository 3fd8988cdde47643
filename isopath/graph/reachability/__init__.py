"""
Reachability support for isopath: collision guard, spatial hashing and
shared result types.
"""

from .collision_checker import CollisionChecker, collides
from .reachability_types import PathResult, ReachabilityResult
from .spatial_hash import SpatialHash

__all__ = [
    "CollisionChecker",
    "collides",
    "PathResult",
    "ReachabilityResult",
    "SpatialHash",
]
