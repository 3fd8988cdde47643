"""
Shared data types for reachability analysis systems.

This module contains common data structures used by the pathfinder and the
play session to avoid circular imports.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, Optional, Tuple

if TYPE_CHECKING:
    from ...pathfinding.movement_types import MoveType


@dataclass(frozen=True)
class PathResult:
    """
    Result of a path query.

    A failed query has success=False and an empty path; callers must branch
    on success rather than on the presence of any particular node.
    """

    path: Tuple[int, ...]
    success: bool
    nodes_explored: int = 0
    move_types: Tuple["MoveType", ...] = ()

    @classmethod
    def not_found(cls, nodes_explored: int = 0) -> "PathResult":
        return cls(path=(), success=False, nodes_explored=nodes_explored)

    @property
    def hop_count(self) -> int:
        return max(len(self.path) - 1, 0)

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class ReachabilityResult:
    """
    Result of a graph-based reachability analysis.
    """

    start_node: Optional[int]
    reachable_nodes: FrozenSet[int] = field(default_factory=frozenset)
    max_depth_reached: bool = False

    def is_node_reachable(self, node_id: int) -> bool:
        """Check if a specific node is reachable."""
        return node_id in self.reachable_nodes

    def __len__(self) -> int:
        return len(self.reachable_nodes)
