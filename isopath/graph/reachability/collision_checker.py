"""
Collision detection utilities for reachability analysis.

A physical step is a unit-length axis-aligned hop, so a single sample at the
segment midpoint is enough to tell whether a solid block sits between the two
endpoints.
"""

import logging
from typing import Iterable, Mapping, Optional

import numpy as np

from ...constants.movement_constants import COLLISION_RADIUS
from ...utils.vector_math import Vector3, lerp
from ..level_data import GameNode

logger = logging.getLogger(__name__)


class CollisionChecker:
    """Handles collision detection between a step and non-walkable geometry."""

    def __init__(
        self,
        solid_positions: np.ndarray,
        radius: float = COLLISION_RADIUS,
        debug: bool = False,
    ):
        """
        Initialize collision checker.

        Args:
            solid_positions: (N, 3) array of non-walkable block positions
            radius: Midpoint clearance radius
            debug: Enable debug output
        """
        self.solid_positions = np.asarray(solid_positions, dtype=np.float64).reshape(
            -1, 3
        )
        self.radius = radius
        self.debug = debug

    @classmethod
    def from_nodes(
        cls,
        all_nodes: Iterable[GameNode],
        world_positions: Mapping[int, Vector3],
        radius: float = COLLISION_RADIUS,
        debug: bool = False,
    ) -> "CollisionChecker":
        """Collect non-walkable positions; nodes without a position are skipped."""
        solid = [
            world_positions[node.id]
            for node in all_nodes
            if not node.is_walkable and node.id in world_positions
        ]
        return cls(np.array(solid, dtype=np.float64), radius, debug)

    @classmethod
    def from_table(cls, table, radius: float = COLLISION_RADIUS, debug: bool = False):
        """Reuse the solid array a WorldPositionTable already holds."""
        return cls(table.solid_positions, radius, debug)

    def is_path_blocked(self, start_pos: Vector3, end_pos: Vector3) -> bool:
        """
        Check whether a solid block occupies the midpoint of a step.

        Args:
            start_pos: Step origin
            end_pos: Step destination

        Returns:
            True if the step is blocked
        """
        if self.solid_positions.shape[0] == 0:
            return False

        midpoint = np.asarray(lerp(start_pos, end_pos, 0.5), dtype=np.float64)
        distances = np.linalg.norm(self.solid_positions - midpoint, axis=1)
        blocked = bool(np.any(distances < self.radius))

        if blocked and self.debug:
            logger.debug(
                "Step %s -> %s blocked at midpoint %s", start_pos, end_pos, midpoint
            )
        return blocked


def collides(
    start_pos: Vector3,
    end_pos: Vector3,
    all_nodes: Iterable[GameNode],
    world_positions: Mapping[int, Vector3],
    radius: Optional[float] = None,
) -> bool:
    """One-off collision test; build a CollisionChecker when testing many steps."""
    checker = CollisionChecker.from_nodes(
        all_nodes,
        world_positions,
        radius if radius is not None else COLLISION_RADIUS,
    )
    return checker.is_path_blocked(start_pos, end_pos)
