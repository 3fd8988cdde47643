"""
Optical bridge classification for isopath.

Two marked blocks that are far apart in depth can still be walked between when,
from the active camera view, they appear to touch. The physical classifier
already covers blocks that really are neighbours, so the depth guard keeps the
two rules from overlapping.
"""

from typing import Optional

from ..engine_config import EngineConfig
from ..graph.level_data import GameNode
from ..utils.vector_math import Vector3
from .projection import depth_gap, screen_distance


class OpticalBridgeClassifier:
    """Decides whether two nodes connect only through view alignment."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def is_connected(
        self,
        node_a: GameNode,
        node_b: GameNode,
        pos_a: Vector3,
        pos_b: Vector3,
        view,
    ) -> bool:
        """
        Check for an illusion connection between two nodes.

        All of the following must hold:
        1. Both nodes carry the optical bridge marker
        2. Projected screen distance is below the alignment threshold
        3. World height difference is within one step
        4. Depth separation exceeds the minimum gap

        Args:
            node_a: Source node
            node_b: Candidate destination node
            pos_a: World position of node_a
            pos_b: World position of node_b
            view: Camera view index

        Returns:
            True if the nodes are optically connected under this view
        """
        if not (node_a.is_optical_bridge and node_b.is_optical_bridge):
            return False

        cfg = self.config
        is_aligned = screen_distance(pos_a, pos_b, view) < cfg.optical_screen_threshold
        is_reasonable_height = abs(pos_a[1] - pos_b[1]) <= cfg.optical_max_height_diff
        is_really_far = depth_gap(pos_a, pos_b, view) > cfg.optical_min_depth_gap

        return is_aligned and is_reasonable_height and is_really_far


def is_optical_bridge(
    node_a: GameNode,
    node_b: GameNode,
    pos_a: Vector3,
    pos_b: Vector3,
    view,
    config: Optional[EngineConfig] = None,
) -> bool:
    return OpticalBridgeClassifier(config).is_connected(node_a, node_b, pos_a, pos_b, view)
