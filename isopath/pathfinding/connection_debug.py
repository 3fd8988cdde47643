"""
Connection diagnostics for a single node pair.

Collects every quantity the classifiers look at so a level author can see why
two blocks do or do not connect under the current view.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..engine_config import EngineConfig
from ..graph.level_data import GameNode
from ..utils.vector_math import Vector3
from .movement_classifier import MovementClassifier
from .movement_types import MoveType
from .optical_bridge import OpticalBridgeClassifier
from .projection import depth_gap, normalize_view, screen_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionReport:
    source_id: int
    target_id: int
    view: int
    physically_adjacent: bool
    move_type: Optional[MoveType]
    transition_legal: bool
    horizontal_distance: float
    height_delta: float
    screen_distance: float
    depth_gap: float
    optical_bridge: bool

    def format(self) -> str:
        def mark(flag: bool) -> str:
            return "yes" if flag else "no"

        move = self.move_type.value if self.move_type is not None else "-"
        return (
            f"Nodes: {self.source_id} -> {self.target_id} (view {self.view})\n"
            f"  Physically adjacent: {mark(self.physically_adjacent)}\n"
            f"  Move type: {move} (legal: {mark(self.transition_legal)})\n"
            f"  Horizontal distance: {self.horizontal_distance:.2f}\n"
            f"  Height delta: {self.height_delta:.2f}\n"
            f"  Screen distance: {self.screen_distance:.2f}\n"
            f"  Depth gap: {self.depth_gap:.2f}\n"
            f"  Optical bridge: {mark(self.optical_bridge)}"
        )


def describe_connection(
    node_a: GameNode,
    node_b: GameNode,
    pos_a: Vector3,
    pos_b: Vector3,
    view,
    config: Optional[EngineConfig] = None,
) -> ConnectionReport:
    """Classify a pair with every rule and report the intermediate values."""
    config = config or EngineConfig()
    classifier = MovementClassifier(config)
    adjacency = classifier.classify(pos_a, pos_b)
    legal = adjacency.is_adjacent and classifier.is_transition_legal(
        adjacency.move_type, node_b.block_type
    )

    report = ConnectionReport(
        source_id=node_a.id,
        target_id=node_b.id,
        view=normalize_view(view),
        physically_adjacent=adjacency.is_adjacent,
        move_type=adjacency.move_type,
        transition_legal=legal,
        horizontal_distance=adjacency.horizontal_distance,
        height_delta=adjacency.rise,
        screen_distance=screen_distance(pos_a, pos_b, view),
        depth_gap=depth_gap(pos_a, pos_b, view),
        optical_bridge=OpticalBridgeClassifier(config).is_connected(
            node_a, node_b, pos_a, pos_b, view
        ),
    )

    if config.debug:
        logger.debug("Connection report\n%s", report.format())
    return report
