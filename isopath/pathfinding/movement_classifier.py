"""
Physical adjacency classification for isopath.

Two blocks are physical neighbours when they sit one block apart in the XZ
plane; the height difference then decides whether the step is a walk, a climb
or a drop.
"""

from dataclasses import dataclass
from typing import Optional

from ..engine_config import EngineConfig
from ..graph.common import BlockType, supports_climb
from ..utils.vector_math import Vector3, horizontal_distance
from .movement_types import MoveType


@dataclass(frozen=True)
class AdjacencyInfo:
    """Outcome of classifying one ordered pair of positions."""

    is_adjacent: bool
    move_type: Optional[MoveType]
    horizontal_distance: float
    rise: float


class MovementClassifier:
    """
    Classifies the step between two world positions.

    The classifier only looks at geometry; whether the destination block
    allows the step is decided separately by is_transition_legal.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def classify(self, pos_a: Vector3, pos_b: Vector3) -> AdjacencyInfo:
        """
        Classify a step from pos_a to pos_b.

        Args:
            pos_a: Position the character stands on
            pos_b: Candidate destination

        Returns:
            AdjacencyInfo; move_type is None when not adjacent
        """
        cfg = self.config
        dist = horizontal_distance(pos_a, pos_b)
        rise = pos_b[1] - pos_a[1]

        if dist < cfg.min_adjacent_distance or dist > cfg.max_adjacent_distance:
            return AdjacencyInfo(False, None, dist, rise)

        if abs(rise) <= cfg.flat_tolerance:
            return AdjacencyInfo(True, MoveType.WALK, dist, rise)

        if cfg.flat_tolerance < rise <= cfg.max_climb_height:
            return AdjacencyInfo(True, MoveType.CLIMB_UP, dist, rise)

        if -cfg.max_drop_height <= rise < -cfg.flat_tolerance:
            return AdjacencyInfo(True, MoveType.JUMP_DOWN, dist, rise)

        return AdjacencyInfo(False, None, dist, rise)

    @staticmethod
    def is_transition_legal(move_type: MoveType, target_block: BlockType) -> bool:
        """
        Check whether a step kind may end on the given block.

        Climbing needs a stair or ramp at the destination; level steps and
        drops are always allowed once in range.
        """
        if move_type == MoveType.WALK:
            return True
        if move_type == MoveType.CLIMB_UP:
            return supports_climb(target_block)
        if move_type == MoveType.JUMP_DOWN:
            return True
        # OPTICAL is not a physical transition
        return False
