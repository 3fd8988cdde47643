"""
Group transform resolution for isopath levels.

A node's world position is a pure function of its local position, its group's
definition and the group's live value. The renderer derives positions with the
same functions, so the formulas here are the single source of truth.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional

import numpy as np

from .common import GroupType
from .level_data import GameNode, GroupState, LevelData, LevelGroup, TransformContext
from ..utils.vector_math import (
    Vector3,
    axis_unit_vector,
    rotate_about_pivot,
    vec_add,
    vec_scale,
)

logger = logging.getLogger(__name__)


def resolve_world_position(
    node: GameNode, group: Optional[LevelGroup], state: Optional[GroupState] = None
) -> Vector3:
    """
    Compute a node's current world position.

    Static groups translate by their initial offset. Rotators rotate about the
    pivot (vertical axis) by rotation_value quarter turns first; sliders move
    along their axis by the clamped offset value first.

    Args:
        node: Node to resolve
        group: Owning group, or None when the node references an unknown group
        state: Live group value (defaults to the group at rest)

    Returns:
        World position (x, y, z)
    """
    local = node.local_pos
    if group is None:
        return local

    if state is None:
        state = GroupState(group.id)

    if group.group_type == GroupType.ROTATOR:
        local = rotate_about_pivot(local, group.pivot_or_origin, state.rotation_value)
    elif group.group_type == GroupType.SLIDER:
        if group.axis is not None:
            offset = group.clamp_offset(state.offset_value)
            local = vec_add(local, vec_scale(axis_unit_vector(group.axis), offset))

    return vec_add(local, group.initial_pos)


class WorldPositionTable(Mapping):
    """
    World positions of every node for one query batch.

    Resolving each node once keeps the pairwise classifiers from recomputing
    transforms (O(N) instead of O(N^2) resolutions). The table also keeps the
    positions of non-walkable nodes as a numpy array for the collision guard.
    """

    def __init__(self, positions: Dict[int, Vector3], solid_ids: List[int]):
        self._positions = positions
        self.solid_ids = list(solid_ids)
        if self.solid_ids:
            self.solid_positions = np.array(
                [positions[i] for i in self.solid_ids], dtype=np.float64
            )
        else:
            self.solid_positions = np.zeros((0, 3), dtype=np.float64)

    @classmethod
    def build(cls, level: LevelData, context: TransformContext) -> "WorldPositionTable":
        positions: Dict[int, Vector3] = {}
        solid_ids: List[int] = []
        missing_groups = set()

        for node in level.nodes:
            group = level.group_by_id(node.group_id)
            if group is None:
                missing_groups.add(node.group_id)
            positions[node.id] = resolve_world_position(
                node, group, context.state_for(node.group_id)
            )
            if not node.is_walkable:
                solid_ids.append(node.id)

        if missing_groups:
            logger.warning(
                "Level %s references unknown groups %s; using local positions",
                level.level_id,
                sorted(missing_groups),
            )

        return cls(positions, solid_ids)

    def __getitem__(self, node_id: int) -> Vector3:
        return self._positions[node_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)
