"""
Level construction helper.

Accumulates nodes and groups while a level is being authored, merging blocks
that land on the same spot, and freezes the result into LevelData. Layout
generation itself lives outside this package; this is only the assembly step
shared by generators, loaders and tests.
"""

from dataclasses import replace
from typing import List, Optional, Tuple

from ..constants.movement_constants import DEDUP_TOLERANCE, PILLAR_FLOOR_Y
from ..utils.vector_math import ORIGIN, Vector3
from .common import Axis, BlockType, GroupType
from .level_data import GameNode, LevelData, LevelGroup, select_start_node


class LevelBuilder:
    """Mutable staging area for one level."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._nodes: List[GameNode] = []
        self._groups: List[LevelGroup] = []
        self._next_id = 0

    def add_group(
        self,
        group_id: str,
        group_type: GroupType = GroupType.STATIC,
        initial_pos: Vector3 = ORIGIN,
        pivot: Optional[Vector3] = None,
        axis: Optional[Axis] = None,
        limit: Optional[Tuple[float, float]] = None,
    ) -> LevelGroup:
        group = LevelGroup(group_id, group_type, initial_pos, pivot, axis, limit)
        self._groups.append(group)
        return group

    def _find_existing(self, x: float, y: float, z: float, group_id: str) -> Optional[int]:
        for index, node in enumerate(self._nodes):
            lx, ly, lz = node.local_pos
            if (
                node.group_id == group_id
                and abs(lx - x) < DEDUP_TOLERANCE
                and abs(ly - y) < DEDUP_TOLERANCE
                and abs(lz - z) < DEDUP_TOLERANCE
            ):
                return index
        return None

    def add_node(
        self,
        x: float,
        y: float,
        z: float,
        group_id: str,
        block_type: BlockType = BlockType.CUBE,
        is_walkable: bool = True,
        is_goal: bool = False,
        rotation: Vector3 = ORIGIN,
        is_optical_bridge: bool = False,
    ) -> int:
        """
        Add a block, merging with any block already at the same local position.

        A walkable block placed on top of a non-walkable one turns the existing
        block walkable and adopts the new block type; otherwise the existing
        block is kept unchanged.

        Returns:
            Id of the new or existing node
        """
        existing = self._find_existing(x, y, z, group_id)
        if existing is not None:
            node = self._nodes[existing]
            if not node.is_walkable and is_walkable:
                self._nodes[existing] = replace(
                    node, is_walkable=True, block_type=BlockType(block_type)
                )
            return node.id

        node = GameNode(
            id=self._next_id,
            local_pos=(x, y, z),
            group_id=group_id,
            block_type=block_type,
            is_walkable=is_walkable,
            is_goal=is_goal,
            is_optical_bridge=is_optical_bridge,
            rotation=rotation,
        )
        self._next_id += 1
        self._nodes.append(node)
        return node.id

    def drop_pillar(self, x: float, y: float, z: float, group_id: str):
        """Fill a solid column from just below (x, y, z) down to the floor."""
        if y <= 0:
            return
        level = int(y) - 1
        while level >= PILLAR_FLOOR_Y:
            self.add_node(x, level, z, group_id, BlockType.PILLAR, False)
            level -= 1

    def add_platform(self, x: float, y: float, z: float, width: int, depth: int, group_id: str):
        """Walkable width x depth slab with a decorative foundation below."""
        for i in range(width):
            for j in range(depth):
                self.add_node(x + i, y, z + j, group_id, BlockType.CUBE, True)
                self.add_node(x + i, y - 1, z + j, group_id, BlockType.DECOR, False)

    def add_strip(
        self,
        x1: float,
        y1: float,
        z1: float,
        x2: float,
        y2: float,
        z2: float,
        group_id: str,
    ):
        """
        Walkable line of blocks between two points (inclusive).

        Diagonal strips (height change plus horizontal change) are built from
        stairs; purely vertical or flat strips use cubes.
        """
        steps = int(max(abs(x2 - x1), abs(y2 - y1), abs(z2 - z1)))
        if steps == 0:
            self.add_node(x1, y1, z1, group_id, BlockType.CUBE, True)
            return

        block_type = BlockType.CUBE
        if abs(y2 - y1) > 0.1 and (abs(x2 - x1) > 0.1 or abs(z2 - z1) > 0.1):
            block_type = BlockType.STAIR

        for i in range(steps + 1):
            t = i / steps
            self.add_node(
                round(x1 + (x2 - x1) * t),
                round(y1 + (y2 - y1) * t),
                round(z1 + (z2 - z1) * t),
                group_id,
                block_type,
                True,
            )

    @property
    def nodes(self) -> Tuple[GameNode, ...]:
        return tuple(self._nodes)

    def build(self, start_node: Optional[int] = None, level_id: Optional[str] = None) -> LevelData:
        """Freeze the staged nodes and groups into LevelData."""
        if start_node is None:
            start_node = select_start_node(self._nodes)
        return LevelData(
            nodes=tuple(self._nodes),
            groups=tuple(self._groups),
            start_node=start_node,
            level_id=level_id,
        )
