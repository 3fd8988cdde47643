"""
Level data structures for isopath graph processing.

This module provides the immutable level description produced by level
construction (nodes and groups) and the run-time transform snapshot that the
interaction layer owns. Queries receive both explicitly instead of reading
ambient global state.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .common import Axis, BlockType, GroupType
from ..utils.vector_math import ORIGIN, Vector3, as_vector


@dataclass(frozen=True)
class GameNode:
    """
    A single unit-cube block, positioned in the local frame of one group.

    Attributes:
        id: Unique node identifier
        local_pos: Position relative to the owning group
        group_id: Identifier of the owning LevelGroup
        block_type: Kind of block (drives climb legality)
        is_walkable: Whether the character may stand on this block
        is_goal: Whether reaching this block completes the level
        is_optical_bridge: Opts the node into illusion-based connectivity
        portal_target_id: Destination node for portal blocks (presentation only)
        rotation: Visual rotation of the block itself (presentation only)
    """

    id: int
    local_pos: Vector3
    group_id: str
    block_type: BlockType = BlockType.CUBE
    is_walkable: bool = True
    is_goal: bool = False
    is_optical_bridge: bool = False
    portal_target_id: Optional[int] = None
    rotation: Vector3 = ORIGIN

    def __post_init__(self):
        object.__setattr__(self, "local_pos", as_vector(self.local_pos))
        object.__setattr__(self, "rotation", as_vector(self.rotation))
        object.__setattr__(self, "block_type", BlockType(self.block_type))


@dataclass(frozen=True)
class LevelGroup:
    """
    Rigid transform context shared by a set of nodes.

    Optional fields are authoring-time data; the accessors below supply the
    fallbacks used when a group is under-specified.
    """

    id: str
    group_type: GroupType = GroupType.STATIC
    initial_pos: Vector3 = ORIGIN
    pivot: Optional[Vector3] = None
    axis: Optional[Axis] = None
    limit: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        object.__setattr__(self, "group_type", GroupType(self.group_type))
        object.__setattr__(self, "initial_pos", as_vector(self.initial_pos))
        if self.pivot is not None:
            object.__setattr__(self, "pivot", as_vector(self.pivot))
        if self.axis is not None:
            object.__setattr__(self, "axis", Axis(self.axis))
        if self.limit is not None:
            low, high = self.limit
            object.__setattr__(self, "limit", (float(low), float(high)))

    @property
    def pivot_or_origin(self) -> Vector3:
        return self.pivot if self.pivot is not None else ORIGIN

    @property
    def offset_bounds(self) -> Tuple[float, float]:
        """Slider bounds as (min, max); zero-width when no limit is configured."""
        if self.limit is None:
            return (0.0, 0.0)
        return (min(self.limit), max(self.limit))

    def clamp_offset(self, value: float) -> float:
        low, high = self.offset_bounds
        return max(low, min(high, float(value)))


@dataclass(frozen=True)
class LevelData:
    """
    Finalized level graph: all nodes and groups plus the designated start node.

    Node order is significant: it is the deterministic iteration order used by
    the pathfinder, and therefore decides ties between equally short paths.

    Attributes:
        nodes: All nodes in iteration order
        groups: All transform groups
        start_node: Node id the character starts on
        level_id: Optional identifier for logging and caching
    """

    nodes: Tuple[GameNode, ...]
    groups: Tuple[LevelGroup, ...]
    start_node: int = 0
    level_id: Optional[str] = None
    _node_index: Dict[int, GameNode] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _group_index: Dict[str, LevelGroup] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Validate the data structure after initialization."""
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "groups", tuple(self.groups))

        for node in self.nodes:
            if not isinstance(node, GameNode):
                raise TypeError("nodes must contain GameNode instances")
            if node.id in self._node_index:
                raise ValueError(f"Duplicate node id {node.id}")
            self._node_index[node.id] = node

        for group in self.groups:
            if not isinstance(group, LevelGroup):
                raise TypeError("groups must contain LevelGroup instances")
            if group.id in self._group_index:
                raise ValueError(f"Duplicate group id {group.id!r}")
            self._group_index[group.id] = group

        if self.level_id is None:
            object.__setattr__(self, "level_id", f"level_{id(self)}")

    def node_by_id(self, node_id: int) -> Optional[GameNode]:
        return self._node_index.get(node_id)

    def group_by_id(self, group_id: str) -> Optional[LevelGroup]:
        return self._group_index.get(group_id)

    @property
    def node_map(self) -> Mapping[int, GameNode]:
        return MappingProxyType(self._node_index)

    @property
    def group_map(self) -> Mapping[str, LevelGroup]:
        return MappingProxyType(self._group_index)

    def walkable_ids(self) -> frozenset:
        return frozenset(n.id for n in self.nodes if n.is_walkable)

    def goal_ids(self) -> List[int]:
        return [n.id for n in self.nodes if n.is_goal]

    def nodes_in_group(self, group_id: str) -> List[GameNode]:
        return [n for n in self.nodes if n.group_id == group_id]


def select_start_node(nodes: Iterable[GameNode]) -> int:
    """
    Pick the lowest walkable node (by local Y) as the starting point.

    Ties go to the earliest node. Falls back to the first node, or 0 for an
    empty level.
    """
    nodes = list(nodes)
    if not nodes:
        return 0

    start_node = nodes[0].id
    min_y = None
    for node in nodes:
        if not node.is_walkable:
            continue
        if min_y is None or node.local_pos[1] < min_y:
            min_y = node.local_pos[1]
            start_node = node.id
    return start_node


@dataclass(frozen=True)
class GroupState:
    """Live interaction value for one group."""

    group_id: str
    rotation_value: int = 0
    offset_value: float = 0.0


@dataclass(frozen=True)
class TransformContext:
    """
    Immutable snapshot of everything the interaction layer controls.

    Passed into every query; a query never observes a change made after the
    snapshot was taken.

    Attributes:
        group_states: Live value per group id (missing groups are at rest)
        view: Camera view index (any integer, normalized by the projection)
    """

    group_states: Mapping[str, GroupState] = field(default_factory=dict)
    view: int = 0

    def __post_init__(self):
        object.__setattr__(self, "group_states", dict(self.group_states))

    @classmethod
    def initial(cls, level: LevelData, view: int = 0) -> "TransformContext":
        """All groups at rest."""
        return cls({g.id: GroupState(g.id) for g in level.groups}, view)

    def state_for(self, group_id: str) -> GroupState:
        state = self.group_states.get(group_id)
        return state if state is not None else GroupState(group_id)

    def with_group_state(self, state: GroupState) -> "TransformContext":
        states = dict(self.group_states)
        states[state.group_id] = state
        return replace(self, group_states=states)

    def with_view(self, view: int) -> "TransformContext":
        return replace(self, view=view)
