"""
Play session state for isopath.

Owns everything the interaction layer mutates between queries (group values,
camera view, player node, status) and turns move requests into path queries
against an immutable snapshot. Animation timing belongs to the presentation
layer, which drains the pending steps with advance().
"""

import logging
from collections import deque
from typing import Deque, List, Optional

from .engine_config import EngineConfig
from .graph.common import GameStatus, GroupType
from .graph.level_data import GroupState, LevelData, TransformContext
from .graph.reachability.reachability_types import PathResult, ReachabilityResult
from .pathfinding.core_pathfinder import NavigationQuery
from .pathfinding.projection import normalize_view
from .utils.vector_math import round_half_up

logger = logging.getLogger(__name__)

VIEW_DIRECTIONS = {"left": 1, "right": -1}


class GameSession:
    """
    One level being played.

    Example Usage:
        session = GameSession(level)
        session.start()
        session.rotate_view("left")
        if session.move_player(goal_id):
            while session.advance() is not None:
                animate(session.player_node)
    """

    def __init__(self, level: LevelData, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.status = GameStatus.IDLE
        self.load_level(level, start=False)

    def load_level(self, level: LevelData, start: bool = True):
        """Swap in a new level and reset all interaction state."""
        self.level = level
        self.context = TransformContext.initial(level)
        self.view_index = 0
        self.player_node = level.start_node
        self._pending_steps: Deque[int] = deque()
        if start:
            self.status = GameStatus.PLAYING
        logger.info(
            "Level %s loaded: %d nodes, %d groups, start node %s",
            level.level_id,
            len(level.nodes),
            len(level.groups),
            level.start_node,
        )

    def start(self):
        self.status = GameStatus.PLAYING

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.PLAYING

    @property
    def view(self) -> int:
        return normalize_view(self.view_index)

    @property
    def is_moving(self) -> bool:
        return bool(self._pending_steps)

    @property
    def pending_steps(self) -> List[int]:
        return list(self._pending_steps)

    def rotate_view(self, direction: str) -> int:
        """
        Turn the camera one quarter in the given direction.

        Raises:
            ValueError: If direction is not "left" or "right"
        """
        if direction not in VIEW_DIRECTIONS:
            raise ValueError(f"Unknown view direction {direction!r}")
        if self.is_playing:
            self.view_index += VIEW_DIRECTIONS[direction]
        return self.view

    def set_view_index(self, index: int):
        self.view_index = index

    def interact_group(self, group_id: str, delta: float) -> Optional[GroupState]:
        """
        Apply a user rotate/drag to a group.

        Rotators snap to whole quarter turns; sliders are clamped into their
        configured range. Unknown groups, static groups and interaction outside
        PLAYING are ignored.

        Returns:
            The new group state, or None when nothing changed
        """
        if not self.is_playing:
            return None

        group = self.level.group_by_id(group_id)
        if group is None:
            logger.debug("Interaction with unknown group %r ignored", group_id)
            return None

        state = self.context.state_for(group_id)
        if group.group_type == GroupType.ROTATOR:
            state = GroupState(
                group_id,
                rotation_value=round_half_up(state.rotation_value + delta),
                offset_value=state.offset_value,
            )
        elif group.group_type == GroupType.SLIDER:
            state = GroupState(
                group_id,
                rotation_value=state.rotation_value,
                offset_value=group.clamp_offset(state.offset_value + delta),
            )
        else:
            return None

        self.context = self.context.with_group_state(state)
        return state

    def snapshot(self) -> TransformContext:
        """Transform snapshot for the next query."""
        return self.context.with_view(self.view)

    def build_query(self) -> NavigationQuery:
        return NavigationQuery(self.level, self.snapshot(), self.config)

    def move_player(self, target_node: int) -> PathResult:
        """
        Request a walk to target_node from the current node.

        On success the remaining steps are queued for advance(). A failed
        request leaves the player and any queued steps untouched.
        """
        if not self.is_playing:
            return PathResult.not_found()
        if target_node == self.player_node:
            return PathResult(path=(self.player_node,), success=True)

        result = self.build_query().find_path(self.player_node, target_node)
        if result.success:
            self._pending_steps = deque(result.path[1:])
            logger.debug("Moving %s -> %s via %s", self.player_node, target_node, result.path)
        else:
            logger.debug("No path from %s to %s", self.player_node, target_node)
        return result

    def advance(self) -> Optional[int]:
        """
        Take the next queued step.

        Returns:
            The node stepped onto, or None when no steps are pending
        """
        if not self._pending_steps:
            return None
        self.player_node = self._pending_steps.popleft()
        if not self._pending_steps:
            self.check_win_condition()
        return self.player_node

    def check_win_condition(self) -> bool:
        node = self.level.node_by_id(self.player_node)
        if node is not None and node.is_goal:
            self.status = GameStatus.COMPLETED
            logger.info("Level %s completed on node %s", self.level.level_id, node.id)
            return True
        return False

    def reachable_nodes(self, max_depth: Optional[int] = None) -> ReachabilityResult:
        """Nodes the player could walk to right now, for highlighting."""
        return self.build_query().find_reachable(self.player_node, max_depth)
