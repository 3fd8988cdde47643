"""
Core pathfinding system for isopath.

Breadth-first search over a neighbour function assembled from the physical
adjacency classifier, the collision guard and the optical bridge classifier.
Every edge costs one hop, so BFS returns a shortest path by hop count; ties are
broken by the order of the node list.
"""

import logging
from collections import deque
from typing import AbstractSet, Dict, List, Mapping, Optional, Sequence, Tuple

from ..engine_config import EngineConfig
from ..graph.level_data import GameNode, LevelData, TransformContext
from ..graph.reachability.collision_checker import CollisionChecker
from ..graph.reachability.reachability_types import PathResult, ReachabilityResult
from ..graph.reachability.spatial_hash import SpatialHash
from ..graph.transform_resolver import WorldPositionTable
from ..utils.vector_math import Vector3
from .movement_classifier import MovementClassifier
from .movement_types import MoveType
from .optical_bridge import OpticalBridgeClassifier

logger = logging.getLogger(__name__)

Neighbor = Tuple[int, MoveType]


class _SearchGraph:
    """
    Per-query view of the level used by one search.

    Holds the lookups every neighbour expansion needs so they are built once
    per query instead of once per node.
    """

    def __init__(
        self,
        engine: "PathfindingEngine",
        nodes: Sequence[GameNode],
        world_positions: Mapping[int, Vector3],
        walkable_ids: AbstractSet[int],
        view,
    ):
        self.engine = engine
        self.nodes = list(nodes)
        self.world_positions = world_positions
        self.walkable_ids = walkable_ids
        self.view = view
        self.node_map: Dict[int, GameNode] = {n.id: n for n in self.nodes}
        self.order: Dict[int, int] = {n.id: i for i, n in enumerate(self.nodes)}

        if isinstance(world_positions, WorldPositionTable):
            self.collision = CollisionChecker.from_table(
                world_positions, engine.config.collision_radius, engine.config.debug
            )
        else:
            self.collision = CollisionChecker.from_nodes(
                self.nodes,
                world_positions,
                engine.config.collision_radius,
                engine.config.debug,
            )

        self.spatial_hash: Optional[SpatialHash] = None
        self.optical_ids: List[int] = []
        if engine.config.use_spatial_hash:
            self._build_spatial_index()

    def _build_spatial_index(self):
        candidates = {
            n.id: self.world_positions[n.id]
            for n in self.nodes
            if n.id in self.walkable_ids and n.id in self.world_positions
        }
        self.spatial_hash = SpatialHash()
        self.spatial_hash.build(candidates)
        self.optical_ids = [
            n.id for n in self.nodes if n.is_optical_bridge and n.id in candidates
        ]

    def candidates(self, current_pos: Vector3) -> List[GameNode]:
        """Nodes to classify against current_pos, in node-list order."""
        if self.spatial_hash is None:
            return self.nodes

        cfg = self.engine.config
        found = self.spatial_hash.query_step_candidates(
            current_pos,
            cfg.max_adjacent_distance,
            max(cfg.max_climb_height, cfg.max_drop_height),
        )
        found.update(self.optical_ids)
        return [self.node_map[i] for i in sorted(found, key=self.order.__getitem__)]

    def neighbors(self, current_node: GameNode, current_pos: Vector3) -> List[Neighbor]:
        return self.engine._expand(self, current_node, current_pos)


class PathfindingEngine:
    """
    Reachability and shortest-path engine over the dynamic level graph.

    The engine keeps no state between calls: every query receives the node
    list, the world position table, the walkable set and the camera view.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.movement_classifier = MovementClassifier(self.config)
        self.optical_classifier = OpticalBridgeClassifier(self.config)

    def get_neighbors(
        self,
        current_id: int,
        nodes: Sequence[GameNode],
        world_positions: Mapping[int, Vector3],
        walkable_ids: AbstractSet[int],
        view,
    ) -> List[Neighbor]:
        """
        List the nodes reachable from current_id in one hop.

        Returns:
            (node id, move type) pairs in node-list order; empty when the
            node or its position is unknown
        """
        graph = _SearchGraph(self, nodes, world_positions, walkable_ids, view)
        current_node = graph.node_map.get(current_id)
        current_pos = world_positions.get(current_id)
        if current_node is None or current_pos is None:
            return []
        return graph.neighbors(current_node, current_pos)

    def _expand(
        self, graph: _SearchGraph, current_node: GameNode, current_pos: Vector3
    ) -> List[Neighbor]:
        debug = self.config.debug
        neighbors: List[Neighbor] = []

        for candidate in graph.candidates(current_pos):
            if candidate.id == current_node.id or candidate.id not in graph.walkable_ids:
                continue

            candidate_pos = graph.world_positions.get(candidate.id)
            if candidate_pos is None:
                continue

            # Physical connection first; when it holds, the optical check is skipped
            adjacency = self.movement_classifier.classify(current_pos, candidate_pos)
            if adjacency.is_adjacent:
                if not self.movement_classifier.is_transition_legal(
                    adjacency.move_type, candidate.block_type
                ):
                    if debug:
                        logger.debug(
                            "Height transition rejected: %s -> %s (%s onto %s)",
                            current_node.id,
                            candidate.id,
                            adjacency.move_type.value,
                            candidate.block_type.value,
                        )
                elif graph.collision.is_path_blocked(current_pos, candidate_pos):
                    if debug:
                        logger.debug(
                            "Collision blocked: %s -> %s", current_node.id, candidate.id
                        )
                else:
                    if debug:
                        logger.debug(
                            "Physical connection: %s -> %s (%s)",
                            current_node.id,
                            candidate.id,
                            adjacency.move_type.value,
                        )
                    neighbors.append((candidate.id, adjacency.move_type))
                    continue

            if self.optical_classifier.is_connected(
                current_node, candidate, current_pos, candidate_pos, graph.view
            ):
                if debug:
                    logger.debug(
                        "Optical connection: %s -> %s", current_node.id, candidate.id
                    )
                neighbors.append((candidate.id, MoveType.OPTICAL))

        return neighbors

    def find_path(
        self,
        start_id: int,
        goal_id: int,
        nodes: Sequence[GameNode],
        world_positions: Mapping[int, Vector3],
        walkable_ids: AbstractSet[int],
        view,
    ) -> PathResult:
        """
        Find the shortest path (by hop count) from start_id to goal_id.

        Args:
            start_id: Node the character stands on
            goal_id: Requested destination
            nodes: All nodes in deterministic iteration order
            world_positions: World position per node id for this batch
            walkable_ids: Ids the character may step onto
            view: Current camera view index

        Returns:
            PathResult; success=False when the goal is unreachable or either
            id is unknown
        """
        if start_id == goal_id:
            return PathResult(path=(start_id,), success=True)

        graph = _SearchGraph(self, nodes, world_positions, walkable_ids, view)
        if start_id not in graph.node_map or start_id not in world_positions:
            logger.debug("Path request from unknown node %s", start_id)
            return PathResult.not_found()
        if goal_id not in graph.node_map:
            logger.debug("Path request to unknown node %s", goal_id)
            return PathResult.not_found()

        queue = deque([start_id])
        parents: Dict[int, Optional[Tuple[int, MoveType]]] = {start_id: None}
        nodes_explored = 0

        while queue:
            current_id = queue.popleft()
            nodes_explored += 1

            if current_id == goal_id:
                return self._reconstruct(parents, goal_id, nodes_explored)

            current_node = graph.node_map.get(current_id)
            current_pos = world_positions.get(current_id)
            if current_node is None or current_pos is None:
                continue

            for neighbor_id, move_type in graph.neighbors(current_node, current_pos):
                if neighbor_id not in parents:
                    parents[neighbor_id] = (current_id, move_type)
                    queue.append(neighbor_id)

        logger.debug(
            "No path from %s to %s (%d nodes explored)",
            start_id,
            goal_id,
            nodes_explored,
        )
        return PathResult.not_found(nodes_explored)

    @staticmethod
    def _reconstruct(
        parents: Dict[int, Optional[Tuple[int, MoveType]]],
        goal_id: int,
        nodes_explored: int,
    ) -> PathResult:
        path = [goal_id]
        move_types = []
        link = parents[goal_id]
        while link is not None:
            parent_id, move_type = link
            path.append(parent_id)
            move_types.append(move_type)
            link = parents[parent_id]
        path.reverse()
        move_types.reverse()
        return PathResult(
            path=tuple(path),
            success=True,
            nodes_explored=nodes_explored,
            move_types=tuple(move_types),
        )

    def find_reachable(
        self,
        start_id: int,
        nodes: Sequence[GameNode],
        world_positions: Mapping[int, Vector3],
        walkable_ids: AbstractSet[int],
        view,
        max_depth: Optional[int] = None,
    ) -> ReachabilityResult:
        """
        Flood fill from start_id.

        Nodes at max_depth hops are included but not expanded further;
        max_depth_reached is set only when one of them has an unvisited
        neighbour.

        Returns:
            ReachabilityResult including the start node; empty when the start
            node is unknown
        """
        if max_depth is None:
            max_depth = self.config.max_reachable_depth

        graph = _SearchGraph(self, nodes, world_positions, walkable_ids, view)
        if start_id not in graph.node_map or start_id not in world_positions:
            logger.debug("Reachability request from unknown node %s", start_id)
            return ReachabilityResult(start_node=start_id)

        visited = {start_id}
        queue = deque([(start_id, 0)])
        depth_capped = False

        while queue:
            current_id, depth = queue.popleft()
            current_node = graph.node_map[current_id]
            current_pos = world_positions.get(current_id)
            if current_pos is None:
                continue

            if depth >= max_depth:
                # Only a node that still leads somewhere new means the cap cut the search
                if not depth_capped:
                    depth_capped = any(
                        neighbor_id not in visited
                        for neighbor_id, _ in graph.neighbors(current_node, current_pos)
                    )
                continue

            for neighbor_id, _ in graph.neighbors(current_node, current_pos):
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    queue.append((neighbor_id, depth + 1))

        return ReachabilityResult(
            start_node=start_id,
            reachable_nodes=frozenset(visited),
            max_depth_reached=depth_capped,
        )


class NavigationQuery:
    """
    One query batch over a level snapshot.

    Resolves every world position once, then answers any number of path and
    reachability questions against that snapshot.

    Example Usage:
        query = NavigationQuery(level, TransformContext.initial(level, view=1))
        result = query.find_path(level.start_node, goal_id)
        if result.success:
            schedule(result.path)
    """

    def __init__(
        self,
        level: LevelData,
        context: TransformContext,
        config: Optional[EngineConfig] = None,
    ):
        self.level = level
        self.context = context
        self.engine = PathfindingEngine(config)
        self.world_positions = WorldPositionTable.build(level, context)
        self.walkable_ids = level.walkable_ids()

    @property
    def view(self):
        return self.context.view

    def position_of(self, node_id: int) -> Optional[Vector3]:
        return self.world_positions.get(node_id)

    def neighbors(self, node_id: int) -> List[Neighbor]:
        return self.engine.get_neighbors(
            node_id, self.level.nodes, self.world_positions, self.walkable_ids, self.view
        )

    def find_path(self, start_id: int, goal_id: int) -> PathResult:
        return self.engine.find_path(
            start_id,
            goal_id,
            self.level.nodes,
            self.world_positions,
            self.walkable_ids,
            self.view,
        )

    def find_reachable(
        self, start_id: int, max_depth: Optional[int] = None
    ) -> ReachabilityResult:
        return self.engine.find_reachable(
            start_id,
            self.level.nodes,
            self.world_positions,
            self.walkable_ids,
            self.view,
            max_depth,
        )
