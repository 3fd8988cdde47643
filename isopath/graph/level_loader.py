"""
Level file loading for isopath.

Levels are stored as JSON objects with "nodes", "groups" and an optional
"startNode". Both the camelCase keys used by the level editor and snake_case
keys are accepted. An optional "groupStates" / "view" pair describes a
transform snapshot for debugging.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .common import Axis, BlockType, GroupType
from .level_data import (
    GameNode,
    GroupState,
    LevelData,
    LevelGroup,
    TransformContext,
    select_start_node,
)
from ..utils.vector_math import round_half_up

logger = logging.getLogger(__name__)


def _get(data: Dict[str, Any], *keys, default=None, required: bool = False):
    for key in keys:
        if key in data:
            return data[key]
    if required:
        raise ValueError(f"Missing required field {keys[0]!r} in {data!r}")
    return default


def _optional_vector(value):
    return None if value is None else tuple(value)


def node_from_dict(data: Dict[str, Any]) -> GameNode:
    try:
        return GameNode(
            id=int(_get(data, "id", required=True)),
            local_pos=tuple(_get(data, "localPos", "local_pos", required=True)),
            group_id=str(_get(data, "groupId", "group_id", required=True)),
            block_type=BlockType(_get(data, "type", "block_type", default="CUBE")),
            is_walkable=bool(_get(data, "isWalkable", "is_walkable", default=True)),
            is_goal=bool(_get(data, "isGoal", "is_goal", default=False)),
            is_optical_bridge=bool(
                _get(data, "isOpticalBridge", "is_optical_bridge", default=False)
            ),
            portal_target_id=_get(data, "portalTargetId", "portal_target_id"),
            rotation=tuple(_get(data, "rotation", default=(0.0, 0.0, 0.0))),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid node definition {data!r}: {e}") from e


def group_from_dict(data: Dict[str, Any]) -> LevelGroup:
    try:
        axis = _get(data, "axis")
        limit = _get(data, "limit")
        return LevelGroup(
            id=str(_get(data, "id", required=True)),
            group_type=GroupType(_get(data, "type", "group_type", default="STATIC")),
            initial_pos=tuple(
                _get(data, "initialPos", "initial_pos", default=(0.0, 0.0, 0.0))
            ),
            pivot=_optional_vector(_get(data, "pivot")),
            axis=Axis(axis) if axis is not None else None,
            limit=tuple(limit) if limit is not None else None,
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid group definition {data!r}: {e}") from e


def level_from_dict(data: Dict[str, Any], level_id: Optional[str] = None) -> LevelData:
    """
    Build LevelData from a decoded level object.

    Raises:
        ValueError: If a node or group is malformed or ids collide
    """
    if not isinstance(data, dict):
        raise TypeError("level data must be a JSON object")

    nodes = tuple(node_from_dict(n) for n in _get(data, "nodes", default=[]))
    groups = tuple(group_from_dict(g) for g in _get(data, "groups", default=[]))
    start_node = _get(data, "startNode", "start_node")
    if start_node is None:
        start_node = select_start_node(nodes)

    return LevelData(
        nodes=nodes,
        groups=groups,
        start_node=int(start_node),
        level_id=level_id or _get(data, "levelId", "level_id"),
    )


def context_from_dict(data: Dict[str, Any], level: LevelData) -> TransformContext:
    """Read an optional transform snapshot stored next to the level."""
    context = TransformContext.initial(level, view=round_half_up(_get(data, "view", default=0)))
    for group_id, state in _get(data, "groupStates", "group_states", default={}).items():
        if level.group_by_id(group_id) is None:
            logger.warning("Ignoring state for unknown group %r", group_id)
            continue
        context = context.with_group_state(
            GroupState(
                group_id,
                rotation_value=round_half_up(
                    _get(state, "rotationValue", "rotation_value", default=0)
                ),
                offset_value=float(_get(state, "offsetValue", "offset_value", default=0.0)),
            )
        )
    return context


def level_to_dict(level: LevelData) -> Dict[str, Any]:
    """Serialize LevelData using the editor's camelCase keys."""
    nodes = []
    for node in level.nodes:
        entry = {
            "id": node.id,
            "localPos": list(node.local_pos),
            "groupId": node.group_id,
            "type": node.block_type.value,
            "isWalkable": node.is_walkable,
        }
        if node.is_goal:
            entry["isGoal"] = True
        if node.is_optical_bridge:
            entry["isOpticalBridge"] = True
        if node.portal_target_id is not None:
            entry["portalTargetId"] = node.portal_target_id
        if any(node.rotation):
            entry["rotation"] = list(node.rotation)
        nodes.append(entry)

    groups = []
    for group in level.groups:
        entry = {
            "id": group.id,
            "type": group.group_type.value,
            "initialPos": list(group.initial_pos),
        }
        if group.pivot is not None:
            entry["pivot"] = list(group.pivot)
        if group.axis is not None:
            entry["axis"] = group.axis.value
        if group.limit is not None:
            entry["limit"] = list(group.limit)
        groups.append(entry)

    return {
        "levelId": level.level_id,
        "nodes": nodes,
        "groups": groups,
        "startNode": level.start_node,
    }


def load_level(path: Union[str, Path]) -> LevelData:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    level = level_from_dict(data, level_id=_get(data, "levelId", "level_id") or path.stem)
    logger.info("Loaded level %s (%d nodes)", path, len(level.nodes))
    return level


def save_level(level: LevelData, path: Union[str, Path]):
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(level_to_dict(level), f, indent=2)
