"""
Tests for reading and writing level files.
"""

import json
import logging

import pytest

from isopath.graph.common import Axis, BlockType, GroupType
from isopath.graph.level_loader import (
    context_from_dict,
    level_from_dict,
    level_to_dict,
    load_level,
    save_level,
)

LEVEL = {
    "levelId": "bridge",
    "nodes": [
        {"id": 0, "localPos": [0, 1, 0], "groupId": "base", "type": "CUBE", "isWalkable": True},
        {"id": 1, "localPos": [1, 0, 0], "groupId": "base", "type": "STAIR"},
        {"id": 2, "localPos": [0, 0, 0], "groupId": "arm", "isOpticalBridge": True},
        {"id": 3, "localPos": [0, 0, 1], "groupId": "lift", "type": "DOME", "isGoal": True},
        {"id": 4, "localPos": [0, -1, 0], "groupId": "base", "type": "PILLAR", "isWalkable": False},
    ],
    "groups": [
        {"id": "base", "type": "STATIC"},
        {"id": "arm", "type": "ROTATOR", "initialPos": [2, 0, 0], "pivot": [0, 0, 0]},
        {"id": "lift", "type": "SLIDER", "initialPos": [4, 0, 0], "axis": "y", "limit": [0, 2]},
    ],
}


class TestLevelFromDict:
    def test_camel_case_fields(self):
        level = level_from_dict(LEVEL)
        assert level.level_id == "bridge"
        assert [n.id for n in level.nodes] == [0, 1, 2, 3, 4]
        assert level.node_by_id(1).block_type == BlockType.STAIR
        assert level.node_by_id(2).is_optical_bridge
        assert level.node_by_id(3).is_goal
        assert not level.node_by_id(4).is_walkable

        arm = level.group_by_id("arm")
        assert arm.group_type == GroupType.ROTATOR
        assert arm.pivot == (0.0, 0.0, 0.0)
        lift = level.group_by_id("lift")
        assert lift.axis == Axis.Y
        assert lift.limit == (0.0, 2.0)

    def test_snake_case_fields(self):
        data = {
            "nodes": [{"id": 7, "local_pos": [1, 2, 3], "group_id": "g", "block_type": "RAMP"}],
            "groups": [{"id": "g", "group_type": "STATIC", "initial_pos": [1, 0, 0]}],
            "start_node": 7,
        }
        level = level_from_dict(data, level_id="snake")
        assert level.level_id == "snake"
        assert level.start_node == 7
        assert level.node_by_id(7).local_pos == (1.0, 2.0, 3.0)
        assert level.group_by_id("g").initial_pos == (1.0, 0.0, 0.0)

    def test_defaults(self):
        level = level_from_dict({"nodes": [{"id": 0, "localPos": [0, 0, 0], "groupId": "g"}]})
        node = level.node_by_id(0)
        assert node.block_type == BlockType.CUBE
        assert node.is_walkable
        assert not node.is_goal
        assert level.groups == ()

    def test_start_node_defaults_to_lowest_walkable(self):
        # Node 4 is lower but solid
        assert level_from_dict(LEVEL).start_node == 1

    @pytest.mark.parametrize(
        "node",
        [
            {"localPos": [0, 0, 0], "groupId": "g"},
            {"id": 0, "groupId": "g"},
            {"id": 0, "localPos": [0, 0], "groupId": "g"},
            {"id": 0, "localPos": [0, 0, 0], "groupId": "g", "type": "TELEPORTER"},
        ],
    )
    def test_malformed_node(self, node):
        with pytest.raises(ValueError):
            level_from_dict({"nodes": [node]})

    def test_malformed_group(self):
        with pytest.raises(ValueError):
            level_from_dict({"groups": [{"id": "g", "type": "SPINNER"}]})
        with pytest.raises(ValueError):
            level_from_dict({"groups": [{"id": "g", "type": "SLIDER", "axis": "w"}]})

    def test_duplicate_ids(self):
        node = {"id": 0, "localPos": [0, 0, 0], "groupId": "g"}
        with pytest.raises(ValueError):
            level_from_dict({"nodes": [node, node]})

    def test_not_an_object(self):
        with pytest.raises(TypeError):
            level_from_dict([1, 2, 3])


class TestContextFromDict:
    def setup_method(self):
        self.level = level_from_dict(LEVEL)

    def test_group_states(self):
        context = context_from_dict(
            {"view": 3, "groupStates": {"arm": {"rotationValue": 1}, "lift": {"offsetValue": 1.5}}},
            self.level,
        )
        assert context.view == 3
        assert context.state_for("arm").rotation_value == 1
        assert context.state_for("lift").offset_value == 1.5
        assert context.state_for("base").rotation_value == 0

    def test_fractional_values_round_half_up(self):
        context = context_from_dict(
            {"view": 2.5, "groupStates": {"arm": {"rotationValue": 1.6}, "lift": {"rotation_value": 0.5}}},
            self.level,
        )
        assert context.view == 3
        assert context.state_for("arm").rotation_value == 2
        assert context.state_for("lift").rotation_value == 1

    def test_unknown_group_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="isopath.graph.level_loader"):
            context = context_from_dict({"groupStates": {"ghost": {"rotationValue": 2}}}, self.level)
        assert "ghost" not in context.group_states
        assert "ghost" in caplog.text


class TestLevelFiles:
    def test_save_and_load(self, tmp_path):
        original = level_from_dict(LEVEL)
        path = tmp_path / "bridge.json"
        save_level(original, path)

        stored = json.loads(path.read_text())
        assert stored["nodes"][2]["isOpticalBridge"] is True
        assert "isGoal" not in stored["nodes"][0]

        loaded = load_level(path)
        assert loaded.nodes == original.nodes
        assert loaded.groups == original.groups
        assert loaded.start_node == original.start_node
        assert loaded.level_id == "bridge"

    def test_level_id_from_file_name(self, tmp_path):
        data = dict(LEVEL)
        del data["levelId"]
        path = tmp_path / "tower_07.json"
        path.write_text(json.dumps(data))
        assert load_level(path).level_id == "tower_07"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_level(tmp_path / "missing.json")

    def test_level_to_dict_omits_empty_fields(self):
        data = level_to_dict(level_from_dict(LEVEL))
        base = data["groups"][0]
        assert base == {"id": "base", "type": "STATIC", "initialPos": [0.0, 0.0, 0.0]}
        assert data["startNode"] == 1
