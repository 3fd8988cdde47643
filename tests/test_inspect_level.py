"""
Tests for the level inspection command and engine configuration.
"""

import argparse
import json

import pytest

from isopath.engine_config import EngineConfig
from isopath.inspect_level import build_parser, main

LEVEL = {
    "levelId": "bridge",
    "nodes": [
        {"id": 0, "localPos": [0, 0, 0], "groupId": "base"},
        {"id": 1, "localPos": [1, 0, 0], "groupId": "base"},
        {"id": 2, "localPos": [0, 0, 0], "groupId": "arm"},
        {"id": 3, "localPos": [0, 0, 1], "groupId": "arm"},
        {"id": 4, "localPos": [4, 0, 0], "groupId": "base", "type": "DOME", "isGoal": True},
    ],
    "groups": [
        {"id": "base", "type": "STATIC"},
        {"id": "arm", "type": "ROTATOR", "initialPos": [2, 0, 0], "pivot": [0, 0, 0]},
    ],
    "startNode": 0,
}


@pytest.fixture
def level_path(tmp_path):
    path = tmp_path / "bridge.json"
    path.write_text(json.dumps(LEVEL))
    return str(path)


class TestInspectLevel:
    def test_no_path_at_rest(self, level_path, capsys):
        assert main([level_path]) == 1
        assert "No path from 0 to 4" in capsys.readouterr().out

    def test_path_after_rotation(self, level_path, capsys):
        assert main([level_path, "--rotate", "arm=1"]) == 0
        out = capsys.readouterr().out
        assert "Path (4 hops): 0 -> 1 -> 2 -> 3 -> 4" in out
        assert "Moves: WALK, WALK, WALK, WALK" in out

    def test_spatial_hash_gives_same_answer(self, level_path, capsys):
        assert main([level_path, "--rotate", "arm=1", "--use-spatial-hash"]) == 0
        assert "0 -> 1 -> 2 -> 3 -> 4" in capsys.readouterr().out

    def test_explicit_endpoints(self, level_path, capsys):
        assert main([level_path, "--from", "1", "--to", "3"]) == 0
        assert "Path (2 hops): 1 -> 2 -> 3" in capsys.readouterr().out

    def test_reachable(self, level_path, capsys):
        assert main([level_path, "--reachable"]) == 0
        assert "Reachable from 0: [0, 1, 2, 3]" in capsys.readouterr().out

    def test_reachable_depth_cap(self, level_path, capsys):
        assert main([level_path, "--reachable", "--max-depth", "1"]) == 0
        out = capsys.readouterr().out
        assert "Reachable from 0: [0, 1]" in out
        assert "(stopped at depth 1)" in out

    def test_explain(self, level_path, capsys):
        assert main([level_path, "--rotate", "arm=1", "--explain", "3", "4"]) == 0
        out = capsys.readouterr().out
        assert "Nodes: 3 -> 4 (view 0)" in out
        assert "Physically adjacent: yes" in out

    def test_explain_unknown_node(self, level_path, capsys):
        assert main([level_path, "--explain", "3", "99"]) == 1
        assert "Unknown node id" in capsys.readouterr().err

    def test_missing_goal(self, tmp_path, capsys):
        data = dict(LEVEL, nodes=LEVEL["nodes"][:2])
        path = tmp_path / "flat.json"
        path.write_text(json.dumps(data))
        assert main([str(path)]) == 1
        assert "no goal" in capsys.readouterr().err

    def test_unreadable_level(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text('{"nodes": [{"id": 0}]}')
        assert main([str(bad)]) == 2
        assert "Could not load level" in capsys.readouterr().err
        assert main([str(tmp_path / "missing.json")]) == 2

    def test_bad_assignment(self, level_path):
        with pytest.raises(SystemExit):
            build_parser().parse_args([level_path, "--rotate", "arm"])


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert not config.debug
        assert not config.use_spatial_hash
        assert config.max_reachable_depth == 100
        assert config.min_adjacent_distance == 0.85
        assert config.max_adjacent_distance == 1.15
        assert config.collision_radius == 0.4

    def test_from_args(self):
        args = argparse.Namespace(debug=True, use_spatial_hash=True, max_depth=12)
        config = EngineConfig.from_args(args)
        assert config.debug
        assert config.use_spatial_hash
        assert config.max_reachable_depth == 12

    def test_from_partial_args(self):
        config = EngineConfig.from_args(argparse.Namespace(debug=True))
        assert config.debug
        assert config.max_reachable_depth == 100
        assert EngineConfig.from_args(None).max_reachable_depth == 100
