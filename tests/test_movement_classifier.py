"""
Tests for physical adjacency classification and step legality.
"""

import itertools

import pytest

from isopath.engine_config import EngineConfig
from isopath.graph.common import BlockType, CLIMB_SUPPORT
from isopath.pathfinding.movement_classifier import MovementClassifier
from isopath.pathfinding.movement_types import MoveType


class TestMovementClassifier:
    """Test suite for the physical adjacency classifier."""

    def setup_method(self):
        """Set up test fixtures."""
        self.classifier = MovementClassifier()

    def test_level_neighbours_walk(self):
        info = self.classifier.classify((0, 0, 0), (1, 0, 0))
        assert info.is_adjacent
        assert info.move_type == MoveType.WALK
        assert info.horizontal_distance == pytest.approx(1.0)

    @pytest.mark.parametrize("dist", [0.85, 0.9, 1.0, 1.1, 1.15])
    def test_horizontal_band_accepts(self, dist):
        assert self.classifier.classify((0, 0, 0), (0, 0, dist)).is_adjacent

    @pytest.mark.parametrize("dist", [0.0, 0.5, 0.84, 1.16, 1.414, 2.0])
    def test_horizontal_band_rejects(self, dist):
        info = self.classifier.classify((0, 0, 0), (dist, 0, 0))
        assert not info.is_adjacent
        assert info.move_type is None

    def test_diagonal_is_not_adjacent(self):
        assert not self.classifier.classify((0, 0, 0), (1, 0, 1)).is_adjacent

    def test_height_is_ignored_by_band(self):
        info = self.classifier.classify((0, 0, 0), (0, 5, 0))
        assert not info.is_adjacent

    def test_small_height_difference_is_walk(self):
        assert self.classifier.classify((0, 0, 0), (1, 0.1, 0)).move_type == MoveType.WALK
        assert self.classifier.classify((0, 0, 0), (1, -0.05, 0)).move_type == MoveType.WALK

    def test_step_up_is_climb(self):
        info = self.classifier.classify((0, 0, 0), (1, 1, 0))
        assert info.is_adjacent
        assert info.move_type == MoveType.CLIMB_UP
        assert info.rise == pytest.approx(1.0)

    def test_step_down_is_jump(self):
        assert self.classifier.classify((0, 1, 0), (1, 0, 0)).move_type == MoveType.JUMP_DOWN

    def test_two_block_drop_is_allowed(self):
        assert self.classifier.classify((0, 2, 0), (1, 0, 0)).move_type == MoveType.JUMP_DOWN

    def test_too_high_is_not_adjacent(self):
        assert not self.classifier.classify((0, 0, 0), (1, 2, 0)).is_adjacent

    def test_too_deep_is_not_adjacent(self):
        assert not self.classifier.classify((0, 3, 0), (1, 0, 0)).is_adjacent

    def test_two_block_drop_is_one_way(self):
        assert self.classifier.classify((0, 2, 0), (1, 0, 0)).is_adjacent
        assert not self.classifier.classify((1, 0, 0), (0, 2, 0)).is_adjacent

    def test_symmetry_within_step_height(self):
        heights = [0.0, 0.05, 0.5, 1.0]
        offsets = [(1, 0), (0, 1), (-1, 0), (0.9, 0), (2, 0)]
        for (ya, yb), (dx, dz) in itertools.product(
            itertools.product(heights, repeat=2), offsets
        ):
            a = (0.0, ya, 0.0)
            b = (float(dx), yb, float(dz))
            forward = self.classifier.classify(a, b)
            backward = self.classifier.classify(b, a)
            assert forward.is_adjacent == backward.is_adjacent, (a, b)
            if forward.is_adjacent:
                assert backward.move_type == forward.move_type.inverse, (a, b)

    def test_custom_config_tolerances(self):
        strict = MovementClassifier(EngineConfig(max_climb_height=0.5))
        assert not strict.classify((0, 0, 0), (1, 1, 0)).is_adjacent


class TestTransitionLegality:
    """Test suite for destination block legality."""

    @pytest.mark.parametrize("block_type", list(BlockType))
    def test_walk_and_drop_always_legal(self, block_type):
        assert MovementClassifier.is_transition_legal(MoveType.WALK, block_type)
        assert MovementClassifier.is_transition_legal(MoveType.JUMP_DOWN, block_type)

    @pytest.mark.parametrize("block_type", list(BlockType))
    def test_climb_needs_stair_or_ramp(self, block_type):
        expected = block_type in (BlockType.STAIR, BlockType.RAMP)
        assert MovementClassifier.is_transition_legal(MoveType.CLIMB_UP, block_type) == expected

    def test_optical_is_not_a_physical_transition(self):
        assert not MovementClassifier.is_transition_legal(MoveType.OPTICAL, BlockType.CUBE)

    def test_every_block_type_is_classified(self):
        assert set(CLIMB_SUPPORT) == set(BlockType)


class TestMoveType:
    def test_inverse(self):
        assert MoveType.WALK.inverse == MoveType.WALK
        assert MoveType.CLIMB_UP.inverse == MoveType.JUMP_DOWN
        assert MoveType.JUMP_DOWN.inverse == MoveType.CLIMB_UP
        assert MoveType.OPTICAL.inverse == MoveType.OPTICAL
