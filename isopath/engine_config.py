from .constants.movement_constants import (
    MIN_ADJACENT_DISTANCE,
    MAX_ADJACENT_DISTANCE,
    FLAT_TOLERANCE,
    MAX_CLIMB_HEIGHT,
    MAX_DROP_HEIGHT,
    OPTICAL_SCREEN_THRESHOLD,
    OPTICAL_MAX_HEIGHT_DIFF,
    OPTICAL_MIN_DEPTH_GAP,
    COLLISION_RADIUS,
    DEFAULT_MAX_REACHABLE_DEPTH,
)


class EngineConfig:
    def __init__(
        self,
        debug: bool = False,
        use_spatial_hash: bool = False,
        max_reachable_depth: int = DEFAULT_MAX_REACHABLE_DEPTH,
        min_adjacent_distance: float = MIN_ADJACENT_DISTANCE,
        max_adjacent_distance: float = MAX_ADJACENT_DISTANCE,
        flat_tolerance: float = FLAT_TOLERANCE,
        max_climb_height: float = MAX_CLIMB_HEIGHT,
        max_drop_height: float = MAX_DROP_HEIGHT,
        optical_screen_threshold: float = OPTICAL_SCREEN_THRESHOLD,
        optical_max_height_diff: float = OPTICAL_MAX_HEIGHT_DIFF,
        optical_min_depth_gap: float = OPTICAL_MIN_DEPTH_GAP,
        collision_radius: float = COLLISION_RADIUS,
    ):
        self.debug = debug
        self.use_spatial_hash = use_spatial_hash
        self.max_reachable_depth = max_reachable_depth
        self.min_adjacent_distance = min_adjacent_distance
        self.max_adjacent_distance = max_adjacent_distance
        self.flat_tolerance = flat_tolerance
        self.max_climb_height = max_climb_height
        self.max_drop_height = max_drop_height
        self.optical_screen_threshold = optical_screen_threshold
        self.optical_max_height_diff = optical_max_height_diff
        self.optical_min_depth_gap = optical_min_depth_gap
        self.collision_radius = collision_radius

    @classmethod
    def from_args(cls, args=None):
        config = cls()
        if args is None:
            return config
        config.debug = getattr(args, "debug", config.debug)
        config.use_spatial_hash = getattr(
            args, "use_spatial_hash", config.use_spatial_hash
        )
        config.max_reachable_depth = getattr(
            args, "max_depth", config.max_reachable_depth
        )
        return config
