"""
Spatial hash grid for fast candidate lookup.

Buckets node ids by rounded world position so the neighbour search only has to
classify nodes in the surrounding cells instead of scanning the whole level.
"""

import math
from typing import Dict, List, Mapping, Set, Tuple

from ...constants.movement_constants import BLOCK_SIZE
from ...utils.vector_math import Vector3

Cell = Tuple[int, int, int]


class SpatialHash:
    """
    3D spatial hash grid keyed on rounded world position.

    Performance:
    - Build: O(N) where N is number of nodes
    - Query: O(1) in practice (a fixed box of cells with few nodes each)
    - Memory: O(N)
    """

    def __init__(self, cell_size: float = BLOCK_SIZE):
        """
        Initialize spatial hash grid.

        Args:
            cell_size: Size of grid cells in world units (default 1 block)
        """
        self.cell_size = cell_size
        self.grid: Dict[Cell, List[int]] = {}

    def _hash_position(self, pos: Vector3) -> Cell:
        return (
            int(math.floor(pos[0] / self.cell_size + 0.5)),
            int(math.floor(pos[1] / self.cell_size + 0.5)),
            int(math.floor(pos[2] / self.cell_size + 0.5)),
        )

    def build(self, positions: Mapping[int, Vector3]):
        """
        Build spatial hash from node positions.

        Args:
            positions: Mapping of node id to world position
        """
        self.grid.clear()
        for node_id, pos in positions.items():
            self.grid.setdefault(self._hash_position(pos), []).append(node_id)

    def query_box(
        self, pos: Vector3, horizontal_cells: int, vertical_cells: int
    ) -> Set[int]:
        """
        Find all node ids whose cell lies within a box around pos.

        Args:
            pos: Query position
            horizontal_cells: Cell radius along X and Z
            vertical_cells: Cell radius along Y

        Returns:
            Set of node ids (unordered)
        """
        cx, cy, cz = self._hash_position(pos)
        found: Set[int] = set()
        for dx in range(-horizontal_cells, horizontal_cells + 1):
            for dy in range(-vertical_cells, vertical_cells + 1):
                for dz in range(-horizontal_cells, horizontal_cells + 1):
                    found.update(self.grid.get((cx + dx, cy + dy, cz + dz), ()))
        return found

    def query_step_candidates(
        self, pos: Vector3, max_horizontal: float, max_vertical: float
    ) -> Set[int]:
        """Ids that could be physically adjacent to pos under the given limits."""
        horizontal_cells = int(math.ceil(max_horizontal / self.cell_size)) + 1
        vertical_cells = int(math.ceil(max_vertical / self.cell_size)) + 1
        return self.query_box(pos, horizontal_cells, vertical_cells)
