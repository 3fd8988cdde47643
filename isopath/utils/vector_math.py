"""
Centralized 3D vector utilities for isopath.
Contains the small amount of geometry shared by the resolver, the classifiers
and the renderer-facing code so that every caller agrees on the same formulas.
"""

import math
from typing import Tuple

from ..constants.movement_constants import QUARTER_TURN_DEGREES

Vector3 = Tuple[float, float, float]

ORIGIN: Vector3 = (0.0, 0.0, 0.0)

# Exact (cos, sin) for whole quarter turns; keeps positions bit-stable
# across full revolutions.
_QUARTER_TURN_TABLE = (
    (1.0, 0.0),
    (0.0, 1.0),
    (-1.0, 0.0),
    (0.0, -1.0),
)

_AXIS_UNIT_VECTORS = {
    "x": (1.0, 0.0, 0.0),
    "y": (0.0, 1.0, 0.0),
    "z": (0.0, 0.0, 1.0),
}


def as_vector(values) -> Vector3:
    """Coerce any 3-element sequence to a float triple."""
    x, y, z = values
    return (float(x), float(y), float(z))


def vec_add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def vec_sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def vec_scale(v: Vector3, factor: float) -> Vector3:
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """Linear interpolation between a and b (t=0.5 is the midpoint)."""
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


def distance(a: Vector3, b: Vector3) -> float:
    """Calculate Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def horizontal_distance(a: Vector3, b: Vector3) -> float:
    """Distance in the XZ plane, ignoring vertical separation."""
    dx = a[0] - b[0]
    dz = a[2] - b[2]
    return math.sqrt(dx * dx + dz * dz)


def _rotation_terms(quarter_turns: float) -> Tuple[float, float]:
    if float(quarter_turns).is_integer():
        return _QUARTER_TURN_TABLE[int(quarter_turns) % 4]
    angle = math.radians(quarter_turns * QUARTER_TURN_DEGREES)
    return math.cos(angle), math.sin(angle)


def rotate_about_y(v: Vector3, quarter_turns: float) -> Vector3:
    """
    Rotate a vector about the +Y axis by quarter_turns * 90 degrees.

    Uses the right-hand rule, so (1, 0, 0) rotated by one quarter turn
    becomes (0, 0, -1).

    Args:
        v: Vector to rotate
        quarter_turns: Rotation in units of 90 degrees (may be fractional)

    Returns:
        Rotated vector
    """
    cos_a, sin_a = _rotation_terms(quarter_turns)
    x, y, z = v
    return (x * cos_a + z * sin_a, y, -x * sin_a + z * cos_a)


def rotate_about_pivot(v: Vector3, pivot: Vector3, quarter_turns: float) -> Vector3:
    """Rotate v about a vertical axis passing through pivot."""
    return vec_add(rotate_about_y(vec_sub(v, pivot), quarter_turns), pivot)


def axis_unit_vector(axis) -> Vector3:
    """Unit vector for an axis name ("x", "y" or "z")."""
    return _AXIS_UNIT_VECTORS[str(axis.value if hasattr(axis, "value") else axis)]


def round_half_up(value: float) -> int:
    """Snap to the nearest integer, with halves going up (2.5 -> 3, -0.5 -> 0)."""
    return int(math.floor(float(value) + 0.5))
