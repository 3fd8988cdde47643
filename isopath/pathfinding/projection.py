"""
Orthographic projection for the four fixed camera views.

Each view hides one horizontal world axis (depth) and maps the remaining
horizontal axis to screen X; world Y is always screen Y.

    view 0 (front, looks -Z):  screen x =  x, depth = -z
    view 1 (right, looks -X):  screen x =  z, depth = -x
    view 2 (back,  looks +Z):  screen x = -x, depth =  z
    view 3 (left,  looks +X):  screen x = -z, depth =  x
"""

import math
from typing import NamedTuple

from ..constants.movement_constants import VIEW_COUNT
from ..utils.vector_math import Vector3, round_half_up


class ScreenPoint(NamedTuple):
    x: float
    y: float
    depth: float


def normalize_view(view) -> int:
    """Map any (possibly fractional or negative) view index into 0..3."""
    return round_half_up(view) % VIEW_COUNT


def project_to_screen(position: Vector3, view) -> ScreenPoint:
    """Project a world position onto the screen plane of a view."""
    x, y, z = position
    view = normalize_view(view)
    if view == 0:
        return ScreenPoint(x, y, -z)
    if view == 1:
        return ScreenPoint(z, y, -x)
    if view == 2:
        return ScreenPoint(-x, y, z)
    return ScreenPoint(-z, y, x)


def screen_distance(pos_a: Vector3, pos_b: Vector3, view) -> float:
    """2D distance between two positions after projection."""
    a = project_to_screen(pos_a, view)
    b = project_to_screen(pos_b, view)
    return math.hypot(a.x - b.x, a.y - b.y)


def depth_gap(pos_a: Vector3, pos_b: Vector3, view) -> float:
    """Separation along the axis the view hides."""
    a = project_to_screen(pos_a, view)
    b = project_to_screen(pos_b, view)
    return abs(a.depth - b.depth)
