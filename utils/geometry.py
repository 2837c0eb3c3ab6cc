"""
This module provides:
    - box_contains
    - grow_box
    - crosses_ray
    - closest_point_on_segment
    - distance_to_segment
"""

import math
from typing import Tuple

Box = Tuple[int, int, int, int]


# ----------------------------------------------------------------------
#  AXIS-ALIGNED BOXES
# ----------------------------------------------------------------------

def box_contains(box: Box, point, padding: int = 0) -> bool:
    """
    True when point lies inside (min_x, min_y, max_x, max_y) grown by
    `padding` on every side. Borders count as inside.
    """
    min_x, min_y, max_x, max_y = box
    x, y = point
    return (min_x - padding <= x <= max_x + padding
            and min_y - padding <= y <= max_y + padding)


def grow_box(box: Box, point, margin: int) -> Box:
    """
    Expand-only update: the box never shrinks, it only takes in the
    square of half-side `margin` around the point.
    """
    min_x, min_y, max_x, max_y = box
    x, y = point
    return (
        min(min_x, x - margin),
        min(min_y, y - margin),
        max(max_x, x + margin),
        max(max_y, y + margin),
    )


# ----------------------------------------------------------------------
#  EVEN-ODD CROSSING TEST
# ----------------------------------------------------------------------

def crosses_ray(point, a, b) -> bool:
    """
    True if the horizontal ray from `point` towards +x crosses segment a-b.

    The segment is half-open in y, so a ray through a shared vertex is
    counted once and horizontal segments never count.
    """
    px, py = point
    ax, ay = a
    bx, by = b

    if (ay > py) == (by > py):
        return False

    # ay != by here, the division is safe
    x_at_py = (bx - ax) * (py - ay) / (by - ay) + ax
    return px < x_at_py


# ----------------------------------------------------------------------
#  POINT TO SEGMENT DISTANCE
# ----------------------------------------------------------------------

def closest_point_on_segment(p3, a1, a2):
    """
    Projection of p3 onto segment a1-a2, clamped to the endpoints.
    """
    (x1, y1), (x2, y2), (x3, y3) = a1, a2, p3
    dx, dy = (x2 - x1), (y2 - y1)
    det = dx * dx + dy * dy

    if det == 0:  # degenerate segment
        return (x1, y1)

    t = (dy * (y3 - y1) + dx * (x3 - x1)) / det
    t = max(0.0, min(1.0, t))
    return (x1 + t * dx, y1 + t * dy)


def distance_to_segment(point, a1, a2) -> float:
    return math.dist(point, closest_point_on_segment(point, a1, a2))
