"""
Point location queries against a Figure.

This module provides:
    • point_in_figure(point, figure)
    • find_vertex_near(point, figure)
    • find_edge_near(point, figure, tolerance)

Both vertex lookup and the containment test start with a cheap bounding-box
rejection. The vertex lookup uses a box (Chebyshev) neighbourhood while the
containment test uses even-odd ray crossing; the two are kept as they are
because the hit-testing behaviour depends on both.
"""

from typing import Optional

from utils.geometry import box_contains, crosses_ray, distance_to_segment
from config import get_active_params


# ---------------------------------------------------------------------
#  Containment (even-odd rule)
# ---------------------------------------------------------------------

def point_in_figure(point, figure) -> bool:
    """
    Even-odd crossing test over the figure's vertex ring.

    Walks exactly vertex_count edges (current, previous), starting with the
    closing edge (first, last). Points on a left or top edge count as inside,
    points on a right or bottom edge as outside.
    """
    params = get_active_params()

    if not box_contains(figure.bounding_box, point, params["BBOX_MARGIN"]):
        return False

    vertices = figure.vertices
    inside = False
    previous = vertices[-1]

    for current in vertices:
        if crosses_ray(point, current.position, previous.position):
            inside = not inside
        previous = current

    return inside


# ---------------------------------------------------------------------
#  Vertex hit test
# ---------------------------------------------------------------------

def find_vertex_near(point, figure):
    """
    Returns the first vertex (ring order) whose ±HIT_RADIUS square contains
    the point, or None. Ties go to the earlier vertex, not the closer one.
    """
    params = get_active_params()
    radius = params["HIT_RADIUS"]

    if not box_contains(figure.bounding_box, point, radius):
        return None

    for vertex in figure.vertices:
        if vertex.isNear(point, radius):
            return vertex

    return None


# ---------------------------------------------------------------------
#  Edge pick
# ---------------------------------------------------------------------

def find_edge_near(point, figure, tolerance: Optional[float] = None) -> Optional[int]:
    """
    Returns the shape-sequence position of the first edge passing within
    `tolerance` pixels of the point, or None.

    The result is the edge_position expected by Figure.insertVertexOnEdge.
    """
    if tolerance is None:
        params = get_active_params()
        tolerance = params["EDGE_PICK_TOLERANCE"]

    if not box_contains(figure.bounding_box, point, tolerance):
        return None

    for position, start, end in figure.edgePositions():
        if distance_to_segment(point, start, end) <= tolerance:
            return position

    return None
