"""
Bresenham rasterization utilities.

This module provides:
    • draw_line(surface, start, end, color, thickness)
    • find_drawing_step(x1, y1, x2, y2)
    • bres_circle(cx, cy, r)

draw_line is the thick-line rasterizer used for figure edges: an integer-only
symmetric Bresenham walk that advances one cursor from each endpoint towards
the middle, sharing a single decision variable. bres_circle wraps the
pybresenham library for outline circles.
"""

from typing import List, Tuple

import pybresenham as bres

from utils.pixel_surface import check_surface, set_pixel


# -----------------------------------------------------------
#   Direction and deltas
# -----------------------------------------------------------

def find_drawing_step(x1: int, y1: int, x2: int, y2: int) -> Tuple[int, int, int, int]:
    """
    Returns (incr_x, incr_y, dx, dy): the unit step from start towards end
    on each axis and the absolute deltas.
    """
    if x1 < x2:
        incr_x, dx = 1, x2 - x1
    else:
        incr_x, dx = -1, x1 - x2

    if y1 < y2:
        incr_y, dy = 1, y2 - y1
    else:
        incr_y, dy = -1, y1 - y2

    return incr_x, incr_y, dx, dy


# -----------------------------------------------------------
#   Thick span at both cursors
# -----------------------------------------------------------

def _draw_span(surface, xf, yf, xb, yb, up_pixels, down_pixels, color, across_x):
    """
    Draws up_pixels + down_pixels + 1 pixels across the line at the forward
    and backward cursor. `across_x` selects the axis the span runs along.
    """
    for i in range(-down_pixels, up_pixels + 1):
        if across_x:
            set_pixel(surface, xf + i, yf, color)
            set_pixel(surface, xb + i, yb, color)
        else:
            set_pixel(surface, xf, yf + i, color)
            set_pixel(surface, xb, yb + i, color)


# -----------------------------------------------------------
#   Walks along each principal axis
# -----------------------------------------------------------

def _walk_x(surface, x1, y1, x2, y2, dx, dy, incr_x, incr_y, up_pixels, down_pixels, color):
    """Lines with |slope| < 1: cursors step in x, span runs along y."""
    xf, yf = x1, y1
    xb, yb = x2, y2
    incr_e = 2 * dy
    incr_ne = 2 * (dy - dx)
    d = 2 * dy - dx

    while xf != xb and xf - 1 != xb and xf + 1 != xb:
        xf += incr_x
        xb -= incr_x

        if d < 0:  # E and W
            d += incr_e
        else:  # NE and SW
            d += incr_ne
            yf += incr_y
            yb -= incr_y

        _draw_span(surface, xf, yf, xb, yb, up_pixels, down_pixels, color, across_x=False)


def _walk_y(surface, x1, y1, x2, y2, dx, dy, incr_x, incr_y, up_pixels, down_pixels, color):
    """Lines with |slope| >= 1: cursors step in y, span runs along x."""
    xf, yf = x1, y1
    xb, yb = x2, y2
    incr_e = 2 * dx
    incr_ne = 2 * (dx - dy)
    d = 2 * dx - dy

    while yf != yb and yf - 1 != yb and yf + 1 != yb:
        yf += incr_y
        yb -= incr_y

        if d < 0:
            d += incr_e
        else:
            d += incr_ne
            xf += incr_x
            xb -= incr_x

        _draw_span(surface, xf, yf, xb, yb, up_pixels, down_pixels, color, across_x=True)


# -----------------------------------------------------------
#   Public entry point
# -----------------------------------------------------------

def draw_line(surface, start, end, color, thickness: int = 1):
    """
    Draws a solid line of `thickness` pixels from start to end, in place.

    Args:
        surface: numpy image (H, W, 3) or (H, W), modified in-place
        start, end: integer (x, y) endpoints
        color: BGR tuple (or scalar for grayscale)
        thickness: pixels across the line, >= 1

    Both endpoints are plotted as single pixels first so even a zero-length
    line leaves a mark. Pixels outside the surface are skipped.
    """
    check_surface(surface)
    if thickness < 1:
        raise ValueError(f"thickness must be >= 1, got {thickness}")

    up_pixels = (thickness - 1) // 2
    down_pixels = thickness - 1 - up_pixels

    x1, y1 = int(start[0]), int(start[1])
    x2, y2 = int(end[0]), int(end[1])
    incr_x, incr_y, dx, dy = find_drawing_step(x1, y1, x2, y2)

    set_pixel(surface, x1, y1, color)
    set_pixel(surface, x2, y2, color)

    if dx > dy:
        _walk_x(surface, x1, y1, x2, y2, dx, dy, incr_x, incr_y, up_pixels, down_pixels, color)
    else:
        _walk_y(surface, x1, y1, x2, y2, dx, dy, incr_x, incr_y, up_pixels, down_pixels, color)

    return surface


# -----------------------------------------------------------
#   Circle wrapper
# -----------------------------------------------------------

def bres_circle(cx: int, cy: int, r: int) -> List[Tuple[int, int]]:
    """
    Returns a list of integer pixel coordinates forming a Bresenham circle.
    """
    if r < 0:
        return []
    return [(int(x), int(y)) for x, y in bres.circle(cx, cy, r)]
