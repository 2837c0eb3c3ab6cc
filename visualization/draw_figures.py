"""
Visualization utilities for rendering figures.

This module provides:
    • draw_figure(img, figure, draw_vertices)
    • draw_figures(img, figures)
    • draw_selection(img, vertex, radius)

Edges go through the symmetric Bresenham rasterizer, vertex markers are
filled circles drawn with cv2.
"""

import cv2
from typing import Iterable, Optional, Tuple

from models.figure import Figure
from models.shapes import Vertex, VertexEntry, EdgeEntry
from utils.bresenham_utils import draw_line, bres_circle
from utils.pixel_surface import check_surface, set_pixel
from config import get_active_params


# ---------------------------------------------------------------------
#  One figure, in shape-sequence order
# ---------------------------------------------------------------------

def draw_figure(
    image,
    figure: Figure,
    draw_vertices: bool = True,
    vertex_color: Optional[Tuple[int, int, int]] = None
):
    """
    Draws a figure by walking its shape sequence:

        EdgeEntry   → thick line in the figure color
        VertexEntry → filled circle of radius vertex_size // 2

    Args:
        image: BGR numpy array (modified in-place)
        figure: Figure to render
        draw_vertices: skip markers when False
        vertex_color: marker color, defaults to VERTEX_COLOR
    """
    check_surface(image)

    if vertex_color is None:
        vertex_color = get_active_params()["VERTEX_COLOR"]

    for entry in figure.shapes:
        if isinstance(entry, EdgeEntry):
            draw_line(
                image,
                figure.vertices[entry.start].position,
                figure.vertices[entry.end].position,
                figure.color,
                figure.thickness
            )
        elif isinstance(entry, VertexEntry) and draw_vertices:
            vertex = figure.vertexOf(entry)
            cv2.circle(
                image,
                vertex.position,
                figure.vertex_size // 2,
                vertex_color,
                thickness=-1
            )

    return image


# ---------------------------------------------------------------------
#  Several figures, oldest first
# ---------------------------------------------------------------------

def draw_figures(image, figures: Iterable[Figure], draw_vertices: bool = True):
    for figure in figures:
        draw_figure(image, figure, draw_vertices=draw_vertices)
    return image


# ---------------------------------------------------------------------
#  Selection ring around a vertex
# ---------------------------------------------------------------------

def draw_selection(image, vertex: Vertex, radius: int, color=None):
    """
    Outlines a selected vertex with a one-pixel Bresenham circle.
    """
    check_surface(image)

    if color is None:
        color = get_active_params()["SELECTION_COLOR"]

    for x, y in bres_circle(vertex.x, vertex.y, radius):
        set_pixel(image, x, y, color)

    return image
