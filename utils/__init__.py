"""
Utility Functions

Provides the thick-line rasterizer, box and segment geometry, pixel surface
helpers and image I/O used across the package.
"""

from .geometry import (
    box_contains,
    grow_box,
    crosses_ray,
    closest_point_on_segment,
    distance_to_segment,
)
from .pixel_surface import create_surface, check_surface, set_pixel, painted_pixels
from .bresenham_utils import draw_line, find_drawing_step, bres_circle
from .image_io import ensure_output_dir, save_image, load_surface

__all__ = [
    "box_contains",
    "grow_box",
    "crosses_ray",
    "closest_point_on_segment",
    "distance_to_segment",
    "create_surface",
    "check_surface",
    "set_pixel",
    "painted_pixels",
    "draw_line",
    "find_drawing_step",
    "bres_circle",
    "ensure_output_dir",
    "save_image",
    "load_surface",
]
