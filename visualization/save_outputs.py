"""
Centralized output-saving utilities for the rendering demo.

This module provides:
    • save_all_outputs(...)
    • save_figures(...)
    • save_wireframe(...)
    • build_hit_map(...)
    • save_hit_map(...)

Uses draw modules to visualize and utils.image_io for filesystem handling.
"""

import numpy as np
from typing import List, Optional

from models.figure import Figure
from visualization.draw_figures import draw_figures
from detectors.hit_testing import point_in_figure
from utils.image_io import save_image, ensure_output_dir
from config import get_active_params


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_figures(path: str, base_image: np.ndarray, figures: List[Figure]):
    """
    Draw figures with vertex markers on a copy of the base image and save.
    """
    vis = base_image.copy()
    draw_figures(vis, figures, draw_vertices=True)
    return save_image(path, vis)


def save_wireframe(path: str, base_image: np.ndarray, figures: List[Figure]):
    """
    Edges only, no vertex markers.
    """
    vis = base_image.copy()
    draw_figures(vis, figures, draw_vertices=False)
    return save_image(path, vis)


def build_hit_map(shape, figures: List[Figure], step: Optional[int] = None) -> np.ndarray:
    """
    Grayscale mask: 255 where point_in_figure holds for any figure.

    Only every `step`-th pixel of each bounding box is tested; a hit fills
    the whole step x step block below and to the right of the sample.
    """
    if step is None:
        step = get_active_params()["HIT_MAP_STEP"]
    if step < 1:
        raise ValueError(f"step must be >= 1, got {step}")

    height, width = shape[:2]
    mask = np.zeros((height, width), dtype=np.uint8)

    for figure in figures:
        min_x, min_y, max_x, max_y = figure.bounding_box
        for y in range(max(min_y, 0), min(max_y + 1, height), step):
            for x in range(max(min_x, 0), min(max_x + 1, width), step):
                if mask[y, x] == 0 and point_in_figure((x, y), figure):
                    mask[y:y + step, x:x + step] = 255

    return mask


def save_hit_map(path: str, shape, figures: List[Figure], step: Optional[int] = None):
    """
    Writes the containment mask from build_hit_map to disk.
    """
    return save_image(path, build_hit_map(shape, figures, step))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    scene_id: str,
    base_image: np.ndarray,
    figures: List[Figure]
):
    """
    Saves every output artifact for one rendered scene.

    Example output:
        <id>_figures.png
        <id>_wireframe.png
        <id>_hitmap.png
    """

    ensure_output_dir(output_dir)

    # 1) Full render
    save_figures(
        f"{output_dir}/{scene_id}_figures.png",
        base_image,
        figures
    )

    # 2) Edges only
    save_wireframe(
        f"{output_dir}/{scene_id}_wireframe.png",
        base_image,
        figures
    )

    # 3) Containment mask
    save_hit_map(
        f"{output_dir}/{scene_id}_hitmap.png",
        base_image.shape,
        figures
    )
