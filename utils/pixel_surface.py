"""
Pixel surface helpers.

A surface is a numpy uint8 image, (H, W, 3) BGR or (H, W) grayscale,
exactly what cv2 reads and writes.

This module provides:
    • create_surface(width, height, color)
    • check_surface(surface)
    • set_pixel(surface, x, y, color)
    • painted_pixels(surface, background)
"""

from typing import Set, Tuple

import numpy as np


def create_surface(width: int, height: int, color=(255, 255, 255)) -> np.ndarray:
    """
    Returns a blank BGR surface filled with `color`.
    """
    surface = np.zeros((height, width, 3), dtype=np.uint8)
    surface[:, :] = color
    return surface


def check_surface(surface):
    """
    Raises ValueError unless `surface` is a 2D or 3D numpy image.
    """
    if not isinstance(surface, np.ndarray) or surface.ndim not in (2, 3):
        raise ValueError("surface must be a 2D or 3D numpy array")


def set_pixel(surface: np.ndarray, x: int, y: int, color):
    """
    Writes one full-opacity pixel. Coordinates outside the surface are
    dropped (numpy would otherwise wrap negative indices).
    """
    height, width = surface.shape[:2]
    if 0 <= x < width and 0 <= y < height:
        surface[y, x] = color


def painted_pixels(surface: np.ndarray, background=(255, 255, 255)) -> Set[Tuple[int, int]]:
    """
    Returns the set of (x, y) coordinates whose value differs from the
    background.
    """
    if surface.ndim == 3:
        mask = np.any(surface != np.asarray(background, dtype=surface.dtype), axis=2)
    else:
        mask = surface != np.asarray(background, dtype=surface.dtype).ravel()[0]

    ys, xs = np.nonzero(mask)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}
