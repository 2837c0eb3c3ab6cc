"""
Image I/O utilities for the rendering demo.

This module provides:
    • ensure_output_dir(path)
    • save_image(path, image)
    • load_surface(path)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
from typing import Optional

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING / LOADING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray) -> bool:
    """
    Save an image to disk, ensuring the directory exists.
    Returns False (and warns) if cv2 could not encode the file.
    """
    ensure_output_dir(os.path.dirname(path))
    ok = cv2.imwrite(path, image)
    if not ok:
        print(f"[WARN] Could not write image: {path}")
    return bool(ok)


def load_surface(path: str) -> Optional[np.ndarray]:
    """
    Loads a BGR image to draw on, or None if it cannot be read.
    """
    return cv2.imread(path)
