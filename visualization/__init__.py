"""
Visualization Tools

Provides drawing utilities for:
- Figures (edges + vertex markers)
- Vertex selection rings
- Output images
"""

from .draw_figures import draw_figure, draw_figures, draw_selection
from .save_outputs import (
    save_all_outputs,
    save_figures,
    save_wireframe,
    build_hit_map,
    save_hit_map,
)

__all__ = [
    "draw_figure",
    "draw_figures",
    "draw_selection",
    "save_all_outputs",
    "save_figures",
    "save_wireframe",
    "build_hit_map",
    "save_hit_map",
]
