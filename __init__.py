"""
Polygon Paint Package

This package provides the drawing core of a small paint program:

- Figure model (vertex ring + shape sequence)
- Point-in-figure and vertex/edge hit testing
- Symmetric Bresenham thick-line rasterization
- Figure rendering and output utilities
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "utils",
    "visualization",
]
