"""
Hit Testing

Answers point-location queries against figures:
- point_in_figure
- find_vertex_near
- find_edge_near
"""

from .hit_testing import point_in_figure, find_vertex_near, find_edge_near

__all__ = ["point_in_figure", "find_vertex_near", "find_edge_near"]
