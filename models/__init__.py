"""
Data Models

Defines the core data structures:
- Vertex, VertexEntry, EdgeEntry
- Figure
- FigureCollection
"""

from .shapes import Vertex, VertexEntry, EdgeEntry
from .figure import Figure
from .figure_collection import FigureCollection

__all__ = ["Vertex", "VertexEntry", "EdgeEntry", "Figure", "FigureCollection"]
