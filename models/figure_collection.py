import logging
from typing import List, Optional, Tuple

from models.figure import Figure, Color
from models.shapes import Point, Vertex
from detectors.hit_testing import point_in_figure, find_vertex_near
from config import get_active_params

logger = logging.getLogger(__name__)


class FigureCollection:
    """
    Owns every figure on a canvas, in creation order.

    Later figures are drawn over earlier ones, so lookups by point scan from
    the newest figure backwards.
    """

    def __init__(self):
        self.figures: List[Figure] = []

    def __len__(self):
        return len(self.figures)

    def __iter__(self):
        return iter(self.figures)

    def createFigure(self, point: Point, color: Optional[Color] = None,
                     thickness: Optional[int] = None) -> Figure:
        params = get_active_params()
        if color is None:
            color = params["DEFAULT_COLOR"]
        if thickness is None:
            thickness = params["DEFAULT_THICKNESS"]

        figure = Figure(point, color, thickness)
        self.figures.append(figure)
        return figure

    def removeFigure(self, figure: Figure):
        """Deletes the whole figure; unknown figures are ignored."""
        if figure in self.figures:
            self.figures.remove(figure)
        else:
            logger.debug("removeFigure: figure not in collection")

    def figureAt(self, point: Point) -> Optional[Figure]:
        """Topmost figure whose interior contains the point."""
        for figure in reversed(self.figures):
            if point_in_figure(point, figure):
                return figure
        return None

    def vertexAt(self, point: Point) -> Optional[Tuple[Figure, Vertex]]:
        """Topmost (figure, vertex) pair hit by the point."""
        for figure in reversed(self.figures):
            vertex = find_vertex_near(point, figure)
            if vertex is not None:
                return figure, vertex
        return None
