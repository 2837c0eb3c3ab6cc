import logging
from typing import Iterator, List, Tuple

from models.shapes import (
    Point,
    Vertex,
    VertexEntry,
    EdgeEntry,
    ShapeEntry,
    shift_entry,
)
from utils.geometry import Box, grow_box
from config import get_active_params

logger = logging.getLogger(__name__)

Color = Tuple[int, ...]


class Figure:
    """
    A closed polygonal figure built one vertex at a time.

    It keeps:
      - the vertex ring (list of Vertex, insertion order = winding order)
      - the shape sequence V0 E01 V1 E12 ... V(n-1) E(n-1)0 driving rendering
        and edge lookup; a single-vertex figure has no edge entry
      - an expand-only bounding box
      - color, stroke thickness and vertex marker size

    Notes:
      • Rejected edits (vertex too close, bad edge position) are no-ops.
        Callers detect them by the unchanged vertex_count.
      • Shape entries address vertices by ring index, never by position.
    """

    def __init__(self, point: Point, color: Color, thickness: int):
        if thickness < 1:
            raise ValueError(f"thickness must be >= 1, got {thickness}")

        params = get_active_params()
        self.hit_radius: int = params["HIT_RADIUS"]
        margin = params["BBOX_MARGIN"]

        self.color: Color = tuple(color)
        self.thickness: int = thickness
        self.vertex_size: int = thickness + params["VERTEX_SIZE_PADDING"]

        x, y = int(point[0]), int(point[1])
        self.vertices: List[Vertex] = [Vertex(x, y)]
        self.shapes: List[ShapeEntry] = [VertexEntry(0)]

        self.min_x: int = x - margin
        self.min_y: int = y - margin
        self.max_x: int = x + margin
        self.max_y: int = y + margin

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def first_vertex(self) -> Vertex:
        return self.vertices[0]

    @property
    def last_vertex(self) -> Vertex:
        return self.vertices[-1]

    @property
    def bounding_box(self) -> Box:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def shape_entries(self) -> Tuple[ShapeEntry, ...]:
        return tuple(self.shapes)

    def edges(self) -> Iterator[Tuple[Point, Point]]:
        """Yields (start, end) positions of every edge in shape order."""
        for _, start, end in self.edgePositions():
            yield start, end

    def edgePositions(self) -> Iterator[Tuple[int, Point, Point]]:
        """Yields (shape position, start, end) for every edge entry."""
        for position, entry in enumerate(self.shapes):
            if isinstance(entry, EdgeEntry):
                yield (position,
                       self.vertices[entry.start].position,
                       self.vertices[entry.end].position)

    def vertexOf(self, entry: VertexEntry) -> Vertex:
        return self.vertices[entry.index]

    def isTooClose(self, point: Point) -> bool:
        return any(v.isNear(point, self.hit_radius) for v in self.vertices)

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def addVertex(self, point: Point):
        """
        Appends a vertex at the end of the ring.

        The closing edge (last -> first) is rerouted through the new vertex,
        so the sequence keeps one edge per vertex once it holds two.
        """
        x, y = int(point[0]), int(point[1])

        if self.isTooClose((x, y)):
            logger.debug("addVertex: (%d, %d) too close to a vertex, ignored", x, y)
            return

        new_index = len(self.vertices)
        self.vertices.append(Vertex(x, y))

        # Drop the old closing edge, if any
        if isinstance(self.shapes[-1], EdgeEntry):
            self.shapes.pop()

        self.shapes.append(EdgeEntry(new_index - 1, new_index))
        self.shapes.append(VertexEntry(new_index))
        self.shapes.append(EdgeEntry(new_index, 0))

        self._growBox((x, y))

    def insertVertexOnEdge(self, point: Point, edge_position: int):
        """
        Splits the edge at `edge_position` in the shape sequence into two
        edges joined by a new vertex at `point`.

        The entries around the edge are looked up cyclically: the entry
        after the closing edge is the first one in the sequence.
        """
        x, y = int(point[0]), int(point[1])

        if not 0 <= edge_position < len(self.shapes):
            logger.debug("insertVertexOnEdge: position %d out of range", edge_position)
            return

        edge = self.shapes[edge_position]
        if not isinstance(edge, EdgeEntry):
            logger.debug("insertVertexOnEdge: entry %d is not an edge", edge_position)
            return

        prev_entry = self.shapes[edge_position - 1]
        next_entry = self.shapes[(edge_position + 1) % len(self.shapes)]
        prev_vertex = self.vertexOf(prev_entry)
        next_vertex = self.vertexOf(next_entry)

        if (prev_vertex.isNear((x, y), self.hit_radius)
                or next_vertex.isNear((x, y), self.hit_radius)):
            logger.debug("insertVertexOnEdge: (%d, %d) too close to edge end", x, y)
            return

        # The new vertex goes right after the edge's start vertex
        new_index = prev_entry.index + 1
        self.vertices.insert(new_index, Vertex(x, y))

        shifted = [shift_entry(e, new_index) for e in self.shapes]
        prev_index = shift_entry(prev_entry, new_index).index
        next_index = shift_entry(next_entry, new_index).index

        shifted[edge_position:edge_position + 1] = [
            EdgeEntry(prev_index, new_index),
            VertexEntry(new_index),
            EdgeEntry(new_index, next_index),
        ]
        self.shapes = shifted

        self._growBox((x, y))

    def _growBox(self, point: Point):
        delta = self.vertex_size // 2
        self.min_x, self.min_y, self.max_x, self.max_y = grow_box(
            self.bounding_box, point, delta
        )

    # ------------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------------

    def __repr__(self):
        return (f"Figure(vertices={self.vertex_count}, color={self.color}, "
                f"thickness={self.thickness}, box={self.bounding_box})")
