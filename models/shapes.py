from dataclasses import dataclass
from typing import Tuple, Union

Point = Tuple[int, int]


@dataclass(frozen=True)
class Vertex:
    """
    A single polygon vertex at an integer pixel position.

    Vertices carry no id: inside a Figure they are addressed by their index
    in the vertex ring.
    """

    x: int
    y: int

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    def isNear(self, point: Point, radius: int) -> bool:
        """
        Box test used for rejection and hit-testing: the point must be
        strictly closer than `radius` on both axes.
        """
        px, py = point
        return abs(self.x - px) < radius and abs(self.y - py) < radius

    def __repr__(self):
        return f"Vertex(x={self.x}, y={self.y})"


# ---------------------------------------------------------------------
#  Shape sequence entries
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class VertexEntry:
    """Shape sequence entry pointing at ring[index]."""

    index: int


@dataclass(frozen=True)
class EdgeEntry:
    """Shape sequence entry for the edge ring[start] -> ring[end]."""

    start: int
    end: int


ShapeEntry = Union[VertexEntry, EdgeEntry]


def shift_entry(entry: ShapeEntry, from_index: int) -> ShapeEntry:
    """
    Returns the entry with every ring index >= from_index moved up by one.
    Used after a vertex is spliced into the ring.
    """
    if isinstance(entry, VertexEntry):
        if entry.index >= from_index:
            return VertexEntry(entry.index + 1)
        return entry

    start = entry.start + 1 if entry.start >= from_index else entry.start
    end = entry.end + 1 if entry.end >= from_index else entry.end
    return EdgeEntry(start, end)
