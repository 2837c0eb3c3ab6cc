import pytest

from models.figure import Figure
from models.shapes import Vertex
from detectors.hit_testing import point_in_figure, find_vertex_near, find_edge_near

BLACK = (0, 0, 0)


@pytest.fixture
def square():
    figure = Figure((0, 0), BLACK, 1)
    for point in [(100, 0), (100, 100), (0, 100)]:
        figure.addVertex(point)
    return figure


# ---------------------------------------------------------------------
#  point_in_figure
# ---------------------------------------------------------------------

def test_center_of_square_is_inside(square):
    assert point_in_figure((50, 50), square) is True


def test_far_point_is_outside(square):
    assert point_in_figure((150, 150), square) is False


def test_point_inside_box_but_outside_polygon():
    triangle = Figure((0, 0), BLACK, 1)
    triangle.addVertex((100, 0))
    triangle.addVertex((0, 100))

    assert point_in_figure((20, 20), triangle) is True
    assert point_in_figure((90, 90), triangle) is False


@pytest.mark.parametrize("point, expected", [
    ((0, 50), True),      # left edge
    ((50, 0), True),      # top edge
    ((100, 50), False),   # right edge
    ((50, 100), False),   # bottom edge
])
def test_points_on_edges_follow_half_open_rule(square, point, expected):
    assert point_in_figure(point, square) is expected


def test_concave_notch_is_outside():
    figure = Figure((0, 0), BLACK, 1)
    for point in [(100, 0), (100, 100), (50, 40), (0, 100)]:
        figure.addVertex(point)

    assert point_in_figure((50, 20), figure) is True
    assert point_in_figure((50, 80), figure) is False


def test_single_vertex_figure_never_contains():
    figure = Figure((10, 10), BLACK, 1)

    assert point_in_figure((10, 10), figure) is False
    assert point_in_figure((12, 9), figure) is False


def test_two_vertex_figure_never_contains():
    figure = Figure((0, 0), BLACK, 1)
    figure.addVertex((40, 40))

    assert point_in_figure((20, 20), figure) is False
    assert point_in_figure((10, 30), figure) is False


def test_inserted_vertex_changes_outline(square):
    # pull the bottom edge down into a spike
    square.insertVertexOnEdge((50, 180), 5)

    assert point_in_figure((50, 150), square) is True
    assert point_in_figure((10, 150), square) is False


# ---------------------------------------------------------------------
#  find_vertex_near
# ---------------------------------------------------------------------

def test_find_vertex_near_hits_within_box(square):
    assert find_vertex_near((95, 104), square) == Vertex(100, 100)
    assert find_vertex_near((3, -7), square) == Vertex(0, 0)


def test_find_vertex_near_misses(square):
    assert find_vertex_near((50, 50), square) is None
    assert find_vertex_near((110, 100), square) is None   # |dx| == 10
    assert find_vertex_near((500, 500), square) is None


def test_find_vertex_near_prefers_ring_order_over_distance():
    figure = Figure((0, 0), BLACK, 1)
    figure.addVertex((15, 0))

    # (8, 0) is closer to (15, 0) but (0, 0) comes first
    assert find_vertex_near((8, 0), figure) == Vertex(0, 0)


# ---------------------------------------------------------------------
#  find_edge_near
# ---------------------------------------------------------------------

def test_find_edge_near_returns_shape_position(square):
    assert find_edge_near((50, 2), square) == 1
    assert find_edge_near((101, 50), square) == 3
    assert find_edge_near((50, 97), square) == 5
    assert find_edge_near((-3, 50), square) == 7


def test_find_edge_near_respects_tolerance(square):
    assert find_edge_near((50, 20), square) is None
    assert find_edge_near((50, 20), square, tolerance=25) == 1


def test_find_edge_near_on_single_vertex_figure():
    figure = Figure((10, 10), BLACK, 1)
    assert find_edge_near((10, 10), figure) is None


def test_found_edge_feeds_insert(square):
    position = find_edge_near((100, 60), square)
    square.insertVertexOnEdge((100, 60), position)

    assert square.vertex_count == 5
    assert square.vertices[2] == Vertex(100, 60)
