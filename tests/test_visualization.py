import cv2
import numpy as np
import pytest

from models.figure import Figure
from models.shapes import Vertex
from utils.pixel_surface import create_surface, painted_pixels
from visualization.draw_figures import draw_figure, draw_figures, draw_selection
from visualization.save_outputs import save_all_outputs, build_hit_map

BLACK = (0, 0, 0)
RED = (0, 0, 255)


@pytest.fixture
def square():
    figure = Figure((20, 20), BLACK, 1)
    for point in [(120, 20), (120, 120), (20, 120)]:
        figure.addVertex(point)
    return figure


def test_wireframe_draws_only_edges(square):
    canvas = create_surface(200, 200)
    draw_figure(canvas, square, draw_vertices=False)
    pixels = painted_pixels(canvas)

    assert (70, 20) in pixels
    assert (120, 70) in pixels
    assert (70, 120) in pixels
    assert (20, 70) in pixels
    assert (70, 70) not in pixels
    assert (22, 22) not in pixels


def test_vertices_drawn_as_filled_circles(square):
    canvas = create_surface(200, 200)
    draw_figure(canvas, square, vertex_color=RED)

    # radius is vertex_size // 2 == 3
    assert tuple(canvas[22, 21]) == RED
    assert tuple(canvas[118, 119]) == RED
    assert tuple(canvas[30, 30]) == (255, 255, 255)


def test_edges_use_figure_color_and_thickness():
    figure = Figure((10, 50), (0, 255, 0), 5)
    figure.addVertex((90, 50))
    canvas = create_surface(100, 100)
    draw_figure(canvas, figure, draw_vertices=False)

    column = {y for x, y in painted_pixels(canvas) if x == 50}
    assert column == {48, 49, 50, 51, 52}
    assert tuple(canvas[50, 50]) == (0, 255, 0)


def test_draw_figures_renders_each(square):
    other = Figure((150, 150), BLACK, 1)
    other.addVertex((190, 150))

    canvas = create_surface(200, 200)
    draw_figures(canvas, [square, other], draw_vertices=False)
    pixels = painted_pixels(canvas)

    assert (70, 20) in pixels
    assert (170, 150) in pixels


def test_draw_selection_outlines_vertex():
    canvas = create_surface(50, 50)
    draw_selection(canvas, Vertex(25, 25), 8, color=RED)
    pixels = painted_pixels(canvas)

    assert pixels
    assert (25, 25) not in pixels
    assert all(tuple(canvas[y, x]) == RED for x, y in pixels)


def test_save_all_outputs_writes_files(tmp_path, square):
    canvas = create_surface(200, 200)
    save_all_outputs(str(tmp_path), "scene", canvas, [square])

    for suffix in ["figures", "wireframe", "hitmap"]:
        assert (tmp_path / f"scene_{suffix}.png").exists()

    hitmap = cv2.imread(str(tmp_path / "scene_hitmap.png"), cv2.IMREAD_GRAYSCALE)
    assert hitmap[70, 70] == 255
    assert hitmap[5, 5] == 0
    assert hitmap[70, 150] == 0

    # the base image is left untouched
    assert np.all(canvas == 255)


def test_hit_map_full_resolution_matches_containment(square):
    mask = build_hit_map((200, 200), [square], step=1)

    assert mask[70, 70] == 255
    assert mask[20, 70] == 255      # top edge counts as inside
    assert mask[120, 70] == 0       # bottom edge does not
    assert mask[150, 150] == 0


def test_hit_map_step_fills_sampled_blocks(square):
    mask = build_hit_map((200, 200), [square], step=4)

    # bounding box starts at 15, so samples sit at 15, 19, 23, ...
    assert mask[71:75, 71:75].min() == 255
    assert mask[150, 150] == 0
    assert set(np.unique(mask)) <= {0, 255}


def test_hit_map_rejects_bad_step(square):
    with pytest.raises(ValueError):
        build_hit_map((200, 200), [square], step=0)
