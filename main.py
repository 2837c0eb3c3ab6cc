import logging
from typing import Optional

from models.figure_collection import FigureCollection
from detectors.hit_testing import find_edge_near
from utils.pixel_surface import create_surface
from utils.image_io import load_surface
from visualization.draw_figures import draw_selection
from visualization.save_outputs import save_all_outputs, save_figures

from config import (
    OUTPUT_FOLDER,
    BASE_IMAGE_PATH,
    SHOWCASE_MODE,
    get_active_params,
)


def build_scene(scene) -> FigureCollection:
    """
    Replays the configured clicks:
      1. First point of each polygon creates the figure
      2. Remaining points are appended as vertices
      3. A vertex is inserted on the midpoint of the first edge
    """
    params = get_active_params()
    figures = FigureCollection()

    for points in scene:
        if not points:
            continue

        figure = figures.createFigure(points[0], thickness=params["DEFAULT_THICKNESS"])
        for point in points[1:]:
            figure.addVertex(point)

        if len(points) < 2:
            continue

        (x1, y1), (x2, y2) = points[0], points[1]
        midpoint = ((x1 + x2) // 2, (y1 + y2) // 2)
        edge_position = find_edge_near(midpoint, figure)
        if edge_position is None:
            print(f"[WARN] No edge found near {midpoint}. Skipping insert.")
            continue
        figure.insertVertexOnEdge(midpoint, edge_position)

    return figures


def render_scene(scene_id: str, scene, base_image_path: Optional[str] = None):
    """
    Runs the complete demo for one scene:
      1. Load the base image, or start from a blank canvas
      2. Build figures from the configured clicks
      3. Render figures, wireframe and containment mask
      4. Render the selection ring around the first figure's first vertex
    """

    print(f"\n=== Rendering scene: {scene_id} ===")
    params = get_active_params()

    canvas = None
    if base_image_path is not None:
        canvas = load_surface(base_image_path)
        if canvas is None:
            print(f"[WARN] Could not read base image {base_image_path}. Using blank canvas.")

    if canvas is None:
        width, height = params["CANVAS_SIZE"]
        canvas = create_surface(width, height, params["BACKGROUND_COLOR"])

    figures = build_scene(scene)
    if len(figures) == 0:
        print(f"[WARN] Scene {scene_id} has no figures. Skipping.")
        return

    save_all_outputs(
        output_dir=OUTPUT_FOLDER,
        scene_id=scene_id,
        base_image=canvas,
        figures=list(figures),
    )

    selected = figures.figures[0]
    highlighted = canvas.copy()
    draw_selection(highlighted, selected.first_vertex, selected.vertex_size)
    save_figures(f"{OUTPUT_FOLDER}/{scene_id}_selection.png", highlighted, list(figures))

    for figure in figures:
        print(f"  {figure}")
    print(f"[OK] Finished {scene_id}")


def main():
    """
    Main entry point:
      - Reads the active scene from config
      - Renders it
      - Saves output files
    """
    params = get_active_params()
    logging.basicConfig(level=params["LOG_LEVEL"], format="%(levelname)s %(name)s: %(message)s")

    scene_id = "showcase" if SHOWCASE_MODE else "demo"
    render_scene(scene_id, params["SCENE"], base_image_path=BASE_IMAGE_PATH)

    print("\n=== All scenes rendered ===")


if __name__ == "__main__":
    main()
