"""
Configuration file for the polygon painting core.

Contains both DEMO and SHOWCASE parameter sets for the rendering demo.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True to render the large showcase scene instead of the demo
SHOWCASE_MODE = False


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"

# Optional image to draw the scene on; None starts from a blank canvas
BASE_IMAGE_PATH = None


# ===============================================================
# DEMO-MODE PARAMETERS
# ===============================================================

DEMO = {
    "CANVAS_SIZE": (320, 240),
    "DEFAULT_THICKNESS": 3,
    "HIT_MAP_STEP": 1,
    "SCENE": [
        [(40, 40), (140, 40), (140, 140), (40, 140)],
        [(200, 60), (290, 120), (210, 200)],
    ],
}


# ===============================================================
# SHOWCASE-MODE PARAMETERS
# ===============================================================

SHOWCASE = {
    "CANVAS_SIZE": (800, 600),
    "DEFAULT_THICKNESS": 7,
    "HIT_MAP_STEP": 4,
    "SCENE": [
        [(60, 60), (360, 80), (320, 300), (90, 260)],
        [(420, 60), (740, 90), (700, 280), (560, 200), (450, 310)],
        [(120, 360), (380, 380), (260, 560)],
        [(460, 360), (760, 360), (760, 560), (460, 560)],
    ],
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

HIT_RADIUS = 10                    # vertex hit / rejection square (half side)
BBOX_MARGIN = 5                    # initial box padding and query padding
VERTEX_SIZE_PADDING = 6            # vertex size = thickness + padding
EDGE_PICK_TOLERANCE = 5            # distance for picking an edge

# The core only logs rejected edits, at DEBUG
LOG_LEVEL = "DEBUG"


# ---------------------------------------------------------------
# COLORS (B, G, R)
# ---------------------------------------------------------------

DEFAULT_COLOR = (0, 0, 0)          # black strokes
VERTEX_COLOR = (0, 0, 255)         # red vertex markers
SELECTION_COLOR = (255, 0, 0)      # blue selection ring
BACKGROUND_COLOR = (255, 255, 255)  # white canvas


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the model, renderer and demo so they only import one dictionary.
    """

    base = {
        "HIT_RADIUS": HIT_RADIUS,
        "BBOX_MARGIN": BBOX_MARGIN,
        "VERTEX_SIZE_PADDING": VERTEX_SIZE_PADDING,
        "EDGE_PICK_TOLERANCE": EDGE_PICK_TOLERANCE,
        "LOG_LEVEL": LOG_LEVEL,
        "DEFAULT_COLOR": DEFAULT_COLOR,
        "VERTEX_COLOR": VERTEX_COLOR,
        "SELECTION_COLOR": SELECTION_COLOR,
        "BACKGROUND_COLOR": BACKGROUND_COLOR,
    }

    # Merge in showcase or demo values
    if SHOWCASE_MODE:
        base.update(SHOWCASE)
    else:
        base.update(DEMO)

    # Vertex marker size follows the stroke thickness
    base["VERTEX_SIZE"] = base["DEFAULT_THICKNESS"] + VERTEX_SIZE_PADDING

    return base
