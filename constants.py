# constants.py

import math

# =============================================================================
# --- LATTICE & HASHING ---
# =============================================================================
PERMUTATION_TABLE_SIZE = 256
HASH_MASK = PERMUTATION_TABLE_SIZE - 1 # Bitwise mask used as a non-negative "modulo 256"
DEFAULT_PERMUTATION_SEED = None # None means: use Ken Perlin's reference table

GRADIENT_COUNT_2D = 8
GRADIENT_COUNT_3D = 12

# Both components of a diagonal 2D gradient, so every 2D gradient is unit length.
DIAGONAL_GRADIENT_COMPONENT = 1.0 / math.sqrt(2.0)

# =============================================================================
# --- EVALUATION ---
# =============================================================================
# The z coordinate used when sampling a 2D slice out of the 3D field.
# Any non-integer value works; an integer would put every sample on a lattice plane.
FIXED_Z_OFFSET = 0.5

# Design targets for the output range (not hard guarantees).
EXPECTED_NOISE_MIN = -1.0
EXPECTED_NOISE_MAX = 1.0
# Values outside this range are treated as a regression signal.
NOISE_REGRESSION_LIMIT = 2.0

# =============================================================================
# --- DEMO IMAGE ---
# =============================================================================
IMAGE_WIDTH = 800
IMAGE_HEIGHT = 800
PIXELS_PER_LATTICE_UNIT = 50.0 # Noise "frequency": one lattice cell per 50 pixels
SAMPLE_ORIGIN_X = 245.0
SAMPLE_ORIGIN_Y = 324.0
DRAW_LATTICE_GRID = True

GREY_LEVELS = 256
GREY_MAX = GREY_LEVELS - 1
COLOR_GRID_LINE = (255, 0, 0)

PPM_MAGIC = "P3"
PPM_MAX_CHANNEL_VALUE = 255
OUTPUT_PPM_PATH = "noise.ppm"
OUTPUT_PNG_PATH = "noise.png"
OUTPUT_HISTOGRAM_PATH = "noise_histogram.png"

# =============================================================================
# --- GRAPHS ---
# =============================================================================
HISTOGRAM_BIN_COUNT = 64
GRAPH_FIGURE_SIZE = (12, 7)

# =============================================================================
# --- UI, PREVIEW & PROFILER ---
# =============================================================================
SCREEN_WIDTH = IMAGE_WIDTH
SCREEN_HEIGHT = IMAGE_HEIGHT
CLOCK_TICK_RATE = 30
UI_FONT_SIZE = 36
UI_LOADING_TEXT_OFFSET_Y = 50
UI_LOADING_BAR_WIDTH = 400
UI_LOADING_BAR_HEIGHT = 30
UI_LOADING_BAR_UPDATE_INTERVAL = 20 # Redraw the loading bar every N rendered rows
COLOR_WHITE = (255, 255, 255); COLOR_BLACK = (0, 0, 0)
COLOR_LOADING_BAR_BG = (50, 50, 50); COLOR_LOADING_BAR_FG = (100, 200, 100)
PROFILER_PRINT_LINE_COUNT = 20

SECONDS_PER_MINUTE = 60
