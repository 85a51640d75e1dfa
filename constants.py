# constants.py

# Sides of a tile, in clockwise order starting at the top.
# np.roll(edges, k) over this order is a rotation of k quarter turns clockwise.
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3
SIDE_NAMES = ("top", "right", "bottom", "left")
NUM_ORIENTATIONS = 4

# Default board
GRID_SIZE = 3
LABEL_COUNT = 9

# Colour for each label (index 0 is the tile background, never a label)
LABEL_COLORS = [
    (40, 40, 40),     # 0: Dark Gray
    (255, 165, 0),    # 1: Orange
    (192, 192, 192),  # 2: Light Gray
    (0, 0, 128),      # 3: Navy Blue
    (255, 0, 0),      # 4: Red
    (255, 255, 0),    # 5: Yellow
    (0, 128, 0),      # 6: Green
    (128, 0, 128),    # 7: Purple
    (165, 42, 42),    # 8: Brown
    (0, 191, 255),    # 9: Deep Sky Blue
]

# --- Window and layout ---
TILE_SIZE = 100
TILE_GAP = 5
REGION_SPACING = 20
BUTTON_HEIGHT = 40
STATUS_HEIGHT = 30
FPS = 60

# --- Colours ---
COLOR_BACKGROUND = (30, 30, 30)
COLOR_GRID_BG = (50, 50, 50)
COLOR_GRID_BORDER = (204, 115, 0)
COLOR_TILE_BORDER = (128, 128, 128)
COLOR_MISMATCH = (255, 60, 60)
COLOR_TEXT = (220, 220, 220)
COLOR_TILE_ID = (192, 192, 192)
COLOR_BUTTON = (60, 179, 113)
COLOR_BUTTON_HOVER = (80, 200, 135)
COLOR_BANNER_BG = (20, 20, 20)
COLOR_BANNER_BORDER = (200, 200, 200)

STATUS_PLAYING = "Keep rotating tiles until all adjacent numbers match."
STATUS_SOLVED = "CONGRATULATIONS! Puzzle Solved!"
