"""Track element dimensions and sample sheet layout.

Track values are in SVG user units.
"""

# Track element
LANE_WIDTH = 120        # distance between the barriers
BARRIER_WIDTH = 6       # width of a barrier
BARRIER_CHUNKS = 4      # barrier chunks per section

# Derived
TRACK_WIDTH = LANE_WIDTH + 2 * BARRIER_WIDTH
INNER_RADIUS = LANE_WIDTH / 2           # radius of the tightest curve

# Sample sheet (points, 72 per inch)
SHEET_MARGIN = 36       # 0.5" page margin
SHEET_COLUMNS = 4
SHEET_ROWS = 2
SHEET_SCALE = 0.4       # track units -> sheet points
TITLE_SIZE = 14
LABEL_SIZE = 8
