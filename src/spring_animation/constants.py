# Spring defaults ("smooth" preset): near-critical damping, half-second response.
DEFAULT_DURATION = 0.5
DEFAULT_DAMPING_RATIO = 0.825
# Squared-magnitude threshold for both velocity and displacement.
DEFAULT_EPSILON = 0.0005

# Demo window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Spring Animation"
UPDATE_RATE = 1 / 60

# Demo scene: circle column positions and the two toggle states (diameter, offset).
# The closed-form reference ring sits left of the integrated one.
EXACT_COLUMN_X = -70.0
SPRING_COLUMN_X = 70.0
MARKER_SMALL = (50.0, -200.0)   # diameter, vertical offset
MARKER_LARGE = (100.0, 200.0)
RING_BIG_STATE = (100.0, 200.0)
RING_SMALL_STATE = (50.0, -200.0)
RING_LINE_WIDTH = 8
EXACT_RING_COLOR = (120, 200, 255, 255)
SPRING_RING_COLOR = (255, 255, 255, 255)
