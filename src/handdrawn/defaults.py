"""Built-in starting points for stroke appearance and jitter generation."""

from __future__ import annotations

# Stroke appearance
STROKE_WIDTH = 2.0
BORDER_OPACITY = 1.0

# Path generation. Irregularity is the jitter magnitude in pixels: about 0.5
# gives a subtle wobble, 6.0 a very rough sketch.
IRREGULARITY = 3.5
SEGMENTS = 24
SEED = 42

# Widgets
CONTAINER_PADDING = 20.0
DIVIDER_THICKNESS = 1.5
DIVIDER_IRREGULARITY = 1.0
DIVIDER_SEGMENTS = 30
