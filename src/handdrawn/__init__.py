"""handdrawn – deterministic sketchy strokes for lines, borders and dividers."""

from __future__ import annotations

from .cache import PathCache
from .geometry import EdgeInsets, Size, StrokePath
from .helpers import HandDrawnHelpers
from .offsets import GenerationConfig, OffsetGenerator
from .painter import HandDrawnLinePainter
from .validation import InvalidConfiguration, ValidationError
from .widgets import HandDrawnContainer, HandDrawnDivider

__all__ = [
    "__version__",
    "EdgeInsets",
    "GenerationConfig",
    "HandDrawnContainer",
    "HandDrawnDivider",
    "HandDrawnHelpers",
    "HandDrawnLinePainter",
    "InvalidConfiguration",
    "OffsetGenerator",
    "PathCache",
    "Size",
    "StrokePath",
    "ValidationError",
]

__version__ = "0.1.0"
