"""Data containers: colors, canvas and markers."""

from .color import unpack_color, parse_color, DEFAULT_PALETTE
from .canvas import Canvas
from .markers import Point, MarkerSet, generate_random_markers

__all__ = [
    "Canvas",
    "Point",
    "MarkerSet",
    "generate_random_markers",
    "unpack_color",
    "parse_color",
    "DEFAULT_PALETTE",
]
