"""Render discrete Voronoi diagrams of random markers to PPM images."""

from .data import Canvas, MarkerSet, Point, generate_random_markers
from .converter import DiskRasterizer, PPMEncoder, PPMWriteError, VoronoiRasterizer
from .processor import render_diagram, process_diagram
from .utils import Config

__version__ = "0.1.0"

__all__ = [
    "Canvas",
    "MarkerSet",
    "Point",
    "generate_random_markers",
    "VoronoiRasterizer",
    "DiskRasterizer",
    "PPMEncoder",
    "PPMWriteError",
    "render_diagram",
    "process_diagram",
    "Config",
]
