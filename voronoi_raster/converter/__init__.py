"""Converter modules painting and serializing the diagram."""

from .voronoi_generator import VoronoiRasterizer, squared_distance
from .rasterizer import DiskRasterizer
from .encoder import PPMEncoder, PPMWriteError

__all__ = [
    "VoronoiRasterizer",
    "DiskRasterizer",
    "PPMEncoder",
    "PPMWriteError",
    "squared_distance",
]
