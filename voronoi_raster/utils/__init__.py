"""Utility modules for Voronoi diagram rendering."""

from .logger import setup_logger, get_logger
from .config import Config

__all__ = ["Config", "setup_logger", "get_logger"]
