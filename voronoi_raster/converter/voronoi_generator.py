"""Voronoi diagram rasterizer using a brute-force nearest-marker scan."""

from typing import Sequence, Tuple, Union
import numpy as np
from tqdm import tqdm

from ..data.canvas import Canvas, COLOR_DTYPE
from ..data.markers import MarkerSet
from ..utils.logger import get_logger

logger = get_logger()


def squared_distance(x0, y0, x1, y1):
    """Squared Euclidean distance between integer points or broadcastable int64 arrays."""
    dx = x0 - x1
    dy = y0 - y1
    return dx * dx + dy * dy


class VoronoiRasterizer:
    """Class for painting the Voronoi partition of a marker set onto a canvas."""

    def __init__(self, palette: Sequence[int], show_progress: bool = False):
        """
        Initialize Voronoi rasterizer.

        Args:
            palette: Ordered colors, marker i is painted with palette[i % len(palette)]
            show_progress: Show a progress bar over canvas rows
        """
        if len(palette) == 0:
            raise ValueError("palette must contain at least one color")
        self.palette = np.asarray(palette, dtype=COLOR_DTYPE)
        self.show_progress = show_progress

    def label(
        self,
        shape: Union[Canvas, Tuple[int, int]],
        markers: MarkerSet,
    ) -> np.ndarray:
        """
        Assign every pixel the index of its nearest marker.

        Distances are squared and computed in int64, so no square root and no
        floating point is involved. On equal distances the lowest marker index
        wins: ``argmin`` returns the first occurrence of the minimum, which is
        the same as scanning markers in order and replacing the current best
        only on a strictly smaller distance.

        Args:
            shape: Canvas, or (width, height) of the grid
            markers: Marker set with at least one point

        Returns:
            (height, width) int64 array of marker indices
        """
        if len(markers) == 0:
            raise ValueError("Voronoi partition requires at least one marker")

        if isinstance(shape, Canvas):
            width, height = shape.dimensions()
        else:
            width, height = shape

        points = markers.as_array()
        mx = points[:, 0][:, np.newaxis]  # (N, 1)
        my = points[:, 1]                 # (N,)

        xs = np.arange(width, dtype=np.int64)
        dx_sq = (xs[np.newaxis, :] - mx) ** 2  # (N, W), reused for every row

        labels = np.empty((height, width), dtype=np.int64)
        rows = tqdm(range(height), desc="Voronoi rows", disable=not self.show_progress)
        for y in rows:
            dy = y - my
            distances = dx_sq + (dy * dy)[:, np.newaxis]
            labels[y] = np.argmin(distances, axis=0)

        return labels

    def render(self, canvas: Canvas, markers: MarkerSet) -> np.ndarray:
        """
        Repaint the whole canvas with the Voronoi partition of ``markers``.

        Args:
            canvas: Canvas to paint in place
            markers: Marker set with at least one point

        Returns:
            The label array used for painting
        """
        width, height = canvas.dimensions()
        logger.debug("Rendering Voronoi partition of %d markers on %dx%d canvas",
                     len(markers), width, height)

        labels = self.label(canvas, markers)
        canvas.pixels[:, :] = self.palette[labels % len(self.palette)]

        logger.debug("Voronoi partition painted with %d palette colors",
                     len(self.palette))
        return labels
